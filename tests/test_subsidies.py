import json

import httpx
import pytest

from advisor import subsidies
from advisor.parse import FALLBACK_SUMMARY
from advisor.subsidies import FALLBACK_PROFILE, SubsidyAdvisor, SubsidySearchError
from tools.citations import CitationLink, split_citations
from tools.models import Source

ONE_SUBSIDY = {
    "subsidies": [
        {
            "name": "KfW Home Ownership Programme (124)",
            "description": "Low-interest loan for owner-occupied homes [1].",
            "eligibility": ["Owner-occupier", "Resident in Germany [2]"],
            "potentialBenefit": "Loan up to EUR 100,000",
        }
    ],
    "summary": "You may qualify for KfW 124 [1].\nCheck your state bank too [2], see also [4].",
}


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr(subsidies._generate.retry, "sleep", lambda _: None)


def test_end_to_end_germany(mock_client, settings, germany_input, fake_response, web_chunk):
    mock_client.models.generate_content.return_value = fake_response(
        "```json\n" + json.dumps(ONE_SUBSIDY) + "\n```",
        [web_chunk("https://www.kfw.de/124", "KfW"), web_chunk("https://www.bayernlabo.de", None)],
    )
    result = SubsidyAdvisor(mock_client, settings).find_subsidies(germany_input)

    assert len(result.response.subsidies) == 1
    assert result.sources == [
        Source("https://www.kfw.de/124", "KfW"),
        Source("https://www.bayernlabo.de", "https://www.bayernlabo.de"),
    ]
    linked = {p.number for p in split_citations(result.response.summary, result.sources)
              if isinstance(p, CitationLink)}
    assert linked == {1, 2}


def test_search_request_is_grounded(mock_client, settings, germany_input):
    SubsidyAdvisor(mock_client, settings).find_subsidies(germany_input)

    kwargs = mock_client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-2.5-flash"
    assert "Germany" in kwargs["contents"]
    assert kwargs["config"].tools[0].google_search is not None


def test_unparseable_reply_is_not_an_error(mock_client, settings, germany_input, fake_response):
    mock_client.models.generate_content.return_value = fake_response("I found a few programmes.", [])
    result = SubsidyAdvisor(mock_client, settings).find_subsidies(germany_input)
    assert result.response.subsidies == []
    assert result.response.summary == FALLBACK_SUMMARY
    assert result.sources == []


def test_transient_failure_retried(mock_client, settings, germany_input, fake_response):
    ok = fake_response(json.dumps(ONE_SUBSIDY), [])
    mock_client.models.generate_content.side_effect = [httpx.ConnectError("reset"), ok]
    result = SubsidyAdvisor(mock_client, settings).find_subsidies(germany_input)
    assert len(result.response.subsidies) == 1
    assert mock_client.models.generate_content.call_count == 2


def test_transient_failure_gives_up_after_three_attempts(mock_client, settings, germany_input):
    mock_client.models.generate_content.side_effect = httpx.ConnectError("down")
    with pytest.raises(SubsidySearchError):
        SubsidyAdvisor(mock_client, settings).find_subsidies(germany_input)
    assert mock_client.models.generate_content.call_count == 3


def test_client_error_not_retried(mock_client, settings, germany_input):
    req = httpx.Request("POST", "https://generativelanguage.googleapis.com")
    err = httpx.HTTPStatusError("quota exceeded", request=req, response=httpx.Response(429, request=req))
    mock_client.models.generate_content.side_effect = err
    with pytest.raises(SubsidySearchError) as exc:
        SubsidyAdvisor(mock_client, settings).find_subsidies(germany_input)
    assert exc.value.__cause__ is err
    assert mock_client.models.generate_content.call_count == 1


def test_non_http_sdk_failure_is_search_error(mock_client, settings, germany_input):
    err = ValueError("bad response payload")
    mock_client.models.generate_content.side_effect = err
    with pytest.raises(SubsidySearchError) as exc:
        SubsidyAdvisor(mock_client, settings).find_subsidies(germany_input)
    assert exc.value.__cause__ is err
    assert mock_client.models.generate_content.call_count == 1


def test_random_profile(mock_client, settings, fake_response):
    mock_client.models.generate_content.return_value = fake_response("  A young couple buying in Lyon.\n")
    advisor = SubsidyAdvisor(mock_client, settings)
    assert advisor.generate_random_profile("France") == "A young couple buying in Lyon."

    kwargs = mock_client.models.generate_content.call_args.kwargs
    assert "France" in kwargs["contents"]
    assert kwargs["config"].thinking_config.thinking_budget == 0
    assert not kwargs["config"].tools


def test_random_profile_falls_back(mock_client, settings, fake_response):
    mock_client.models.generate_content.side_effect = RuntimeError("quota")
    assert SubsidyAdvisor(mock_client, settings).generate_random_profile("Italy") == FALLBACK_PROFILE

    mock_client.models.generate_content.side_effect = None
    mock_client.models.generate_content.return_value = fake_response(None)
    assert SubsidyAdvisor(mock_client, settings).generate_random_profile("Italy") == FALLBACK_PROFILE
