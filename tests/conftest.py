from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from tools.models import AdvisorInput, SearchFilters
from tools.settings import AppSettings


def _fake_response(text, chunks=None):
    # shaped like google.genai's GenerateContentResponse as far as the advisor reads it
    metadata = SimpleNamespace(grounding_chunks=chunks) if chunks is not None else None
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)])


def _web_chunk(uri=None, title=None):
    return SimpleNamespace(web=SimpleNamespace(uri=uri, title=title))


@pytest.fixture
def fake_response():
    """Factory: fake_response(text, chunks=None) -> Gemini-like response."""
    return _fake_response


@pytest.fixture
def web_chunk():
    """Factory: web_chunk(uri, title) -> grounding chunk with a web entry."""
    return _web_chunk


@pytest.fixture
def settings():
    return AppSettings()


@pytest.fixture
def mock_client():
    client = Mock()
    client.models.generate_content.return_value = _fake_response('{"subsidies": [], "summary": "none"}', [])
    return client


@pytest.fixture
def germany_input():
    return AdvisorInput(country="Germany", client_profile="first-time buyer", filters=SearchFilters())
