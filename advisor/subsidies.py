import logging
from typing import Any

import httpx
from google.genai import errors as genai_errors
from google.genai import types
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from advisor.parse import resolve_response
from advisor.sources import grounding_chunks, map_sources
from tools.models import AdvisorInput, SearchResult
from tools.settings import AppSettings
from tools.subsidy_prompt import build_filter_clauses, build_profile_prompt, build_subsidy_prompt

logger = logging.getLogger(__name__)

FALLBACK_PROFILE = (
    "First-time home buyer, under 35 years old, looking to purchase a new energy-efficient apartment."
)

TRANSIENT_ERRORS = (genai_errors.ServerError, httpx.TransportError)


class SubsidySearchError(Exception): pass


@retry(
    reraise=True,
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
    retry=retry_if_exception_type(TRANSIENT_ERRORS),
)
def _generate(client, model: str, contents: str, config: types.GenerateContentConfig) -> Any:
    return client.models.generate_content(model=model, contents=contents, config=config)


class SubsidyAdvisor:
    def __init__(self, client, settings: AppSettings):
        self.client = client
        self.settings = settings

    def find_subsidies(self, inp: AdvisorInput) -> SearchResult:
        """
        Ask the model, grounded with Google Search, for subsidies matching the input.
        Any failure of the call itself raises SubsidySearchError; unparseable replies do not.
        """
        prompt = build_subsidy_prompt(inp)
        config = types.GenerateContentConfig(tools=[types.Tool(google_search=types.GoogleSearch())])
        logger.info("Searching subsidies for %s (%d filters)", inp.country, len(build_filter_clauses(inp.filters)))
        try:
            result = _generate(self.client, self.settings.model, prompt, config)
            text = result.text
            chunks = grounding_chunks(result)
        except Exception as e:
            # SDK failures are not all APIError (e.g. UnknownApiResponseError is a ValueError)
            raise SubsidySearchError(str(e) or type(e).__name__) from e

        sources = map_sources(chunks)
        response = resolve_response(text)
        logger.info("Found %d subsidies with %d sources", len(response.subsidies), len(sources))
        return SearchResult(response=response, sources=sources)

    def generate_random_profile(self, country: str) -> str:
        """One example client profile for the country; the fixed fallback if anything goes wrong."""
        config = types.GenerateContentConfig(thinking_config=types.ThinkingConfig(thinking_budget=0))
        try:
            result = self.client.models.generate_content(
                model=self.settings.model,
                contents=build_profile_prompt(country),
                config=config,
            )
            profile = (result.text or "").strip()
        except Exception as e:
            logger.warning("Failed to generate random profile: %s", e)
            return FALLBACK_PROFILE
        return profile or FALLBACK_PROFILE
