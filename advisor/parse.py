import logging
import re
from typing import Optional

from pydantic import ValidationError

from tools.models import SubsidyResponse

logger = logging.getLogger(__name__)

LEADING_FENCE = re.compile(r"\A```json\n?")
TRAILING_FENCE = re.compile(r"```\Z")

FALLBACK_SUMMARY = (
    "I'm sorry, I couldn't process the information from the official sources. "
    "The format was unexpected. Please try rephrasing your request."
)


def strip_fences(text: str) -> str:
    """Drop a ```json fence at the very start and a ``` fence at the very end (once each)."""
    text = LEADING_FENCE.sub("", text, count=1)
    return TRAILING_FENCE.sub("", text, count=1)


def fallback_response() -> SubsidyResponse:
    return SubsidyResponse(subsidies=[], summary=FALLBACK_SUMMARY)


def resolve_response(text: Optional[str]) -> SubsidyResponse:
    """
    Decode the model's reply into a SubsidyResponse.
    Anything that does not validate comes back as an empty result with an apology summary.
    """
    if not text:
        logger.warning("Empty model response; using fallback summary")
        return fallback_response()
    try:
        return SubsidyResponse.model_validate_json(strip_fences(text).strip())
    except ValidationError as e:
        logger.warning("Failed to parse model response as JSON: %s", e)
        logger.warning("Raw response: %s", text)
        return fallback_response()
