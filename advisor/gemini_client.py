import logging
from typing import Mapping, Optional

from google import genai

from tools.settings import AppSettings, resolve_api_key

logger = logging.getLogger(__name__)


class ConfigurationError(Exception): pass


def create_client(settings: AppSettings, environ: Optional[Mapping[str, str]] = None) -> genai.Client:
    """
    Build the Gemini client from the first configured API key variable that is set.
    Raises ConfigurationError when none is, so the app can block searching up front.
    """
    api_key = resolve_api_key(settings, environ)
    if not api_key:
        names = " or ".join(settings.api_key_env)
        raise ConfigurationError(f"No API key found. Set {names} in the environment or in a .env file.")
    logger.info("Gemini client ready (model %s)", settings.model)
    return genai.Client(api_key=api_key)
