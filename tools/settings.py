import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

import yaml

CONFIG_PATH = Path("config/app.yaml")

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_KEY_ENV = ["GEMINI_API_KEY", "API_KEY"]

EU_COUNTRIES = [
    "Austria", "Belgium", "Bulgaria", "Croatia", "Cyprus", "Czech Republic",
    "Denmark", "Estonia", "Finland", "France", "Germany", "Greece", "Hungary",
    "Ireland", "Italy", "Latvia", "Lithuania", "Luxembourg", "Malta",
    "Netherlands", "Poland", "Portugal", "Romania", "Slovakia", "Slovenia",
    "Spain", "Sweden",
]

ELIGIBILITY_OPTIONS = [
    "First-time Buyer",
    "Energy Efficiency",
    "Renovation",
    "Low Income",
    "Young Applicant (under 35)",
    "Family with Children",
]

SUBSIDY_TYPE_OPTIONS = ["Grant", "Loan", "Tax Credit"]


@dataclass
class AppSettings:
    model: str = DEFAULT_MODEL
    api_key_env: List[str] = field(default_factory=lambda: list(DEFAULT_KEY_ENV))
    countries: List[str] = field(default_factory=lambda: list(EU_COUNTRIES))
    eligibility_options: List[str] = field(default_factory=lambda: list(ELIGIBILITY_OPTIONS))
    subsidy_type_options: List[str] = field(default_factory=lambda: list(SUBSIDY_TYPE_OPTIONS))
    log_level: str = "INFO"


def load_settings(path: Path = CONFIG_PATH) -> AppSettings:
    """Read app settings from YAML; every key is optional and falls back to the defaults above."""
    raw = {}
    if path.exists():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    settings = AppSettings()
    if raw.get("model"):
        settings.model = str(raw["model"])
    key_env = raw.get("api_key_env")
    if isinstance(key_env, str):
        key_env = [key_env]
    if key_env:
        settings.api_key_env = [str(k) for k in key_env]
    for name in ("countries", "eligibility_options", "subsidy_type_options"):
        if raw.get(name):
            setattr(settings, name, [str(v) for v in raw[name]])
    if raw.get("log_level"):
        settings.log_level = str(raw["log_level"]).upper()
    return settings


def resolve_api_key(settings: AppSettings, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    for name in settings.api_key_env:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return None
