from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from .errors import ConfigurationError

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_BRANCH = "main"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = field(repr=False)
    github_token: str = field(repr=False)
    gemini_model: str = DEFAULT_GEMINI_MODEL
    base_branch: str = DEFAULT_BASE_BRANCH


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigurationError(f"The required {name} environment variable is not set.")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read credentials and optional overrides once, before any work starts.

    GEMINI_API_KEY and GITHUB_TOKEN are required. GEMINI_MODEL and
    DEFAULT_BASE_BRANCH fall back to the built-in defaults when unset or blank.
    """
    env = os.environ if environ is None else environ
    gemini_api_key = _require(env, "GEMINI_API_KEY")
    github_token = _require(env, "GITHUB_TOKEN")
    return Settings(
        gemini_api_key=gemini_api_key,
        github_token=github_token,
        gemini_model=env.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
        base_branch=env.get("DEFAULT_BASE_BRANCH") or DEFAULT_BASE_BRANCH,
    )
