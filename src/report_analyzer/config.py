"""Runtime settings for the analyzer.

API Key Priority:
1. API_KEY / OPENAI_API_KEY from st.secrets (passed in as a mapping)
2. API_KEY / OPENAI_API_KEY from os.environ

Blank values are treated as missing so that an empty variable on a
deployment platform still surfaces the "not configured" banner.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

API_KEY_NAMES = ("API_KEY", "OPENAI_API_KEY")
BASE_URL_NAME = "OPENAI_BASE_URL"
MODEL_NAME = "REPORT_ANALYZER_LLM_MODEL"
TIMEOUT_NAME = "REPORT_ANALYZER_TIMEOUT"

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT_SECONDS = 60.0


class AnalyzerSettings(BaseModel):
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    temperature: float = 0.2

    @property
    def api_key_configured(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def _lookup(name: str, secrets: Optional[Mapping[str, Any]], environ: Mapping[str, str]) -> Optional[str]:
    if secrets is not None and name in secrets:
        value = str(secrets[name]).strip()
        if value:
            return value
    value = environ.get(name, "").strip()
    return value or None


def load_settings(
    secrets: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AnalyzerSettings:
    """
    Build settings from Streamlit secrets and the process environment.

    Args:
        secrets: st.secrets or any mapping; consulted before the environment
        environ: defaults to os.environ

    Returns:
        AnalyzerSettings. A missing key is not an error here; callers check
        `api_key_configured` and decide how to surface it.
    """
    env = os.environ if environ is None else environ

    api_key = None
    for name in API_KEY_NAMES:
        api_key = _lookup(name, secrets, env)
        if api_key:
            break
    if not api_key:
        logger.debug(
            "API key is not set. Configure %s in the deployment environment or Streamlit secrets.",
            " or ".join(API_KEY_NAMES),
        )

    settings: dict[str, Any] = {"api_key": api_key}

    base_url = _lookup(BASE_URL_NAME, secrets, env)
    if base_url:
        settings["base_url"] = base_url

    model = _lookup(MODEL_NAME, secrets, env)
    if model:
        settings["model"] = model

    timeout = _lookup(TIMEOUT_NAME, secrets, env)
    if timeout:
        try:
            settings["timeout_seconds"] = float(timeout)
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", TIMEOUT_NAME, timeout)

    return AnalyzerSettings(**settings)
