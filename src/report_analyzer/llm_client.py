"""Remote model invocation.

One Chat Completions request per analysis attempt. Provider errors are
surfaced to the caller; there is no retry, backoff or caching.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import openai
from openai import OpenAI

from .config import AnalyzerSettings
from .errors import ApiKeyMissingError, RemoteCallError
from .models import Language, ResponseShape
from .prompts import SYSTEM_PROMPTS
from .schemas import response_format_for

logger = logging.getLogger(__name__)


class AnalyzerClient:
    """Thin wrapper around the OpenAI client (or any OpenAI-compatible endpoint)."""

    def __init__(self, client: Any, model: str, temperature: float = 0.2) -> None:
        self._client = client
        self.model = model
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: AnalyzerSettings) -> "AnalyzerClient":
        if not settings.api_key_configured:
            raise ApiKeyMissingError()
        kwargs: dict[str, Any] = {
            "api_key": settings.api_key,
            "timeout": settings.timeout_seconds,
            "max_retries": 0,
        }
        if settings.base_url:
            kwargs["base_url"] = settings.base_url
        return cls(OpenAI(**kwargs), model=settings.model, temperature=settings.temperature)

    def generate(
        self,
        content_parts: list[dict[str, Any]],
        shape: ResponseShape,
        language: Language = Language.EN,
        use_schema: bool = True,
    ) -> str:
        """
        Send one request and return the raw text of the first choice.

        Raises:
            RemoteCallError: transport, auth or quota failure, or an empty reply
        """
        logger.info(
            "Requesting %s analysis from model %s (schema=%s, parts=%d)",
            shape.value, self.model, use_schema, len(content_parts),
        )
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPTS[language]},
                    {"role": "user", "content": content_parts},
                ],
                temperature=self.temperature,
                response_format=response_format_for(shape, use_schema),
            )
        except openai.OpenAIError as e:
            logger.exception("Model request failed")
            raise RemoteCallError(str(e) or "The model request failed.") from e

        text: Optional[str] = None
        if resp.choices:
            text = resp.choices[0].message.content
        if not text or not text.strip():
            raise RemoteCallError("The model returned an empty response.")
        logger.debug("Received %d characters from model", len(text))
        return text
