"""Gemini text generation adapter.

Calls the hosted ``generateContent`` REST endpoint with a single text
prompt and returns the concatenated text parts of the first candidate.
Every failure surfaces as a GenerationError so the calling service can
apply its own fallback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import requests

from ...config import LLMConfig, get_config
from ...domain.errors import ConfigurationError, GenerationError


@dataclass
class GeminiTextGenerator:
    """TextGeneratorPort implementation over the Gemini REST API.

    Attributes:
        config: Language model configuration
        session: HTTP session (injectable for tests)
    """

    config: LLMConfig = field(default_factory=lambda: get_config().llm)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def model(self) -> str:
        return self.config.model

    def _endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/models/{self.config.model}:generateContent"

    def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return the generated text.

        Raises:
            GenerationError: On transport failure, non-success status
                or a body without text.
        """
        if not self.config.api_key:
            raise GenerationError(
                "Language model API key is not configured",
                model=self.model,
                cause=ConfigurationError(
                    "Missing API key", setting_name="VTA_LLM_API_KEY"
                ),
            )

        payload: Dict[str, Any] = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": self.config.temperature},
        }

        try:
            response = self.session.post(
                self._endpoint(),
                params={"key": self.config.api_key},
                json=payload,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            self._logger.warning(
                "Generation request failed",
                extra={"model": self.model, "error": str(e)},
            )
            raise GenerationError(
                "Generation request failed", model=self.model, cause=e
            )

        if not response.ok:
            self._logger.warning(
                "Generation returned non-success status",
                extra={"model": self.model, "status": response.status_code},
            )
            raise GenerationError(
                f"Generation failed with HTTP {response.status_code}",
                model=self.model,
                status_code=response.status_code,
            )

        try:
            body = response.json()
            parts = body["candidates"][0]["content"]["parts"]
            text = "".join(part.get("text", "") for part in parts)
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            raise GenerationError(
                "Generation response has no text",
                model=self.model,
                status_code=response.status_code,
                cause=e,
            )

        if not text.strip():
            raise GenerationError(
                "Generation response is empty",
                model=self.model,
                status_code=response.status_code,
            )

        self._logger.debug(
            "Generation succeeded",
            extra={"model": self.model, "chars": len(text)},
        )
        return text
