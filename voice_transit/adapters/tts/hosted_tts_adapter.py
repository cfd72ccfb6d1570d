"""Hosted text-to-speech adapter.

Posts the text to a hosted ``/tts`` endpoint, receives an audio file
and plays it on the default output device. Used as the primary
synthesizer when enabled; the local engine is the fallback.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Dict

import requests

from ...config import TTSConfig, get_config
from ...domain.errors import SpeechSynthesisError
from ...locales import get_language


@dataclass
class HostedTTSSynthesizer:
    """SpeechSynthesizerPort implementation over a hosted TTS API.

    Attributes:
        config: Speech output configuration
        session: HTTP session (injectable for tests)
    """

    config: TTSConfig = field(default_factory=lambda: get_config().tts)
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build_payload(self, text: str, locale: str) -> Dict[str, str]:
        """Request body: text, language tag and a female voice name."""
        profile = get_language(locale)
        return {
            "text": text,
            "language": profile.tag,
            "voice": f"{profile.name.lower()}_female",
        }

    def synthesize(self, text: str, locale: str) -> bytes:
        """Fetch synthesized audio bytes for ``text``.

        Raises:
            SpeechSynthesisError: On transport failure, non-success
                status or an empty body.
        """
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"

        try:
            response = self.session.post(
                f"{self.config.base_url.rstrip('/')}/tts",
                json=self.build_payload(text, locale),
                headers=headers,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as e:
            raise SpeechSynthesisError("TTS request failed", engine="hosted", cause=e)

        if not response.ok:
            raise SpeechSynthesisError(
                f"TTS request failed with HTTP {response.status_code}",
                engine="hosted",
            )
        if not response.content:
            raise SpeechSynthesisError("TTS response is empty", engine="hosted")

        return response.content

    def play(self, audio: bytes) -> None:
        """Decode and play audio bytes, blocking until playback ends."""
        try:
            import sounddevice as sd
            import soundfile as sf

            data, sample_rate = sf.read(io.BytesIO(audio), dtype="float32")
            sd.play(data, sample_rate)
            sd.wait()
        except Exception as e:
            raise SpeechSynthesisError("Audio playback failed", engine="hosted", cause=e)

    def speak(self, text: str, locale: str) -> None:
        audio = self.synthesize(text, locale)
        self._logger.debug(
            "Playing hosted TTS audio",
            extra={"locale": locale, "bytes": len(audio)},
        )
        self.play(audio)
