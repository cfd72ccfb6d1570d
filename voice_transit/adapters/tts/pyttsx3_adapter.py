"""Local speech synthesis adapter using pyttsx3.

Picks a voice for the requested locale and, when asked to, prefers one
whose name suggests a female voice. Without any voice for the locale
the engine's default voice is used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from ...config import TTSConfig, get_config
from ...domain.errors import SpeechSynthesisError

FEMALE_NAME_MARKERS: Sequence[str] = (
    "female",
    "woman",
    "heera",
    "kalpana",
    "lekha",
    "veena",
    "zira",
    "samantha",
)


def _voice_languages(voice: Any) -> list[str]:
    languages = []
    for lang in getattr(voice, "languages", None) or []:
        if isinstance(lang, bytes):
            # espeak prefixes the language with a priority byte
            lang = lang.decode("utf-8", errors="ignore").lstrip("\x00\x01\x02\x03\x04\x05")
        languages.append(str(lang).lower().replace("_", "-"))
    return languages


def voice_matches_locale(voice: Any, locale: str) -> bool:
    """Whether a pyttsx3 voice speaks the locale's language."""
    code = locale.lower().replace("_", "-").split("-", 1)[0]
    if not code:
        return False
    for lang in _voice_languages(voice):
        if lang == code or lang.startswith(f"{code}-"):
            return True
    identifier = f"{getattr(voice, 'id', '')} {getattr(voice, 'name', '')}".lower()
    return f"{code}-" in identifier or f"{code}_" in identifier


def sounds_female(voice: Any) -> bool:
    name = str(getattr(voice, "name", "") or "").lower()
    return any(marker in name for marker in FEMALE_NAME_MARKERS)


def select_voice(
    voices: Iterable[Any], locale: str, prefer_female: bool = True
) -> Optional[str]:
    """Return the id of the best voice for ``locale``, or None for default."""
    matching = [v for v in voices if voice_matches_locale(v, locale)]
    if not matching:
        return None
    if prefer_female:
        for voice in matching:
            if sounds_female(voice):
                return voice.id
    return matching[0].id


@dataclass
class LocalSpeechSynthesizer:
    """SpeechSynthesizerPort implementation using the pyttsx3 engine.

    Attributes:
        config: Speech output configuration
    """

    config: TTSConfig = field(default_factory=lambda: get_config().tts)

    _engine: Optional[Any] = field(default=None, repr=False)
    _default_voice: Optional[str] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_engine(self) -> Any:
        if self._engine is None:
            import pyttsx3

            self._engine = pyttsx3.init()
            self._engine.setProperty("rate", self.config.speech_rate)
            self._default_voice = self._engine.getProperty("voice")
        return self._engine

    def speak(self, text: str, locale: str) -> None:
        try:
            engine = self._get_engine()
            voice_id = select_voice(
                engine.getProperty("voices") or [],
                locale,
                prefer_female=self.config.prefer_female_voice,
            )
            if voice_id is not None:
                engine.setProperty("voice", voice_id)
            elif self._default_voice is not None:
                # the engine keeps whichever voice was set last
                engine.setProperty("voice", self._default_voice)
            self._logger.debug(
                "Speaking with local engine",
                extra={"locale": locale, "voice": voice_id or "default"},
            )
            engine.say(text)
            engine.runAndWait()
        except Exception as e:
            raise SpeechSynthesisError(
                "Local speech synthesis failed", engine="pyttsx3", cause=e
            )
