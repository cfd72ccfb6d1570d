"""Typed domain errors for the Voice Transit Assistant.

Adapters raise these errors; the stage services catch them at their
boundary and convert them into deterministic fallbacks.

All errors inherit from TransitAssistantError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TransitAssistantError(Exception):
    """Base error for the transit assistant domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GenerationError(TransitAssistantError):
    """The hosted language model call failed.

    Attributes:
        model: Model identifier that was called
        status_code: HTTP status if a response was received
    """

    model: str = ""
    status_code: Optional[int] = None


@dataclass
class DirectionsError(TransitAssistantError):
    """The directions request failed or returned a non-OK status.

    Attributes:
        status: Directions status string or HTTP status
    """

    status: str = ""


@dataclass
class SpeechCaptureError(TransitAssistantError):
    """Speech capture or transcription failed.

    Attributes:
        locale: Locale the recognizer was configured for
    """

    locale: str = ""


@dataclass
class SpeechSynthesisError(TransitAssistantError):
    """Speech synthesis or playback failed.

    Attributes:
        engine: Name of the synthesizer that failed
    """

    engine: str = ""


@dataclass
class GeocodingError(TransitAssistantError):
    """Failed to resolve a device location.

    Attributes:
        query: The coordinates or query that failed
    """

    query: str = ""


@dataclass
class ConfigurationError(TransitAssistantError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


@dataclass
class SessionBusyError(TransitAssistantError):
    """A voice session is already listening or processing.

    Attributes:
        state: Name of the state the session is in
    """

    state: str = ""
