"""Immutable domain models for the Voice Transit Assistant.

All models are frozen dataclasses with slots. Every model is rebuilt
from scratch for each query; nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class AssistantState(Enum):
    """Voice session state.

    IDLE -> LISTENING on user request, LISTENING -> PROCESSING when a
    transcript arrives, PROCESSING -> IDLE when the pipeline finishes
    (success or error). Capture errors go straight back to IDLE.
    """

    IDLE = auto()
    LISTENING = auto()
    PROCESSING = auto()


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Location:
    """Device position reverse-geocoded to a readable address.

    Attributes:
        latitude: Device latitude
        longitude: Device longitude
        address: Human-readable address in the active language
    """

    latitude: float
    longitude: float
    address: str


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """Origin and destination extracted from a spoken query.

    Empty fields signal an unresolvable query.
    """

    origin: str = ""
    destination: str = ""

    @property
    def is_complete(self) -> bool:
        """Check if both origin and destination were extracted."""
        return bool(self.origin) and bool(self.destination)


@dataclass(frozen=True, slots=True)
class TransitResult:
    """One bus ride of a computed route.

    Attributes:
        bus_number: Line short name (e.g. '335E')
        from_stop: Boarding stop name
        to_stop: Alighting stop name
        departure_time: Departure time text as returned by the service
        duration: Duration text of the enclosing leg
        stops: Number of stops ridden
    """

    bus_number: str
    from_stop: str
    to_stop: str
    departure_time: str
    duration: str
    stops: int = 0


@dataclass(frozen=True, slots=True)
class TranscriptionResult:
    """Result of capturing one utterance.

    Attributes:
        full_text: Transcribed text, taken verbatim
        language: Language code the recognizer used or detected
        duration_seconds: Audio duration if available
    """

    full_text: str
    language: str = ""
    duration_seconds: Optional[float] = None


@dataclass(frozen=True, slots=True)
class SessionContext:
    """Explicit session state threaded through the pipeline.

    Every transition produces a new context; fields are replaced
    wholesale, never merged.
    """

    language: str
    state: AssistantState = AssistantState.IDLE
    transcript: str = ""
    response: str = ""
    results: tuple[TransitResult, ...] = field(default_factory=tuple)
    location: Optional[Location] = None


@dataclass(frozen=True, slots=True)
class PipelineOutcome:
    """Result of one pass from transcript to response.

    Attributes:
        response: Text to display and speak
        results: Bus rides found for the query
        parsed: Interpreted origin and destination
        context: Session context after the pass
    """

    response: str
    results: tuple[TransitResult, ...]
    parsed: ParsedQuery
    context: SessionContext
