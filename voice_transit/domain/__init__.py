"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DirectionsError,
    GenerationError,
    GeocodingError,
    SessionBusyError,
    SpeechCaptureError,
    SpeechSynthesisError,
    TransitAssistantError,
)
from .models import (
    AssistantState,
    GeoLocation,
    Location,
    ParsedQuery,
    PipelineOutcome,
    SessionContext,
    TranscriptionResult,
    TransitResult,
)

__all__ = [
    # Models
    "AssistantState",
    "GeoLocation",
    "Location",
    "ParsedQuery",
    "PipelineOutcome",
    "SessionContext",
    "TranscriptionResult",
    "TransitResult",
    # Errors
    "TransitAssistantError",
    "GenerationError",
    "DirectionsError",
    "SpeechCaptureError",
    "SpeechSynthesisError",
    "GeocodingError",
    "ConfigurationError",
    "SessionBusyError",
]
