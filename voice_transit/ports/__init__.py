"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the pipeline and the external
services it drives: speech engines, the language model, the directions
service and the geocoder. They enable dependency injection and make
the system testable with fakes.
"""

from .cache import CachePort
from .directions import DirectionsPort
from .generation import TextGeneratorPort
from .geocoding import DeviceLocatorPort, GeocoderPort
from .speech import SpeechCapturePort, SpeechSynthesizerPort

__all__ = [
    # Speech
    "SpeechCapturePort",
    "SpeechSynthesizerPort",
    # Language model
    "TextGeneratorPort",
    # Directions
    "DirectionsPort",
    # Location
    "DeviceLocatorPort",
    "GeocoderPort",
    # Cache
    "CachePort",
]
