"""Directions adapters - Implementations of DirectionsPort.

Available implementations:
- GoogleDirectionsAdapter: Google Directions web service, bus transit only
"""

from .google_directions_adapter import GoogleDirectionsAdapter

__all__ = ["GoogleDirectionsAdapter"]
