"""Directions port - Abstraction for the hosted directions service."""

from __future__ import annotations

from typing import Any, Dict, Protocol


class DirectionsPort(Protocol):
    """Port for bus transit directions.

    Implementation: adapters/directions/google_directions_adapter.py

    The adapter owns the request shape (transit mode restricted to
    buses, units, region bias); callers receive the decoded response.
    """

    def directions(self, origin: str, destination: str) -> Dict[str, Any]:
        """Request bus transit directions.

        Args:
            origin: Free-text origin.
            destination: Free-text destination.

        Returns:
            Decoded response with ``status`` and nested ``routes``.

        Raises:
            DirectionsError: On transport failure, HTTP error or an
                undecodable body.
        """
        ...
