"""Geocoding ports - Device position and reverse geocoding."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import GeoLocation, Location


class DeviceLocatorPort(Protocol):
    """Port for the device's current coordinates.

    Implementation: adapters/location/static_locator.py
    """

    def locate(self) -> Optional[GeoLocation]:
        """Return the current device coordinates, or None if unknown."""
        ...


class GeocoderPort(Protocol):
    """Port for reverse geocoding.

    Implementation: adapters/geocoding/nominatim_adapter.py
    """

    def reverse_geocode(
        self, location: GeoLocation, language: str = "en"
    ) -> Optional[Location]:
        """Resolve coordinates to a human-readable address.

        Args:
            location: GPS coordinates to look up.
            language: Language code for the address.

        Returns:
            Location with the address, or None if not found.

        Raises:
            GeocodingError: If the lookup service failed.
        """
        ...
