"""Device location lookup for display."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from ..domain.errors import GeocodingError
from ..domain.models import Location
from ..ports.cache import CachePort
from ..ports.geocoding import DeviceLocatorPort, GeocoderPort


@dataclass
class LocationService:
    """Resolves the device position to an address in the active language.

    Attributes:
        locator: Source of device coordinates
        geocoder: Reverse geocoder
        cache: Optional cache keyed by coordinates and language
    """

    locator: DeviceLocatorPort
    geocoder: GeocoderPort
    cache: Optional[CachePort[Any]] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def current_location(self, language: str) -> Optional[Location]:
        """Look up the current device address.

        Args:
            language: Language tag for the address.

        Returns:
            The Location, or None when the position or address is unknown.
        """
        try:
            point = self.locator.locate()
        except ValueError as e:
            # out-of-range configured coordinates
            self._logger.warning("Invalid device position", extra={"error": str(e)})
            return None

        if point is None:
            self._logger.debug("Device position unavailable")
            return None

        key = f"location:{point.latitude:.5f},{point.longitude:.5f}:{language}"
        try:
            if self.cache is None:
                location = self.geocoder.reverse_geocode(point, language)
            else:
                location = self.cache.get_or_compute(
                    key, lambda: self.geocoder.reverse_geocode(point, language)
                )
        except GeocodingError as e:
            self._logger.warning(
                "Location lookup failed",
                extra={"language": language, "query": e.query, "error": str(e)},
            )
            return None

        if location is not None:
            self._logger.info(
                "Device location resolved",
                extra={"language": language, "address": location.address},
            )
        return location
