"""Nominatim reverse-geocoding adapter.

Resolves the device coordinates to a readable address in the active
language, with rate limiting to stay within the public endpoint's
usage policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config
from ...domain.errors import GeocodingError
from ...domain.models import GeoLocation, Location


@dataclass
class NominatimGeocoderAdapter:
    """GeocoderPort implementation using OpenStreetMap Nominatim.

    Attributes:
        config: Geocoding configuration
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)

    _reverse_fn: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_reverse(self) -> Any:
        """Get or initialize the rate-limited reverse lookup."""
        if self._reverse_fn is not None:
            return self._reverse_fn

        self._logger.debug(
            "Initializing Nominatim geocoder",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )

        geolocator = Nominatim(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )
        self._reverse_fn = RateLimiter(
            geolocator.reverse,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=self.config.max_retries,
            error_wait_seconds=self.config.error_wait_seconds,
            swallow_exceptions=False,
        )
        return self._reverse_fn

    def reverse_geocode(
        self, location: GeoLocation, language: str = "en"
    ) -> Optional[Location]:
        """Reverse geocode coordinates to an address.

        Args:
            location: GPS coordinates to look up.
            language: Language code for the address.

        Returns:
            Location with the address, or None if no address was found.

        Raises:
            GeocodingError: If the geocoding service failed.
        """
        try:
            result = self._get_reverse()(
                (location.latitude, location.longitude),
                language=language,
                exactly_one=True,
            )
        except (GeocoderTimedOut, GeocoderUnavailable, GeocoderServiceError) as e:
            raise GeocodingError(
                "Reverse geocode failed",
                query=f"{location.latitude},{location.longitude}",
                cause=e,
            )

        if result is None or not getattr(result, "address", ""):
            self._logger.debug(
                "Reverse geocode returned no address",
                extra={"lat": location.latitude, "lon": location.longitude},
            )
            return None

        return Location(
            latitude=location.latitude,
            longitude=location.longitude,
            address=str(result.address),
        )
