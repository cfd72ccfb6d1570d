"""Device locator returning configured coordinates.

A desktop process has no browser geolocation, so the device position
comes from configuration (VTA_GEO_DEVICE_LATITUDE / _LONGITUDE).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ...config import GeocodingConfig, get_config
from ...domain.models import GeoLocation


@dataclass
class StaticDeviceLocator:
    """DeviceLocatorPort implementation backed by configuration."""

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)

    def locate(self) -> Optional[GeoLocation]:
        if self.config.device_latitude is None or self.config.device_longitude is None:
            return None
        return GeoLocation(
            latitude=self.config.device_latitude,
            longitude=self.config.device_longitude,
        )
