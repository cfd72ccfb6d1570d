"""Tests for the Nominatim reverse-geocoding adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from geopy.exc import GeocoderTimedOut, GeocoderUnavailable

from voice_transit.adapters.geocoding import NominatimGeocoderAdapter
from voice_transit.adapters.location import StaticDeviceLocator
from voice_transit.config import GeocodingConfig
from voice_transit.domain.errors import GeocodingError
from voice_transit.domain.models import GeoLocation, Location

MAJESTIC = GeoLocation(12.9767, 77.5713)


class TestNominatimGeocoderAdapter:
    @pytest.fixture
    def reverse(self):
        return MagicMock()

    @pytest.fixture
    def adapter(self, reverse):
        adapter = NominatimGeocoderAdapter(GeocodingConfig())
        adapter._reverse_fn = reverse
        return adapter

    def test_reverse_geocode(self, adapter, reverse):
        reverse.return_value = SimpleNamespace(address="Kempegowda Bus Station, Bengaluru")

        location = adapter.reverse_geocode(MAJESTIC, language="kn")

        assert location == Location(12.9767, 77.5713, "Kempegowda Bus Station, Bengaluru")
        reverse.assert_called_once_with((12.9767, 77.5713), language="kn", exactly_one=True)

    def test_no_result(self, adapter, reverse):
        reverse.return_value = None

        assert adapter.reverse_geocode(MAJESTIC) is None

    @pytest.mark.parametrize("error", [GeocoderTimedOut("slow"), GeocoderUnavailable("down")])
    def test_service_errors_raise(self, adapter, reverse, error):
        reverse.side_effect = error

        with pytest.raises(GeocodingError) as exc_info:
            adapter.reverse_geocode(MAJESTIC)

        assert exc_info.value.query == "12.9767,77.5713"

    def test_rate_limiter_built_once(self):
        adapter = NominatimGeocoderAdapter(GeocodingConfig(user_agent="test-agent"))

        with patch(
            "voice_transit.adapters.geocoding.nominatim_adapter.Nominatim"
        ) as nominatim, patch(
            "voice_transit.adapters.geocoding.nominatim_adapter.RateLimiter"
        ) as limiter:
            first = adapter._get_reverse()
            second = adapter._get_reverse()

        assert first is second
        nominatim.assert_called_once_with(user_agent="test-agent", timeout=10)
        limiter.assert_called_once()


class TestStaticDeviceLocator:
    def test_configured_position(self):
        config = GeocodingConfig(device_latitude=13.0, device_longitude=77.6)

        assert StaticDeviceLocator(config).locate() == GeoLocation(13.0, 77.6)

    def test_unconfigured_position(self):
        config = GeocodingConfig(device_latitude=None, device_longitude=None)

        assert StaticDeviceLocator(config).locate() is None
