"""Tests for LocationService."""

from fakes import FakeGeocoder, FakeLocator

from voice_transit.adapters.cache import InMemoryCache
from voice_transit.adapters.location import StaticDeviceLocator
from voice_transit.config import GeocodingConfig
from voice_transit.domain.errors import GeocodingError
from voice_transit.services.location_service import LocationService


class TestLocationService:
    def test_resolves_address_in_language(self):
        service = LocationService(FakeLocator(), FakeGeocoder())

        location = service.current_location("kn")

        assert location.address == "kn address"
        assert location.latitude == 12.9767

    def test_unknown_position_returns_none(self):
        geocoder = FakeGeocoder()
        service = LocationService(FakeLocator(known=False), geocoder)

        assert service.current_location("en") is None
        assert geocoder.calls == []

    def test_geocoder_failure_returns_none(self):
        geocoder = FakeGeocoder(error=GeocodingError("down", query="12.9767,77.5713"))
        service = LocationService(FakeLocator(), geocoder)

        assert service.current_location("en") is None

    def test_cached_per_language(self):
        geocoder = FakeGeocoder()
        service = LocationService(FakeLocator(), geocoder, InMemoryCache(name="test"))

        service.current_location("en")
        service.current_location("hi")
        service.current_location("en")

        assert [language for _, language in geocoder.calls] == ["en", "hi"]

    def test_invalid_configured_position_returns_none(self):
        geocoder = FakeGeocoder()
        locator = StaticDeviceLocator(GeocodingConfig(device_latitude=100.0))
        service = LocationService(locator, geocoder)

        assert service.current_location("en") is None
        assert geocoder.calls == []
