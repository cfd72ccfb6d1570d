"""Tests for the dependency injection container."""

import pytest

from fakes import (
    FakeCapture,
    FakeDirections,
    FakeGeocoder,
    FakeLocator,
    FakeTextGenerator,
)

from voice_transit.adapters.cache import InMemoryCache, NullCache
from voice_transit.config import AppConfig, GeocodingConfig, TTSConfig
from voice_transit.container import Container, get_container, reset_container
from voice_transit.ports.cache import CachePort
from voice_transit.ports.directions import DirectionsPort
from voice_transit.ports.generation import TextGeneratorPort
from voice_transit.ports.speech import SpeechCapturePort
from voice_transit.services import (
    LocationService,
    RouteResolver,
    SpeechOutputService,
    TransitQueryPipeline,
    VoiceTransitAssistant,
)


class TestContainer:
    def test_register_and_resolve_singleton(self):
        container = Container(config=AppConfig())
        container.register(DirectionsPort, FakeDirections)

        assert container.resolve(DirectionsPort) is container.resolve(DirectionsPort)

    def test_non_singleton_creates_new_instances(self):
        container = Container(config=AppConfig())
        container.register(DirectionsPort, FakeDirections, singleton=False)

        assert container.resolve(DirectionsPort) is not container.resolve(DirectionsPort)

    def test_unregistered_type_raises(self):
        with pytest.raises(KeyError):
            Container(config=AppConfig()).resolve(DirectionsPort)

    def test_clear_all(self):
        container = Container(config=AppConfig())
        container.register(DirectionsPort, FakeDirections)
        container.clear_all()

        assert not container.is_registered(DirectionsPort)


class TestDefaultContainer:
    def test_wires_pipeline_with_overrides(self):
        container = Container.create_default(AppConfig())
        container.register(TextGeneratorPort, lambda: FakeTextGenerator())
        container.register(DirectionsPort, lambda: FakeDirections())

        pipeline = container.resolve(TransitQueryPipeline)

        assert isinstance(pipeline, TransitQueryPipeline)
        assert isinstance(pipeline.resolver.directions, FakeDirections)

    def test_strict_mode_from_config(self):
        config = AppConfig()
        config.directions.raise_on_failure = True
        container = Container.create_default(config)
        container.register(DirectionsPort, lambda: FakeDirections())

        assert container.resolve(RouteResolver).raise_on_failure is True

    def test_location_cache_from_config(self):
        cache = Container.create_default(AppConfig()).resolve(CachePort)

        assert isinstance(cache, InMemoryCache)
        assert cache.default_ttl_seconds == 600

    def test_location_cache_disabled(self):
        config = AppConfig(geocoding=GeocodingConfig(cache_ttl_seconds=0))

        assert isinstance(Container.create_default(config).resolve(CachePort), NullCache)

    def test_hosted_tts_disabled(self):
        config = AppConfig(tts=TTSConfig(hosted_enabled=False))
        container = Container.create_default(config)

        speech_output = container.resolve(SpeechOutputService)

        assert [type(s).__name__ for s in speech_output.synthesizers] == [
            "LocalSpeechSynthesizer"
        ]

    def test_hosted_tts_first_when_enabled(self):
        container = Container.create_default(AppConfig())

        speech_output = container.resolve(SpeechOutputService)

        assert [type(s).__name__ for s in speech_output.synthesizers] == [
            "HostedTTSSynthesizer",
            "LocalSpeechSynthesizer",
        ]

    def test_assistant_is_new_per_resolve(self):
        container = Container.create_default(AppConfig(default_language="kn"))
        container.register(TextGeneratorPort, lambda: FakeTextGenerator())
        container.register(DirectionsPort, lambda: FakeDirections())
        container.register(SpeechCapturePort, lambda: FakeCapture())
        container.register(
            LocationService, lambda: LocationService(FakeLocator(), FakeGeocoder())
        )

        first = container.resolve(VoiceTransitAssistant)
        second = container.resolve(VoiceTransitAssistant)

        assert first is not second
        assert first.context.language == "kn"
        assert first.context.location.address == "kn address"


class TestGlobalContainer:
    def test_get_container_is_cached(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()

        assert get_container() is not first
