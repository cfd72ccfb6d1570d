"""Dependency injection container.

Binds the ports to their production adapters and wires the services.
Adapters are created on first resolve, so importing this module never
loads speech models or opens network sessions. Tests build a bare
Container and register fakes.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        pipeline = container.resolve(TransitQueryPipeline)

        # Testing
        container = Container()
        container.register(DirectionsPort, lambda: FakeDirections())
        directions = container.resolve(DirectionsPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: Port Protocol or service class to bind.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Args:
            port_type: The type to resolve.

        Returns:
            An instance of the requested type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        """Check if a type is registered.

        Args:
            port_type: The type to check.

        Returns:
            True if the type is registered.
        """
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons.

        Call this to completely reset the container.
        """
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        This creates a fully configured container with all adapters
        registered and ready to use.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.asr import WhisperSpeechCapture
        from .adapters.cache import InMemoryCache, NullCache
        from .adapters.directions import GoogleDirectionsAdapter
        from .adapters.generation import GeminiTextGenerator
        from .adapters.geocoding import NominatimGeocoderAdapter
        from .adapters.location import StaticDeviceLocator
        from .adapters.tts import HostedTTSSynthesizer, LocalSpeechSynthesizer
        from .ports.cache import CachePort
        from .ports.directions import DirectionsPort
        from .ports.generation import TextGeneratorPort
        from .ports.geocoding import DeviceLocatorPort, GeocoderPort
        from .ports.speech import SpeechCapturePort, SpeechSynthesizerPort
        from .services import (
            LocationService,
            QueryInterpreter,
            ResponseComposer,
            RouteResolver,
            SpeechOutputService,
            StructuredGenerationService,
            TransitQueryPipeline,
            VoiceTransitAssistant,
        )

        config = config or get_config()
        container = cls(config=config)

        # Cache for reverse-geocoded locations
        ttl = config.geocoding.cache_ttl_seconds
        cache: CachePort[Any] = (
            InMemoryCache(name="location", default_ttl_seconds=ttl, max_size=64)
            if ttl > 0
            else NullCache()
        )
        container.register(CachePort, lambda: cache)

        # External services
        container.register(
            TextGeneratorPort,
            lambda: GeminiTextGenerator(config.llm),
        )
        container.register(
            DirectionsPort,
            lambda: GoogleDirectionsAdapter(config.directions),
        )
        container.register(
            SpeechCapturePort,
            lambda: WhisperSpeechCapture(config.asr),
        )
        container.register(
            DeviceLocatorPort,
            lambda: StaticDeviceLocator(config.geocoding),
        )
        container.register(
            GeocoderPort,
            lambda: NominatimGeocoderAdapter(config.geocoding),
        )

        # Local engine last; hosted only when enabled
        def create_speech_output() -> SpeechOutputService:
            synthesizers: List[SpeechSynthesizerPort] = []
            if config.tts.hosted_enabled:
                synthesizers.append(HostedTTSSynthesizer(config.tts))
            synthesizers.append(LocalSpeechSynthesizer(config.tts))
            return SpeechOutputService(synthesizers)

        container.register(SpeechOutputService, create_speech_output)

        # Services
        container.register(
            StructuredGenerationService,
            lambda: StructuredGenerationService(container.resolve(TextGeneratorPort)),
        )
        container.register(
            QueryInterpreter,
            lambda: QueryInterpreter(container.resolve(StructuredGenerationService)),
        )
        container.register(
            RouteResolver,
            lambda: RouteResolver(
                container.resolve(DirectionsPort),
                raise_on_failure=config.directions.raise_on_failure,
            ),
        )
        container.register(
            ResponseComposer,
            lambda: ResponseComposer(container.resolve(StructuredGenerationService)),
        )
        container.register(
            LocationService,
            lambda: LocationService(
                locator=container.resolve(DeviceLocatorPort),
                geocoder=container.resolve(GeocoderPort),
                cache=container.resolve(CachePort),
            ),
        )

        def create_pipeline() -> TransitQueryPipeline:
            return TransitQueryPipeline(
                interpreter=container.resolve(QueryInterpreter),
                resolver=container.resolve(RouteResolver),
                composer=container.resolve(ResponseComposer),
            )

        container.register(TransitQueryPipeline, create_pipeline)

        # One session per resolve
        def create_assistant() -> VoiceTransitAssistant:
            return VoiceTransitAssistant(
                pipeline=container.resolve(TransitQueryPipeline),
                capture=container.resolve(SpeechCapturePort),
                speech_output=container.resolve(SpeechOutputService),
                location_service=container.resolve(LocationService),
                language=config.default_language,
            )

        container.register(VoiceTransitAssistant, create_assistant, singleton=False)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
