"""Centralized configuration using Pydantic Settings.

Every external collaborator (language model, directions API, speech
engines, geocoder) reads its settings from here instead of carrying
hardcoded keys and endpoints.

Configuration can be overridden via environment variables:
- VTA_DEFAULT_LANGUAGE=kn
- VTA_LLM_API_KEY=...
- VTA_MAPS_API_KEY=...
- VTA_MAPS_RAISE_ON_FAILURE=true
- VTA_ASR_DEVICE=cpu
- VTA_TTS_HOSTED_ENABLED=false
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseSettings):
    """Hosted generative-language endpoint configuration.

    Environment variables prefixed with VTA_LLM_.
    """

    model_config = SettingsConfigDict(env_prefix="VTA_LLM_")

    api_key: Optional[str] = None
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-1.5-flash"
    timeout_seconds: float = 30.0
    temperature: float = 0.2


class DirectionsConfig(BaseSettings):
    """Hosted directions service configuration.

    Environment variables prefixed with VTA_MAPS_.
    """

    model_config = SettingsConfigDict(env_prefix="VTA_MAPS_")

    api_key: Optional[str] = None
    endpoint: str = "https://maps.googleapis.com/maps/api/directions/json"
    region: str = "in"
    units: Literal["metric", "imperial"] = "metric"
    transit_mode: str = "bus"
    departure_time: str = "now"
    timeout_seconds: float = 15.0
    raise_on_failure: bool = False


class ASRConfig(BaseSettings):
    """Speech capture configuration.

    Environment variables prefixed with VTA_ASR_.
    """

    model_config = SettingsConfigDict(env_prefix="VTA_ASR_")

    default_model: str = "small"
    device: Literal["cuda", "cpu", "auto"] = "auto"
    compute_type: str = "float16"
    fallback_device: str = "cpu"
    fallback_compute_type: str = "int8"
    beam_size: int = 5
    sample_rate: int = 16000
    record_seconds: float = 5.0


class TTSConfig(BaseSettings):
    """Speech output configuration.

    Environment variables prefixed with VTA_TTS_.
    """

    model_config = SettingsConfigDict(env_prefix="VTA_TTS_")

    hosted_enabled: bool = True
    base_url: str = "https://dwani-dwani-api.hf.space"
    api_key: Optional[str] = None
    timeout_seconds: float = 30.0
    speech_rate: int = 150
    prefer_female_voice: bool = True


class GeocodingConfig(BaseSettings):
    """Device location and reverse-geocoding configuration.

    Environment variables prefixed with VTA_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="VTA_GEO_")

    user_agent: str = "voice-transit-assistant"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    max_retries: int = 2
    error_wait_seconds: float = 2.0
    # Kempegowda bus station (Majestic), Bengaluru
    device_latitude: Optional[float] = 12.9767
    device_longitude: Optional[float] = 77.5713
    # 0 disables the reverse-geocode cache
    cache_ttl_seconds: int = 600


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with VTA_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="VTA_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.default_language)
        print(config.directions.region)

    Environment variables prefixed with VTA_.
    """

    model_config = SettingsConfigDict(env_prefix="VTA_")

    default_language: str = "hi"

    llm: LLMConfig = Field(default_factory=LLMConfig)
    directions: DirectionsConfig = Field(default_factory=DirectionsConfig)
    asr: ASRConfig = Field(default_factory=ASRConfig)
    tts: TTSConfig = Field(default_factory=TTSConfig)
    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.format,
    )
