"""Whisper speech capture adapter.

Records one fixed-length utterance from the default microphone and
transcribes it with Faster-Whisper, hinting the language from the
requested locale. The transcript is returned verbatim with no
confidence thresholding.

The model is loaded lazily on first use and falls back to the
configured CPU settings when the requested device cannot be used.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from ...config import ASRConfig, get_config
from ...domain.errors import SpeechCaptureError
from ...domain.models import TranscriptionResult


def language_code(locale: str) -> Optional[str]:
    """Primary language subtag of a locale ('hi-IN' -> 'hi')."""
    code = locale.strip().replace("_", "-").split("-", 1)[0].lower()
    return code or None


@dataclass
class WhisperSpeechCapture:
    """SpeechCapturePort implementation using sounddevice + Faster-Whisper.

    Attributes:
        config: ASR configuration
    """

    config: ASRConfig = field(default_factory=lambda: get_config().asr)

    _model: Optional[Any] = field(default=None, repr=False)
    _actual_device: str = field(default="", repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _detect_device(self) -> str:
        """Pick cuda when CTranslate2 sees a GPU, else cpu."""
        try:
            import ctranslate2

            if ctranslate2.get_cuda_device_count() > 0:
                return "cuda"
        except Exception as e:
            self._logger.debug("CUDA detection failed", extra={"error": str(e)})
        return "cpu"

    def _load_model(self) -> Any:
        if self._model is not None:
            return self._model

        from faster_whisper import WhisperModel

        device: str = self.config.device
        if device == "auto":
            device = self._detect_device()
        compute_type = (
            self.config.compute_type
            if device == "cuda"
            else self.config.fallback_compute_type
        )

        self._logger.info(
            "Loading Whisper model",
            extra={
                "model": self.config.default_model,
                "device": device,
                "compute_type": compute_type,
            },
        )

        try:
            model = WhisperModel(
                self.config.default_model,
                device=device,
                compute_type=compute_type,
            )
        except Exception as e:
            self._logger.warning(
                "Failed to load on requested device, falling back",
                extra={
                    "error": str(e),
                    "requested_device": device,
                    "fallback_device": self.config.fallback_device,
                },
            )
            device = self.config.fallback_device
            model = WhisperModel(
                self.config.default_model,
                device=device,
                compute_type=self.config.fallback_compute_type,
            )

        self._model = model
        self._actual_device = device
        return model

    def _record(self, locale: str) -> Any:
        """Record one utterance as a mono float32 array."""
        frames = int(self.config.record_seconds * self.config.sample_rate)
        self._logger.info(
            "Listening",
            extra={"locale": locale, "seconds": self.config.record_seconds},
        )
        try:
            import sounddevice as sd

            audio = sd.rec(
                frames,
                samplerate=self.config.sample_rate,
                channels=1,
                dtype="float32",
            )
            sd.wait()
        except Exception as e:
            raise SpeechCaptureError(
                "Microphone recording failed", locale=locale, cause=e
            )
        return audio.flatten()

    def _transcribe(self, audio: Union[str, Any], locale: str) -> TranscriptionResult:
        try:
            model = self._load_model()
        except Exception as e:
            raise SpeechCaptureError(
                "Speech model unavailable", locale=locale, cause=e
            )
        start_time = time.time()

        try:
            segments_iter, info = model.transcribe(
                audio,
                language=language_code(locale),
                beam_size=self.config.beam_size,
                vad_filter=True,
            )
            text = " ".join(segment.text.strip() for segment in segments_iter).strip()
        except Exception as e:
            self._logger.error(
                "Transcription failed",
                extra={"error": str(e), "locale": locale},
            )
            raise SpeechCaptureError("Transcription failed", locale=locale, cause=e)

        if not text:
            raise SpeechCaptureError("No speech recognized", locale=locale)

        self._logger.info(
            "Transcription complete",
            extra={
                "elapsed_seconds": round(time.time() - start_time, 2),
                "device": self._actual_device,
                "language": info.language,
            },
        )

        return TranscriptionResult(
            full_text=text,
            language=info.language or language_code(locale) or "",
            duration_seconds=info.duration,
        )

    def capture(self, locale: str) -> TranscriptionResult:
        """Record from the microphone and transcribe one utterance.

        Raises:
            SpeechCaptureError: If recording or recognition fails.
        """
        audio = self._record(locale)
        return self._transcribe(audio, locale)

    def transcribe_file(self, audio_path: Path, locale: str) -> TranscriptionResult:
        """Transcribe an uploaded or recorded audio file.

        Raises:
            SpeechCaptureError: If recognition fails.
        """
        return self._transcribe(str(audio_path), locale)

    def unload(self) -> None:
        """Drop the loaded model."""
        if self._model is not None:
            self._model = None
            self._logger.info("Whisper model unloaded")
