"""Tests for the Whisper speech capture adapter."""

import os
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

from voice_transit.adapters.asr import WhisperSpeechCapture
from voice_transit.adapters.asr.whisper_adapter import language_code
from voice_transit.config import ASRConfig
from voice_transit.domain.errors import SpeechCaptureError


def segments(*texts):
    return [SimpleNamespace(text=t) for t in texts]


class TestLanguageCode:
    @pytest.mark.parametrize(
        "locale,expected",
        [("hi-IN", "hi"), ("kn_IN", "kn"), ("EN-in", "en"), ("", None)],
    )
    def test_primary_subtag(self, locale, expected):
        assert language_code(locale) == expected


class TestWhisperSpeechCapture:
    @pytest.fixture
    def model(self):
        model = MagicMock()
        info = SimpleNamespace(language="hi", duration=3.2)
        model.transcribe.return_value = (iter(segments(" Majestic se", " KR Market tak ")), info)
        return model

    @pytest.fixture
    def capture(self, model):
        capture = WhisperSpeechCapture(ASRConfig(device="cpu", beam_size=3))
        capture._model = model
        return capture

    def test_transcribe_file(self, capture, model):
        result = capture.transcribe_file("question.wav", "hi-IN")

        assert result.full_text == "Majestic se KR Market tak"
        assert result.language == "hi"
        assert result.duration_seconds == 3.2
        model.transcribe.assert_called_once_with(
            "question.wav", language="hi", beam_size=3, vad_filter=True
        )

    def test_capture_records_then_transcribes(self, capture, model):
        fake_sd = MagicMock()
        fake_sd.rec.return_value = np.zeros((80000, 1), dtype="float32")

        with patch.dict(sys.modules, {"sounddevice": fake_sd}):
            result = capture.capture("hi-IN")

        assert result.full_text == "Majestic se KR Market tak"
        fake_sd.rec.assert_called_once_with(
            80000, samplerate=16000, channels=1, dtype="float32"
        )
        fake_sd.wait.assert_called_once()
        audio = model.transcribe.call_args.args[0]
        assert audio.shape == (80000,)

    def test_recording_failure(self, capture):
        fake_sd = MagicMock()
        fake_sd.rec.side_effect = RuntimeError("no input device")

        with patch.dict(sys.modules, {"sounddevice": fake_sd}):
            with pytest.raises(SpeechCaptureError) as exc_info:
                capture.capture("en-IN")

        assert exc_info.value.locale == "en-IN"

    def test_empty_transcript_is_error(self, capture, model):
        model.transcribe.return_value = (iter(segments("  ")), SimpleNamespace(language="en", duration=1.0))

        with pytest.raises(SpeechCaptureError):
            capture.transcribe_file("silence.wav", "en-IN")

    def test_transcription_failure(self, capture, model):
        model.transcribe.side_effect = RuntimeError("decoder crashed")

        with pytest.raises(SpeechCaptureError):
            capture.transcribe_file("question.wav", "en-IN")

    def test_model_load_failure(self):
        capture = WhisperSpeechCapture(ASRConfig(device="cpu"))

        with patch.object(capture, "_load_model", side_effect=ImportError("faster_whisper")):
            with pytest.raises(SpeechCaptureError):
                capture.transcribe_file("question.wav", "en-IN")

    def test_falls_back_to_cpu(self):
        capture = WhisperSpeechCapture(ASRConfig(device="cuda", fallback_compute_type="int8"))
        fake_fw = MagicMock()
        fallback_model = MagicMock()
        fake_fw.WhisperModel.side_effect = [RuntimeError("CUDA unavailable"), fallback_model]

        with patch.dict(sys.modules, {"faster_whisper": fake_fw}):
            assert capture._load_model() is fallback_model

        assert capture._actual_device == "cpu"
        assert fake_fw.WhisperModel.call_args.kwargs == {"device": "cpu", "compute_type": "int8"}

    def test_unload(self, capture):
        capture.unload()

        assert capture._model is None


@pytest.mark.skipif(
    os.environ.get("SKIP_SLOW_TESTS", "1") == "1",
    reason="Loads a real Whisper model; set SKIP_SLOW_TESTS=0 to run",
)
def test_real_model_loads():
    capture = WhisperSpeechCapture(ASRConfig(default_model="tiny", device="cpu"))

    assert capture._load_model() is not None
    capture.unload()
