"""Speech ports - Abstractions for speech capture and synthesis.

These protocols decouple the pipeline from any specific audio stack so
a test harness can substitute deterministic fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import TranscriptionResult


class SpeechCapturePort(Protocol):
    """Port for capturing one spoken utterance.

    Implementation: adapters/asr/whisper_adapter.py

    One call captures a single, non-continuous utterance and returns
    its transcript verbatim.
    """

    def capture(self, locale: str) -> TranscriptionResult:
        """Capture and transcribe one utterance.

        Args:
            locale: Locale the recognizer should expect (e.g. 'hi-IN').

        Returns:
            TranscriptionResult with the recognized text.

        Raises:
            SpeechCaptureError: If recording or recognition fails.
        """
        ...

    def transcribe_file(self, audio_path: Path, locale: str) -> TranscriptionResult:
        """Transcribe an uploaded or pre-recorded audio file.

        Raises:
            SpeechCaptureError: If the file cannot be transcribed.
        """
        ...


class SpeechSynthesizerPort(Protocol):
    """Port for speaking text aloud.

    Implementations:
    - adapters/tts/hosted_tts_adapter.py (HostedTTSSynthesizer)
    - adapters/tts/pyttsx3_adapter.py (LocalSpeechSynthesizer)
    """

    def speak(self, text: str, locale: str) -> None:
        """Synthesize and play ``text``; return when playback completes.

        Args:
            text: The text to speak.
            locale: Locale of the text (e.g. 'kn-IN').

        Raises:
            SpeechSynthesisError: If synthesis or playback fails.
        """
        ...
