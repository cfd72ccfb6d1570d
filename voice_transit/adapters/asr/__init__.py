"""ASR adapters - Implementations of SpeechCapturePort.

Available implementations:
- WhisperSpeechCapture: Microphone capture + Faster-Whisper transcription
"""

from .whisper_adapter import WhisperSpeechCapture

__all__ = ["WhisperSpeechCapture"]
