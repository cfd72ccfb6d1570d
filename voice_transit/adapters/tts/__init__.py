"""TTS adapters - Implementations of SpeechSynthesizerPort.

Available implementations:
- HostedTTSSynthesizer: Hosted /tts endpoint, played with sounddevice
- LocalSpeechSynthesizer: Offline pyttsx3 engine
"""

from .hosted_tts_adapter import HostedTTSSynthesizer
from .pyttsx3_adapter import LocalSpeechSynthesizer

__all__ = ["HostedTTSSynthesizer", "LocalSpeechSynthesizer"]
