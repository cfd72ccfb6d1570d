"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Hosted language model (Gemini)
- Directions service (Google Directions)
- Speech capture (sounddevice + Faster-Whisper)
- Speech output (hosted TTS, pyttsx3)
- Reverse geocoding (Nominatim) and device location
- Caching systems (in-memory, null)
"""
