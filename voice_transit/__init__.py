"""Top-level package for the Voice Transit Assistant.

A spoken question ("Majestic to KR Market", "Majestic se KR Market
tak") is transcribed, interpreted into an origin and a destination,
resolved into bus rides, and answered aloud in the user's language.
"""

__version__ = "0.1.0"
