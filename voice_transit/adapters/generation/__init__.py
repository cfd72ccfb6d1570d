"""Generation adapters - Implementations of TextGeneratorPort.

Available implementations:
- GeminiTextGenerator: Hosted Gemini generateContent endpoint
"""

from .gemini_adapter import GeminiTextGenerator

__all__ = ["GeminiTextGenerator"]
