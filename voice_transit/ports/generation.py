"""Generation port - Abstraction for the hosted language model."""

from __future__ import annotations

from typing import Protocol


class TextGeneratorPort(Protocol):
    """Port for hosted text generation.

    Implementation: adapters/generation/gemini_adapter.py

    The same endpoint serves both query interpretation and response
    composition; the port only knows about prompts and text.
    """

    def generate(self, prompt: str) -> str:
        """Send a prompt and return the generated text.

        Args:
            prompt: The full prompt text.

        Returns:
            The raw generated text.

        Raises:
            GenerationError: On transport failure, non-success status
                or a response without text.
        """
        ...

    @property
    def model(self) -> str:
        """Return the model identifier."""
        ...
