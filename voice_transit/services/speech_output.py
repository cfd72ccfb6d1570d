"""Speech output with ordered synthesizer fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..domain.errors import SpeechSynthesisError
from ..ports.speech import SpeechSynthesizerPort


@dataclass
class SpeechOutputService:
    """Speaks text with the first synthesizer that succeeds.

    Synthesizers are tried in order (hosted first, then local). A failure
    of the last one is logged and absorbed; speaking never fails a query.

    Attributes:
        synthesizers: Synthesizers in preference order
    """

    synthesizers: Sequence[SpeechSynthesizerPort]

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def speak(self, text: str, locale: str) -> bool:
        """Speak ``text`` in ``locale``.

        Returns:
            True if some synthesizer spoke the text.
        """
        if not text:
            return False

        for synthesizer in self.synthesizers:
            try:
                synthesizer.speak(text, locale)
            except SpeechSynthesisError as e:
                self._logger.warning(
                    "Speech synthesis failed",
                    extra={
                        "engine": e.engine or type(synthesizer).__name__,
                        "locale": locale,
                        "error": str(e),
                    },
                )
                continue
            return True

        self._logger.error(
            "No synthesizer could speak the response", extra={"locale": locale}
        )
        return False
