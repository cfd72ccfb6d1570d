"""Response composition: bus rides to a spoken sentence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..domain.models import TransitResult
from ..locales import format_route_message, get_language, no_route_message
from .structured_generation import StructuredGenerationService

COMPOSE_PROMPT = """You are a friendly bus transit voice assistant.
Tell the rider about this bus in one or two short conversational sentences in {language}.
Reply with the sentence only.

Bus number: {bus_number}
Boarding stop: {from_stop}
Alighting stop: {to_stop}
Departure: {departure_time}
Travel time: {duration}
Stops: {stops}"""

_QUOTES = "\"'“”‘’"


@dataclass(frozen=True)
class ComposeResponseTask:
    """GenerationTask producing a localized sentence for one bus ride."""

    result: TransitResult
    language: str
    name: str = "compose_response"

    def build_prompt(self) -> str:
        return COMPOSE_PROMPT.format(
            language=get_language(self.language).name,
            bus_number=self.result.bus_number,
            from_stop=self.result.from_stop,
            to_stop=self.result.to_stop,
            departure_time=self.result.departure_time,
            duration=self.result.duration,
            stops=self.result.stops,
        )

    def parse(self, text: str) -> str:
        sentence = text.strip().strip(_QUOTES).strip()
        if not sentence:
            raise ValueError("Empty composed response")
        return sentence

    def fallback(self) -> str:
        return format_route_message(self.result, self.language)


@dataclass
class ResponseComposer:
    """Builds the text shown and spoken for a query.

    Attributes:
        generation: Structured generation service for the model call
    """

    generation: StructuredGenerationService

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def compose(self, results: Sequence[TransitResult], language: str) -> str:
        """Describe the first bus ride, or say that none was found.

        Args:
            results: Bus rides for the query, possibly empty.
            language: Active language tag.

        Returns:
            The display string.
        """
        if not results:
            return no_route_message(language)

        return self.generation.run(
            ComposeResponseTask(result=results[0], language=language)
        )
