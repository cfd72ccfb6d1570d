"""Query interpretation: transcript to origin and destination.

The language model is asked for a JSON object; when the call fails or
the answer is not usable JSON, the pattern-based parser takes over.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field

from ..domain.models import ParsedQuery
from ..locales import get_language
from ..nlp.query_patterns import parse_transit_query
from .structured_generation import StructuredGenerationService

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)

PARSE_PROMPT = """You extract trip endpoints from bus transit questions.
The question may be in {language} or mixed with English.
Reply with only a JSON object of the form {{"origin": "...", "destination": "..."}}.
Keep place names as spoken. Use an empty string for anything not mentioned.

Question: {query}"""


def parse_query_json(text: str) -> ParsedQuery:
    """Parse the model's JSON answer into a ParsedQuery.

    A Markdown code fence around the object is tolerated; missing keys
    default to empty strings.

    Raises:
        ValueError: If the text is not a JSON object with string fields.
    """
    stripped = text.strip()
    fenced = _CODE_FENCE.match(stripped)
    if fenced:
        stripped = fenced.group(1)

    data = json.loads(stripped)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    origin = data.get("origin") or ""
    destination = data.get("destination") or ""
    if not isinstance(origin, str) or not isinstance(destination, str):
        raise ValueError("origin and destination must be strings")

    return ParsedQuery(origin=origin.strip(), destination=destination.strip())


@dataclass(frozen=True)
class ParseQueryTask:
    """GenerationTask extracting {origin, destination} from a query."""

    query: str
    language: str
    name: str = "parse_query"

    def build_prompt(self) -> str:
        return PARSE_PROMPT.format(
            language=get_language(self.language).name,
            query=self.query,
        )

    def parse(self, text: str) -> ParsedQuery:
        return parse_query_json(text)

    def fallback(self) -> ParsedQuery:
        return parse_transit_query(self.query)


@dataclass
class QueryInterpreter:
    """Turns a free-text transit query into a ParsedQuery.

    Attributes:
        generation: Structured generation service for the model call
    """

    generation: StructuredGenerationService

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def interpret(self, query: str, language: str) -> ParsedQuery:
        """Extract origin and destination from ``query``.

        Args:
            query: Raw transcript.
            language: Active language tag.

        Returns:
            ParsedQuery; both fields empty when the query cannot be
            interpreted.
        """
        if not query or not query.strip():
            return ParsedQuery()

        parsed = self.generation.run(ParseQueryTask(query=query, language=language))
        self._logger.info(
            "Query interpreted",
            extra={
                "origin": parsed.origin,
                "destination": parsed.destination,
                "complete": parsed.is_complete,
            },
        )
        return parsed
