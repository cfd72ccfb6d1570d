"""Pattern-based origin/destination extraction for transit queries.

This is the fallback used when the hosted language model cannot
interpret a transcript. Three alternations are tried in a fixed
priority order; the first that matches wins:

1. prefix form       ``from Majestic to KR Market``, ``से Majestic तक KR Market``
2. postposition form ``Majestic se KR Market tak``
3. infix form        ``Majestic to KR Market``

Separator words cover English, Hindi, Kannada, Tamil, Telugu and
Marathi, in romanized and native script.

Example
-------
    >>> parse_transit_query("Majestic se KR Market tak")
    ParsedQuery(origin='Majestic', destination='KR Market')
"""

import re
from typing import List, Optional, Pattern, Sequence

from ..domain.models import ParsedQuery

FROM_WORDS: Sequence[str] = ("from",)

TO_WORDS: Sequence[str] = (
    "to",
    "till",
    "until",
    "towards",
    "tak",
    "तक",
    "varege",
    "ವರೆಗೆ",
    "varai",
    "வரை",
    "varaku",
    "వరకు",
    "paryant",
    "पर्यंत",
)

FROM_POSTPOSITIONS: Sequence[str] = (
    "se",
    "से",
    "inda",
    "ninda",
    "ಇಂದ",
    "ನಿಂದ",
    "irundhu",
    "irunthu",
    "இருந்து",
    "nundi",
    "నుండి",
    "pasun",
    "पासून",
)

TO_POSTPOSITIONS: Sequence[str] = (
    "tak",
    "तक",
    "varege",
    "ವರೆಗೆ",
    "varai",
    "வரை",
    "varaku",
    "వరకు",
    "paryant",
    "पर्यंत",
)

_TRAILING_PUNCTUATION = "?.!,;:।"


def _alternation(words: Sequence[str]) -> str:
    # Longest first so a short word never shadows a longer one.
    ordered = sorted(set(words), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(w) for w in ordered) + ")"


def _build_patterns() -> List[Pattern[str]]:
    """Compile the three alternations in priority order.

    Word boundaries are expressed with whitespace lookarounds rather
    than ``\\b`` because Indic vowel signs are not word characters.
    """
    from_words = _alternation(FROM_WORDS)
    to_words = _alternation(TO_WORDS)
    from_post = _alternation(FROM_POSTPOSITIONS)
    to_post = _alternation(TO_POSTPOSITIONS)
    end = r"(?=[\s" + re.escape(_TRAILING_PUNCTUATION) + r"]|$)"

    return [
        re.compile(
            # postpositions double as a leading "from", but only at the start
            rf"(?:(?<!\S){from_words}|^\s*{from_post})\s+(.+?)\s+{to_words}\s+(.+)",
            re.IGNORECASE,
        ),
        re.compile(
            rf"(.+?)\s+{from_post}\s+(.+?)\s+{to_post}{end}",
            re.IGNORECASE,
        ),
        re.compile(
            rf"(.+?)\s+{to_words}\s+(.+)",
            re.IGNORECASE,
        ),
    ]


PATTERNS: List[Pattern[str]] = _build_patterns()


def _clean(fragment: str) -> str:
    """Trim whitespace and trailing sentence punctuation."""
    return fragment.strip().rstrip(_TRAILING_PUNCTUATION).strip()


def match_pattern_index(text: str) -> Optional[int]:
    """Return the index of the first pattern matching ``text``.

    Parameters
    ----------
    text : str
        Raw transcript.

    Returns
    -------
    Optional[int]
        0, 1 or 2 for the matching tier, or None when nothing matches.
    """
    if not text or not text.strip():
        return None
    for index, pattern in enumerate(PATTERNS):
        if pattern.search(text):
            return index
    return None


def parse_transit_query(text: str) -> ParsedQuery:
    """Extract origin and destination with the fallback patterns.

    Parameters
    ----------
    text : str
        Raw transcript, matched case-insensitively.

    Returns
    -------
    ParsedQuery
        Groups 1 and 2 of the first matching pattern, cleaned. Both
        fields are empty when no pattern matches.
    """
    if not text or not text.strip():
        return ParsedQuery()

    for pattern in PATTERNS:
        match = pattern.search(text)
        if match:
            return ParsedQuery(
                origin=_clean(match.group(1)),
                destination=_clean(match.group(2)),
            )

    return ParsedQuery()
