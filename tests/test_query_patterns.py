"""Tests for the pattern-based query parser."""

import pytest

from voice_transit.domain.models import ParsedQuery
from voice_transit.nlp.query_patterns import match_pattern_index, parse_transit_query


class TestParseTransitQuery:
    def test_infix_english(self):
        assert parse_transit_query("Majestic to KR Market") == ParsedQuery(
            "Majestic", "KR Market"
        )

    def test_keeps_input_case(self):
        parsed = parse_transit_query("MAJESTIC TO KR MARKET")

        assert parsed.origin == "MAJESTIC"
        assert parsed.destination == "KR MARKET"

    def test_prefix_from_to(self):
        parsed = parse_transit_query("How do I go from Majestic to KR Market?")

        assert parsed == ParsedQuery("Majestic", "KR Market")
        assert match_pattern_index("How do I go from Majestic to KR Market?") == 0

    def test_hindi_romanized_postpositions(self):
        parsed = parse_transit_query("Majestic se KR Market tak")

        assert parsed == ParsedQuery("Majestic", "KR Market")
        assert match_pattern_index("Majestic se KR Market tak") == 1

    def test_postposition_with_trailing_words(self):
        parsed = parse_transit_query("Shivajinagar se Majestic tak jaana hai")

        assert parsed == ParsedQuery("Shivajinagar", "Majestic")

    def test_hindi_native_script(self):
        parsed = parse_transit_query("मैजेस्टिक से केआर मार्केट तक")

        assert parsed == ParsedQuery("मैजेस्टिक", "केआर मार्केट")

    def test_kannada_romanized(self):
        parsed = parse_transit_query("Majestic inda Jayanagar varege")

        assert parsed == ParsedQuery("Majestic", "Jayanagar")

    @pytest.mark.parametrize(
        "query",
        ["Majestic KR Market", "bus please", "", "   "],
    )
    def test_no_separator_gives_empty_result(self, query):
        parsed = parse_transit_query(query)

        assert parsed == ParsedQuery()
        assert not parsed.is_complete
        assert match_pattern_index(query) is None

    def test_trailing_punctuation_stripped(self):
        parsed = parse_transit_query("Majestic to Whitefield.")

        assert parsed.destination == "Whitefield"

    def test_separator_inside_word_is_not_split(self):
        # "toronto" must not be read as "to"
        parsed = parse_transit_query("Majestic to Toronto Circle")

        assert parsed == ParsedQuery("Majestic", "Toronto Circle")

    def test_infix_index(self):
        assert match_pattern_index("Majestic to KR Market") == 2

    @pytest.mark.parametrize(
        "query",
        [
            "से Majestic तक KR Market",
            "se Majestic tak KR Market",
            "ನಿಂದ Majestic ವರೆಗೆ KR Market",
        ],
    )
    def test_leading_native_from_word(self, query):
        assert parse_transit_query(query) == ParsedQuery("Majestic", "KR Market")
        assert match_pattern_index(query) == 0

    def test_postposition_not_read_as_leading_from(self):
        query = "Shivajinagar se Majestic tak jaana hai"

        assert match_pattern_index(query) == 1
