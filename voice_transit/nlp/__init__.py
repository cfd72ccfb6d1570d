"""Rule-based language processing for transit queries."""

from .query_patterns import match_pattern_index, parse_transit_query

__all__ = ["parse_transit_query", "match_pattern_index"]
