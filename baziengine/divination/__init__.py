"""Divination companions to the chart engine."""

from .hexagram import (
    HEXAGRAMS,
    TRIGRAMS,
    Hexagram,
    HexagramReading,
    Trigram,
    cast_hexagram,
    changed_hexagram,
    hexagram_by_binary,
    hexagram_by_number,
    hexagram_for_trigrams,
)

__all__ = [
    "HEXAGRAMS",
    "TRIGRAMS",
    "Hexagram",
    "HexagramReading",
    "Trigram",
    "cast_hexagram",
    "changed_hexagram",
    "hexagram_by_binary",
    "hexagram_by_number",
    "hexagram_for_trigrams",
]
