"""Case-insensitive deduplication of normalized lines."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class LinePair(NamedTuple):
    """A raw input line and its normalized form."""

    raw: str
    normalized: str


def dedupe_key(normalized: str) -> str:
    """Equality key for deduplication: exact match ignoring case."""
    return normalized.lower()


def dedupe_pairs(pairs: Iterable[LinePair], enabled: bool) -> list[LinePair]:
    """Keep the first pair for each distinct lowercase normalized value.

    Order of first occurrences is preserved. When ``enabled`` is False the
    pairs are returned unchanged.
    """
    pairs = list(pairs)
    if not enabled:
        return pairs

    seen: set[str] = set()
    unique: list[LinePair] = []

    for pair in pairs:
        key = dedupe_key(pair.normalized)
        if key in seen:
            continue
        seen.add(key)
        unique.append(pair)

    return unique
