"""
Line normalization utilities.

Handles line splitting, scheme inference, deduplication and ID generation.
"""

from .deduplicator import LinePair, dedupe_key, dedupe_pairs
from .ids import (
    CounterIDGenerator,
    IDGenerator,
    UUIDGenerator,
    get_id_generator,
    reset_id_generator,
)
from .line_normalizer import SCHEME_PATTERN, has_scheme, normalize_line, split_lines

__all__ = [
    "split_lines",
    "normalize_line",
    "has_scheme",
    "SCHEME_PATTERN",
    "LinePair",
    "dedupe_key",
    "dedupe_pairs",
    "IDGenerator",
    "UUIDGenerator",
    "CounterIDGenerator",
    "get_id_generator",
    "reset_id_generator",
]
