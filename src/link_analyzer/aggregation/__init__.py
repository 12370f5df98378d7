"""
Batch aggregation.

Builds summary metrics and protocol/domain/TLD distributions.
"""

from .aggregator import aggregate, top_entries

__all__ = ["aggregate", "top_entries"]
