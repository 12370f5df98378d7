"""
Aggregation of classified rows into metrics and distributions.

All counters are local to a single call; distributions keep keys in the
order they were first seen, which is the tie-break used by top_entries.
"""

from collections.abc import Mapping, Sequence

from link_analyzer.models import LinkDistributions, LinkMetrics, LinkRow


def _increment(counts: dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def aggregate(items: Sequence[LinkRow]) -> tuple[LinkMetrics, LinkDistributions]:
    """
    Fold rows into summary metrics and frequency distributions.

    Args:
        items: Classified rows in report order

    Returns:
        Tuple of (metrics, distributions). Empty input yields zeroed metrics
        (avg_length == 0) and empty distributions.
    """
    protocol_dist: dict[str, int] = {}
    domain_dist: dict[str, int] = {}
    tld_dist: dict[str, int] = {}

    valid = 0
    with_query = 0
    with_hash = 0
    length_sum = 0

    for item in items:
        length_sum += item.length
        if item.is_valid:
            valid += 1
        if item.query_params > 0:
            with_query += 1
        if item.has_hash:
            with_hash += 1

        if item.protocol:
            _increment(protocol_dist, item.protocol)
        if item.domain:
            _increment(domain_dist, item.domain.lower())
        if item.tld:
            _increment(tld_dist, item.tld)

    total = len(items)
    metrics = LinkMetrics(
        total=total,
        valid=valid,
        invalid=total - valid,
        unique_domains=len(domain_dist),
        with_query=with_query,
        with_hash=with_hash,
        avg_length=length_sum / total if total else 0,
    )
    distributions = LinkDistributions(
        protocol=protocol_dist, domain=domain_dist, tld=tld_dist
    )
    return metrics, distributions


def top_entries(distribution: Mapping[str, int], limit: int) -> list[tuple[str, int]]:
    """
    Return the most frequent entries of a distribution.

    Sorted by count descending; equal counts keep the mapping's iteration
    (first-seen) order because the sort is stable.

    Args:
        distribution: Key to count mapping
        limit: Maximum number of entries to return

    Returns:
        List of (key, count) pairs, at most ``limit`` long
    """
    if limit <= 0:
        return []
    ranked = sorted(distribution.items(), key=lambda entry: entry[1], reverse=True)
    return ranked[:limit]
