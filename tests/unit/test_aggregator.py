"""Unit tests for aggregation and top entries."""

import pytest

from link_analyzer.aggregation import aggregate, top_entries
from link_analyzer.models import LinkRow


def _valid_row(row_id, normalized, protocol, domain, tld, query_params=0, has_hash=False):
    return LinkRow(
        id=row_id,
        raw=normalized,
        normalized=normalized,
        is_valid=True,
        protocol=protocol,
        hostname=domain,
        domain=domain,
        tld=tld,
        pathname="/",
        query_params=query_params,
        has_hash=has_hash,
        length=len(normalized),
    )


def _invalid_row(row_id, normalized):
    return LinkRow(
        id=row_id,
        raw=normalized,
        normalized=normalized,
        is_valid=False,
        error="relative URL without a base",
        length=len(normalized),
    )


class TestAggregate:
    """Test suite for aggregate."""

    def test_empty(self):
        """Test empty input yields zeroed metrics and empty distributions."""
        metrics, distributions = aggregate([])

        assert metrics.total == 0
        assert metrics.valid == 0
        assert metrics.invalid == 0
        assert metrics.unique_domains == 0
        assert metrics.avg_length == 0
        assert distributions.protocol == {}
        assert distributions.domain == {}
        assert distributions.tld == {}

    def test_counts(self):
        """Test metric counters over mixed rows."""
        items = [
            _valid_row("1", "https://a.com?x=1", "https", "a.com", "com", query_params=1),
            _valid_row("2", "http://b.org#top", "http", "b.org", "org", has_hash=True),
            _invalid_row("3", "nope"),
        ]
        metrics, _ = aggregate(items)

        assert metrics.total == 3
        assert metrics.valid == 2
        assert metrics.invalid == 1
        assert metrics.with_query == 1
        assert metrics.with_hash == 1
        assert metrics.valid + metrics.invalid == metrics.total

    def test_avg_length(self):
        """Test average length over all rows, invalid included."""
        items = [
            _valid_row("1", "https://a.com", "https", "a.com", "com"),  # 13
            _invalid_row("2", "abc"),  # 3
        ]
        metrics, _ = aggregate(items)
        assert metrics.avg_length == pytest.approx(8.0)

    def test_domain_distribution_lowercased(self):
        """Test domain keys are lowercased and counted together."""
        items = [
            _valid_row("1", "https://Example.com", "https", "Example.com", "com"),
            _valid_row("2", "https://example.com", "https", "example.com", "com"),
            _valid_row("3", "https://other.net", "https", "other.net", "net"),
        ]
        metrics, distributions = aggregate(items)

        assert distributions.domain == {"example.com": 2, "other.net": 1}
        assert distributions.tld == {"com": 2, "net": 1}
        assert distributions.protocol == {"https": 3}
        assert metrics.unique_domains == 2

    def test_absent_fields_skipped(self):
        """Test rows without a domain or TLD are not counted there."""
        items = [
            _valid_row("1", "https://nota-url", "https", "nota-url", None),
            _valid_row("2", "mailto:x@y.z", "mailto", None, None),
            _invalid_row("3", "bad"),
        ]
        _, distributions = aggregate(items)

        assert distributions.protocol == {"https": 1, "mailto": 1}
        assert distributions.domain == {"nota-url": 1}
        assert distributions.tld == {}

    def test_first_seen_key_order(self):
        """Test distribution keys keep first-seen order."""
        items = [
            _valid_row("1", "https://c.io", "https", "c.io", "io"),
            _valid_row("2", "http://a.io", "http", "a.io", "io"),
            _valid_row("3", "ftp://b.io", "ftp", "b.io", "io"),
        ]
        _, distributions = aggregate(items)

        assert list(distributions.domain) == ["c.io", "a.io", "b.io"]
        assert list(distributions.protocol) == ["https", "http", "ftp"]

    def test_calls_are_independent(self):
        """Test repeated calls do not share counters."""
        items = [_valid_row("1", "https://a.com", "https", "a.com", "com")]

        aggregate(items)
        metrics, distributions = aggregate(items)

        assert metrics.total == 1
        assert distributions.domain == {"a.com": 1}


class TestTopEntries:
    """Test suite for top_entries."""

    def test_sorted_descending(self):
        """Test entries are sorted by count, highest first."""
        dist = {"a": 1, "b": 5, "c": 3}
        assert top_entries(dist, 10) == [("b", 5), ("c", 3), ("a", 1)]

    def test_ties_keep_insertion_order(self):
        """Test equal counts keep the mapping's insertion order."""
        dist = {"x": 2, "y": 3, "z": 2, "w": 2}
        assert top_entries(dist, 10) == [("y", 3), ("x", 2), ("z", 2), ("w", 2)]

    def test_limit(self):
        """Test output is truncated to the limit."""
        dist = {"a": 3, "b": 2, "c": 1}
        assert top_entries(dist, 2) == [("a", 3), ("b", 2)]

    def test_non_positive_limit(self):
        """Test zero or negative limits return nothing."""
        assert top_entries({"a": 1}, 0) == []
        assert top_entries({"a": 1}, -1) == []

    def test_empty(self):
        """Test empty distribution."""
        assert top_entries({}, 5) == []
