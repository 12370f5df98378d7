"""Unit tests for CSV and tabular export."""

import csv
import io
from datetime import datetime, timezone

import polars as pl
import pytest

from link_analyzer import AnalyzeOptions, LinkAnalyzer
from link_analyzer.exceptions import ExportError
from link_analyzer.export import (
    EXPORT_COLUMNS,
    distribution_frame,
    export_filename,
    to_csv,
    to_frame,
)
from link_analyzer.normalization import CounterIDGenerator


@pytest.fixture
def analyzer():
    """Create an analyzer with deterministic IDs and clock."""
    return LinkAnalyzer(
        id_generator=CounterIDGenerator(prefix="e"),
        clock=lambda: datetime(2024, 6, 7, 8, 9, 10, tzinfo=timezone.utc),
    )


@pytest.fixture
def analysis(analyzer):
    """Create an analysis with valid and invalid rows."""
    return analyzer.analyze(
        'https://a.com/x?q=1&r=2#top\nexample.com\nhttps://b.org/"quoted"',
        AnalyzeOptions(assume_https=False, dedupe=True),
    )


def _read_csv(text):
    return list(csv.reader(io.StringIO(text)))


class TestToFrame:
    """Test suite for to_frame."""

    def test_columns_and_types(self, analysis):
        """Test the frame has one typed row per item."""
        df = to_frame(analysis)

        assert df.columns == EXPORT_COLUMNS
        assert len(df) == 3
        assert df.schema["isValid"] == pl.Boolean
        assert df.schema["queryParams"] == pl.Int64

    def test_values(self, analysis):
        """Test row values mirror the analysis items."""
        row = to_frame(analysis).row(0, named=True)

        assert row["domain"] == "a.com"
        assert row["queryParams"] == 2
        assert row["hasHash"] is True
        assert row["error"] is None

    def test_empty(self, analyzer):
        """Test an empty analysis yields an empty frame with the schema."""
        df = to_frame(analyzer.analyze("", AnalyzeOptions()))

        assert len(df) == 0
        assert df.columns == EXPORT_COLUMNS


class TestToCsv:
    """Test suite for to_csv."""

    def test_header_and_rows(self, analysis):
        """Test CSV header and row count."""
        rows = _read_csv(to_csv(analysis))

        assert rows[0] == EXPORT_COLUMNS
        assert len(rows) == 4

    def test_cell_formatting(self, analysis):
        """Test booleans, numbers and absent fields are rendered as text."""
        rows = _read_csv(to_csv(analysis))
        valid = dict(zip(rows[0], rows[1]))
        invalid = dict(zip(rows[0], rows[2]))

        assert valid["isValid"] == "true"
        assert valid["hasHash"] == "true"
        assert valid["queryParams"] == "2"
        assert valid["error"] == ""

        assert invalid["isValid"] == "false"
        assert invalid["protocol"] == ""
        assert invalid["error"] != ""

    def test_quotes_escaped(self, analysis):
        """Test embedded quotes survive a CSV round-trip."""
        rows = _read_csv(to_csv(analysis))
        assert rows[3][0] == 'https://b.org/"quoted"'

    def test_every_cell_quoted(self, analysis):
        """Test data cells are quoted."""
        data_line = to_csv(analysis).splitlines()[1]
        assert data_line.startswith('"https://a.com/x?q=1&r=2#top"')

    def test_empty(self, analyzer):
        """Test an empty analysis exports only the header."""
        rows = _read_csv(to_csv(analyzer.analyze("", AnalyzeOptions())))
        assert rows == [EXPORT_COLUMNS]


class TestExportHelpers:
    """Test suite for filename and distribution helpers."""

    def test_export_filename(self, analysis):
        """Test the filename is stamped with the analysis time."""
        assert export_filename(analysis) == "analise-links_2024-06-07-08-09-10.csv"

    def test_distribution_frame(self, analyzer):
        """Test top entries as a key/count frame."""
        analysis = analyzer.analyze(
            "a.com/1\na.com/2\nb.com\nc.net", AnalyzeOptions(assume_https=True)
        )
        df = distribution_frame(analysis, "domain", 2)

        assert df["key"].to_list() == ["a.com", "b.com"]
        assert df["count"].to_list() == [2, 1]

    def test_unknown_distribution(self, analysis):
        """Test unknown distribution names raise ExportError."""
        with pytest.raises(ExportError):
            distribution_frame(analysis, "port", 5)
