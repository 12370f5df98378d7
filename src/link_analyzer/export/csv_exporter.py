"""
CSV and tabular export of analyses.

Rows are laid out with the record's camelCase column names so exported files
line up with the serialized history.
"""

from collections.abc import Mapping

import polars as pl

from link_analyzer.aggregation import top_entries
from link_analyzer.exceptions import ExportError
from link_analyzer.models import LinkAnalysis

EXPORT_COLUMNS = [
    "raw",
    "normalized",
    "isValid",
    "protocol",
    "hostname",
    "domain",
    "tld",
    "pathname",
    "queryParams",
    "hasHash",
    "length",
    "error",
]

DISTRIBUTION_FIELDS = ("protocol", "domain", "tld")


def to_frame(analysis: LinkAnalysis) -> pl.DataFrame:
    """
    Build a typed DataFrame with one row per analyzed link.

    Args:
        analysis: Analysis to export

    Returns:
        DataFrame with EXPORT_COLUMNS (absent fields are null)
    """
    records = [
        {
            "raw": item.raw,
            "normalized": item.normalized,
            "isValid": item.is_valid,
            "protocol": item.protocol,
            "hostname": item.hostname,
            "domain": item.domain,
            "tld": item.tld,
            "pathname": item.pathname,
            "queryParams": item.query_params,
            "hasHash": item.has_hash,
            "length": item.length,
            "error": item.error,
        }
        for item in analysis.items
    ]

    schema = {
        "raw": pl.Utf8,
        "normalized": pl.Utf8,
        "isValid": pl.Boolean,
        "protocol": pl.Utf8,
        "hostname": pl.Utf8,
        "domain": pl.Utf8,
        "tld": pl.Utf8,
        "pathname": pl.Utf8,
        "queryParams": pl.Int64,
        "hasHash": pl.Boolean,
        "length": pl.Int64,
        "error": pl.Utf8,
    }

    if not records:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(records, schema=schema)


def to_csv(analysis: LinkAnalysis) -> str:
    """
    Render an analysis as CSV text.

    Every cell is quoted; booleans are written as true/false and absent
    fields as empty strings.
    """
    df = to_frame(analysis).with_columns(
        pl.col("isValid", "hasHash").cast(pl.Utf8).str.to_lowercase(),
        pl.col("queryParams", "length").cast(pl.Utf8),
    )
    df = df.fill_null("")
    return df.write_csv(quote_style="always", line_terminator="\n").rstrip("\n")


def export_filename(analysis: LinkAnalysis) -> str:
    """File name for a CSV export, stamped with the analysis time."""
    stamp = analysis.created_at.strftime("%Y-%m-%d-%H-%M-%S")
    return f"analise-links_{stamp}.csv"


def distribution(analysis: LinkAnalysis, field: str) -> Mapping[str, int]:
    """
    Look up one of the analysis distributions by name.

    Raises:
        ExportError: If field is not a known distribution
    """
    if field not in DISTRIBUTION_FIELDS:
        raise ExportError(
            f"Unknown distribution '{field}' (expected one of {', '.join(DISTRIBUTION_FIELDS)})"
        )
    return getattr(analysis.distributions, field)


def distribution_frame(analysis: LinkAnalysis, field: str, limit: int) -> pl.DataFrame:
    """Top entries of a distribution as a key/count DataFrame."""
    entries = top_entries(distribution(analysis, field), limit)
    return pl.DataFrame(
        {
            "key": [key for key, _ in entries],
            "count": [count for _, count in entries],
        },
        schema={"key": pl.Utf8, "count": pl.Int64},
    )
