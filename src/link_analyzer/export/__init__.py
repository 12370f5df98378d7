"""
Export of analyses to tabular formats.

Handles CSV rendering and chart-ready distribution tables.
"""

from .csv_exporter import (
    DISTRIBUTION_FIELDS,
    EXPORT_COLUMNS,
    distribution,
    distribution_frame,
    export_filename,
    to_csv,
    to_frame,
)

__all__ = [
    "EXPORT_COLUMNS",
    "DISTRIBUTION_FIELDS",
    "to_frame",
    "to_csv",
    "export_filename",
    "distribution",
    "distribution_frame",
]
