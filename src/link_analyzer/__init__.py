"""
Link analyzer.

Normalizes pasted lists of links, classifies them as valid URLs, and
computes batch statistics.
"""

from link_analyzer.aggregation import aggregate, top_entries
from link_analyzer.models import (
    AnalyzeOptions,
    LinkAnalysis,
    LinkDistributions,
    LinkMetrics,
    LinkRow,
)
from link_analyzer.pipeline import LinkAnalyzer, analyze_links

__version__ = "0.1.0"

__all__ = [
    "analyze_links",
    "LinkAnalyzer",
    "top_entries",
    "aggregate",
    "AnalyzeOptions",
    "LinkAnalysis",
    "LinkRow",
    "LinkMetrics",
    "LinkDistributions",
]
