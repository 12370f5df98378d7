"""
API serving layer.

Handles analysis requests, history and exports over HTTP.
"""

from link_analyzer.api.models import AnalyzeRequest, TopEntriesResponse, TopEntry
from link_analyzer.api.server import app, get_analyzer, get_history, init_history

__all__ = [
    "AnalyzeRequest",
    "TopEntry",
    "TopEntriesResponse",
    "app",
    "get_analyzer",
    "get_history",
    "init_history",
]
