"""
Storage layer for analysis history.

Handles the bounded, most-recent-first list of saved analyses.
"""

from .history import HistoryStore

__all__ = ["HistoryStore"]
