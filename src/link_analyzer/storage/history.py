"""Bounded, most-recent-first history of analyses persisted as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import xxhash
from pydantic import ValidationError

from link_analyzer.config import get_config
from link_analyzer.exceptions import HistoryError
from link_analyzer.models import LinkAnalysis

logger = logging.getLogger(__name__)


class HistoryStore:
    """Persist up to ``max_entries`` analyses, most recent first."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        max_entries: Optional[int] = None,
        namespace: Optional[str] = None,
    ) -> None:
        config = get_config()
        self.max_entries = max_entries if max_entries is not None else config.history.max_entries
        self.namespace = namespace or config.history.namespace
        self._root = Path(base_path or config.history.base_path) / "history"

    def _namespace_key(self) -> str:
        return xxhash.xxh64(self.namespace.encode("utf-8")).hexdigest()

    @property
    def path(self) -> Path:
        """Location of the JSON file backing this namespace."""
        return self._root / f"{self._namespace_key()}.json"

    def _read_payload(self) -> Any:
        if not self.path.exists():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                return json.load(fp)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable history file {self.path}: {e}")
            return None

    def load(self) -> list[LinkAnalysis]:
        """Return stored analyses; malformed payloads yield an empty history."""

        payload = self._read_payload()
        if payload is None:
            return []
        if not isinstance(payload, list):
            logger.warning(f"Ignoring history payload of type {type(payload).__name__}")
            return []

        analyses: list[LinkAnalysis] = []
        for entry in payload:
            if not isinstance(entry, dict):
                continue
            try:
                analyses.append(LinkAnalysis.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping malformed history record: {e.error_count()} errors")
                continue
            if len(analyses) >= self.max_entries:
                break

        return analyses

    def _write(self, analyses: list[LinkAnalysis]) -> None:
        # Serialize before opening the tmp file; lone surrogates fail to encode.
        try:
            records = [analysis.to_record() for analysis in analyses]
            data = json.dumps(records, ensure_ascii=False).encode("utf-8")
        except ValueError as e:
            raise HistoryError(f"Analysis cannot be stored as JSON: {e}") from e

        tmp_path = self.path.with_suffix(".json.tmp")
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            tmp_path.replace(self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise HistoryError(f"Failed to write history to {self.path}: {e}") from e

    def add(self, analysis: LinkAnalysis) -> list[LinkAnalysis]:
        """Prepend an analysis, evict the oldest beyond the bound, and persist."""

        merged = [analysis, *self.load()][: self.max_entries]
        self._write(merged)
        logger.debug(f"Saved analysis {analysis.id} ({len(merged)} in history)")
        return merged

    def get(self, analysis_id: str) -> Optional[LinkAnalysis]:
        """Return the stored analysis with the given ID, if any."""

        for analysis in self.load():
            if analysis.id == analysis_id:
                return analysis
        return None

    def clear(self) -> None:
        """Remove all stored analyses for this namespace."""

        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise HistoryError(f"Failed to clear history at {self.path}: {e}") from e
