"""
Link analysis pipeline.

Raw text -> lines -> normalized candidates -> (optional) dedup ->
classified rows -> metrics and distributions, packed into a LinkAnalysis.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Optional

from link_analyzer.aggregation import aggregate
from link_analyzer.classification import URLClassifier
from link_analyzer.config import get_config
from link_analyzer.models import AnalyzeOptions, LinkAnalysis, LinkRow
from link_analyzer.normalization import (
    IDGenerator,
    LinePair,
    dedupe_pairs,
    get_id_generator,
    normalize_line,
    split_lines,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: current time in UTC."""
    return datetime.now(timezone.utc)


def default_options() -> AnalyzeOptions:
    """Build options from the analysis configuration."""
    config = get_config()
    return AnalyzeOptions(
        assume_https=config.analysis.assume_https,
        dedupe=config.analysis.dedupe,
    )


class LinkAnalyzer:
    """
    Run the analysis pipeline over a block of text.

    The analyzer keeps no state between runs; identifiers and timestamps come
    from the injected generator and clock.
    """

    def __init__(
        self,
        classifier: Optional[URLClassifier] = None,
        id_generator: Optional[IDGenerator] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize analyzer.

        Args:
            classifier: URL classifier instance (creates new if None)
            id_generator: Identifier source (global generator if None)
            clock: Zero-argument callable returning an aware datetime
        """
        self.classifier = classifier or URLClassifier()
        self.id_generator = id_generator or get_id_generator()
        self.clock = clock or utc_now

    def analyze(self, text: str, options: Optional[AnalyzeOptions] = None) -> LinkAnalysis:
        """
        Analyze a block of candidate links, one per line.

        Args:
            text: Raw input (LF or CRLF separated)
            options: Normalization/dedup options (configuration defaults if None)

        Returns:
            LinkAnalysis snapshot of the run
        """
        options = options or default_options()

        pairs = [
            LinePair(raw=line, normalized=normalize_line(line, options.assume_https))
            for line in split_lines(text)
        ]
        unique = dedupe_pairs(pairs, options.dedupe)

        items = [self._classify_pair(pair) for pair in unique]
        metrics, distributions = aggregate(items)

        logger.debug(
            f"Analyzed {len(pairs)} lines ({len(unique)} after dedup): "
            f"{metrics.valid} valid, {metrics.invalid} invalid"
        )

        return LinkAnalysis(
            id=self.id_generator.new_id(),
            created_at=self.clock(),
            input=text,
            items=items,
            metrics=metrics,
            distributions=distributions,
        )

    def _classify_pair(self, pair: LinePair) -> LinkRow:
        result = self.classifier.classify(pair.normalized)
        return LinkRow(
            id=self.id_generator.new_id(),
            raw=pair.raw,
            normalized=pair.normalized,
            length=len(pair.normalized),
            **result.to_fields(),
        )


def analyze_links(
    text: str,
    options: Optional[AnalyzeOptions] = None,
    *,
    id_generator: Optional[IDGenerator] = None,
    clock: Optional[Clock] = None,
) -> LinkAnalysis:
    """
    Analyze a block of candidate links (convenience wrapper).

    Never raises for text input; in the worst case every row is invalid.
    """
    analyzer = LinkAnalyzer(id_generator=id_generator, clock=clock)
    return analyzer.analyze(text, options)
