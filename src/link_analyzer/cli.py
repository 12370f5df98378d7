"""
Command-line link analysis.

Reads links (one per line) from a file or stdin, prints a summary of the
analysis, and optionally writes a CSV export and saves the run to history.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from link_analyzer.aggregation import top_entries
from link_analyzer.config import get_config
from link_analyzer.exceptions import HistoryError
from link_analyzer.export import to_csv
from link_analyzer.models import AnalyzeOptions, LinkAnalysis
from link_analyzer.pipeline import LinkAnalyzer
from link_analyzer.storage import HistoryStore

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    config = get_config()
    parser = argparse.ArgumentParser(
        description="Normalize, validate and summarize a list of links."
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        type=Path,
        default=None,
        help="File with one link per line (reads stdin when omitted).",
    )
    parser.add_argument(
        "--assume-https",
        default=config.analysis.assume_https,
        action=argparse.BooleanOptionalAction,
        help="Prefix https:// to lines without a scheme (defaults to config).",
    )
    parser.add_argument(
        "--dedupe",
        default=config.analysis.dedupe,
        action=argparse.BooleanOptionalAction,
        help="Collapse lines that normalize to the same URL, ignoring case (defaults to config).",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=config.analysis.top_limit,
        help="Number of entries shown per distribution.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full analysis record as JSON instead of a summary.",
    )
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Write a CSV export of the rows to this path.",
    )
    parser.add_argument(
        "--save",
        default=False,
        action=argparse.BooleanOptionalAction,
        help="Save the analysis to history (default: off).",
    )
    parser.add_argument(
        "--history-path",
        type=Path,
        default=config.history.base_path,
        help="Base path for the history store (defaults to config.history.base_path).",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (defaults to config).",
    )
    return parser.parse_args(argv)


def read_input(path: Optional[Path], stdin: TextIO) -> str:
    """Read raw text from a file, or from stdin when no path is given."""
    if path is None:
        return stdin.read()
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def format_summary(analysis: LinkAnalysis, top: int) -> str:
    """Render a plain-text summary of an analysis."""
    metrics = analysis.metrics
    lines = [
        "=" * 60,
        f"Link analysis {analysis.id}",
        f"Created: {analysis.created_at.isoformat()}",
        "=" * 60,
        f"Total:          {metrics.total}",
        f"Valid:          {metrics.valid}",
        f"Invalid:        {metrics.invalid}",
        f"Unique domains: {metrics.unique_domains}",
        f"With query:     {metrics.with_query}",
        f"With fragment:  {metrics.with_hash}",
        f"Average length: {metrics.avg_length:.1f}",
    ]

    sections = (
        ("Protocols", analysis.distributions.protocol),
        ("Domains", analysis.distributions.domain),
        ("TLDs", analysis.distributions.tld),
    )
    for title, dist in sections:
        lines.append("")
        lines.append(f"{title} (top {top})")
        lines.append("-" * 60)
        entries = top_entries(dist, top)
        if not entries:
            lines.append("  (none)")
        for key, count in entries:
            lines.append(f"  {key:<40} {count:>6}")

    invalid = [item for item in analysis.items if not item.is_valid]
    if invalid:
        lines.append("")
        lines.append("Invalid links")
        lines.append("-" * 60)
        for item in invalid:
            lines.append(f"  {item.raw}: {item.error}")

    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        text = read_input(args.input_file, sys.stdin)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read input: {e}")
        return 1

    options = AnalyzeOptions(assume_https=args.assume_https, dedupe=args.dedupe)
    analysis = LinkAnalyzer().analyze(text, options)
    metrics = analysis.metrics
    logger.info(
        f"Analyzed {metrics.total} links ({metrics.valid} valid, {metrics.invalid} invalid)"
    )

    if args.csv is not None:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        args.csv.write_text(to_csv(analysis), encoding="utf-8")
        logger.info(f"Wrote CSV export to {args.csv}")

    if args.save:
        store = HistoryStore(base_path=args.history_path)
        try:
            store.add(analysis)
        except HistoryError:
            logger.exception(f"Failed to save analysis {analysis.id}")
            return 1

    if args.json:
        print(json.dumps(analysis.to_record(), indent=2, ensure_ascii=False))
    else:
        print(format_summary(analysis, args.top))

    return 0


if __name__ == "__main__":
    sys.exit(main())
