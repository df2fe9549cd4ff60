# ==============================================================================
# Report Pipeline
# ==============================================================================
"""
Runs one sessionization report over a set of log paths.

    discover sources -> (resolve chronology, streaming only) -> aggregate -> summarize

The streaming strategy needs sources oldest first, so they are resolved in
a first pass. The interval strategy accepts any order and reads each source
once, in discovery order.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from sessiontop.base.aggregator import SessionAggregator
from sessiontop.base.source import EventSource
from sessiontop.core.chronology import resolve_chronology
from sessiontop.core.factory import get_aggregator
from sessiontop.core.models import Summary
from sessiontop.sources.log_file import discover_sources
from sessiontop.utils.config import Settings

logger = logging.getLogger(__name__)


class ReportResult(NamedTuple):
    """Outcome of one report run."""

    summary: Summary
    event_count: int
    source_count: int


def ingest_sources(aggregator: SessionAggregator, sources: Iterable[EventSource]) -> int:
    """
    Feed every source into an aggregator, in the order the strategy needs.

    Args:
        aggregator: Fresh or partially filled aggregator
        sources: Event sources in any order

    Returns:
        Number of events ingested

    Raises:
        OrderingViolation: If the streaming aggregator sees an event out of order
    """
    if aggregator.name == "streaming":
        ordered = [resolved.source for resolved in resolve_chronology(sources)]
    else:
        ordered = list(sources)

    total = 0
    for source in ordered:
        count = aggregator.ingest_all(source.events())
        logger.info("Processed %s: %d user requests", source.name, count)
        total += count
    return total


def build_report(paths: Iterable[Path | str], settings: Settings) -> ReportResult:
    """
    Build a summary report for the given files and directories.

    Args:
        paths: Log files and/or directories of log files
        settings: Threshold, strategy and top-N configuration

    Returns:
        ReportResult with the summary and ingestion counts

    Raises:
        SourceNotFoundError: If a path does not exist
        OrderingViolation: If the streaming strategy sees an event out of order
    """
    sources = discover_sources(paths)
    aggregator = get_aggregator(settings.strategy, settings.session_threshold_seconds)
    logger.info(
        "Aggregating %d sources (strategy=%s, threshold=%ds)",
        len(sources),
        aggregator.name,
        settings.session_threshold_seconds,
    )

    event_count = ingest_sources(aggregator, sources)
    return ReportResult(
        summary=aggregator.summarize(settings.top_n),
        event_count=event_count,
        source_count=len(sources),
    )
