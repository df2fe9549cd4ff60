# ==============================================================================
# Source Chronology Resolver
# ==============================================================================
"""
Orders event sources by the timestamp of their first event.

The streaming aggregator needs events in near-chronological order, but log
files can be handed over in any order. Resolution is the first of two
passes: read each source only as far as its first event, then sort sources
by that timestamp so the second (full) pass visits them oldest first.

Only the order between sources is fixed here; events inside one source are
assumed to already be chronological.
"""

import logging
from collections.abc import Iterable
from typing import NamedTuple

from sessiontop.base.source import EventSource

logger = logging.getLogger(__name__)


class ResolvedSource(NamedTuple):
    """A source together with the timestamp of its first event."""

    source: EventSource
    first_timestamp: int


def first_timestamp(source: EventSource) -> int | None:
    """
    Read a source up to its first event.

    Returns:
        Timestamp of the first event, or None if the source has none
    """
    for event in source.events():
        return event.timestamp
    return None


def resolve_chronology(sources: Iterable[EventSource]) -> list[ResolvedSource]:
    """
    Sort sources by their first event timestamp, oldest first.

    Sources without any parseable event are dropped with a warning. Sources
    sharing a first timestamp keep their input order.

    Args:
        sources: Event sources in any order

    Returns:
        Resolved sources in processing order
    """
    resolved: list[ResolvedSource] = []
    for source in sources:
        start = first_timestamp(source)
        if start is None:
            logger.warning("Didn't find any user requests in %s, ignoring", source.name)
            continue
        resolved.append(ResolvedSource(source, start))

    resolved.sort(key=lambda r: r.first_timestamp)

    for position, item in enumerate(resolved, start=1):
        logger.debug("Source %d: %s (starts at %d)", position, item.source.name, item.first_timestamp)
    return resolved
