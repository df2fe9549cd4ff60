# ==============================================================================
# Event Source Abstract Base Class
# ==============================================================================
"""
Abstract interface for anything that yields page-view events.

Sources must be re-iterable: the chronology resolver reads the first event
of every source before the aggregator reads the whole thing.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from sessiontop.core.models import PageViewEvent


class EventSource(ABC):
    """A named, re-iterable stream of page-view events."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source name (e.g., the file path)."""
        ...

    @abstractmethod
    def events(self) -> Iterator[PageViewEvent]:
        """
        Yield events in source order.

        Each call starts again from the beginning of the source. Lines or
        records that cannot be parsed are skipped, never yielded.
        """
        ...
