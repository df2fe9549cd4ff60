# ==============================================================================
# Session Aggregator Abstract Base Class
# ==============================================================================
"""
Abstract interface for session aggregators.

Two implementations exist:
- streaming: single pass over chronologically ordered events
- interval: merges session intervals regardless of arrival order

Each implementation owns all of its per-user state. Nothing is shared
between instances, so one aggregator corresponds to one run.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from sessiontop.core.models import PageViewEvent, Summary


class SessionAggregator(ABC):
    """
    Accumulates page-view events into per-user sessions.

    Implementations must leave their state untouched when summarizing, so
    that ingest() and summarize() calls can be interleaved freely.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Short strategy name.

        Examples:
            'streaming'
            'interval'
        """
        ...

    @property
    @abstractmethod
    def unique_users(self) -> int:
        """Number of distinct users seen so far."""
        ...

    @abstractmethod
    def ingest(self, event: PageViewEvent) -> None:
        """
        Add a single event to the user's session state.

        Args:
            event: Parsed page-view event
        """
        ...

    @abstractmethod
    def ingest_all(self, events: Iterable[PageViewEvent]) -> int:
        """
        Add every event from an iterable.

        Args:
            events: Parsed page-view events

        Returns:
            Number of events ingested
        """
        ...

    @abstractmethod
    def summarize(self, top_n: int) -> Summary:
        """
        Build a snapshot of the top users by page count.

        Args:
            top_n: Maximum number of users to include (must be positive)

        Returns:
            New Summary; the aggregator is not modified
        """
        ...
