# ==============================================================================
# Streaming Session Aggregator
# ==============================================================================
"""
Single-pass session aggregation for chronologically ordered events.

This module contains the domain logic for the streaming strategy:
- Session timeout detection
- Closing sessions and tracking longest/shortest lengths
- Tolerating small backward jitter inside an open session
- Virtually closing open sessions when summarizing

Only constant state is kept per user (no session history), which keeps
memory flat regardless of log size. The price is that events must arrive in
near-chronological order; use the chronology resolver to order sources
before feeding them in.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from sessiontop.base.aggregator import SessionAggregator
from sessiontop.core.errors import AggregatorInvalidated, OrderingViolation
from sessiontop.core.models import (
    DEFAULT_SESSION_THRESHOLD_SECONDS,
    PageViewEvent,
    Summary,
    UserSummary,
    session_length,
)
from sessiontop.core.summarizer import summarize_top


@dataclass
class StreamingUser:
    """
    Per-user state for the streaming strategy.

    ``longest`` and ``shortest`` cover completed sessions only; zero means no
    session has been completed yet. ``current_session_start`` is None until
    the first event arrives.
    """

    id: str
    pages: int = 0
    completed_sessions: int = 0
    longest: int = 0
    shortest: int = 0
    last_event_time: int = 0
    current_session_start: int | None = None

    def extremes_with(self, elapsed: int) -> tuple[int, int]:
        """Return (longest, shortest) as if a session of ``elapsed`` seconds completed."""
        longest = max(self.longest, elapsed)
        shortest = elapsed if self.shortest == 0 else min(self.shortest, elapsed)
        return longest, shortest


class StreamingAggregator(SessionAggregator):
    """
    Session aggregator for events arriving in (near) chronological order.

    Usage:
        aggregator = StreamingAggregator(threshold_seconds=600)
        for source in resolve_chronology(sources):
            aggregator.ingest_all(source.events())
        summary = aggregator.summarize(5)
    """

    def __init__(self, threshold_seconds: int = DEFAULT_SESSION_THRESHOLD_SECONDS):
        """
        Initialize the streaming aggregator.

        Args:
            threshold_seconds: Largest gap between two events that still
                               keeps them in the same session.
        """
        if threshold_seconds <= 0:
            raise ValueError(f"threshold_seconds must be positive, got {threshold_seconds}")
        self.threshold_seconds = threshold_seconds
        self.event_count = 0
        self._users: dict[str, StreamingUser] = {}
        self._violation: OrderingViolation | None = None

    @property
    def name(self) -> str:
        return "streaming"

    @property
    def unique_users(self) -> int:
        return len(self._users)

    def ingest(self, event: PageViewEvent) -> None:
        """
        Apply one event to its user's session state.

        Raises:
            OrderingViolation: If the event predates the user's open session
            AggregatorInvalidated: If a previous event raised OrderingViolation
        """
        self._check_valid()

        user = self._users.get(event.user_id)
        if user is None:
            user = StreamingUser(id=event.user_id)
            self._users[event.user_id] = user

        t = event.timestamp
        user.pages += 1
        self.event_count += 1

        if user.current_session_start is None:
            # First event for this user opens their first session
            user.current_session_start = t
            user.last_event_time = t
        elif t < user.last_event_time:
            if t < user.current_session_start:
                self._violation = OrderingViolation(user.id, t, user.current_session_start)
                raise self._violation
            # Late, but inside the open session; last_event_time stays put
        elif t - user.last_event_time <= self.threshold_seconds:
            user.last_event_time = t
        else:
            elapsed = session_length(user.current_session_start, user.last_event_time)
            user.longest, user.shortest = user.extremes_with(elapsed)
            user.completed_sessions += 1
            user.current_session_start = t
            user.last_event_time = t

    def ingest_all(self, events: Iterable[PageViewEvent]) -> int:
        count = 0
        for event in events:
            self.ingest(event)
            count += 1
        return count

    def summarize(self, top_n: int) -> Summary:
        """
        Summarize the busiest users, treating open sessions as closed.

        The open session of each reported user is closed virtually: its
        length is folded into the extremes and counted, but stored state is
        left as is so more events can be ingested afterwards.
        """
        self._check_valid()
        return summarize_top(self._users.values(), top_n, self._describe)

    @staticmethod
    def _describe(user: StreamingUser) -> UserSummary:
        elapsed = session_length(user.current_session_start, user.last_event_time)
        longest, shortest = user.extremes_with(elapsed)
        return UserSummary(
            id=user.id,
            pages=user.pages,
            sessions=user.completed_sessions + 1,
            longest=longest,
            shortest=shortest,
        )

    def _check_valid(self) -> None:
        if self._violation is not None:
            raise AggregatorInvalidated(
                "aggregator can no longer be used after an ordering violation"
            ) from self._violation
