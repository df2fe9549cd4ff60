# ==============================================================================
# Interval-Merge Session Aggregator
# ==============================================================================
"""
Order-independent session aggregation.

Every session of every user is kept as an interval in a SessionSet for the
whole run. A new event either falls inside an existing session, extends the
session before or after it, bridges the two into one, or starts a session of
its own. Because two events end up in the same session exactly when a chain
of events with gaps <= threshold connects them, the final sessions do not
depend on the order the events arrived in.

That makes this strategy suitable for logs written concurrently by several
servers (a user load-balanced across hosts), at the cost of memory that
grows with the number of sessions.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from sessiontop.base.aggregator import SessionAggregator
from sessiontop.core.models import (
    DEFAULT_SESSION_THRESHOLD_SECONDS,
    PageViewEvent,
    Session,
    Summary,
    UserSummary,
)
from sessiontop.core.session_set import SessionSet
from sessiontop.core.summarizer import summarize_top


@dataclass
class IntervalUser:
    """Per-user state for the interval-merge strategy."""

    id: str
    pages: int = 0
    sessions: SessionSet = field(default_factory=SessionSet)


class IntervalMergeAggregator(SessionAggregator):
    """
    Session aggregator tolerating any arrival order.

    Usage:
        aggregator = IntervalMergeAggregator(threshold_seconds=600)
        for source in sources:
            aggregator.ingest_all(source.events())
        summary = aggregator.summarize(5)
    """

    def __init__(self, threshold_seconds: int = DEFAULT_SESSION_THRESHOLD_SECONDS):
        """
        Initialize the interval-merge aggregator.

        Args:
            threshold_seconds: Largest gap between two events that still
                               keeps them in the same session.
        """
        if threshold_seconds <= 0:
            raise ValueError(f"threshold_seconds must be positive, got {threshold_seconds}")
        self.threshold_seconds = threshold_seconds
        self.event_count = 0
        self._users: dict[str, IntervalUser] = {}

    @property
    def name(self) -> str:
        return "interval"

    @property
    def unique_users(self) -> int:
        return len(self._users)

    def ingest(self, event: PageViewEvent) -> None:
        user = self._users.get(event.user_id)
        if user is None:
            user = IntervalUser(id=event.user_id)
            self._users[event.user_id] = user

        user.pages += 1
        self.event_count += 1
        self._place(user.sessions, event.timestamp)

    def ingest_all(self, events: Iterable[PageViewEvent]) -> int:
        count = 0
        for event in events:
            self.ingest(event)
            count += 1
        return count

    def _place(self, sessions: SessionSet, t: int) -> None:
        """Merge timestamp ``t`` into a user's session set."""
        threshold = self.threshold_seconds
        before = sessions.floor(t)
        after = sessions.higher(t)
        reaches_after = after is not None and t + threshold >= after.start

        if before is not None:
            if t <= before.end:
                # Already covered by this session
                return
            if before.end + threshold >= t:
                if reaches_after:
                    # Bridges the gap: coalesce both sessions into one
                    before.end = after.end
                    sessions.remove(after)
                else:
                    before.end = t
                return

        if reaches_after:
            # t < after.start, so pulling the start back keeps the order
            sessions.move_start(after, t)
        else:
            sessions.add(Session(start=t, end=t))

    def summarize(self, top_n: int) -> Summary:
        return summarize_top(self._users.values(), top_n, self._describe)

    @staticmethod
    def _describe(user: IntervalUser) -> UserSummary:
        lengths = [session.duration_seconds for session in user.sessions]
        return UserSummary(
            id=user.id,
            pages=user.pages,
            sessions=len(lengths),
            longest=max(lengths),
            shortest=min(lengths),
        )

    def sessions_for(self, user_id: str) -> tuple[tuple[int, int], ...]:
        """
        Current sessions of a user as (start, end) pairs, earliest first.

        Returns an empty tuple for unknown users.
        """
        user = self._users.get(user_id)
        if user is None:
            return ()
        return user.sessions.as_tuples()
