# ==============================================================================
# Ordered Session Set
# ==============================================================================
"""
Sorted container of disjoint sessions keyed by start time.

Supports the floor/higher lookups the interval-merge aggregator needs:

    floor(t)   - session with the greatest start <= t, or None
    higher(t)  - session with the least start > t, or None

Backed by two parallel lists (start keys and sessions) searched with bisect.
Sessions of one user are few compared to events, so O(n) list inserts are
cheap next to the O(log n) lookups done for every event.
"""

from bisect import bisect_left, bisect_right
from collections.abc import Iterator

from sessiontop.core.models import Session


class SessionSet:
    """Sessions ordered by start; starts are unique."""

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._sessions: list[Session] = []

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[Session]:
        return iter(self._sessions)

    def floor(self, t: int) -> Session | None:
        """Return the session with the greatest start <= t."""
        idx = bisect_right(self._starts, t) - 1
        return self._sessions[idx] if idx >= 0 else None

    def higher(self, t: int) -> Session | None:
        """Return the session with the least start > t."""
        idx = bisect_right(self._starts, t)
        return self._sessions[idx] if idx < len(self._sessions) else None

    def add(self, session: Session) -> None:
        """
        Insert a session at its ordered position.

        Raises:
            ValueError: If a session with the same start is already present
        """
        idx = bisect_left(self._starts, session.start)
        if idx < len(self._starts) and self._starts[idx] == session.start:
            raise ValueError(f"a session starting at {session.start} already exists")
        self._starts.insert(idx, session.start)
        self._sessions.insert(idx, session)

    def remove(self, session: Session) -> None:
        """
        Remove a session that is in the set.

        Raises:
            KeyError: If the session is not in the set
        """
        idx = self._index_of(session)
        del self._starts[idx]
        del self._sessions[idx]

    def move_start(self, session: Session, new_start: int) -> None:
        """
        Pull a session's start back to ``new_start``.

        The new start must stay above the previous session's start so the
        ordering of the set is unchanged.

        Raises:
            KeyError: If the session is not in the set
            ValueError: If the move would reorder the set
        """
        idx = self._index_of(session)
        if new_start > session.start:
            raise ValueError("session start can only move backward")
        if idx > 0 and self._starts[idx - 1] >= new_start:
            raise ValueError(
                f"moving start to {new_start} would pass the session at {self._starts[idx - 1]}"
            )
        session.start = new_start
        self._starts[idx] = new_start

    def as_tuples(self) -> tuple[tuple[int, int], ...]:
        """Snapshot of (start, end) pairs in order."""
        return tuple((s.start, s.end) for s in self._sessions)

    def _index_of(self, session: Session) -> int:
        idx = bisect_left(self._starts, session.start)
        if idx < len(self._sessions) and self._sessions[idx] is session:
            return idx
        raise KeyError(f"session starting at {session.start} is not in the set")
