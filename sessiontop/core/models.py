# ==============================================================================
# Session Domain Models
# ==============================================================================
"""
Pydantic models for page-view events and session summaries.

These models are used for:
- Passing parsed log events from sources into aggregators
- Returning read-only summary snapshots to formatters
- Type safety throughout the application

This module is part of the core domain layer and has no external dependencies
beyond Pydantic.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

# A session made of a single event would otherwise have length zero.
SINGLE_EVENT_SESSION_SECONDS = 1

DEFAULT_SESSION_THRESHOLD_SECONDS = 600


def session_length(start: int, end: int) -> int:
    """Length of a session in seconds, floored at SINGLE_EVENT_SESSION_SECONDS."""
    return max(end - start, SINGLE_EVENT_SESSION_SECONDS)


class PageViewEvent(BaseModel):
    """
    A single user request extracted from a log line.

    Attributes:
        user_id: Opaque user identifier
        timestamp: Unix timestamp in whole seconds
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="User identifier")
    timestamp: int = Field(..., description="Unix timestamp in seconds")

    @property
    def event_time(self) -> datetime:
        """Convert timestamp to a UTC datetime object."""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


class Session(BaseModel):
    """
    A closed interval of user activity, both ends inclusive.

    Sessions are mutated in place by the interval-merge aggregator as events
    extend or bridge them; ``start`` is also the ordering key, and is only
    ever moved to a value that keeps its position among its neighbours.
    """

    start: int = Field(..., description="Timestamp of the earliest event")
    end: int = Field(..., description="Timestamp of the latest event")

    @property
    def duration_seconds(self) -> int:
        return session_length(self.start, self.end)


class UserSummary(BaseModel):
    """
    Per-user line of a summary.

    Attributes:
        id: User identifier
        pages: Number of requests the user made
        sessions: Number of sessions the user maintained
        longest: Length of the longest session, in seconds
        shortest: Length of the shortest session, in seconds
    """

    model_config = ConfigDict(frozen=True)

    id: str
    pages: int
    sessions: int
    longest: int
    shortest: int


class Summary(BaseModel):
    """
    Snapshot of the top users by page count.

    A new Summary is built on every request; it shares no state with the
    aggregator that produced it.
    """

    model_config = ConfigDict(frozen=True)

    unique_users: int = Field(..., description="Number of distinct users seen")
    top: tuple[UserSummary, ...] = Field(
        default_factory=tuple, description="Top users, highest page count first"
    )
