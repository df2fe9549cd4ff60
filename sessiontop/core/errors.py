# ==============================================================================
# Session Aggregation Errors
# ==============================================================================
"""
Exception types raised by the session aggregators and event sources.

    SessionTopError
    ├── OrderingViolation      - event predates the open session's start
    ├── AggregatorInvalidated  - aggregator used after an OrderingViolation
    └── SourceNotFoundError    - a requested log path does not exist
"""


class SessionTopError(Exception):
    """Base class for all sessiontop errors."""


class OrderingViolation(SessionTopError):
    """
    An event arrived earlier than the start of the user's open session.

    The streaming aggregator may already have closed a previous session based
    on the events it saw, so the run cannot be corrected after the fact.

    Attributes:
        user_id: User the late event belongs to
        timestamp: Timestamp of the late event
        session_start: Start of the user's currently open session
    """

    def __init__(self, user_id: str, timestamp: int, session_start: int):
        self.user_id = user_id
        self.timestamp = timestamp
        self.session_start = session_start
        super().__init__(
            f"got request time {timestamp} for user {user_id}, "
            f"which is before the current session start time of {session_start}"
        )


class AggregatorInvalidated(SessionTopError):
    """Raised when an aggregator is used again after an OrderingViolation."""


class SourceNotFoundError(SessionTopError):
    """Raised when a log file or directory does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"No such file or directory: {path}")
