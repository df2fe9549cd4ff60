# ==============================================================================
# Access Log Line Parser
# ==============================================================================
"""
Extracts (user id, timestamp) pairs from access log lines.

Expected line shape (fields after the request are ignored):

    10.10.6.90 - - 15/Aug/2016:23:59:20 -0500 "GET /ecf8427e/b443dc7f/71f28176/... HTTP/1.0" ...

The user id is the third path segment of the request. Lines that are not
user requests (health checks, garbage, unparseable dates) are rejected.
"""

import re
from datetime import datetime

from sessiontop.core.models import PageViewEvent

USER_REQUEST = re.compile(
    # Client IP address, not used
    r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}"
    r"\s+-\s+-\s+"
    # Date and timezone offset, handed to strptime
    r"(\d\S+\s+\S+)\s+"
    # Request; the id may be followed by more path, a query string or nothing
    r'"(?:GET|POST|PUT|PATCH|DELETE)\s+/[0-9a-f]+/[0-9a-f]+/([0-9a-f]+)[ /?]'
)

DATE_FORMAT = "%d/%b/%Y:%H:%M:%S %z"


def parse_timestamp(value: str) -> int | None:
    """
    Convert a log date such as ``15/Aug/2016:23:59:20 -0500`` to epoch seconds.

    Returns:
        Seconds since 1970-01-01 UTC, or None if the date can't be parsed
    """
    try:
        return int(datetime.strptime(value, DATE_FORMAT).timestamp())
    except ValueError:
        return None


class LineParser:
    """
    Parses log lines into page-view events, counting what it accepts.

    Attributes:
        accepted: Number of lines parsed as user requests
        rejected: Number of lines skipped
    """

    def __init__(self) -> None:
        self.accepted = 0
        self.rejected = 0

    def parse(self, line: str) -> PageViewEvent | None:
        """
        Parse a single line.

        Args:
            line: Raw log line, with or without trailing newline

        Returns:
            The event, or None if the line is not a parseable user request
        """
        match = USER_REQUEST.match(line)
        timestamp = parse_timestamp(match.group(1)) if match else None
        if timestamp is None:
            self.rejected += 1
            return None

        self.accepted += 1
        return PageViewEvent(user_id=match.group(2), timestamp=timestamp)
