# ==============================================================================
# Summary Formatting
# ==============================================================================
"""
Renders Summary snapshots as plain text or JSON.

Text layout:

    Total unique users: 666
    Top users:
    id              # pages # sess  longest shortest
    sally-bob       123     3       1       0
"""

import json

from sessiontop.core.models import Summary

HEADER = "id              # pages # sess  longest shortest"


def format_duration(seconds: int, include_seconds: bool = False) -> str:
    """
    Format a duration in seconds.

    Args:
        seconds: Non-negative duration
        include_seconds: If True, render as ``M:SS``; otherwise whole
                         minutes, rounded down

    Examples:
        >>> format_duration(113)
        '1'
        >>> format_duration(113, include_seconds=True)
        '1:53'
    """
    minutes, secs = divmod(seconds, 60)
    if include_seconds:
        return f"{minutes}:{secs:02d}"
    return str(minutes)


def summary_to_text(summary: Summary, include_seconds: bool = False) -> str:
    """Render a summary as the fixed-width text table, one line per user."""
    lines = [
        f"Total unique users: {summary.unique_users}",
        "Top users:",
        HEADER,
    ]
    for user in summary.top:
        longest = format_duration(user.longest, include_seconds)
        shortest = format_duration(user.shortest, include_seconds)
        lines.append(
            f"{user.id:<15} {user.pages:<7} {user.sessions:<7} {longest:<7} {shortest}"
        )
    return "\n".join(lines) + "\n"


def summary_to_json(summary: Summary) -> str:
    """Render a summary as indented JSON."""
    return json.dumps(summary.model_dump(), indent=2)
