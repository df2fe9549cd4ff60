# ==============================================================================
# Top-N Summarizer
# ==============================================================================
"""
Ranks per-user state by page count and builds a Summary snapshot.

Shared by both aggregators. Each aggregator supplies a ``describe`` callable
that turns one of its user records into a UserSummary; only the selected
top users are described, and the user records are never modified.
"""

import heapq
from collections.abc import Callable, Collection
from typing import Protocol, TypeVar

from sessiontop.core.models import Summary, UserSummary


class RankedUser(Protocol):
    """Minimum a user record needs for ranking."""

    id: str
    pages: int


U = TypeVar("U", bound=RankedUser)


def rank_key(user: RankedUser) -> tuple[int, str]:
    """Sort key: most pages first, then user id ascending for equal counts."""
    return (-user.pages, user.id)


def select_top(users: Collection[U], top_n: int) -> list[U]:
    """
    Pick the ``top_n`` users with the most pages.

    Args:
        users: All user records
        top_n: Maximum number to return (must be positive)

    Returns:
        At most ``top_n`` users, highest page count first

    Raises:
        ValueError: If top_n is not positive
    """
    if top_n <= 0:
        raise ValueError(f"top_n must be positive, got {top_n}")
    return heapq.nsmallest(top_n, users, key=rank_key)


def summarize_top(
    users: Collection[U],
    top_n: int,
    describe: Callable[[U], UserSummary],
) -> Summary:
    """
    Build a Summary of the ``top_n`` busiest users.

    Args:
        users: All user records owned by the aggregator
        top_n: Maximum number of users to report
        describe: Builds the UserSummary for one user without mutating it

    Returns:
        New Summary with ``unique_users`` counting every user
    """
    top = tuple(describe(user) for user in select_top(users, top_n))
    return Summary(unique_users=len(users), top=top)
