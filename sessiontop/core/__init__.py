# ==============================================================================
# Core Domain Logic
# ==============================================================================
"""
Session reconstruction with no I/O.

This module contains:
- Domain models (PageViewEvent, Session, Summary, UserSummary)
- The streaming and interval-merge session aggregators
- Source chronology resolution and top-N summarizing

All code here works on already-parsed events and is easily unit-testable.
"""

from sessiontop.core.chronology import ResolvedSource, resolve_chronology
from sessiontop.core.errors import (
    AggregatorInvalidated,
    OrderingViolation,
    SessionTopError,
    SourceNotFoundError,
)
from sessiontop.core.factory import STRATEGIES, get_aggregator
from sessiontop.core.interval_merge import IntervalMergeAggregator
from sessiontop.core.models import PageViewEvent, Session, Summary, UserSummary
from sessiontop.core.streaming import StreamingAggregator

__all__ = [
    "AggregatorInvalidated",
    "IntervalMergeAggregator",
    "OrderingViolation",
    "PageViewEvent",
    "ResolvedSource",
    "STRATEGIES",
    "Session",
    "SessionTopError",
    "SourceNotFoundError",
    "StreamingAggregator",
    "Summary",
    "UserSummary",
    "get_aggregator",
    "resolve_chronology",
]
