# ==============================================================================
# Base Abstract Classes
# ==============================================================================
"""
Abstract base classes defining the seams between sources, aggregators and
the report pipeline.
"""

from sessiontop.base.aggregator import SessionAggregator
from sessiontop.base.source import EventSource

__all__ = [
    "EventSource",
    "SessionAggregator",
]
