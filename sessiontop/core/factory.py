# ==============================================================================
# Aggregator Factory
# ==============================================================================
"""
Factory function for getting a session aggregator by strategy name.
"""

from sessiontop.base.aggregator import SessionAggregator

STRATEGIES = ("streaming", "interval")


def get_aggregator(strategy: str, threshold_seconds: int) -> SessionAggregator:
    """
    Create a fresh aggregator for one run.

    Strategies:
    - "streaming": single pass, constant memory per user; sources must be
      processed in chronological order
    - "interval": keeps every session and merges intervals; any order works

    Args:
        strategy: One of STRATEGIES
        threshold_seconds: Session inactivity threshold in seconds

    Returns:
        SessionAggregator: A new aggregator instance

    Raises:
        ValueError: If an unknown strategy is specified

    Example:
        >>> aggregator = get_aggregator("interval", 600)
        >>> aggregator.name
        'interval'
    """
    match strategy:
        case "streaming":
            from sessiontop.core.streaming import StreamingAggregator

            return StreamingAggregator(threshold_seconds)
        case "interval":
            from sessiontop.core.interval_merge import IntervalMergeAggregator

            return IntervalMergeAggregator(threshold_seconds)
        case _:
            raise ValueError(
                f"Unknown strategy: '{strategy}'.\nValid options are: {', '.join(STRATEGIES)}"
            )
