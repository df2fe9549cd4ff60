# ==============================================================================
# Event Sources
# ==============================================================================
"""
Readers that turn access logs into page-view events.
"""

from sessiontop.sources.line_parser import LineParser, parse_timestamp
from sessiontop.sources.log_file import LogFileSource, discover_sources

__all__ = [
    "LineParser",
    "LogFileSource",
    "discover_sources",
    "parse_timestamp",
]
