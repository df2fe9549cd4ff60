# ==============================================================================
# CLI Commands Module
# ==============================================================================
"""
CLI commands for sessiontop.

Commands are organized into separate modules for maintainability:
- shared.py: Colors, exit codes and logging setup
- formatting.py: Text and JSON rendering of summaries
- report.py: The report command
- config.py: Config commands
"""

from sessiontop.cli.formatting import format_duration, summary_to_json, summary_to_text
from sessiontop.cli.shared import (
    EXIT_NO_DATA,
    EXIT_OK,
    EXIT_ORDERING_VIOLATION,
    C,
    Colors,
    I,
    Icons,
    configure_logging,
    print_error,
)

__all__ = [
    # Constants
    "EXIT_NO_DATA",
    "EXIT_OK",
    "EXIT_ORDERING_VIOLATION",
    # Classes
    "Colors",
    "Icons",
    # Aliases
    "C",
    "I",
    # Helpers
    "configure_logging",
    "format_duration",
    "print_error",
    "summary_to_json",
    "summary_to_text",
]
