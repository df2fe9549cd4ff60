# ==============================================================================
# Shared Utilities for CLI Commands
# ==============================================================================
"""
Shared constants and helper functions used across CLI command modules.

This module provides:
- ANSI color codes and status icons
- Exit codes
- Logging setup for command entry points
"""

import logging

# ==============================================================================
# Exit Codes
# ==============================================================================

EXIT_OK = 0
EXIT_NO_DATA = 1
EXIT_ORDERING_VIOLATION = 2


# ==============================================================================
# ANSI Colors and Icons
# ==============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_YELLOW = "\033[93m"


class Icons:
    """Status icons using Unicode symbols."""

    CHECK = "✓"
    CROSS = "✗"
    WARN = "!"


# Module-level aliases for convenience
C, I = Colors, Icons


def print_error(message: str) -> None:
    """Print an error line in the CLI's error style."""
    print(f"\n{C.BRIGHT_RED}{I.CROSS} {message}{C.RESET}\n")


# ==============================================================================
# Logging
# ==============================================================================


def configure_logging(level: str, verbose: bool = False) -> None:
    """
    Configure root logging for a CLI run.

    Args:
        level: Level name from settings (e.g. "WARNING")
        verbose: Force DEBUG regardless of level
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
