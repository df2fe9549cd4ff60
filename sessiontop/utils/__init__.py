# ==============================================================================
# sessiontop Utilities
# ==============================================================================
"""
Shared utilities for sessiontop.

This module exports configuration for use throughout the package.
"""

from sessiontop.utils.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
