"""Utility functions for union-fonts.

This module provides:

- Logging setup and configuration
"""

from unionfonts.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
