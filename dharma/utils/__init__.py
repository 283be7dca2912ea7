"""
Utility modules for dharma.

This package contains configuration and logging helpers.
"""

from .settings import Settings, DEFAULT_SETTINGS
from .logging import configure_logging

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "configure_logging",
]
