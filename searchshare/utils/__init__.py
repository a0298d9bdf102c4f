"""Utility modules for SearchShare."""

from .config import Settings, get_settings, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
