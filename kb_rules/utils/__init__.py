"""
Shared utility functions.

This package contains utility code used across the facts and
rules passes.
"""

from .logging import JsonlFormatter, log_event, setup_logging

__all__ = [
    "setup_logging",
    "log_event",
    "JsonlFormatter",
]
