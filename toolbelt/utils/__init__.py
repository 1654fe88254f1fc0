"""
Utility Functions and Helpers

This package contains time parsing, logging setup, environment detection
and the variable dumper.
"""

from .time_parser import TimestampNormalizer, DurationParser, to_timestamp, to_seconds
from .helpers import is_cli, setup_logging

__all__ = [
    "TimestampNormalizer",
    "DurationParser",
    "to_timestamp",
    "to_seconds",
    "is_cli",
    "setup_logging"
]
