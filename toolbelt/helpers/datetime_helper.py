"""
Date and time helpers.

Registered with the facade by default, exposing facade.make_timestamp()
and facade.seconds().
"""

from datetime import datetime
from typing import Optional

from .base_helper import BaseHelper
from ..utils.time_parser import TimeInput, to_seconds, to_timestamp


class DateTimeHelper(BaseHelper):
    """Timestamp and duration conversion."""

    exports = ("make_timestamp", "seconds")

    @staticmethod
    def make_timestamp(time: TimeInput, reference_time: Optional[datetime] = None) -> int:
        """
        Convert a value to a Unix timestamp.

        e.g. make_timestamp(1700000000.9), make_timestamp("2025-10-24 10:30"),
        make_timestamp("3 days ago")

        Raises:
            InvalidTimeRepresentation: If the value cannot be converted
        """
        return to_timestamp(time, reference_time)

    @staticmethod
    def seconds(duration: str) -> int:
        """
        Convert a string containing one or more of hours, minutes and seconds into seconds.

        e.g. seconds("3 hours 4 minutes 10 seconds"), seconds("5min"), seconds("4.5h")
        Returns 0 if the string cannot be parsed.
        """
        return to_seconds(duration)
