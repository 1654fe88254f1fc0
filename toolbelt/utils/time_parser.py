"""
Time Parser for toolbelt

Converts time values into Unix timestamps and human-readable duration
strings into a number of seconds.
Supports timestamps from numbers, datetime objects and free text such as
"2025-10-24 10:30", "yesterday" or "20 minutes ago", and durations such as
"3 hours 4 minutes 10 seconds", "5min", "4.5h" or "12:30:00".

Python 3.9+ compatible.
"""

import re
import logging
import math
import numbers
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Callable, List, Optional, Tuple, Union

from dateutil.parser import ParserError, parse as dateutil_parse

from ..core.exceptions import InvalidTimeRepresentation


TimeInput = Union[int, float, Decimal, str, date, datetime]

_NUMERIC_TEXT = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")

_RELATIVE_UNITS = {
    "sec": "seconds",
    "second": "seconds",
    "min": "minutes",
    "minute": "minutes",
    "hour": "hours",
    "day": "days",
    "week": "weeks",
}
_UNIT_WORDS = "sec|second|min|minute|hour|day|week"


class TimestampNormalizer:
    """
    Converts numbers, datetime objects and date/time text into Unix timestamps.

    Text is first matched against the relative expressions dateutil does
    not understand ("now", "yesterday", "3 days ago", "+2 hours"), then
    handed to dateutil's parser.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        self._relative_patterns: List[Tuple[re.Pattern, Callable[[re.Match, datetime], datetime]]] = [
            (re.compile(r"now"), lambda m, ref: ref),
            (re.compile(r"today"), lambda m, ref: _midnight(ref)),
            (re.compile(r"yesterday"), lambda m, ref: _midnight(ref) - timedelta(days=1)),
            (re.compile(r"tomorrow"), lambda m, ref: _midnight(ref) + timedelta(days=1)),
            (re.compile(rf"(\d+)\s*({_UNIT_WORDS})s?\s+ago"), self._parse_ago),
            (re.compile(rf"([+-])\s*(\d+)\s*({_UNIT_WORDS})s?"), self._parse_offset),
        ]

    def normalize(self, value: Any, reference_time: Optional[datetime] = None) -> int:
        """
        Convert a value to a Unix timestamp.

        Args:
            value: Number, numeric text, date, datetime or date/time text
            reference_time: Reference time for relative text (defaults to now)

        Returns:
            Seconds since the Unix epoch

        Raises:
            InvalidTimeRepresentation: If the value cannot be converted
        """
        if isinstance(value, (numbers.Real, Decimal)):
            return self._truncate(value, value)

        if isinstance(value, str) and _NUMERIC_TEXT.fullmatch(value):
            return self._truncate(Decimal(value.strip()), value)

        if isinstance(value, datetime):
            return int(value.timestamp())

        if isinstance(value, date):
            return int(datetime.combine(value, time()).timestamp())

        if not isinstance(value, str):
            raise InvalidTimeRepresentation(value, f"unsupported type {type(value).__name__}")

        if reference_time is None:
            reference_time = datetime.now()

        return int(self._parse_text(value, reference_time).timestamp())

    def _truncate(self, number: Union[numbers.Real, Decimal], original: Any) -> int:
        if isinstance(number, float) and not math.isfinite(number):
            raise InvalidTimeRepresentation(original, "not a finite number")
        if isinstance(number, Decimal) and not number.is_finite():
            raise InvalidTimeRepresentation(original, "not a finite number")
        return int(number)

    def _parse_text(self, text: str, reference_time: datetime) -> datetime:
        time_str = text.strip()

        if not time_str:
            raise InvalidTimeRepresentation(text, "empty time input")

        for pattern, parser_func in self._relative_patterns:
            match = pattern.fullmatch(time_str.lower())
            if match:
                try:
                    return parser_func(match, reference_time)
                except (OverflowError, ValueError) as e:
                    raise InvalidTimeRepresentation(text, str(e)) from e

        try:
            return dateutil_parse(time_str, default=_midnight(reference_time))
        except (ParserError, ValueError, OverflowError) as e:
            self.logger.debug(f"dateutil parsing failed for {text!r}: {e}")
            raise InvalidTimeRepresentation(text, str(e)) from e

    def _parse_ago(self, match: re.Match, reference_time: datetime) -> datetime:
        """Parse 'N units ago'."""
        amount = int(match.group(1))
        return reference_time - timedelta(**{_RELATIVE_UNITS[match.group(2)]: amount})

    def _parse_offset(self, match: re.Match, reference_time: datetime) -> datetime:
        """Parse '+N units' and '-N units'."""
        amount = int(match.group(2))
        if match.group(1) == "-":
            amount = -amount
        return reference_time + timedelta(**{_RELATIVE_UNITS[match.group(3)]: amount})


def _midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


class DurationParser:
    """
    Converts a duration string into a total number of seconds.

    Accepts "MM:SS", "HH:MM:SS" and free text made of number/unit pairs
    such as "3 hours 4 minutes 10 seconds", "5min" or "4.5h". The parser is
    permissive: any input it cannot read yields 0 rather than an error, and a
    single unreadable chunk makes the whole result 0.

    Each of hours, minutes and seconds is taken from its first non-zero
    occurrence; later occurrences are ignored ("2h 2h" is two hours).
    A zero-valued first occurrence counts as unset, so "0h 2h" is also
    two hours.
    """

    MINUTES_SECONDS = re.compile(r"[0-9]+:[0-9]+")
    HOURS_MINUTES_SECONDS = re.compile(r"[0-9]+:[0-9]+:[0-9]+")

    INVALID_CHARS = re.compile(r"[^a-zA-Z0-9.]+")
    MULTIPLE_SPACES = re.compile(r" {2,}")

    # Letters needed to spell hour(s), min(ute)(s) and sec(ond)(s)
    SCALE_UNIT_GAP = re.compile(r"([0-9.]+) ([cdehimnorstu]+)")
    SCALE_UNIT = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)([cdehimnorstu]+)")

    HOUR_UNIT = re.compile(r"h(?:r|our|ours)?")
    MINUTE_UNIT = re.compile(r"m(?:in|ins|inute|inutes)?")
    SECOND_UNIT = re.compile(r"s(?:ec|ecs|econd|econds)?")

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def parse(self, text: Any) -> int:
        """
        Convert a duration string to seconds.

        Args:
            text: Duration string

        Returns:
            Total number of seconds, or 0 if the string cannot be parsed
        """
        if not isinstance(text, str):
            self.logger.debug(f"Duration must be a string, got {type(text).__name__}")
            return 0

        if self.MINUTES_SECONDS.fullmatch(text):
            minutes, seconds = text.split(":")
            return int(minutes) * 60 + int(seconds)

        if self.HOURS_MINUTES_SECONDS.fullmatch(text):
            hours, minutes, seconds = text.split(":")
            return int(hours) * 3600 + int(minutes) * 60 + int(seconds)

        hours = minutes = seconds = 0

        for item in self.normalize(text).split(" "):
            match = self.SCALE_UNIT.fullmatch(item)
            if not match:
                self.logger.debug(f"Unparseable duration chunk {item!r} in {text!r}")
                return 0

            scale = self._coerce(match.group(1))
            unit = match.group(2)

            if self.HOUR_UNIT.fullmatch(unit):
                if not hours:
                    hours = scale
            elif self.MINUTE_UNIT.fullmatch(unit):
                if not minutes:
                    minutes = scale
            elif self.SECOND_UNIT.fullmatch(unit):
                if not seconds:
                    seconds = scale
            else:
                self.logger.debug(f"Unknown duration unit {unit!r} in {text!r}")
                return 0

        return int(hours * 3600 + minutes * 60 + seconds)

    def normalize(self, text: str) -> str:
        """
        Reduce free text to space-separated number/unit chunks.

        "3 hours, 4 minutes" becomes "3hours 4minutes".
        """
        text = self.INVALID_CHARS.sub(" ", text)
        text = self.MULTIPLE_SPACES.sub(" ", text)
        return self.SCALE_UNIT_GAP.sub(r"\1\2", text)

    @staticmethod
    def _coerce(number: str) -> Union[int, Decimal]:
        value = Decimal(number)
        if value == value.to_integral_value():
            return int(value)
        return value


_normalizer = TimestampNormalizer()
_duration_parser = DurationParser()


# Convenience functions for common use cases
def to_timestamp(value: TimeInput, reference_time: Optional[datetime] = None) -> int:
    """
    Convert a number, date, datetime or date/time text to a Unix timestamp.

    Raises:
        InvalidTimeRepresentation: If the value cannot be converted
    """
    return _normalizer.normalize(value, reference_time)


def to_seconds(text: str) -> int:
    """Convert a duration string to seconds; 0 if it cannot be parsed."""
    return _duration_parser.parse(text)
