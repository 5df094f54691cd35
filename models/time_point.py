"""
Wall-clock time points ("HH:MM") as used by shift and reservation records.

Records arrive in three spellings:
- "22:30"     (form input)
- "22:30:00"  (database TIME column)
- "26:30"     (shift-registration notation: hours 24-29 mean the next calendar day)

All of them are normalised to a plain ``datetime.time``.
"""

import re
from datetime import time
from typing import Union

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")

# Highest hour accepted by the overnight notation (29:59 == 05:59 next day)
MAX_EXTENDED_HOUR = 29


def parse_time_point(value: Union[str, time]) -> time:
    """Normalise a time record into a ``datetime.time`` with zero seconds."""
    if isinstance(value, time):
        if value.second or value.microsecond:
            raise ValueError(f"Time point must be on a whole minute, got {value.isoformat()}")
        return value.replace(tzinfo=None)

    if not isinstance(value, str):
        raise ValueError(f"Unsupported time point value: {value!r}")

    match = _TIME_PATTERN.match(value)
    if not match:
        raise ValueError(f"Malformed time point '{value}', expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)

    if minute > 59 or seconds:
        raise ValueError(f"Malformed time point '{value}'")
    if hour > MAX_EXTENDED_HOUR:
        raise ValueError(f"Hour out of range in '{value}'")

    # Overnight notation: 24:00-29:59 -> 00:00-05:59
    if hour >= 24:
        hour -= 24

    return time(hour, minute)


def format_time_point(value: time) -> str:
    """Render as zero-padded 'HH:MM'."""
    return f"{value.hour:02d}:{value.minute:02d}"
