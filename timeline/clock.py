"""
The Operating-Day Clock.

A business day opens at 10:00 and closes at 05:00 on the following
calendar day. Every other timeline component works in *offsets*: whole
minutes since the day opened (10:00 == 0, 00:00 == 840, 05:00 == 1140).
This module is the only place that knows how wall-clock times map onto
that axis, including the jump across midnight.
"""

from dataclasses import dataclass
from datetime import datetime, time as time_type
from typing import Optional, Union

from models import parse_time_point, format_time_point
from .errors import OutOfOperatingWindow, OutOfRange, InvalidInterval

MINUTES_PER_DAY = 24 * 60

TimeLike = Union[str, time_type]


@dataclass(frozen=True)
class BusinessDayClock:
    """
    Converts between wall-clock time points and operating-day offsets.
    """
    open_hour: int = 10
    close_hour: int = 5

    def __post_init__(self):
        if not (0 <= self.close_hour < self.open_hour <= 23):
            raise ValueError(
                f"Operating day must open after it closes (open={self.open_hour}, close={self.close_hour})"
            )

    # --- Window geometry ---

    @property
    def minutes_to_midnight(self) -> int:
        """Offset of 00:00 (840 for a 10:00 opening)."""
        return (24 - self.open_hour) * 60

    @property
    def window_minutes(self) -> int:
        """Length of the operating window (1140 minutes, 19 hours)."""
        return self.minutes_to_midnight + self.close_hour * 60

    @property
    def max_offset(self) -> int:
        """Last representable offset (the final minute of the closing hour)."""
        return self.window_minutes + 59

    def is_operating_hour(self, hour: int) -> bool:
        return hour >= self.open_hour or hour <= self.close_hour

    # --- Conversions ---

    def to_offset(self, value: TimeLike) -> int:
        """Map a time point onto the operating-day axis."""
        t = parse_time_point(value)

        if t.hour >= self.open_hour:
            return (t.hour - self.open_hour) * 60 + t.minute
        if t.hour <= self.close_hour:
            # Next calendar day
            return self.minutes_to_midnight + t.hour * 60 + t.minute

        raise OutOfOperatingWindow(
            f"{format_time_point(t)} is outside business hours "
            f"({self.open_hour:02d}:00-{self.close_hour:02d}:00)"
        )

    def from_offset(self, offset: int) -> time_type:
        """Exact inverse of to_offset."""
        if not 0 <= offset <= self.max_offset:
            raise OutOfRange(f"Offset {offset} outside [0, {self.max_offset}]")

        wall = (self.open_hour * 60 + offset) % MINUTES_PER_DAY
        hour, minute = divmod(wall, 60)
        return time_type(hour, minute)

    # --- Derived times ---

    def end_offset(self, start: TimeLike, duration_minutes: int) -> int:
        """Offset at which a block starting at `start` ends. May run past closing."""
        if duration_minutes < 0:
            raise InvalidInterval(f"Negative duration: {duration_minutes} minutes")
        return self.to_offset(start) + duration_minutes

    def add_minutes(self, start: TimeLike, duration_minutes: int) -> time_type:
        """
        Wall-clock end time of a block, wrapped back into hour/minute.
        e.g. 23:30 + 90 -> 01:00
        """
        end = self.end_offset(start, duration_minutes)
        wall = (self.open_hour * 60 + end) % MINUTES_PER_DAY
        hour, minute = divmod(wall, 60)
        return time_type(hour, minute)

    def current_offset(self, now: Union[datetime, time_type]) -> Optional[int]:
        """
        Position of the 'now' indicator, or None while the shop is closed.
        Seconds are truncated.
        """
        if isinstance(now, datetime):
            now = now.time()
        if not self.is_operating_hour(now.hour):
            return None

        offset = self.to_offset(time_type(now.hour, now.minute))
        if offset >= self.window_minutes:
            return None
        return offset

    # --- Formatting ---

    def format_offset(self, offset: int) -> str:
        return format_time_point(self.from_offset(offset))

    def format_extended(self, value: TimeLike) -> str:
        """
        Render using overnight notation: next-day hours are shown as 24-29.
        e.g. 02:30 -> '26:30', 22:00 -> '22:00'
        """
        t = parse_time_point(value)
        self.to_offset(t)  # rejects closed hours
        hour = t.hour + 24 if t.hour <= self.close_hour else t.hour
        return f"{hour:02d}:{t.minute:02d}"


DEFAULT_CLOCK = BusinessDayClock()
