"""
Discrete Timeline Grid.

Slices the operating window into fixed-size slots (5 minutes by default,
228 slots over 19 hours). The grid only converts between offsets and slot
indices; it enforces no business rules.
"""

import math
from dataclasses import dataclass
from typing import List

from .clock import BusinessDayClock, DEFAULT_CLOCK
from .errors import OutOfRange

DEFAULT_GRANULARITY = 5


@dataclass(frozen=True)
class TimelineGrid:
    """Offset <-> slot-index conversion for a given granularity."""
    granularity_minutes: int = DEFAULT_GRANULARITY
    window_minutes: int = DEFAULT_CLOCK.window_minutes

    def __post_init__(self):
        g = self.granularity_minutes
        if g <= 0 or 60 % g != 0:
            raise OutOfRange(f"Granularity must be a positive divisor of 60, got {g}")
        if self.window_minutes % g != 0:
            raise OutOfRange(f"Window of {self.window_minutes} minutes is not a multiple of {g}")

    @classmethod
    def for_clock(cls, clock: BusinessDayClock, granularity_minutes: int = DEFAULT_GRANULARITY) -> "TimelineGrid":
        return cls(granularity_minutes=granularity_minutes, window_minutes=clock.window_minutes)

    @property
    def slot_count(self) -> int:
        return self.window_minutes // self.granularity_minutes

    @property
    def slots_per_hour(self) -> int:
        return 60 // self.granularity_minutes

    def slot_index(self, offset_minutes: int) -> int:
        if not 0 <= offset_minutes < self.window_minutes:
            raise OutOfRange(f"Offset {offset_minutes} outside grid [0, {self.window_minutes})")
        return offset_minutes // self.granularity_minutes

    def slot_to_offset(self, index: int) -> int:
        if not 0 <= index < self.slot_count:
            raise OutOfRange(f"Slot {index} outside grid [0, {self.slot_count})")
        return index * self.granularity_minutes

    def slot_span(self, duration_minutes: int) -> int:
        """Columns needed to draw a block; partial slots round up."""
        if duration_minutes <= 0:
            return 0
        return math.ceil(duration_minutes / self.granularity_minutes)

    def is_hour_start(self, index: int) -> bool:
        return index % self.slots_per_hour == 0

    # --- Header labels ---

    def slot_labels(self, clock: BusinessDayClock = DEFAULT_CLOCK) -> List[str]:
        """'HH:MM' for every slot, in timeline order."""
        return [clock.format_offset(self.slot_to_offset(i)) for i in range(self.slot_count)]

    def hour_labels(self, clock: BusinessDayClock = DEFAULT_CLOCK) -> List[str]:
        """One 'HH:00' label per hour column group."""
        return [
            clock.format_offset(self.slot_to_offset(i))
            for i in range(0, self.slot_count, self.slots_per_hour)
        ]


DEFAULT_GRID = TimelineGrid()


def slot_count(granularity_minutes: int = DEFAULT_GRANULARITY) -> int:
    return TimelineGrid(granularity_minutes).slot_count


def slot_index(offset_minutes: int, granularity_minutes: int = DEFAULT_GRANULARITY) -> int:
    return TimelineGrid(granularity_minutes).slot_index(offset_minutes)


def slot_to_offset(index: int, granularity_minutes: int = DEFAULT_GRANULARITY) -> int:
    return TimelineGrid(granularity_minutes).slot_to_offset(index)
