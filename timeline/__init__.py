"""
Operating-day timeline package.

Maps business hours (10:00 through 05:00 the next calendar day) onto a
linear minute axis and lays shifts and reservations out on it.
"""

from .clock import BusinessDayClock, DEFAULT_CLOCK
from .grid import TimelineGrid, DEFAULT_GRID, slot_count, slot_index, slot_to_offset
from .availability import ShiftAvailability
from .placement import ScheduleBlockPlacer, overlaps
from .constraints import ScheduleValidator, ScheduleViolation
from .errors import TimelineError, OutOfOperatingWindow, OutOfRange, InvalidInterval

__all__ = [
    "BusinessDayClock",
    "DEFAULT_CLOCK",
    "TimelineGrid",
    "DEFAULT_GRID",
    "slot_count",
    "slot_index",
    "slot_to_offset",
    "ShiftAvailability",
    "ScheduleBlockPlacer",
    "overlaps",
    "ScheduleValidator",
    "ScheduleViolation",
    "TimelineError",
    "OutOfOperatingWindow",
    "OutOfRange",
    "InvalidInterval",
]
