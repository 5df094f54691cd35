"""
Shift Membership Logic.

Answers the binary question: "Is therapist X on shift at time Y?"
Shifts may wrap past the end of the operating window (e.g. 04:00 -> 11:00),
in which case coverage is [start, window end) plus [window start, end).
"""

from typing import List, Optional

from models import ShiftInterval
from .clock import BusinessDayClock, DEFAULT_CLOCK, TimeLike
from .grid import TimelineGrid


class ShiftAvailability:
    """
    Shift membership tests on the operating-day axis.
    """

    def __init__(self, clock: BusinessDayClock = DEFAULT_CLOCK, grid: Optional[TimelineGrid] = None):
        self.clock = clock
        self.grid = grid or TimelineGrid.for_clock(clock)

    def is_within_shift(self, shift: ShiftInterval, probe: TimeLike) -> bool:
        """True when the probe time falls inside the shift."""
        if not shift.is_bounded:
            return True  # No shift recorded: treat as always working
        return self.is_offset_within_shift(shift, self.clock.to_offset(probe))

    def is_offset_within_shift(self, shift: ShiftInterval, offset: int) -> bool:
        if not shift.is_bounded:
            return True

        start = self.clock.to_offset(shift.start_time)
        end = self.clock.to_offset(shift.end_time)

        # Zero-length shift covers nothing (the wrap rule would match everything)
        if start == end:
            return False

        if end < start:
            return offset >= start or offset < end
        return start <= offset < end

    def is_slot_in_shift(self, shift: ShiftInterval, slot_index: int) -> bool:
        """Cell shading test: a slot counts when its first minute is on shift."""
        return self.is_offset_within_shift(shift, self.grid.slot_to_offset(slot_index))

    def shift_mask(self, shift: ShiftInterval) -> List[bool]:
        """One flag per grid slot, in timeline order."""
        return [self.is_slot_in_shift(shift, i) for i in range(self.grid.slot_count)]

    def covered_minutes(self, shift: ShiftInterval) -> int:
        """Length of the shift's coverage inside the operating window."""
        window = self.clock.window_minutes
        if not shift.is_bounded:
            return window

        start = self.clock.to_offset(shift.start_time)
        end = self.clock.to_offset(shift.end_time)
        if start == end:
            return 0

        # Minutes after closing are off the axis
        if end < start:
            return window - min(start, window) + min(end, window)
        return min(end, window) - min(start, window)
