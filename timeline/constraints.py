"""
Hard Constraint Validation Logic.

This module answers the binary questions asked before a record is saved:
"Is this shift well-formed?" and "Can this reservation go here?"
Expected domain conditions come back as ScheduleViolation records; nothing
here raises for them.
"""

from dataclasses import dataclass
from typing import List, Optional

from models import ScheduleEntity, ShiftInterval
from .availability import ShiftAvailability
from .clock import BusinessDayClock, DEFAULT_CLOCK
from .placement import overlaps


@dataclass
class ScheduleViolation:
    """Detailed reason for rejection."""
    constraint_type: str  # e.g. "ShiftBounds", "Duplicate", "OffShift", "Overlap"
    reason: str
    resource_id: str
    entity_id: Optional[str] = None


class ScheduleValidator:
    """
    Validates shift registrations and reservation slots.
    """

    def __init__(self, clock: BusinessDayClock = DEFAULT_CLOCK):
        self.clock = clock
        self.availability = ShiftAvailability(clock)

    def check_shift_registration(
        self,
        shift: ShiftInterval,
        existing_shifts: List[ShiftInterval]
    ) -> Optional[ScheduleViolation]:
        """
        Master validation for a new or edited shift. Returns None if valid.
        Registered shifts must end strictly after they start on the timeline,
        and a therapist holds at most one shift per business day.
        """
        if not shift.is_bounded:
            return ScheduleViolation(
                "ShiftBounds", "Start and end time are both required", shift.resource_id, shift.id
            )

        start = self.clock.to_offset(shift.start_time)
        end = self.clock.to_offset(shift.end_time)
        if end <= start:
            return ScheduleViolation(
                "ShiftBounds",
                f"Shift must end after it starts "
                f"({self.clock.format_extended(shift.start_time)}-{self.clock.format_extended(shift.end_time)})",
                shift.resource_id, shift.id
            )

        for other in existing_shifts:
            if other.resource_id != shift.resource_id or other.date != shift.date:
                continue
            if shift.id is not None and other.id == shift.id:
                continue  # Editing the same record
            return ScheduleViolation(
                "Duplicate",
                f"{shift.resource_id} already has a shift on {shift.date}",
                shift.resource_id, shift.id
            )

        return None

    def check_reservation(
        self,
        entity: ScheduleEntity,
        shifts: List[ShiftInterval],
        booked: List[ScheduleEntity]
    ) -> Optional[ScheduleViolation]:
        """
        A reservation block must sit entirely inside the therapist's shift
        coverage and must not collide with another booked reservation.
        """
        if entity.end_offset < entity.start_offset:
            return ScheduleViolation(
                "Interval", "Reservation ends before it starts", entity.resource_id, entity.entity_id
            )

        violation = self._check_shift_coverage(entity, shifts)
        if violation: return violation

        for other in booked:
            if other.entity_id == entity.entity_id or other.kind != entity.kind:
                continue
            if overlaps(entity, other):
                return ScheduleViolation(
                    "Overlap",
                    f"Clash with {other.entity_id} ({self.clock.format_offset(other.start_offset)})",
                    entity.resource_id, entity.entity_id
                )

        return None  # All clear!

    def _check_shift_coverage(
        self,
        entity: ScheduleEntity,
        shifts: List[ShiftInterval]
    ) -> Optional[ScheduleViolation]:
        own = [s for s in shifts if s.resource_id == entity.resource_id]
        if not own:
            return None  # No shift recorded: unconstrained

        window = self.clock.window_minutes
        if entity.end_offset > window:
            return ScheduleViolation(
                "OffShift", "Reservation runs past closing time", entity.resource_id, entity.entity_id
            )

        for shift in own:
            covered = all(
                self.availability.is_offset_within_shift(shift, minute)
                for minute in range(entity.start_offset, entity.end_offset)
            )
            if covered:
                return None

        return ScheduleViolation(
            "OffShift",
            f"{entity.resource_id} is not on shift at {self.clock.format_offset(entity.start_offset)}",
            entity.resource_id, entity.entity_id
        )
