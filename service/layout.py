"""
Day Layout Assembly.

Fetches a business day's shifts and reservations through the repository,
resolves them into timeline blocks, positions them on the grid and flags
collisions. This is the layout pass behind GET /availability.
"""

import logging
from datetime import date as date_type
from typing import List, Optional

from pydantic import BaseModel, Field

from models import Placement, Reservation, ScheduleEntity, format_time_point
from timeline import BusinessDayClock, DEFAULT_CLOCK, OutOfOperatingWindow, ScheduleBlockPlacer, TimelineGrid
from .repository import SalonRepository

logger = logging.getLogger(__name__)


class LayoutBlock(BaseModel):
    """A ScheduleEntity with its grid placement and overlap flag."""
    entity: ScheduleEntity
    start_time: str = Field(description="Wall-clock start, HH:MM")
    end_time: str = Field(description="Wall-clock end, HH:MM")
    placement: Optional[Placement] = Field(
        default=None,
        description="Grid position; None when the block starts after closing"
    )
    overlapping: bool = False


class DayLayoutService:
    """
    Builds the timeline layout of one business day.
    """

    def __init__(
        self,
        repository: SalonRepository,
        clock: BusinessDayClock = DEFAULT_CLOCK,
        grid: Optional[TimelineGrid] = None
    ):
        self.repository = repository
        self.clock = clock
        self.grid = grid or TimelineGrid.for_clock(clock)
        self.placer = ScheduleBlockPlacer(clock, self.grid)

    def reservation_duration(self, reservation: Reservation) -> int:
        """Stored duration, or course + options when the record has none."""
        if reservation.duration_minutes is not None:
            return reservation.duration_minutes

        duration = 0
        if reservation.course_id:
            duration += self.repository.get_course(reservation.course_id).duration_minutes
        for option in self.repository.get_options(reservation.option_ids):
            duration += option.duration_minutes
        return duration

    def build_entities(self, day: date_type, resource_id: Optional[str] = None) -> List[ScheduleEntity]:
        """
        Timeline blocks for the day. A stored record timed inside closed hours
        cannot be placed; it is logged and left out so the rest of the day
        still renders.
        """
        entities: List[ScheduleEntity] = []

        for shift in self.repository.list_shifts(day, resource_id):
            try:
                entities.extend(self.placer.entities_for_shift(shift))
            except OutOfOperatingWindow as e:
                logger.warning(f"⚠️ Skipping shift {shift.id or shift.resource_id}: {e}")

        for reservation in self.repository.list_reservations(day, resource_id):
            duration = self.reservation_duration(reservation)
            try:
                entities.append(self.placer.entity_for_reservation(reservation, duration))
            except OutOfOperatingWindow as e:
                logger.warning(f"⚠️ Skipping reservation {reservation.id}: {e}")

        return entities

    def layout(self, day: date_type, resource_id: Optional[str] = None) -> List[LayoutBlock]:
        entities = self.build_entities(day, resource_id)
        flags = self.placer.overlap_flags(entities)

        blocks = []
        for entity in entities:
            placement = None
            if entity.start_offset < self.grid.window_minutes:
                placement = self.placer.place(entity)

            start = self.clock.from_offset(entity.start_offset)
            end = self.clock.add_minutes(start, entity.duration_minutes)
            blocks.append(LayoutBlock(
                entity=entity,
                start_time=format_time_point(start),
                end_time=format_time_point(end),
                placement=placement,
                overlapping=flags.get(entity.entity_id, False)
            ))

        blocks.sort(key=lambda b: (b.entity.resource_id, b.entity.start_offset, b.entity.kind.value))

        conflicts = sum(1 for b in blocks if b.overlapping)
        if conflicts:
            logger.warning(f"{day}: {conflicts} block(s) overlap another block on the same resource")
        return blocks
