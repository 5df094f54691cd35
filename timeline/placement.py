"""
Schedule Block Placement & Overlap Detection.

Turns shifts and reservations into half-open [start, end) blocks on the
operating-day axis, positions them on the grid, and finds blocks of the
same resource that collide. Pure geometry over already-resolved offsets.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from models import EntityKind, Placement, Reservation, ScheduleEntity, ShiftInterval, format_time_point
from .clock import BusinessDayClock, DEFAULT_CLOCK
from .errors import InvalidInterval
from .grid import TimelineGrid

logger = logging.getLogger(__name__)

OverlapPair = Tuple[ScheduleEntity, ScheduleEntity]


def overlaps(a: ScheduleEntity, b: ScheduleEntity) -> bool:
    """
    Half-open intersection of two blocks on the same resource.
    Back-to-back blocks ([0,60) and [60,120)) do not collide; empty blocks never do.
    """
    if a.resource_id != b.resource_id:
        return False
    if a.start_offset == a.end_offset or b.start_offset == b.end_offset:
        return False
    return a.start_offset < b.end_offset and b.start_offset < a.end_offset


class ScheduleBlockPlacer:
    """
    Lays out schedule entities and validates them against each other.
    """

    def __init__(self, clock: BusinessDayClock = DEFAULT_CLOCK, grid: Optional[TimelineGrid] = None):
        self.clock = clock
        self.grid = grid or TimelineGrid.for_clock(clock)

    # --- Entity construction ---

    def entity_for_reservation(
        self,
        reservation: Reservation,
        duration_minutes: int,
        label: str = ""
    ) -> ScheduleEntity:
        """Block for a reservation: start time + total (course + options) duration."""
        start = self.clock.to_offset(reservation.start_time)
        end = self.clock.end_offset(reservation.start_time, duration_minutes)
        return ScheduleEntity(
            entity_id=reservation.id,
            resource_id=reservation.therapist_id,
            kind=EntityKind.RESERVATION,
            start_offset=start,
            end_offset=end,
            label=label or reservation.id,
            metadata={
                "customer_id": reservation.customer_id,
                "designation": reservation.designation.value,
                "status": reservation.status.value,
            }
        )

    def entities_for_shift(self, shift: ShiftInterval) -> List[ScheduleEntity]:
        """
        Blocks covered by a shift.
        A wrapped shift yields two blocks: [start, window end) and [0, end).
        Minutes after closing are off the axis, so spans are clipped to the
        window and empty ones dropped. Unsaved shifts get an id keyed by
        their start offset.
        """
        window = self.clock.window_minutes

        if not shift.is_bounded:
            first = 0
            spans = [(0, window)]
            label = "unscheduled"
        else:
            start = self.clock.to_offset(shift.start_time)
            end = self.clock.to_offset(shift.end_time)
            first = start
            label = f"{format_time_point(shift.start_time)}-{format_time_point(shift.end_time)}"

            if start == end:
                spans = []
            elif end < start:
                spans = [(start, window), (0, end)]
            else:
                spans = [(start, end)]

        spans = [(min(s, window), min(e, window)) for s, e in spans]
        spans = [(s, e) for s, e in spans if s < e]

        base_id = shift.id or f"shift:{shift.resource_id}@{first}"
        entities = []
        for i, (start, end) in enumerate(spans):
            entity_id = base_id if len(spans) == 1 else f"{base_id}#{i + 1}"
            entities.append(ScheduleEntity(
                entity_id=entity_id,
                resource_id=shift.resource_id,
                kind=EntityKind.SHIFT,
                start_offset=start,
                end_offset=end,
                label=label,
                metadata={"room_id": shift.room_id} if shift.room_id else {}
            ))
        return entities

    # --- Placement ---

    def place(self, entity: ScheduleEntity) -> Placement:
        """Grid position of a block. The span is clipped at the closing edge."""
        if entity.end_offset < entity.start_offset:
            raise InvalidInterval(
                f"{entity.entity_id} ends ({entity.end_offset}) before it starts ({entity.start_offset})"
            )

        slot_start = self.grid.slot_index(entity.start_offset)
        span = self.grid.slot_span(entity.duration_minutes)
        span = min(span, self.grid.slot_count - slot_start)

        return Placement(
            start_offset=entity.start_offset,
            end_offset=entity.end_offset,
            slot_start=slot_start,
            slot_span=span
        )

    # --- Overlap detection ---

    def find_overlaps(self, entities: Iterable[ScheduleEntity]) -> List[OverlapPair]:
        """
        Every colliding pair of blocks that share a resource and a kind.

        Blocks are grouped, sorted by start and swept once while keeping the
        set of still-open blocks; each pair is reported once, earlier start first.
        Shifts are never compared against reservations.
        """
        groups: Dict[Tuple[str, EntityKind], List[ScheduleEntity]] = defaultdict(list)
        for entity in entities:
            if entity.end_offset < entity.start_offset:
                raise InvalidInterval(f"{entity.entity_id} ends before it starts")
            if entity.end_offset == entity.start_offset:
                continue
            groups[(entity.resource_id, entity.kind)].append(entity)

        pairs: List[OverlapPair] = []
        for blocks in groups.values():
            blocks.sort(key=lambda e: (e.start_offset, e.end_offset, e.entity_id))

            active: List[ScheduleEntity] = []
            for block in blocks:
                active = [a for a in active if a.end_offset > block.start_offset]
                for other in active:
                    if other.entity_id != block.entity_id:
                        pairs.append((other, block))
                active.append(block)

        if pairs:
            logger.debug(f"Detected {len(pairs)} overlapping block pair(s)")
        return pairs

    def overlap_flags(self, entities: Iterable[ScheduleEntity]) -> Dict[str, bool]:
        """entity_id -> True when the block collides with any other block."""
        entities = list(entities)
        flags = {e.entity_id: False for e in entities}
        for a, b in self.find_overlaps(entities):
            flags[a.entity_id] = True
            flags[b.entity_id] = True
        return flags
