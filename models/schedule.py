"""
Schedule data models for the Salon Timeline Engine.

This module defines the records the timeline works on:
1. ShiftInterval (Supply: when a therapist is on the floor)
2. Reservation (Demand: a booked customer visit)
3. ScheduleEntity / Placement (Output: derived blocks on the operating-day axis)
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from datetime import date as date_type, time as time_type
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .catalog import DesignationType
from .time_point import parse_time_point


class EntityKind(str, Enum):
    """What a block on the timeline represents."""
    SHIFT = "shift"
    RESERVATION = "reservation"


class ReservationStatus(str, Enum):
    """Lifecycle of a reservation record."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ShiftInterval(BaseModel):
    """
    A therapist's working window for one business day.
    The window may wrap past the operating-day boundary; with either bound
    missing the therapist is treated as always available.
    """
    id: Optional[str] = Field(default=None, description="Record id, if persisted")
    resource_id: str = Field(description="Therapist the shift belongs to")
    date: Optional[date_type] = Field(default=None, description="Business day")
    start_time: Optional[time_type] = Field(default=None, description="Shift start")
    end_time: Optional[time_type] = Field(default=None, description="Shift end")
    room_id: Optional[str] = Field(default=None, description="Assigned room, if any")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def normalise_time(cls, v):
        if v is None or v == "":
            return None
        return parse_time_point(v)

    @property
    def is_bounded(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "resource_id": "th_01",
            "date": "2025-01-15",
            "start_time": "22:00",
            "end_time": "03:00",
            "room_id": "room_a"
        }
    })


class Reservation(BaseModel):
    """
    A customer reservation as supplied by the data-access layer.
    Pricing fields are not stored here; they are recomputed on demand.
    """

    # --- Identity ---
    id: str = Field(description="Unique identifier")
    shop_id: Optional[str] = Field(default=None)
    customer_id: str = Field(description="Customer who booked")
    therapist_id: str = Field(description="Therapist (timeline resource)")

    # --- Timing ---
    date: Optional[date_type] = Field(default=None, description="Business day")
    start_time: time_type = Field(description="Start of the visit")
    duration_minutes: Optional[int] = Field(
        default=None,
        ge=0,
        description="Stored total duration; derived from course + options when absent"
    )

    # --- Pricing inputs ---
    course_id: Optional[str] = Field(default=None)
    option_ids: List[str] = Field(default_factory=list)
    designation: DesignationType = Field(default=DesignationType.FREE)
    discount_amount: int = Field(default=0, ge=0)

    status: ReservationStatus = Field(default=ReservationStatus.CONFIRMED)

    @field_validator("start_time", mode="before")
    @classmethod
    def normalise_time(cls, v):
        return parse_time_point(v)

    model_config = ConfigDict(frozen=True)


class ScheduleEntity(BaseModel):
    """
    A shift or reservation resolved onto the operating-day axis.
    Offsets are minutes since the window opens; the interval is half-open.
    """
    entity_id: str = Field(description="Source record id (shift blocks get a suffix)")
    resource_id: str
    kind: EntityKind
    start_offset: int
    end_offset: int
    label: str = Field(default="")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_minutes(self) -> int:
        return self.end_offset - self.start_offset

    model_config = ConfigDict(frozen=True)


class Placement(BaseModel):
    """Grid position of a ScheduleEntity (used for rendering alignment)."""
    start_offset: int
    end_offset: int
    slot_start: int = Field(ge=0, description="First grid column")
    slot_span: int = Field(ge=0, description="Number of grid columns covered")

    model_config = ConfigDict(frozen=True)
