"""
Data models package for the Salon Timeline Engine.

This package exports the three groups of records the engines work on:
1. Catalog (Course, Option, DesignationType, fee tables)
2. Schedule (ShiftInterval, Reservation, ScheduleEntity, Placement)
3. Output (PriceBreakdown)
"""

from .catalog import (
    Course,
    Option,
    DesignationType,
    TherapistPricing,
    ShopDefaults
)

from .schedule import (
    EntityKind,
    ReservationStatus,
    ShiftInterval,
    Reservation,
    ScheduleEntity,
    Placement
)

from .quote import PriceBreakdown

from .time_point import (
    parse_time_point,
    format_time_point
)

__all__ = [
    # --- Catalog Models ---
    "Course",
    "Option",
    "DesignationType",
    "TherapistPricing",
    "ShopDefaults",

    # --- Schedule Models ---
    "EntityKind",
    "ReservationStatus",
    "ShiftInterval",
    "Reservation",
    "ScheduleEntity",
    "Placement",

    # --- Output Models ---
    "PriceBreakdown",

    # --- Time Points ---
    "parse_time_point",
    "format_time_point",
]
