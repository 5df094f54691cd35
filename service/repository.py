"""
Data-access boundary for the engines.

Records are validated into typed models once, here, so the engines never
see loosely shaped rows. The JSON-backed repository re-hydrates pydantic
models from a data file; any other store only has to satisfy
SalonRepository.
"""

import json
import logging
from datetime import date as date_type
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from models import (
    Course,
    Option,
    Reservation,
    ReservationStatus,
    ShiftInterval,
    ShopDefaults,
    TherapistPricing,
)

logger = logging.getLogger(__name__)


class RecordNotFound(LookupError):
    """A referenced course, option or other record does not exist."""
    pass


class SalonRepository(Protocol):
    """Read-only queries the engines depend on."""

    def get_course(self, course_id: str) -> Course: ...

    def get_options(self, option_ids: List[str]) -> List[Option]: ...

    def get_therapist_pricing(self, therapist_id: str) -> Optional[TherapistPricing]: ...

    def get_shop_defaults(self) -> ShopDefaults: ...

    def list_shifts(self, day: date_type, resource_id: Optional[str] = None) -> List[ShiftInterval]: ...

    def list_reservations(self, day: date_type, resource_id: Optional[str] = None) -> List[Reservation]: ...

    def list_reservation_history(self, customer_id: str, therapist_id: str) -> List[Reservation]: ...


class JsonSalonRepository:
    """
    In-memory repository loaded from a JSON document of the form
    {"shop_defaults": {...}, "courses": [...], "options": [...],
     "therapist_pricing": [...], "shifts": [...], "reservations": [...]}.
    """

    def __init__(
        self,
        courses: List[Course],
        options: List[Option],
        therapist_pricing: List[TherapistPricing],
        shop_defaults: ShopDefaults,
        shifts: List[ShiftInterval],
        reservations: List[Reservation]
    ):
        self.courses = {c.id: c for c in courses}
        self.options = {o.id: o for o in options}
        self.pricing = {p.therapist_id: p for p in therapist_pricing}
        self.shop_defaults = shop_defaults
        self.shifts = shifts
        self.reservations = reservations

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JsonSalonRepository":
        """Re-hydrate pydantic models from plain dicts."""
        return cls(
            courses=[Course(**item) for item in data.get("courses", [])],
            options=[Option(**item) for item in data.get("options", [])],
            therapist_pricing=[TherapistPricing(**item) for item in data.get("therapist_pricing", [])],
            shop_defaults=ShopDefaults(**data.get("shop_defaults", {})),
            shifts=[ShiftInterval(**item) for item in data.get("shifts", [])],
            reservations=[Reservation(**item) for item in data.get("reservations", [])],
        )

    @classmethod
    def from_file(cls, filename: str) -> "JsonSalonRepository":
        path = Path(filename)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        repo = cls.from_dict(data)
        logger.info(
            f"Loaded {path}: {len(repo.courses)} courses, {len(repo.options)} options, "
            f"{len(repo.shifts)} shifts, {len(repo.reservations)} reservations"
        )
        return repo

    # --- Catalog ---

    def get_course(self, course_id: str) -> Course:
        course = self.courses.get(course_id)
        if course is None:
            raise RecordNotFound(f"Unknown course '{course_id}'")
        return course

    def get_options(self, option_ids: List[str]) -> List[Option]:
        missing = [oid for oid in option_ids if oid not in self.options]
        if missing:
            raise RecordNotFound(f"Unknown option(s): {', '.join(missing)}")
        return [self.options[oid] for oid in option_ids]

    def get_therapist_pricing(self, therapist_id: str) -> Optional[TherapistPricing]:
        return self.pricing.get(therapist_id)

    def get_shop_defaults(self) -> ShopDefaults:
        return self.shop_defaults

    # --- Schedule ---

    def list_shifts(self, day: date_type, resource_id: Optional[str] = None) -> List[ShiftInterval]:
        return [
            s for s in self.shifts
            if (s.date is None or s.date == day)
            and (resource_id is None or s.resource_id == resource_id)
        ]

    def list_reservations(self, day: date_type, resource_id: Optional[str] = None) -> List[Reservation]:
        """Active reservations of a business day (cancelled ones are left out)."""
        return [
            r for r in self.reservations
            if r.date == day
            and r.status != ReservationStatus.CANCELLED
            and (resource_id is None or r.therapist_id == resource_id)
        ]

    def list_reservation_history(self, customer_id: str, therapist_id: str) -> List[Reservation]:
        return [
            r for r in self.reservations
            if r.customer_id == customer_id and r.therapist_id == therapist_id
        ]
