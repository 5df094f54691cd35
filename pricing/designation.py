"""
Designation Auto-Classification.

Proposes the default designation for a new reservation from the
customer's history with the chosen therapist. The proposal is advisory:
the caller may override it before pricing.
"""

from typing import Iterable, Optional

from models import DesignationType, Reservation, ReservationStatus

# Only visits that actually happened (or are firmly booked) make a repeat customer
COUNTED_STATUSES = frozenset({ReservationStatus.CONFIRMED, ReservationStatus.COMPLETED})


def has_prior_reservation(
    history: Iterable[Reservation],
    customer_id: str,
    therapist_id: str,
    shop_id: Optional[str] = None,
    exclude_id: Optional[str] = None
) -> bool:
    """
    Does the customer already have a counted reservation with this therapist?
    `exclude_id` skips the reservation being edited.
    """
    for r in history:
        if r.customer_id != customer_id or r.therapist_id != therapist_id:
            continue
        if shop_id is not None and r.shop_id is not None and r.shop_id != shop_id:
            continue
        if exclude_id is not None and r.id == exclude_id:
            continue
        if r.status in COUNTED_STATUSES:
            return True
    return False


class DesignationClassifier:
    """First nomination vs. confirmed (repeat) nomination."""

    def classify(self, has_prior_reservation: bool, requested: DesignationType) -> DesignationType:
        if requested in (DesignationType.FREE, DesignationType.PRINCESS_RESERVATION):
            return requested

        if has_prior_reservation:
            return DesignationType.CONFIRMED_NOMINATION
        # A first visit cannot be a repeat nomination
        return DesignationType.NOMINATION
