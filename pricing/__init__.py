"""
Reservation pricing package.

Course + options + nomination fee - discount, with the fee resolved
from therapist overrides and shop defaults.
"""

from .fees import NominationFeeResolver
from .designation import DesignationClassifier, has_prior_reservation
from .calculator import ReservationPriceCalculator, PriceQuote

__all__ = [
    "NominationFeeResolver",
    "DesignationClassifier",
    "has_prior_reservation",
    "ReservationPriceCalculator",
    "PriceQuote",
]
