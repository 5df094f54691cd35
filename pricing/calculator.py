"""
Reservation Price Calculator.

Composes the billable total of a reservation:

    total = max(0, course base price + options + nomination fee - discount)

and the total duration (course + options) used to derive the end time.
Amounts are whole currency units throughout; there is no rounding step.
"""

import logging
from dataclasses import dataclass
from datetime import time as time_type
from typing import Iterable, Optional

from models import Course, DesignationType, Option, PriceBreakdown, ShopDefaults, TherapistPricing
from timeline import BusinessDayClock, DEFAULT_CLOCK
from .designation import DesignationClassifier
from .fees import NominationFeeResolver

logger = logging.getLogger(__name__)


@dataclass
class PriceQuote:
    """Designation actually priced, plus the resulting breakdown."""
    designation: DesignationType
    breakdown: PriceBreakdown


class ReservationPriceCalculator:
    """
    Pure, on-demand price computation. Holds no state between calls.
    """

    def __init__(self, clock: BusinessDayClock = DEFAULT_CLOCK):
        self.clock = clock
        self.fee_resolver = NominationFeeResolver()
        self.classifier = DesignationClassifier()

    def calculate(
        self,
        course: Optional[Course],
        selected_options: Iterable[Option],
        designation: DesignationType,
        nomination_fee: int,
        discount_amount: int = 0
    ) -> PriceBreakdown:
        """
        Master pricing function. `nomination_fee` arrives already resolved
        for `designation`. An oversized discount clamps the total to zero.
        """
        if discount_amount < 0:
            raise ValueError(f"Discount cannot be negative: {discount_amount}")
        if nomination_fee < 0:
            raise ValueError(f"Nomination fee cannot be negative: {nomination_fee}")

        # Missing course is an incomplete form; the edge rejects it, here it prices as zero
        base_price = course.base_price if course else 0
        duration = course.duration_minutes if course else 0

        options_price = 0
        for option in selected_options:
            options_price += option.price
            duration += option.duration_minutes

        subtotal = base_price + options_price + nomination_fee
        total = max(0, subtotal - discount_amount)

        logger.debug(
            f"Priced {designation.value}: base={base_price} options={options_price} "
            f"fee={nomination_fee} discount={discount_amount} -> {total}"
        )

        return PriceBreakdown(
            base_price=base_price,
            options_price=options_price,
            nomination_fee=nomination_fee,
            discount_amount=discount_amount,
            total_price=total,
            total_duration_minutes=duration
        )

    def end_time(self, start: time_type, total_duration_minutes: int) -> time_type:
        """Wall-clock end of a reservation (wraps past midnight)."""
        return self.clock.add_minutes(start, total_duration_minutes)

    def quote(
        self,
        course: Optional[Course],
        selected_options: Iterable[Option],
        designation: DesignationType,
        therapist_pricing: Optional[TherapistPricing],
        shop_defaults: Optional[ShopDefaults],
        discount_amount: int = 0,
        has_prior_reservation: Optional[bool] = None
    ) -> PriceQuote:
        """
        End-to-end pricing: optional auto-classification, fee resolution, calculation.
        Pass `has_prior_reservation=None` to price the requested designation as-is.
        """
        if has_prior_reservation is not None:
            proposed = self.classifier.classify(has_prior_reservation, designation)
            if proposed != designation:
                logger.info(f"Designation reclassified: {designation.value} -> {proposed.value}")
            designation = proposed

        fee = self.fee_resolver.resolve(designation, therapist_pricing, shop_defaults)
        breakdown = self.calculate(course, selected_options, designation, fee, discount_amount)
        return PriceQuote(designation=designation, breakdown=breakdown)
