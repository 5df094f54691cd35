from datetime import time

import pytest

from models import (
    Course,
    DesignationType,
    Option,
    Reservation,
    ReservationStatus,
    ShopDefaults,
    TherapistPricing,
)
from pricing import (
    DesignationClassifier,
    NominationFeeResolver,
    ReservationPriceCalculator,
    has_prior_reservation,
)

D = DesignationType

SHOP = ShopDefaults(
    default_nomination_fee=1000,
    default_confirmed_nomination_fee=500,
    default_princess_reservation_fee=3000,
)
OVERRIDES = TherapistPricing(
    therapist_id="th_01",
    nomination_fee=1500,
    confirmed_nomination_fee=700,
    princess_reservation_fee=4000,
)
ZERO_OVERRIDES = TherapistPricing(
    therapist_id="th_02",
    nomination_fee=0,
    confirmed_nomination_fee=0,
    princess_reservation_fee=0,
)

COURSE = Course(id="course_60", duration_minutes=60, base_price=6000)
HEAD_SPA = Option(id="opt_head", duration_minutes=30, price=3000)
AROMA = Option(id="opt_aroma", duration_minutes=0, price=1000)


class TestFeeResolution:

    resolver = NominationFeeResolver()

    @pytest.mark.parametrize("designation, expected", [
        (D.NOMINATION, 1500),
        (D.CONFIRMED_NOMINATION, 700),
        (D.PRINCESS_RESERVATION, 4000),
        (D.FREE, 0),
    ])
    def test_therapist_override_wins(self, designation, expected):
        assert self.resolver.resolve(designation, OVERRIDES, SHOP) == expected

    @pytest.mark.parametrize("pricing", [None, ZERO_OVERRIDES, TherapistPricing(therapist_id="th_03")])
    @pytest.mark.parametrize("designation, expected", [
        (D.NOMINATION, 1000),
        (D.CONFIRMED_NOMINATION, 500),
        (D.PRINCESS_RESERVATION, 3000),
        (D.FREE, 0),
    ])
    def test_shop_default_when_override_missing(self, pricing, designation, expected):
        assert self.resolver.resolve(designation, pricing, SHOP) == expected

    @pytest.mark.parametrize("designation", list(DesignationType))
    def test_zero_when_nothing_configured(self, designation):
        assert self.resolver.resolve(designation, None, ShopDefaults()) == 0
        assert self.resolver.resolve(designation, ZERO_OVERRIDES, None) == 0

    def test_mixed_overrides(self):
        pricing = TherapistPricing(therapist_id="th_04", nomination_fee=2000)
        assert self.resolver.resolve(D.NOMINATION, pricing, SHOP) == 2000
        assert self.resolver.resolve(D.CONFIRMED_NOMINATION, pricing, SHOP) == 500


class TestDesignationClassifier:

    classifier = DesignationClassifier()

    def test_repeat_customer_is_upgraded(self):
        assert self.classifier.classify(True, D.NOMINATION) == D.CONFIRMED_NOMINATION

    def test_princess_is_left_alone(self):
        assert self.classifier.classify(True, D.PRINCESS_RESERVATION) == D.PRINCESS_RESERVATION
        assert self.classifier.classify(False, D.PRINCESS_RESERVATION) == D.PRINCESS_RESERVATION

    def test_free_is_left_alone(self):
        assert self.classifier.classify(True, D.FREE) == D.FREE

    def test_first_visit(self):
        assert self.classifier.classify(False, D.NOMINATION) == D.NOMINATION
        assert self.classifier.classify(False, D.CONFIRMED_NOMINATION) == D.NOMINATION


class TestReservationHistory:

    def reservation(self, rid, status, customer="cu_01", therapist="th_01", shop=None):
        return Reservation(
            id=rid, shop_id=shop, customer_id=customer, therapist_id=therapist,
            start_time="12:00", status=status
        )

    def test_counted_statuses(self):
        for status in (ReservationStatus.CONFIRMED, ReservationStatus.COMPLETED):
            assert has_prior_reservation([self.reservation("r1", status)], "cu_01", "th_01")
        for status in (ReservationStatus.PENDING, ReservationStatus.CANCELLED):
            assert not has_prior_reservation([self.reservation("r1", status)], "cu_01", "th_01")

    def test_other_pairs_do_not_count(self):
        history = [
            self.reservation("r1", ReservationStatus.COMPLETED, customer="cu_02"),
            self.reservation("r2", ReservationStatus.COMPLETED, therapist="th_02"),
        ]
        assert not has_prior_reservation(history, "cu_01", "th_01")

    def test_reservation_being_edited_is_excluded(self):
        history = [self.reservation("r1", ReservationStatus.CONFIRMED)]
        assert not has_prior_reservation(history, "cu_01", "th_01", exclude_id="r1")

    def test_shop_filter(self):
        history = [self.reservation("r1", ReservationStatus.CONFIRMED, shop="shop_02")]
        assert not has_prior_reservation(history, "cu_01", "th_01", shop_id="shop_01")
        assert has_prior_reservation(history, "cu_01", "th_01", shop_id="shop_02")


class TestPriceCalculator:

    calculator = ReservationPriceCalculator()

    def test_course_option_and_nomination(self):
        result = self.calculator.calculate(COURSE, [HEAD_SPA], D.NOMINATION, 1000)
        assert result.base_price == 6000
        assert result.options_price == 3000
        assert result.nomination_fee == 1000
        assert result.total_price == 10000
        assert result.total_duration_minutes == 90

    def test_oversized_discount_clamps_to_zero(self):
        result = self.calculator.calculate(COURSE, [HEAD_SPA], D.NOMINATION, 1000, discount_amount=15000)
        assert result.total_price == 0
        assert result.discount_amount == 15000

    def test_partial_discount(self):
        result = self.calculator.calculate(COURSE, [], D.FREE, 0, discount_amount=500)
        assert result.total_price == 5500

    def test_no_course_prices_as_zero(self):
        result = self.calculator.calculate(None, [AROMA], D.FREE, 0)
        assert result.base_price == 0
        assert result.total_price == 1000
        assert result.total_duration_minutes == 0

    def test_negative_discount_is_rejected(self):
        with pytest.raises(ValueError):
            self.calculator.calculate(COURSE, [], D.FREE, 0, discount_amount=-1)

    def test_adding_options_never_decreases(self):
        selected = []
        previous = self.calculator.calculate(COURSE, selected, D.FREE, 0)
        for option in (HEAD_SPA, AROMA, HEAD_SPA):
            selected.append(option)
            current = self.calculator.calculate(COURSE, selected, D.FREE, 0)
            assert current.options_price >= previous.options_price
            assert current.total_duration_minutes >= previous.total_duration_minutes
            previous = current

    def test_discount_never_increases_total(self):
        totals = [
            self.calculator.calculate(COURSE, [HEAD_SPA], D.NOMINATION, 1000, discount_amount=d).total_price
            for d in range(0, 20001, 250)
        ]
        assert all(a >= b for a, b in zip(totals, totals[1:]))
        assert min(totals) == 0

    def test_end_time_crosses_midnight(self):
        assert self.calculator.end_time(time(23, 30), 90) == time(1, 0)

    def test_quote_resolves_fee(self):
        quote = self.calculator.quote(COURSE, [HEAD_SPA], D.NOMINATION, OVERRIDES, SHOP)
        assert quote.designation == D.NOMINATION
        assert quote.breakdown.nomination_fee == 1500
        assert quote.breakdown.total_price == 10500

    def test_quote_reclassifies_repeat_customer(self):
        quote = self.calculator.quote(
            COURSE, [HEAD_SPA], D.NOMINATION, ZERO_OVERRIDES, SHOP, has_prior_reservation=True
        )
        assert quote.designation == D.CONFIRMED_NOMINATION
        assert quote.breakdown.nomination_fee == 500
        assert quote.breakdown.total_price == 9500

    def test_quote_without_history_keeps_request(self):
        quote = self.calculator.quote(COURSE, [], D.CONFIRMED_NOMINATION, None, SHOP)
        assert quote.designation == D.CONFIRMED_NOMINATION
        assert quote.breakdown.nomination_fee == 500
