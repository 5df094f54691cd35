import pytest

from models import ShiftInterval
from timeline import DEFAULT_CLOCK, OutOfOperatingWindow, ShiftAvailability

availability = ShiftAvailability()


def shift(start, end):
    return ShiftInterval(resource_id="th_01", start_time=start, end_time=end)


class TestMembership:

    def test_late_shift(self):
        # 22:00 -> 03:00 is offsets 720 -> 1020, a plain interval; 04:00 (1080) lies after it
        s = shift("22:00", "03:00")
        assert availability.is_within_shift(s, "22:00")
        assert availability.is_within_shift(s, "23:30")
        assert availability.is_within_shift(s, "02:55")
        assert not availability.is_within_shift(s, "03:00")
        assert not availability.is_within_shift(s, "04:00")
        assert not availability.is_within_shift(s, "12:00")

    def test_wrapped_shift(self):
        # 04:00 -> 11:00 runs past closing and resumes when the next day opens
        s = shift("04:00", "11:00")
        assert availability.is_within_shift(s, "04:30")
        assert availability.is_within_shift(s, "10:30")
        assert not availability.is_within_shift(s, "11:00")
        assert not availability.is_within_shift(s, "12:00")
        assert not availability.is_within_shift(s, "03:59")

    def test_unbounded_shift_is_always_available(self):
        s = ShiftInterval(resource_id="th_01")
        assert availability.is_within_shift(s, "10:00")
        assert availability.is_within_shift(s, "04:55")
        s = ShiftInterval(resource_id="th_01", start_time="12:00")
        assert availability.is_within_shift(s, "23:00")

    def test_zero_length_shift_is_never_available(self):
        s = shift("12:00", "12:00")
        assert not any(availability.is_offset_within_shift(s, o) for o in range(1140))
        assert availability.covered_minutes(s) == 0

    def test_probe_in_closed_hours(self):
        with pytest.raises(OutOfOperatingWindow):
            availability.is_within_shift(shift("12:00", "18:00"), "08:00")


@pytest.mark.parametrize("start, end, expected", [
    ("12:00", "18:00", 360),
    ("22:00", "03:00", 300),
    ("10:00", "05:00", 1140),
    ("04:00", "11:00", 120),
    ("00:30", "23:00", 1050),
    ("18:00", "26:00", 480),
])
def test_membership_matches_arc_length(start, end, expected):
    s = shift(start, end)
    inside = sum(1 for o in range(DEFAULT_CLOCK.window_minutes) if availability.is_offset_within_shift(s, o))
    assert inside == expected
    assert availability.covered_minutes(s) == expected


def test_shift_mask():
    mask = availability.shift_mask(shift("12:00", "18:00"))
    assert len(mask) == 228
    assert sum(mask) == 72
    assert mask[24] and not mask[23]
    assert availability.is_slot_in_shift(shift("12:00", "18:00"), 24)
