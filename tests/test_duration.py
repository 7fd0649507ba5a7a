"""Duration value type tests: construction, arithmetic, ordering, accessors."""

from datetime import timedelta

import pytest

from pyduration import (
    HOUR,
    MAX_DURATION,
    MICROSECOND,
    MILLISECOND,
    MIN_DURATION,
    MINUTE,
    NANOSECOND,
    SECOND,
    Duration,
)


class TestConstants:
    def test_unit_sizes(self):
        assert NANOSECOND.ns == 1
        assert MICROSECOND.ns == 1_000
        assert MILLISECOND.ns == 1_000_000
        assert SECOND.ns == 1_000_000_000
        assert MINUTE.ns == 60 * SECOND.ns
        assert HOUR.ns == 3600 * SECOND.ns

    def test_bounds(self):
        assert MAX_DURATION.ns == 2**63 - 1
        assert MIN_DURATION.ns == -(2**63)


class TestConstruction:
    def test_default_is_zero(self):
        assert Duration() == Duration(0)

    def test_rejects_float(self):
        with pytest.raises(TypeError):
            Duration(1.5)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            Duration(True)

    def test_rejects_out_of_range(self):
        with pytest.raises(OverflowError):
            Duration(2**63)
        with pytest.raises(OverflowError):
            Duration(-(2**63) - 1)

    def test_immutable(self):
        d = Duration(5)
        with pytest.raises(AttributeError):
            d.ns = 6

    def test_hashable(self):
        table = {SECOND: "one second"}
        assert table[Duration(1_000_000_000)] == "one second"


class TestAbs:
    @pytest.mark.parametrize(
        "ns,want",
        [
            (0, 0),
            (1, 1),
            (-1, 1),
            (MINUTE.ns, MINUTE.ns),
            (-MINUTE.ns, MINUTE.ns),
            (MIN_DURATION.ns, MAX_DURATION.ns),
            (MIN_DURATION.ns + 1, MAX_DURATION.ns),
            (MIN_DURATION.ns + 2, MAX_DURATION.ns - 1),
            (MAX_DURATION.ns, MAX_DURATION.ns),
            (MAX_DURATION.ns - 1, MAX_DURATION.ns - 1),
        ],
    )
    def test_abs(self, ns, want):
        assert abs(Duration(ns)) == Duration(want)


class TestArithmetic:
    def test_add(self):
        assert HOUR + 30 * MINUTE == Duration(5_400_000_000_000)

    def test_sub(self):
        assert HOUR - MINUTE == 59 * MINUTE

    def test_add_wraps(self):
        assert MAX_DURATION + NANOSECOND == MIN_DURATION

    def test_sub_wraps(self):
        assert MIN_DURATION - NANOSECOND == MAX_DURATION

    def test_mul_both_sides(self):
        assert SECOND * 3 == 3 * SECOND == Duration(3_000_000_000)

    def test_mul_wraps(self):
        assert MAX_DURATION * 2 == Duration(-2)

    def test_mul_by_duration_undefined(self):
        with pytest.raises(TypeError):
            SECOND * SECOND

    def test_add_int_undefined(self):
        with pytest.raises(TypeError):
            SECOND + 1

    def test_neg(self):
        assert -SECOND == Duration(-1_000_000_000)
        assert -(-SECOND) == SECOND

    def test_neg_min_saturates(self):
        assert -MIN_DURATION == MIN_DURATION

    def test_pos(self):
        assert +SECOND == SECOND


class TestDivision:
    def test_ratio(self):
        assert HOUR // MINUTE == 60

    def test_truncates_toward_zero(self):
        assert Duration(-7) // Duration(2) == -3
        assert Duration(7) // Duration(-2) == -3

    def test_min_by_minus_one_wraps(self):
        assert MIN_DURATION // Duration(-1) == MIN_DURATION.ns

    def test_zero_divisor(self):
        with pytest.raises(ZeroDivisionError):
            SECOND // Duration(0)

    def test_int_divisor_undefined(self):
        with pytest.raises(TypeError):
            SECOND // 2


class TestOrdering:
    def test_compare(self):
        assert NANOSECOND < MICROSECOND < MILLISECOND < SECOND < MINUTE < HOUR
        assert MIN_DURATION < Duration(0) < MAX_DURATION

    def test_sorted(self):
        assert sorted([HOUR, -SECOND, Duration(0)]) == [-SECOND, Duration(0), HOUR]

    def test_bool(self):
        assert not Duration(0)
        assert NANOSECOND


class TestAccessors:
    @pytest.mark.parametrize(
        "ns,want",
        [
            (-3_600_000_000_000, -1.0),
            (-1, -1.0 / 3600e9),
            (1, 1.0 / 3600e9),
            (3_600_000_000_000, 1.0),
            (36, 1e-11),
        ],
    )
    def test_hours(self, ns, want):
        assert Duration(ns).hours() == want

    @pytest.mark.parametrize("ns", [-1000, -1, 1, 1000])
    def test_nanoseconds(self, ns):
        assert Duration(ns).nanoseconds() == ns

    def test_seconds(self):
        assert Duration(300_000_000).seconds() == 0.3
        assert Duration.parse("1m30s").seconds() == 90.0

    def test_minutes(self):
        assert Duration.parse("1h30m").minutes() == 90.0

    def test_hours_fraction(self):
        assert f"{Duration.parse('4h30m').hours():.1f}" == "4.5"

    def test_microseconds(self):
        assert Duration.parse("1s").microseconds() == 1_000_000
        assert Duration(-1_500).microseconds() == -1

    def test_milliseconds(self):
        assert Duration.parse("1s").milliseconds() == 1_000
        assert Duration(-1_500_000).milliseconds() == -1


class TestTimedelta:
    def test_from_timedelta(self):
        td = timedelta(hours=1, microseconds=5)
        assert Duration.from_timedelta(td) == HOUR + 5 * MICROSECOND

    def test_from_negative_timedelta(self):
        assert Duration.from_timedelta(timedelta(seconds=-1.5)) == -1_500 * MILLISECOND

    def test_from_timedelta_overflow(self):
        with pytest.raises(OverflowError):
            Duration.from_timedelta(timedelta(days=110_000))

    def test_to_timedelta_truncates(self):
        assert Duration(1_999).to_timedelta() == timedelta(microseconds=1)
        assert Duration(-1_500).to_timedelta() == timedelta(microseconds=-1)

    def test_to_timedelta_whole(self):
        assert (90 * MINUTE).to_timedelta() == timedelta(hours=1, minutes=30)
