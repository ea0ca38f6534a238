"""Tests for epoch conversion functions."""

from __future__ import annotations

import datetime
import math

import pytest

from protostamp import ReferenceEpoch, Timestamp
from protostamp.convert import (
    from_datetime,
    from_time_interval,
    from_unix_millis,
    from_unix_nanos,
    to_datetime,
    to_time_interval,
    to_unix_millis,
    to_unix_nanos,
)
from protostamp.errors import OverflowError, ValidationError

UNIX = ReferenceEpoch.UNIX.offset_seconds
REFERENCE = ReferenceEpoch.REFERENCE_DATE.offset_seconds
UTC = datetime.timezone.utc


class TestFromTimeInterval:
    """Tests for from_time_interval."""

    @pytest.mark.parametrize(
        ("interval", "seconds", "nanos"),
        [
            (0.0, 0, 0),
            (1.5, 1, 500_000_000),
            (-0.5, -1, 500_000_000),
            (-1.5, -2, 500_000_000),
            (-1.0, -1, 0),
            (0.25, 0, 250_000_000),
            (1_700_000_000.5, 1_700_000_000, 500_000_000),
        ],
    )
    def test_unix(self, interval: float, seconds: int, nanos: int) -> None:
        """Floor and fraction split from the Unix epoch."""
        ts = from_time_interval(interval, UNIX)
        assert (ts.seconds, ts.nanos) == (seconds, nanos)

    def test_accepts_int(self) -> None:
        """Integral intervals are accepted."""
        assert from_time_interval(7, UNIX) == Timestamp(7)

    def test_result_is_normalized(self) -> None:
        """Output nanos are always canonical."""
        for interval in (-3.75, -0.000000001, 0.999999999, 12.3):
            assert from_time_interval(interval, UNIX).is_normalized

    def test_rounds_to_nearest_nano(self) -> None:
        """Fractions round to the nearest nanosecond."""
        ts = from_time_interval(0.1, UNIX)
        assert ts.nanos == 100_000_000

    def test_half_nano_rounds_away_from_zero(self) -> None:
        """An exact half nanosecond rounds up."""
        # 2**-10 seconds is exactly 976562.5 ns
        assert from_time_interval(2.0**-10, UNIX).nanos == 976_563
        # 2**-11 seconds is exactly 488281.25 ns
        assert from_time_interval(2.0**-11, UNIX).nanos == 488_281

    def test_rounding_carries_into_seconds(self) -> None:
        """A fraction that rounds to a full second carries."""
        ts = from_time_interval(0.9999999999, UNIX)
        assert (ts.seconds, ts.nanos) == (1, 0)

    def test_reference_date(self) -> None:
        """Zero since the reference date is 2001-01-01."""
        ts = from_time_interval(0.0, REFERENCE)
        assert ts == Timestamp(978_307_200)
        assert ts.to_rfc3339() == "2001-01-01T00:00:00Z"

    def test_reference_date_negative(self) -> None:
        """Negative intervals reach back before 2001."""
        ts = from_time_interval(-0.5, REFERENCE)
        assert (ts.seconds, ts.nanos) == (978_307_199, 500_000_000)

    def test_offset_applied_after_split(self) -> None:
        """One nanosecond survives a large reference offset."""
        ts = from_time_interval(1e-9, REFERENCE)
        assert (ts.seconds, ts.nanos) == (978_307_200, 1)

    @pytest.mark.parametrize("interval", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, interval: float) -> None:
        """NaN and infinities raise ValidationError."""
        with pytest.raises(ValidationError):
            from_time_interval(interval, UNIX)

    @pytest.mark.parametrize("interval", [1e300, -1e300, 9.3e18])
    def test_overflow(self, interval: float) -> None:
        """Seconds beyond 64 bits raise OverflowError."""
        with pytest.raises(OverflowError):
            from_time_interval(interval, UNIX)


class TestToTimeInterval:
    """Tests for to_time_interval."""

    def test_unix(self) -> None:
        """Seconds plus fractional nanos."""
        assert to_time_interval(Timestamp(1, 500_000_000), UNIX) == 1.5

    def test_negative(self) -> None:
        """Pre-epoch timestamps give negative intervals."""
        assert to_time_interval(Timestamp(-2, 500_000_000), UNIX) == -1.5

    def test_reference_date(self) -> None:
        """Offset is removed from the seconds."""
        assert to_time_interval(Timestamp(978_307_201, 250_000_000), REFERENCE) == 1.25

    def test_offset_subtracted_before_float(self) -> None:
        """One nanosecond after the reference date stays visible."""
        assert to_time_interval(Timestamp(978_307_200, 1), REFERENCE) == 1e-9

    def test_non_normalized_input(self) -> None:
        """Non-canonical nanos still give the right interval."""
        assert to_time_interval(Timestamp(10, -500_000_000), UNIX) == 9.5


class TestIntervalRoundTrip:
    """from_time_interval and to_time_interval invert each other."""

    @pytest.mark.parametrize(
        "interval",
        [0.0, 1.5, -1.25, 1e-9, -1e-9, 123_456.789, -98_765.4321, 3_600.000001],
    )
    @pytest.mark.parametrize("offset", [UNIX, REFERENCE])
    def test_within_one_nano(self, interval: float, offset: int) -> None:
        """Round trip error is under one nanosecond."""
        restored = to_time_interval(from_time_interval(interval, offset), offset)
        assert restored == pytest.approx(interval, abs=1e-9)

    @pytest.mark.parametrize("interval", [1_700_000_000.5, -1_700_000_000.25, 253_402_300_799.0])
    def test_large_exact(self, interval: float) -> None:
        """Large intervals with exact binary fractions come back exactly."""
        assert to_time_interval(from_time_interval(interval, UNIX), UNIX) == interval


class TestDatetime:
    """Tests for datetime.datetime conversion."""

    def test_epoch_aware(self) -> None:
        """UTC epoch is zero."""
        assert from_datetime(datetime.datetime(1970, 1, 1, tzinfo=UTC)) == Timestamp(0)

    def test_naive_is_utc(self) -> None:
        """Naive datetimes are read as UTC."""
        assert from_datetime(datetime.datetime(2000, 2, 29)) == Timestamp(951_782_400)

    def test_offset_converted(self) -> None:
        """Aware datetimes in other zones are converted to UTC."""
        plus_one = datetime.timezone(datetime.timedelta(hours=1))
        assert from_datetime(datetime.datetime(1970, 1, 1, 1, tzinfo=plus_one)) == Timestamp(0)

    def test_microseconds(self) -> None:
        """Microseconds become nanos."""
        ts = from_datetime(datetime.datetime(1969, 12, 31, 23, 59, 59, 250_000))
        assert (ts.seconds, ts.nanos) == (-1, 250_000_000)

    def test_datetime_limits(self, min_seconds: int, max_seconds: int) -> None:
        """datetime.min and datetime.max map to the range limits."""
        assert from_datetime(datetime.datetime.min) == Timestamp(min_seconds)
        assert from_datetime(datetime.datetime.max) == Timestamp(max_seconds, 999_999_000)

    def test_to_datetime(self) -> None:
        """Result is aware UTC, nanos truncated to micros."""
        dt = to_datetime(Timestamp(0, 1_999))
        assert dt == datetime.datetime(1970, 1, 1, 0, 0, 0, 1, tzinfo=UTC)
        assert dt.tzinfo is UTC

    def test_to_datetime_pre_epoch(self) -> None:
        """Negative seconds land on the previous day."""
        assert to_datetime(Timestamp(-1)) == datetime.datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC)

    def test_to_datetime_normalizes(self) -> None:
        """Non-canonical nanos are normalized first."""
        assert to_datetime(Timestamp(10, -500_000_000)) == datetime.datetime(
            1970, 1, 1, 0, 0, 9, 500_000, tzinfo=UTC
        )

    def test_to_datetime_out_of_range(self, max_seconds: int, min_seconds: int) -> None:
        """Instants outside years 1-9999 raise OverflowError."""
        with pytest.raises(OverflowError):
            to_datetime(Timestamp(max_seconds + 1))
        with pytest.raises(OverflowError):
            to_datetime(Timestamp(min_seconds, -1))

    def test_round_trip(self) -> None:
        """datetime survives a round trip."""
        dt = datetime.datetime(2024, 5, 6, 7, 8, 9, 123_456, tzinfo=UTC)
        assert to_datetime(from_datetime(dt)) == dt


class TestUnixIntegers:
    """Tests for integer Unix nanos and millis."""

    def test_from_unix_nanos(self) -> None:
        """Nanos split with floored division."""
        assert from_unix_nanos(1_500_000_000) == Timestamp(1, 500_000_000)
        ts = from_unix_nanos(-1)
        assert (ts.seconds, ts.nanos) == (-1, 999_999_999)

    def test_to_unix_nanos(self) -> None:
        """Seconds and nanos combine exactly."""
        assert to_unix_nanos(Timestamp(1, 5)) == 1_000_000_005
        assert to_unix_nanos(Timestamp(1, -1)) == 999_999_999
        assert to_unix_nanos(Timestamp(-1, 999_999_999)) == -1

    def test_from_unix_millis(self) -> None:
        """Millis scale to nanos."""
        assert from_unix_millis(1_500) == Timestamp(1, 500_000_000)
        assert from_unix_millis(-1) == Timestamp(-1, 999_000_000)

    def test_to_unix_millis_floors(self) -> None:
        """Sub-millisecond remainders floor toward negative infinity."""
        assert to_unix_millis(Timestamp(1, 999_999)) == 1_000
        assert to_unix_millis(Timestamp(-1, 999_999_999)) == -1

    def test_from_unix_nanos_overflow(self) -> None:
        """Seconds beyond 64 bits raise OverflowError."""
        with pytest.raises(OverflowError):
            from_unix_nanos(2**63 * 1_000_000_000)
