"""The Duration value type."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from datetime import timedelta

from pyduration._constants import (
    INT64_MAX,
    INT64_MIN,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_NANOSECOND,
    NANOS_PER_SECOND,
)
from pyduration._formatter import format_nanoseconds
from pyduration._parser import parse_nanoseconds
from pyduration._utils import c_div, c_rem, less_than_half, wrap_int64

_SECONDS_PER_DAY = 86_400


def _nanos_of(m: Duration | int) -> int:
    if isinstance(m, Duration):
        return m.ns
    if isinstance(m, int) and not isinstance(m, bool):
        return m
    raise TypeError(f"expected Duration or int, not {type(m).__name__}")


@dataclass(frozen=True, order=True)
class Duration:
    """Elapsed time between two instants as an int64 nanosecond count.

    The representation limits the largest duration to about 290 years.
    Addition, subtraction and integer multiplication wrap around like
    64-bit two's-complement integers; negation and ``abs`` saturate, and
    :meth:`round` clamps to the representable range.

    Examples:
        >>> Duration.parse("1h30m").ns
        5400000000000
        >>> str(Duration(1100))
        '1.1µs'
    """

    ns: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.ns, bool) or not isinstance(self.ns, int):
            raise TypeError(
                f"Duration requires an int nanosecond count, not {type(self.ns).__name__}"
            )
        if not INT64_MIN <= self.ns <= INT64_MAX:
            raise OverflowError(f"duration {self.ns}ns out of int64 range")

    # --- Construction ---

    @classmethod
    def parse(cls, text: str, *, max_length: int | None = None) -> Duration:
        """Parse a duration string such as ``"300ms"`` or ``"-1.5h"``."""
        return cls(parse_nanoseconds(text, max_length=max_length))

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        """Convert a :class:`datetime.timedelta` exactly.

        Raises:
            OverflowError: If ``td`` does not fit in int64 nanoseconds.
        """
        seconds = td.days * _SECONDS_PER_DAY + td.seconds
        return cls(seconds * NANOS_PER_SECOND + td.microseconds * NANOS_PER_MICROSECOND)

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating toward zero to microseconds."""
        return timedelta(microseconds=self.microseconds())

    # --- Accessors ---

    def nanoseconds(self) -> int:
        return self.ns

    def microseconds(self) -> int:
        return c_div(self.ns, NANOS_PER_MICROSECOND)

    def milliseconds(self) -> int:
        return c_div(self.ns, NANOS_PER_MILLISECOND)

    def seconds(self) -> float:
        """Return the duration as a floating point number of seconds."""
        s = c_div(self.ns, NANOS_PER_SECOND)
        nsec = c_rem(self.ns, NANOS_PER_SECOND)
        return float(s) + float(nsec) / 1e9

    def minutes(self) -> float:
        """Return the duration as a floating point number of minutes."""
        m = c_div(self.ns, NANOS_PER_MINUTE)
        nsec = c_rem(self.ns, NANOS_PER_MINUTE)
        return float(m) + float(nsec) / (60.0 * 1e9)

    def hours(self) -> float:
        """Return the duration as a floating point number of hours."""
        h = c_div(self.ns, NANOS_PER_HOUR)
        nsec = c_rem(self.ns, NANOS_PER_HOUR)
        return float(h) + float(nsec) / (60.0 * 60.0 * 1e9)

    # --- Rounding ---

    def truncate(self, m: Duration | int) -> Duration:
        """Round toward zero to a multiple of ``m``.

        If ``m <= 0`` the duration is returned unchanged.
        """
        step = _nanos_of(m)
        if step <= 0:
            return self
        return Duration(self.ns - c_rem(self.ns, step))

    def round(self, m: Duration | int) -> Duration:
        """Round to the nearest multiple of ``m``.

        Halfway values round away from zero. A result beyond the int64
        range saturates to the maximum (or minimum) duration. If ``m <= 0``
        the duration is returned unchanged.
        """
        d = self.ns
        step = _nanos_of(m)
        if step <= 0:
            return self

        r = c_rem(d, step)
        if d < 0:
            r = -r
            if less_than_half(r, step):
                return Duration(d + r)
            d1 = d + r - step
            if d1 < INT64_MIN:
                return MIN_DURATION
            return Duration(d1)

        if less_than_half(r, step):
            return Duration(d - r)
        d1 = d - r + step
        if d1 > INT64_MAX:
            return MAX_DURATION
        return Duration(d1)

    # --- Arithmetic ---

    def __abs__(self) -> Duration:
        # INT64_MIN has no positive counterpart
        if self.ns == INT64_MIN:
            return MAX_DURATION
        return self if self.ns >= 0 else Duration(-self.ns)

    def __neg__(self) -> Duration:
        if self.ns == INT64_MIN:
            return self
        return Duration(-self.ns)

    def __pos__(self) -> Duration:
        return self

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(wrap_int64(self.ns + other.ns))

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(wrap_int64(self.ns - other.ns))

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(wrap_int64(self.ns * other))

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> int:
        """Ratio of two durations, truncated toward zero."""
        if not isinstance(other, Duration):
            return NotImplemented
        if other.ns == 0:
            raise ZeroDivisionError("duration division by zero")
        return wrap_int64(c_div(self.ns, other.ns))

    def __bool__(self) -> bool:
        return self.ns != 0

    # --- Text ---

    def __str__(self) -> str:
        return format_nanoseconds(self.ns)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def string(self) -> str:
        """Deprecated alias of ``str(d)``."""
        warnings.warn(
            "Duration.string() is deprecated, use str() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return str(self)


NANOSECOND = Duration(NANOS_PER_NANOSECOND)
MICROSECOND = Duration(NANOS_PER_MICROSECOND)
MILLISECOND = Duration(NANOS_PER_MILLISECOND)
SECOND = Duration(NANOS_PER_SECOND)
MINUTE = Duration(NANOS_PER_MINUTE)
HOUR = Duration(NANOS_PER_HOUR)
MAX_DURATION = Duration(INT64_MAX)
MIN_DURATION = Duration(INT64_MIN)
