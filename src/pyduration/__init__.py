"""pyduration - int64 nanosecond durations with Go-style text form."""

from __future__ import annotations

__version__ = "0.1.0"

from pyduration._duration import (
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
from pyduration._errors import (
    DurationParseError,
    InvalidDurationError,
    MissingUnitError,
    UnknownUnitError,
)
from pyduration._formatter import format_nanoseconds
from pyduration._utils import quote

__all__ = [
    "parse_duration",
    "format_duration",
    "quote",
    "Duration",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "MAX_DURATION",
    "MIN_DURATION",
    "DurationParseError",
    "InvalidDurationError",
    "MissingUnitError",
    "UnknownUnitError",
]


def parse_duration(
    text: str,
    *,
    max_length: int | None = None,
) -> Duration:
    """Parse a duration string.

    A duration string is a possibly signed sequence of decimal numbers,
    each with optional fraction and a unit suffix, such as ``"300ms"``,
    ``"-1.5h"`` or ``"2h45m"``. Valid time units are ``"ns"``, ``"us"``
    (or ``"µs"``/``"μs"``), ``"ms"``, ``"s"``, ``"m"``, ``"h"``.

    Args:
        text: The duration string.
        max_length: Longest accepted input. Defaults to 1024.

    Returns:
        The parsed Duration.

    Raises:
        InvalidDurationError: Malformed syntax or int64 overflow.
        MissingUnitError: A term has digits but no unit.
        UnknownUnitError: A term has an unrecognized unit.
    """
    return Duration.parse(text, max_length=max_length)


def format_duration(d: Duration | int) -> str:
    """Return the canonical string form of a Duration or nanosecond count.

    Raises:
        OverflowError: If an int argument is outside the int64 range.
    """
    if not isinstance(d, Duration):
        d = Duration(d)
    return format_nanoseconds(d.ns)
