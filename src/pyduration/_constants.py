"""Unit sizes, integer bounds and resource limits for duration handling."""

NANOS_PER_NANOSECOND = 1
NANOS_PER_MICROSECOND = 1_000 * NANOS_PER_NANOSECOND
NANOS_PER_MILLISECOND = 1_000 * NANOS_PER_MICROSECOND
NANOS_PER_SECOND = 1_000 * NANOS_PER_MILLISECOND
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
# No day or larger unit: calendar days are not constant-length.

INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)
UINT64_MASK = (1 << 64) - 1

MAGNITUDE_LIMIT = 1 << 63
"""Largest unsigned magnitude the parser accumulates (the magnitude of INT64_MIN)."""

MIN_DURATION_STRING = "-2562047h47m16.854775808s"
"""Canonical form of INT64_MIN, which cannot be negated."""

FORMAT_BUFFER_SIZE = 32
"""Longest canonical form is 25 bytes; the buffer leaves headroom."""

DEFAULT_MAX_DURATION_LENGTH = 1024
"""Maximum accepted length of a duration string (CWE-400 prevention)."""

UNITS: dict[str, int] = {
    "ns": NANOS_PER_NANOSECOND,
    "us": NANOS_PER_MICROSECOND,
    "µs": NANOS_PER_MICROSECOND,  # µ micro sign
    "μs": NANOS_PER_MICROSECOND,  # μ greek small letter mu
    "ms": NANOS_PER_MILLISECOND,
    "s": NANOS_PER_SECOND,
    "m": NANOS_PER_MINUTE,
    "h": NANOS_PER_HOUR,
}
"""Accepted unit suffixes and their size in nanoseconds."""
