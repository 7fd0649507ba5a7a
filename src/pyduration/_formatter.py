"""Canonical text form of a nanosecond count.

The output is built from the right into a fixed-size byte buffer: the
seconds term first, then minutes, then hours, then the sign.
"""

from __future__ import annotations

from pyduration._constants import (
    FORMAT_BUFFER_SIZE,
    INT64_MIN,
    MIN_DURATION_STRING,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)

_MICRO_SIGN = "µ".encode()  # U+00B5, b"\xc2\xb5"


def fmt_frac(buf: bytearray, w: int, v: int, prec: int) -> tuple[int, int]:
    """Write the fraction of ``v / 10**prec`` (e.g. ``.12345``) ending at ``w``.

    Trailing zeros are omitted, and so is the decimal point when the
    fraction is zero. Returns the index where the written bytes begin and
    ``v // 10**prec``.
    """
    printed = False
    for _ in range(prec):
        digit = v % 10
        printed = printed or digit != 0
        if printed:
            w -= 1
            buf[w] = 0x30 + digit
        v //= 10
    if printed:
        w -= 1
        buf[w] = 0x2E  # "."
    return w, v


def fmt_int(buf: bytearray, w: int, v: int) -> int:
    """Write the decimal form of ``v`` ending at ``w``; return its start."""
    if v == 0:
        w -= 1
        buf[w] = 0x30
        return w
    while v > 0:
        w -= 1
        buf[w] = 0x30 + v % 10
        v //= 10
    return w


def format_nanoseconds(ns: int) -> str:
    """Return the canonical form of ``ns``, such as ``"72h3m0.5s"``.

    Leading zero units are omitted. Values under one second use a smaller
    unit (``ms``, ``µs`` or ``ns``) so the leading digit is non-zero. Zero
    formats as ``"0s"``.
    """
    if ns == INT64_MIN:
        return MIN_DURATION_STRING

    buf = bytearray(FORMAT_BUFFER_SIZE)
    w = len(buf)

    neg = ns < 0
    u = -ns if neg else ns

    if u < NANOS_PER_SECOND:
        # Special case: use smaller units, like 1.2ms
        if u == 0:
            return "0s"
        w -= 1
        buf[w] = 0x73  # "s"
        if u < NANOS_PER_MICROSECOND:
            w -= 1
            buf[w] = 0x6E  # "n"
            prec = 0
        elif u < NANOS_PER_MILLISECOND:
            w -= 2
            buf[w : w + 2] = _MICRO_SIGN
            prec = 3
        else:
            w -= 1
            buf[w] = 0x6D  # "m"
            prec = 6
        w, u = fmt_frac(buf, w, u, prec)
        w = fmt_int(buf, w, u)
    else:
        w -= 1
        buf[w] = 0x73  # "s"
        w, u = fmt_frac(buf, w, u, 9)

        # u is now integer seconds
        w = fmt_int(buf, w, u % 60)
        u //= 60

        # u is now integer minutes
        if u > 0:
            w -= 1
            buf[w] = 0x6D  # "m"
            w = fmt_int(buf, w, u % 60)
            u //= 60

            # u is now integer hours; stop here since days vary in length
            if u > 0:
                w -= 1
                buf[w] = 0x68  # "h"
                w = fmt_int(buf, w, u)

    if neg:
        w -= 1
        buf[w] = 0x2D  # "-"

    return buf[w:].decode()
