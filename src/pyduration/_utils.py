"""Fixed-width integer helpers and quoting for error messages."""

from __future__ import annotations

from pyduration._constants import INT64_MIN, UINT64_MASK


def wrap_int64(value: int) -> int:
    """Reduce an arbitrary integer to int64 with two's-complement wraparound."""
    return ((value - INT64_MIN) & UINT64_MASK) + INT64_MIN


def c_rem(x: int, y: int) -> int:
    """Remainder with the sign of the dividend, as in C and Go."""
    r = abs(x) % abs(y)
    return -r if x < 0 else r


def c_div(x: int, y: int) -> int:
    """Integer quotient truncated toward zero."""
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q


def less_than_half(x: int, y: int) -> bool:
    """Report whether ``x`` is less than half of ``y``.

    Both operands are reinterpreted as uint64 and the doubling wraps, so
    values near MAX/2 are compared without a sign flip.
    """
    return ((x & UINT64_MASK) << 1) & UINT64_MASK < (y & UINT64_MASK)


def quote(s: str) -> str:
    """Quote ``s`` for an error message.

    Printable ASCII (space through ``~``) passes through with ``"`` and
    ``\\`` backslash-escaped; every other character, DEL included, is
    written as ``\\u{hex}``.
    """
    parts = ['"']
    for ch in s:
        code = ord(ch)
        if " " <= ch < "\x7f":
            if ch in ('"', "\\"):
                parts.append("\\")
            parts.append(ch)
            continue
        parts.append(f"\\u{{{code:x}}}")
    parts.append('"')
    return "".join(parts)
