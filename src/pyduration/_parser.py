"""Duration string parser.

A duration string is a possibly signed sequence of decimal numbers, each
with an optional fraction and a unit suffix, such as ``"300ms"``,
``"-1.5h"`` or ``"2h45m"``. The text after the sign is split by a Lark
lexer into digit runs, dots and unit runs; the term accumulator below
enforces the grammar and the int64 overflow rules.
"""

from __future__ import annotations

import logging

from lark import Lark, Token

from pyduration._constants import (
    DEFAULT_MAX_DURATION_LENGTH,
    INT64_MAX,
    MAGNITUDE_LIMIT,
    UNITS,
)
from pyduration._errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_LEADING_INT,
    ERR_MSG_MISSING_UNIT,
    ERR_MSG_UNKNOWN_UNIT,
    DurationParseError,
    InvalidDurationError,
    MissingUnitError,
    UnknownUnitError,
)
from pyduration._utils import quote

logger = logging.getLogger(__name__)

# The three token classes partition every string, so lexing never fails.
_GRAMMAR = r"""
start: _item*
_item: DIGITS | DOT | UNIT

DIGITS: /[0-9]+/
DOT: "."
UNIT: /[^0-9.]+/
"""

_lexer = Lark(_GRAMMAR, parser="lalr", lexer="basic")


class _LeadingIntError(Exception):
    """Integer part of a term exceeds the 2**63 magnitude limit."""


def _reject(
    cls: type[DurationParseError],
    text: str,
    user_message: str,
    detail: str,
    wrapped: Exception | None = None,
) -> DurationParseError:
    internal = f"time: {detail}"
    logger.debug("rejected duration: %s", internal)
    return cls(user_message, internal, wrapped=wrapped, text=text)


def _invalid(
    text: str, detail: str | None = None, wrapped: Exception | None = None
) -> DurationParseError:
    if detail is None:
        detail = f"{ERR_MSG_INVALID_DURATION} {quote(text)}"
    return _reject(
        InvalidDurationError, text, ERR_MSG_INVALID_DURATION, detail, wrapped=wrapped
    )


def _unknown_unit(text: str, unit: str) -> UnknownUnitError:
    internal = f"time: {ERR_MSG_UNKNOWN_UNIT} {quote(unit)} in duration {quote(text)}"
    logger.debug("rejected duration: %s", internal)
    return UnknownUnitError(
        f"{ERR_MSG_UNKNOWN_UNIT} {quote(unit)}", internal, text=text, unit=unit
    )


def _leading_int(digits: str) -> int:
    """Accumulate a digit run, failing once the value passes 2**63."""
    x = 0
    for ch in digits:
        if x > MAGNITUDE_LIMIT // 10:
            raise _LeadingIntError(ERR_MSG_LEADING_INT)
        x = x * 10 + (ord(ch) - 48)
        if x > MAGNITUDE_LIMIT:
            raise _LeadingIntError(ERR_MSG_LEADING_INT)
    return x


def _leading_fraction(digits: str) -> tuple[int, float]:
    """Accumulate fractional digits into ``(value, scale)``.

    Digits that would overflow the int64 accumulator are dropped and the
    scale stops growing with them.
    """
    x = 0
    scale = 1.0
    for ch in digits:
        if x > INT64_MAX // 10:
            break
        y = x * 10 + (ord(ch) - 48)
        if y > INT64_MAX:
            break
        x = y
        scale *= 10.0
    return x, scale


def _peek(tokens: list[Token], i: int, kind: str) -> bool:
    return i < len(tokens) and tokens[i].type == kind


def parse_nanoseconds(
    text: str,
    *,
    max_length: int | None = None,
) -> int:
    """Parse a duration string into a signed int64 nanosecond count.

    Args:
        text: The duration string, e.g. ``"1h30m"``.
        max_length: Longest accepted input. Defaults to 1024.

    Returns:
        The nanosecond count, in ``[-2**63, 2**63 - 1]``.

    Raises:
        InvalidDurationError: Malformed syntax or overflow.
        MissingUnitError: A term has no unit suffix.
        UnknownUnitError: A term has an unrecognized unit suffix.
    """
    if not isinstance(text, str):
        raise TypeError(f"duration must be a str, not {type(text).__name__}")
    if max_length is None:
        max_length = DEFAULT_MAX_DURATION_LENGTH
    if len(text) > max_length:
        raise _invalid(
            text,
            f"duration length {len(text)} exceeds limit {max_length}",
        )

    s = text
    neg = False
    if s and s[0] in "+-":
        neg = s[0] == "-"
        s = s[1:]

    # Special case: a bare zero needs no unit.
    if s == "0":
        return 0
    if not s:
        raise _invalid(text)

    tokens = list(_lexer.lex(s))
    n = len(tokens)
    d = 0
    i = 0
    while i < n:
        if tokens[i].type == "UNIT":
            raise _invalid(text)

        # Integer part [0-9]*
        v = 0
        pre = False
        if _peek(tokens, i, "DIGITS"):
            try:
                v = _leading_int(tokens[i])
            except _LeadingIntError as e:
                raise _invalid(text, wrapped=e) from e
            pre = True
            i += 1

        # Fractional part (\.[0-9]*)?
        f = 0
        scale = 1.0
        post = False
        if _peek(tokens, i, "DOT"):
            i += 1
            if _peek(tokens, i, "DIGITS"):
                f, scale = _leading_fraction(tokens[i])
                post = True
                i += 1

        if not pre and not post:
            # no digits (e.g. ".s" or "-.s")
            raise _invalid(text)

        if not _peek(tokens, i, "UNIT"):
            raise _reject(
                MissingUnitError,
                text,
                ERR_MSG_MISSING_UNIT,
                f"{ERR_MSG_MISSING_UNIT} {quote(text)}",
            )
        u = str(tokens[i])
        i += 1
        unit = UNITS.get(u)
        if unit is None:
            raise _unknown_unit(text, u)

        if v > MAGNITUDE_LIMIT // unit:
            raise _invalid(text)
        v *= unit
        if f > 0:
            # float64 is needed to be nanosecond accurate for fractions of hours.
            # v >= 0 && (f*unit/scale) <= 3.6e+12 (ns/h, h is the largest unit)
            v += int(float(f) * (float(unit) / scale))
            if v > MAGNITUDE_LIMIT:
                raise _invalid(text)
        d += v
        if d > MAGNITUDE_LIMIT:
            raise _invalid(text)

    if neg:
        return -d
    if d > INT64_MAX:
        raise _invalid(text)
    return d
