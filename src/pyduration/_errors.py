"""Exception hierarchy for duration parsing."""

from __future__ import annotations


class DurationParseError(ValueError):
    """Base exception for duration parsing errors.

    Provides dual messaging: a short user-facing message and internal
    details (which quote the offending input) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        text: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped
        self.text = text

    def internal(self) -> str:
        return self.internal_details


class InvalidDurationError(DurationParseError):
    """Raised for malformed syntax or a value outside the int64 range."""


class MissingUnitError(DurationParseError):
    """Raised when a term has digits but no unit suffix."""


class UnknownUnitError(DurationParseError):
    """Raised when a term carries a unit suffix that is not recognized."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        text: str | None = None,
        unit: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped, text)
        self.unit = unit


# User-facing error message constants
ERR_MSG_INVALID_DURATION = "invalid duration"
ERR_MSG_MISSING_UNIT = "missing unit in duration"
ERR_MSG_UNKNOWN_UNIT = "unknown unit"
ERR_MSG_LEADING_INT = "bad [0-9]*"
