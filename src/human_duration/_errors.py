"""Exception hierarchy for duration construction and parsing."""

from __future__ import annotations

import enum


class DurationError(Exception):
    """Base exception for duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidDurationError(DurationError, ValueError):
    """Raised when a duration is built from a negative or non-integer value."""


class DurationOverflowError(DurationError, OverflowError):
    """Raised when a duration exceeds the representable range."""


class ParseErrorKind(enum.StrEnum):
    INVALID_FORMAT = "invalid_format"
    OVERFLOW = "overflow"
    INPUT_TOO_LONG = "input_too_long"


class ParseError(DurationError, ValueError):
    """Base exception for text that cannot be parsed into a duration.

    ``token`` and ``position`` point at the offending part of the input
    when one can be identified. ``position`` is a zero-based character
    offset into the original text.

    Only subclasses are raised. ``kind`` on the base class defaults to
    ``INVALID_FORMAT``.
    """

    kind: ParseErrorKind = ParseErrorKind.INVALID_FORMAT

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        token: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.token = token
        self.position = position


class InvalidFormatError(ParseError):
    """Raised when text does not follow the duration grammar."""

    kind = ParseErrorKind.INVALID_FORMAT


class ParseOverflowError(ParseError, OverflowError):
    """Raised when a parsed number or total exceeds the representable range."""

    kind = ParseErrorKind.OVERFLOW


class InputTooLongError(ParseError):
    """Raised when text exceeds the configured length limit.

    The text may be grammatically valid; it is rejected unread.
    """

    kind = ParseErrorKind.INPUT_TOO_LONG


# Sanitized user-facing error message constants
ERR_MSG_EMPTY_INPUT = "no duration found in text"
ERR_MSG_INPUT_TOO_LONG = "duration text too long"
ERR_MSG_UNEXPECTED_CHARACTER = "unexpected character in duration text"
ERR_MSG_UNKNOWN_TOKEN = "unknown token in duration text"
ERR_MSG_MISSING_NUMBER = "unit is missing a number"
ERR_MSG_MISSING_UNIT = "number is missing a unit"
ERR_MSG_NUMBER_TOO_LARGE = "number too large for a duration"
ERR_MSG_DURATION_TOO_LARGE = "duration too large"
ERR_MSG_NEGATIVE_DURATION = "duration cannot be negative"
ERR_MSG_CALENDAR_UNITS = "calendar-relative units cannot be converted"
