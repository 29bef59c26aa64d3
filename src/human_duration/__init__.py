"""human-duration - Parse and format human-readable time durations."""

from __future__ import annotations

try:
    from human_duration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from human_duration._constants import MAX_SECONDS
from human_duration._duration import Components, Duration
from human_duration._errors import (
    DurationError,
    DurationOverflowError,
    InputTooLongError,
    InvalidDurationError,
    InvalidFormatError,
    ParseError,
    ParseErrorKind,
    ParseOverflowError,
)
from human_duration._formatter import format_duration
from human_duration._parser import parse_duration
from human_duration._units import TimeUnit

__all__ = [
    "parse_duration",
    "format_duration",
    "Duration",
    "Components",
    "TimeUnit",
    "MAX_SECONDS",
    "DurationError",
    "DurationOverflowError",
    "InputTooLongError",
    "InvalidDurationError",
    "InvalidFormatError",
    "ParseError",
    "ParseErrorKind",
    "ParseOverflowError",
]
