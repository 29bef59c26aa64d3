"""dateutil relativedelta conversion.

Requires python-dateutil (``pip install human-duration[dateutil]``).
"""

from __future__ import annotations

import logging

from human_duration._constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from human_duration._duration import Duration
from human_duration._errors import (
    ERR_MSG_CALENDAR_UNITS,
    ERR_MSG_NEGATIVE_DURATION,
    InvalidDurationError,
)

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:  # pragma: no cover - exercised only without the extra
    raise ImportError(
        "relativedelta support requires python-dateutil: "
        "pip install human-duration[dateutil]"
    ) from e

logger = logging.getLogger(__name__)

# Relative fields whose length in seconds depends on the calendar.
_CALENDAR_RELATIVE_FIELDS = ("years", "months", "leapdays")

# Absolute fields replace a date component instead of adding to it. They
# are None when unset; 0 is a meaningful value.
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


def to_relativedelta(duration: Duration) -> relativedelta:
    """Convert a duration to a normalized ``relativedelta``."""
    days, hours, minutes, seconds = duration.components()
    return relativedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)


def from_relativedelta(value: relativedelta) -> Duration:
    """Convert a ``relativedelta`` holding only fixed-length units.

    Sub-second parts are truncated.

    Raises:
        InvalidDurationError: If ``value`` uses calendar-relative fields
            (years, months, absolute dates) or is negative.
        DurationOverflowError: If the total is too large.
    """
    used = [name for name in _CALENDAR_RELATIVE_FIELDS if getattr(value, name)]
    used += [name for name in _ABSOLUTE_FIELDS if getattr(value, name) is not None]
    if used:
        raise InvalidDurationError(
            ERR_MSG_CALENDAR_UNITS,
            f"relativedelta uses calendar fields {', '.join(used)}: {value!r}",
        )

    whole = (
        value.days * SECONDS_PER_DAY
        + value.hours * SECONDS_PER_HOUR
        + value.minutes * SECONDS_PER_MINUTE
        + value.seconds
    )
    total_us = int(whole * 1_000_000 + value.microseconds)
    if total_us < 0:
        raise InvalidDurationError(
            ERR_MSG_NEGATIVE_DURATION,
            f"relativedelta is negative: {value!r}",
        )
    if value.microseconds:
        logger.debug("truncating %d microseconds from %r", value.microseconds, value)
    return Duration(total_us // 1_000_000)
