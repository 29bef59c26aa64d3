"""datetime.timedelta conversion (standard library, always available)."""

from __future__ import annotations

import logging
from datetime import timedelta

from human_duration._constants import SECONDS_PER_DAY
from human_duration._duration import Duration
from human_duration._errors import ERR_MSG_NEGATIVE_DURATION, InvalidDurationError

logger = logging.getLogger(__name__)


def to_timedelta(duration: Duration) -> timedelta:
    """Convert a duration to a ``timedelta``.

    Raises:
        OverflowError: If the duration is longer than ``timedelta.max``.
    """
    return timedelta(seconds=duration.total_seconds())


def from_timedelta(value: timedelta) -> Duration:
    """Convert a ``timedelta`` to a duration.

    Sub-second parts are truncated.

    Raises:
        InvalidDurationError: If the timedelta is negative.
    """
    if value < timedelta(0):
        raise InvalidDurationError(
            ERR_MSG_NEGATIVE_DURATION,
            f"timedelta is negative: {value!r}",
        )
    if value.microseconds:
        logger.debug("truncating %d microseconds from %r", value.microseconds, value)
    return Duration(value.days * SECONDS_PER_DAY + value.seconds)
