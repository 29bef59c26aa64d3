"""The Duration value type."""

from __future__ import annotations

from datetime import timedelta
from functools import total_ordering
from typing import TYPE_CHECKING, Any, NamedTuple

from human_duration._constants import (
    MAX_SECONDS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from human_duration._errors import (
    ERR_MSG_DURATION_TOO_LARGE,
    ERR_MSG_NEGATIVE_DURATION,
    DurationOverflowError,
    InvalidDurationError,
)

if TYPE_CHECKING:
    from human_duration.interop import ExternalKind


class Components(NamedTuple):
    """Normalized breakdown of a duration."""

    days: int
    hours: int
    minutes: int
    seconds: int


def _check_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a meaningful count of seconds.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidDurationError(
            ERR_MSG_NEGATIVE_DURATION,
            f"{name} is negative: {value}",
        )
    return value


def _check_range(total: int) -> int:
    if total > MAX_SECONDS:
        raise DurationOverflowError(
            ERR_MSG_DURATION_TOO_LARGE,
            f"{total} seconds exceeds limit {MAX_SECONDS}",
        )
    return total


@total_ordering
class Duration:
    """An immutable, non-negative span of elapsed time in whole seconds.

    Equality, ordering and hashing depend only on :meth:`total_seconds`.
    A duration of ``90 minutes`` and one of ``1 hour 30 minutes`` are the
    same value.

    Raises:
        TypeError: If ``seconds`` is not an int.
        InvalidDurationError: If ``seconds`` is negative.
        DurationOverflowError: If ``seconds`` exceeds ``MAX_SECONDS``.
    """

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int = 0) -> None:
        self._seconds = _check_range(_check_int(seconds, "seconds"))

    # --- Construction ---

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds)

    @classmethod
    def from_components(
        cls,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
    ) -> Duration:
        """Build a duration by adding up unit components.

        Components are not bounded: ``hours=30`` is one day and six hours.
        """
        total = (
            _check_int(days, "days") * SECONDS_PER_DAY
            + _check_int(hours, "hours") * SECONDS_PER_HOUR
            + _check_int(minutes, "minutes") * SECONDS_PER_MINUTE
            + _check_int(seconds, "seconds")
        )
        return cls(total)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse human-readable text. See :func:`human_duration.parse_duration`."""
        from human_duration._parser import parse_duration

        return parse_duration(text)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        """Convert a :class:`datetime.timedelta`, dropping sub-second parts."""
        from human_duration.interop.stdlib import from_timedelta

        return from_timedelta(value)

    @classmethod
    def from_external_duration(cls, value: Any) -> Duration:
        """Convert a ``timedelta`` or dateutil ``relativedelta``."""
        from human_duration.interop import from_external

        return from_external(value)

    # --- Accessors ---

    def total_seconds(self) -> int:
        return self._seconds

    def total_minutes(self) -> int:
        """Whole minutes contained in the duration."""
        return self._seconds // SECONDS_PER_MINUTE

    def total_hours(self) -> int:
        """Whole hours contained in the duration."""
        return self._seconds // SECONDS_PER_HOUR

    def total_days(self) -> int:
        """Whole days contained in the duration."""
        return self._seconds // SECONDS_PER_DAY

    def days(self) -> int:
        return self._seconds // SECONDS_PER_DAY

    def hours(self) -> int:
        return self._seconds % SECONDS_PER_DAY // SECONDS_PER_HOUR

    def minutes(self) -> int:
        return self._seconds % SECONDS_PER_HOUR // SECONDS_PER_MINUTE

    def seconds(self) -> int:
        return self._seconds % SECONDS_PER_MINUTE

    def components(self) -> Components:
        return Components(self.days(), self.hours(), self.minutes(), self.seconds())

    # --- Conversion ---

    def to_timedelta(self) -> timedelta:
        from human_duration.interop.stdlib import to_timedelta

        return to_timedelta(self)

    def to_external_duration(self, kind: ExternalKind = "timedelta") -> Any:
        """Convert to an external duration type.

        Args:
            kind: ``"timedelta"`` or ``"relativedelta"``. The latter needs
                the ``dateutil`` extra.
        """
        from human_duration.interop import to_external

        return to_external(self, kind)

    # --- Protocols ---

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._seconds + other._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds < other._seconds

    def __hash__(self) -> int:
        return hash((Duration, self._seconds))

    def __bool__(self) -> bool:
        return self._seconds != 0

    def __int__(self) -> int:
        return self._seconds

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_seconds"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds})"

    def __str__(self) -> str:
        from human_duration._formatter import format_duration

        return format_duration(self)
