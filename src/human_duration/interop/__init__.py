"""Conversions between Duration and external duration types.

``timedelta`` support uses the standard library and is always available.
``relativedelta`` support needs python-dateutil, installed with the
``dateutil`` extra.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from human_duration._duration import Duration

__all__ = [
    "ExternalKind",
    "from_external",
    "from_relativedelta",
    "from_timedelta",
    "to_external",
    "to_relativedelta",
    "to_timedelta",
]

ExternalKind = Literal["timedelta", "relativedelta"]


def to_external(duration: Duration, kind: str) -> Any:
    """Convert a duration to an external representation.

    Args:
        duration: The duration to convert.
        kind: ``"timedelta"`` or ``"relativedelta"``.

    Returns:
        A ``datetime.timedelta`` or ``dateutil.relativedelta.relativedelta``.

    Raises:
        ImportError: If ``kind`` is ``"relativedelta"`` and python-dateutil
            is not installed.
        ValueError: If the kind is unknown.
    """
    if kind == "timedelta":
        from human_duration.interop.stdlib import to_timedelta

        return to_timedelta(duration)
    if kind == "relativedelta":
        from human_duration.interop.relativedelta import to_relativedelta

        return to_relativedelta(duration)

    raise ValueError(
        f"unknown duration kind: {kind!r}. Available: relativedelta, timedelta"
    )


def from_external(value: Any) -> Duration:
    """Convert an external duration to a Duration, dispatching on its type.

    Raises:
        InvalidDurationError: If the value is negative or uses
            calendar-relative units.
        DurationOverflowError: If the value is too large.
        TypeError: If the value's type is not supported.
    """
    if isinstance(value, timedelta):
        from human_duration.interop.stdlib import from_timedelta

        return from_timedelta(value)
    # Checked by module name so the optional dependency is only imported
    # when a relativedelta, or a subclass of one, is actually passed in.
    if any(cls.__module__ == "dateutil.relativedelta" for cls in type(value).__mro__):
        from dateutil.relativedelta import relativedelta

        from human_duration.interop.relativedelta import from_relativedelta

        if isinstance(value, relativedelta):
            return from_relativedelta(value)

    raise TypeError(
        f"cannot convert {type(value).__name__!r} to Duration. "
        f"Supported: datetime.timedelta, dateutil.relativedelta.relativedelta"
    )


def __getattr__(name: str) -> Any:
    """Lazy re-exports of per-type conversion functions."""
    if name == "to_timedelta":
        from human_duration.interop.stdlib import to_timedelta

        return to_timedelta
    if name == "from_timedelta":
        from human_duration.interop.stdlib import from_timedelta

        return from_timedelta
    if name == "to_relativedelta":
        from human_duration.interop.relativedelta import to_relativedelta

        return to_relativedelta
    if name == "from_relativedelta":
        from human_duration.interop.relativedelta import from_relativedelta

        return from_relativedelta
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
