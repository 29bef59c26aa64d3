"""Render a Duration as human-readable text."""

from __future__ import annotations

from human_duration._duration import Duration
from human_duration._errors import InvalidFormatError
from human_duration._lexer import TokenKind, tokenize
from human_duration._units import UNITS_DESCENDING, TimeUnit

ZERO_DURATION_TEXT = "0 seconds"
ZERO_DURATION_COMPACT = "0s"


def _check_separator(separator: str) -> None:
    # Anything the parser would not skip between pairs breaks the round trip.
    try:
        ignorable = all(t.kind is TokenKind.SEPARATOR for t in tokenize(separator))
    except InvalidFormatError as e:
        raise ValueError(f"unsupported separator: {separator!r}") from e
    # A leading letter would merge with the preceding unit word.
    if not ignorable or separator[:1].isalpha():
        raise ValueError(f"unsupported separator: {separator!r}")


def _unit_word(value: int, unit: TimeUnit) -> str:
    return unit.value if value == 1 else unit.plural


def format_duration(
    duration: Duration,
    *,
    separator: str = " ",
    compact: bool = False,
) -> str:
    """Render a duration with its non-zero components, largest first.

    ``Duration.from_seconds(5400)`` renders as ``"1 hour 30 minutes"``, or
    ``"1h30m"`` when ``compact`` is set. A zero duration renders as
    ``"0 seconds"`` (``"0s"`` compact). The output parses back to an equal
    Duration: separators are limited to whitespace, commas and ``and``.

    Args:
        duration: The duration to render.
        separator: Placed between components. Ignored when ``compact``.
        compact: Use single-letter units with no spaces.

    Raises:
        ValueError: If ``separator`` contains anything other than
            whitespace, commas and ``and``.
    """
    parts = [
        (value, unit)
        for value, unit in zip(duration.components(), UNITS_DESCENDING)
        if value
    ]
    if compact:
        if not parts:
            return ZERO_DURATION_COMPACT
        return "".join(f"{value}{unit.abbreviation}" for value, unit in parts)
    _check_separator(separator)
    if not parts:
        return ZERO_DURATION_TEXT
    return separator.join(f"{value} {_unit_word(value, unit)}" for value, unit in parts)
