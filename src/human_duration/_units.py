"""Fixed vocabulary of unit spellings and separator words."""

from __future__ import annotations

import enum
from types import MappingProxyType

from human_duration._constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class TimeUnit(enum.StrEnum):
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def seconds(self) -> int:
        return UNIT_SECONDS[self]

    @property
    def plural(self) -> str:
        return f"{self.value}s"

    @property
    def abbreviation(self) -> str:
        return self.value[0]


UNIT_SECONDS: MappingProxyType[TimeUnit, int] = MappingProxyType({
    TimeUnit.DAY: SECONDS_PER_DAY,
    TimeUnit.HOUR: SECONDS_PER_HOUR,
    TimeUnit.MINUTE: SECONDS_PER_MINUTE,
    TimeUnit.SECOND: 1,
})

UNITS_DESCENDING: tuple[TimeUnit, ...] = (
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
)

# Lowercase spelling -> unit. Lookups are exact; no prefix matching.
UNIT_SPELLINGS: MappingProxyType[str, TimeUnit] = MappingProxyType({
    "d": TimeUnit.DAY,
    "day": TimeUnit.DAY,
    "days": TimeUnit.DAY,
    "h": TimeUnit.HOUR,
    "hr": TimeUnit.HOUR,
    "hrs": TimeUnit.HOUR,
    "hour": TimeUnit.HOUR,
    "hours": TimeUnit.HOUR,
    "m": TimeUnit.MINUTE,
    "min": TimeUnit.MINUTE,
    "mins": TimeUnit.MINUTE,
    "minute": TimeUnit.MINUTE,
    "minutes": TimeUnit.MINUTE,
    "s": TimeUnit.SECOND,
    "sec": TimeUnit.SECOND,
    "secs": TimeUnit.SECOND,
    "second": TimeUnit.SECOND,
    "seconds": TimeUnit.SECOND,
})

SEPARATOR_WORDS: frozenset[str] = frozenset({"and"})


def lookup_unit(word: str) -> TimeUnit | None:
    """Return the unit a spelling names, ignoring case."""
    return UNIT_SPELLINGS.get(word.lower())


def is_separator_word(word: str) -> bool:
    return word.lower() in SEPARATOR_WORDS
