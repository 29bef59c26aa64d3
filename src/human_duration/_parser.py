"""Parse human-readable text into a Duration."""

from __future__ import annotations

import enum
import logging

from human_duration._constants import (
    DEFAULT_MAX_INPUT_LENGTH,
    MAX_NUMBER_DIGITS,
    MAX_SECONDS,
)
from human_duration._duration import Duration
from human_duration._errors import (
    ERR_MSG_DURATION_TOO_LARGE,
    ERR_MSG_EMPTY_INPUT,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_MISSING_NUMBER,
    ERR_MSG_MISSING_UNIT,
    ERR_MSG_NUMBER_TOO_LARGE,
    ERR_MSG_UNKNOWN_TOKEN,
    InputTooLongError,
    InvalidFormatError,
    ParseError,
    ParseOverflowError,
)
from human_duration._lexer import Token, TokenKind, tokenize
from human_duration._units import UNITS_DESCENDING, TimeUnit

logger = logging.getLogger(__name__)


class _State(enum.Enum):
    AWAITING_NUMBER = enum.auto()
    AWAITING_UNIT = enum.auto()


class _Accumulator:
    """Running per-unit totals. Repeated units add up."""

    def __init__(self) -> None:
        self.counts: dict[TimeUnit, int] = dict.fromkeys(UNITS_DESCENDING, 0)
        self.total = 0
        self.pairs = 0

    def add(self, value: int, unit: TimeUnit, token: Token) -> None:
        total = self.total + value * unit.seconds
        if total > MAX_SECONDS:
            raise ParseOverflowError(
                ERR_MSG_DURATION_TOO_LARGE,
                f"total reaches {total} seconds at {token.text!r} "
                f"(position {token.position}), limit {MAX_SECONDS}",
                token=token.text,
                position=token.position,
            )
        self.counts[unit] += value
        self.total = total
        self.pairs += 1


def _parse_number(token: Token) -> int:
    # Checked before int() so absurdly long literals are never converted.
    digits = token.text.lstrip("0") or "0"
    if len(digits) > MAX_NUMBER_DIGITS:
        raise ParseOverflowError(
            ERR_MSG_NUMBER_TOO_LARGE,
            f"number with {len(token.text)} digits at position {token.position}",
            token=token.text,
            position=token.position,
        )
    value = int(digits)
    if value > MAX_SECONDS:
        raise ParseOverflowError(
            ERR_MSG_NUMBER_TOO_LARGE,
            f"number {value} at position {token.position} exceeds {MAX_SECONDS}",
            token=token.text,
            position=token.position,
        )
    return value


def _reject(user_message: str, token: Token, text: str) -> InvalidFormatError:
    return InvalidFormatError(
        user_message,
        f"{token.kind} token {token.text!r} at position {token.position} in {text!r}",
        token=token.text,
        position=token.position,
    )


def _fold(text: str) -> Duration:
    state = _State.AWAITING_NUMBER
    acc = _Accumulator()
    pending: tuple[int, Token] | None = None

    for token in tokenize(text):
        if token.kind is TokenKind.UNKNOWN:
            raise _reject(ERR_MSG_UNKNOWN_TOKEN, token, text)

        if state is _State.AWAITING_NUMBER:
            if token.kind is TokenKind.SEPARATOR:
                continue
            if token.kind is TokenKind.UNIT:
                raise _reject(ERR_MSG_MISSING_NUMBER, token, text)
            pending = (_parse_number(token), token)
            state = _State.AWAITING_UNIT
        else:
            if token.kind is not TokenKind.UNIT:
                raise _reject(ERR_MSG_MISSING_UNIT, token, text)
            acc.add(pending[0], token.unit, pending[1])
            pending = None
            state = _State.AWAITING_NUMBER

    if pending is not None:
        raise _reject(ERR_MSG_MISSING_UNIT, pending[1], text)
    if acc.pairs == 0:
        raise InvalidFormatError(
            ERR_MSG_EMPTY_INPUT,
            f"no duration found in {text!r}",
            token=text,
            position=0,
        )

    counts = acc.counts
    return Duration.from_components(
        days=counts[TimeUnit.DAY],
        hours=counts[TimeUnit.HOUR],
        minutes=counts[TimeUnit.MINUTE],
        seconds=counts[TimeUnit.SECOND],
    )


def parse_duration(
    text: str,
    *,
    max_input_length: int | None = DEFAULT_MAX_INPUT_LENGTH,
) -> Duration:
    """Parse human-readable text into a Duration.

    The text is a sequence of ``<number> <unit>`` pairs such as
    ``"2 days, 3 hours and 15 minutes"`` or ``"4m10s"``. Matching is
    case-insensitive and whitespace between or inside pairs is optional.
    Commas and the word ``and`` may separate pairs. Units may come in any
    order; a unit given twice is added up, so ``"1h 2h"`` is three hours.

    Args:
        text: The text to parse.
        max_input_length: Longest accepted text. Longer text is rejected
            without being read, even when it follows the grammar. ``None``
            disables the check. Defaults to 1024.

    Returns:
        The parsed Duration.

    Raises:
        InvalidFormatError: If the text does not follow the grammar.
        ParseOverflowError: If a number or the total exceeds ``MAX_SECONDS``.
        InputTooLongError: If ``text`` is longer than ``max_input_length``.
        TypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    if max_input_length is not None and len(text) > max_input_length:
        raise InputTooLongError(
            ERR_MSG_INPUT_TOO_LONG,
            f"text length {len(text)} exceeds limit {max_input_length}",
        )

    try:
        return _fold(text)
    except ParseError as e:
        logger.debug("rejected duration text: %s", e.internal())
        raise
