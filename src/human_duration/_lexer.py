"""Tokenizer for duration text, built on a lark basic lexer."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from human_duration._errors import ERR_MSG_UNEXPECTED_CHARACTER, InvalidFormatError
from human_duration._units import TimeUnit, is_separator_word, lookup_unit

_GRAMMAR = r"""
start: (NUMBER | WORD | COMMA)*

NUMBER: /[0-9]+/
WORD: /[^\W\d_]+/
COMMA: ","
WS: /\s+/

%ignore WS
"""

_lexer = Lark(_GRAMMAR, parser="lalr", lexer="basic")


class TokenKind(enum.StrEnum):
    NUMBER = "number"
    UNIT = "unit"
    SEPARATOR = "separator"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    """A classified piece of duration text."""

    kind: TokenKind
    text: str
    position: int
    unit: TimeUnit | None = None


def _classify(type_: str, text: str, position: int) -> Token:
    if type_ == "NUMBER":
        return Token(TokenKind.NUMBER, text, position)
    if type_ == "COMMA" or is_separator_word(text):
        return Token(TokenKind.SEPARATOR, text, position)
    unit = lookup_unit(text)
    if unit is not None:
        return Token(TokenKind.UNIT, text, position, unit)
    return Token(TokenKind.UNKNOWN, text, position)


def tokenize(text: str) -> Iterator[Token]:
    """Split duration text into classified tokens.

    Whitespace is dropped. Letters and digits split into separate tokens
    without needing whitespace, so ``"4m10s"`` yields four tokens.

    Raises:
        InvalidFormatError: On a character that can start no token, such
            as a sign, a decimal point or other punctuation.
    """
    try:
        for tok in _lexer.lex(text):
            yield _classify(tok.type, str(tok), tok.start_pos)
    except UnexpectedCharacters as e:
        raise InvalidFormatError(
            ERR_MSG_UNEXPECTED_CHARACTER,
            f"unexpected character {e.char!r} at position {e.pos_in_stream} in {text!r}",
            wrapped=e,
            token=e.char,
            position=e.pos_in_stream,
        ) from e
