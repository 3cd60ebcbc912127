"""Character classes used by the scanner."""

from __future__ import annotations

from enum import Enum, auto
from string import ascii_letters, digits


class CharCode(Enum):
    """Lexical class of a single source character."""

    SPACE = auto()
    LETTER = auto()
    DIGIT = auto()
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EXCLAMATION = auto()
    EQ = auto()
    COMMA = auto()
    PERIOD = auto()
    COLON = auto()
    SEMICOLON = auto()
    SINGLEQUOTE = auto()
    LPAR = auto()
    RPAR = auto()
    UNKNOWN = auto()


_PUNCTUATION = {
    "!": CharCode.EXCLAMATION,
    "'": CharCode.SINGLEQUOTE,
    "(": CharCode.LPAR,
    ")": CharCode.RPAR,
    "*": CharCode.TIMES,
    "+": CharCode.PLUS,
    ",": CharCode.COMMA,
    "-": CharCode.MINUS,
    ".": CharCode.PERIOD,
    "/": CharCode.SLASH,
    ":": CharCode.COLON,
    ";": CharCode.SEMICOLON,
    "<": CharCode.LT,
    "=": CharCode.EQ,
    ">": CharCode.GT,
}

_TABLE: dict[str, CharCode] = {
    **{ch: CharCode.SPACE for ch in "\t\n\v\f\r "},
    **{ch: CharCode.LETTER for ch in ascii_letters},
    **{ch: CharCode.DIGIT for ch in digits},
    **_PUNCTUATION,
}


def char_code(ch: str | None) -> CharCode:
    """Return the class of ``ch``; end of input (``None``) is UNKNOWN."""
    if ch is None:
        return CharCode.UNKNOWN
    return _TABLE.get(ch, CharCode.UNKNOWN)