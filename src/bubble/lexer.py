"""Lexer: source text → classified tokens."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum, auto


# ---------------------------------------------------------------------------
# Token
# ---------------------------------------------------------------------------

class TokenKind(Enum):
    NUMBER = auto()
    STRING = auto()
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    DIVIDED_BY = auto()
    ASSIGN = auto()
    REMEMBER = auto()
    AS = auto()
    IDENTIFIER = auto()
    SAY = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        return f"{self.kind.name}({self.text!r})"


_KEYWORDS: dict[str, TokenKind] = {
    "say": TokenKind.SAY,
    "plus": TokenKind.PLUS,
    "+": TokenKind.PLUS,
    "minus": TokenKind.MINUS,
    "-": TokenKind.MINUS,
    "times": TokenKind.TIMES,
    "*": TokenKind.TIMES,
    "over": TokenKind.DIVIDED_BY,
    "/": TokenKind.DIVIDED_BY,
    "by": TokenKind.IDENTIFIER,  # reserved
    "remember": TokenKind.REMEMBER,
    "as": TokenKind.AS,
}

_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_SPECIAL_RE = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def is_number(text: str) -> bool:
    """True when *text* is a float literal that fits in a 64-bit float."""
    if _SPECIAL_RE.fullmatch(text):
        return True
    if not _NUMBER_RE.fullmatch(text):
        return False
    # Out-of-range literals are not numbers (1e999 is an identifier).
    return not math.isinf(float(text))


def classify(text: str) -> Token:
    """Turn one flushed word into a token.

    Keywords match whole words, case-sensitively; anything that is neither a
    keyword nor a number is an identifier.
    """
    kind = _KEYWORDS.get(text)
    if kind is not None:
        return Token(kind, text)
    if is_number(text):
        return Token(TokenKind.NUMBER, text)
    return Token(TokenKind.IDENTIFIER, text)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

def tokenize(source: str) -> list[Token]:
    """Scan *source* left to right.  Always ends with an EOF token."""
    tokens: list[Token] = []
    buf: list[str] = []
    in_quotes = False

    def flush() -> None:
        if buf:
            tokens.append(classify("".join(buf)))
            buf.clear()

    for ch in source:
        if ch == '"':
            if in_quotes:
                tokens.append(Token(TokenKind.STRING, "".join(buf)))
                buf.clear()
            in_quotes = not in_quotes
        elif in_quotes:
            buf.append(ch)
        elif ch == " ":
            flush()
        elif ch == "=":
            flush()
            tokens.append(Token(TokenKind.ASSIGN, "="))
        elif ch in "+-":
            flush()
            tokens.append(classify(ch))
        else:
            buf.append(ch)

    # An unterminated quote falls through as an ordinary word.
    flush()
    tokens.append(Token(TokenKind.EOF, ""))
    return tokens
