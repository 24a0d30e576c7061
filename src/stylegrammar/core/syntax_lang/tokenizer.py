"""
Tokenizer for CSS Value Definition Syntax strings.

Converts a (token-expanded) syntax string into a sequence of typed tokens.
Data type references and whole function calls are single tokens.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from ..errors import make_syntax_error


class TokenKind(StrEnum):
    """Token types for the value definition syntax."""

    # Atoms
    DATA_TYPE = auto()  # <length [0,∞]>
    FUNCTION = auto()  # fit-content(<length>)
    KEYWORD = auto()
    STRING = auto()

    # Grouping
    LBRACKET = auto()
    RBRACKET = auto()

    # Separators and combinators
    COMMA = auto()
    SLASH = auto()
    BAR = auto()  # |
    DOUBLE_BAR = auto()  # ||
    DOUBLE_AMP = auto()  # &&

    # Multipliers
    QUESTION = auto()
    STAR = auto()
    PLUS = auto()
    HASH = auto()
    RANGE = auto()  # {m}, {m,}, {m,n}
    BANG = auto()

    # End of input
    EOF = auto()


MULTIPLIER_KINDS = frozenset(
    {
        TokenKind.QUESTION,
        TokenKind.STAR,
        TokenKind.PLUS,
        TokenKind.HASH,
        TokenKind.RANGE,
        TokenKind.BANG,
    }
)


class Token:
    """A single token from the syntax tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_IDENT_RE = re.compile(r"-?[a-zA-Z_][a-zA-Z0-9_-]*")
_DATA_TYPE_RE = re.compile(r"<[a-zA-Z][a-zA-Z0-9-]*(?:\s*\[[^\]<>]*\])*\s*>")
_RANGE_RE = re.compile(r"\{\s*\d+\s*(?:,\s*\d*\s*)?\}")

_SINGLE: dict[str, TokenKind] = {
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ",": TokenKind.COMMA,
    "/": TokenKind.SLASH,
    "?": TokenKind.QUESTION,
    "*": TokenKind.STAR,
    "+": TokenKind.PLUS,
    "#": TokenKind.HASH,
    "!": TokenKind.BANG,
}


def tokenize(source: str) -> list[Token]:
    """
    Tokenize a syntax string into a list of tokens.

    Raises:
        SyntaxParseError: On an unexpected character, an unterminated data
            type, string or function call, or a malformed ``{m,n}`` range
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c.isspace():
            i += 1
            continue

        if c == "<":
            m = _DATA_TYPE_RE.match(source, i)
            if m is None:
                raise make_syntax_error("Malformed data type reference", source, i)
            tokens.append(Token(TokenKind.DATA_TYPE, m.group(0), i))
            i = m.end()
            continue

        if c in ('"', "'"):
            end = source.find(c, i + 1)
            if end == -1:
                raise make_syntax_error("Unterminated string literal", source, i)
            tokens.append(Token(TokenKind.STRING, source[i : end + 1], i))
            i = end + 1
            continue

        m = _IDENT_RE.match(source, i)
        if m:
            end = m.end()
            if end < n and source[end] == "(":
                close = _find_call_end(source, end)
                tokens.append(Token(TokenKind.FUNCTION, source[i : close + 1], i))
                i = close + 1
            else:
                tokens.append(Token(TokenKind.KEYWORD, m.group(0), i))
                i = end
            continue

        if c == "{":
            m = _RANGE_RE.match(source, i)
            if m is None:
                raise make_syntax_error("Malformed {m,n} multiplier", source, i)
            tokens.append(Token(TokenKind.RANGE, m.group(0), i))
            i = m.end()
            continue

        two = source[i : i + 2]
        if two == "||":
            tokens.append(Token(TokenKind.DOUBLE_BAR, two, i))
            i += 2
            continue
        if two == "&&":
            tokens.append(Token(TokenKind.DOUBLE_AMP, two, i))
            i += 2
            continue
        if c == "|":
            tokens.append(Token(TokenKind.BAR, c, i))
            i += 1
            continue

        if c in _SINGLE:
            tokens.append(Token(_SINGLE[c], c, i))
            i += 1
            continue

        raise make_syntax_error(f"Unexpected character: {c!r}", source, i)

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens


def _find_call_end(source: str, open_pos: int) -> int:
    """Index of the parenthesis closing the call opened at ``open_pos``."""
    depth = 0
    quote: str | None = None
    for i in range(open_pos, len(source)):
        c = source[i]
        if quote:
            if c == quote:
                quote = None
        elif c in ('"', "'"):
            quote = c
        elif c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return i
    raise make_syntax_error("Unbalanced parentheses in function call", source, open_pos)
