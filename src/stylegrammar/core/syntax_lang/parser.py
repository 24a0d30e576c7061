"""
Recursive descent parser for CSS Value Definition Syntax.

Grammar (precedence low to high):
    comma_list  → choice ("," choice)*
    choice      → any_order ("|" any_order)*
    any_order   → all_order ("||" all_order)*
    all_order   → sequence ("&&" sequence)*
    sequence    → (term | "/")+
    term        → primary multiplier*
    multiplier  → "?" | "*" | "+" | "#" RANGE? | RANGE | "!"
    primary     → DATA_TYPE | FUNCTION | KEYWORD | STRING | "[" comma_list "]"

Brackets only group; optionality comes from multipliers.
"""

from __future__ import annotations

import re

from ..errors import SyntaxParseError, make_syntax_error
from ..ir.grammar import (
    AllOrder,
    AnyOrder,
    Atom,
    AtomKind,
    Choice,
    CommaList,
    Group,
    Multiplied,
    Node,
    Separator,
    Sequence,
)
from .tokenizer import MULTIPLIER_KINDS, Token, TokenKind, tokenize

_ATOM_KINDS: dict[TokenKind, AtomKind] = {
    TokenKind.DATA_TYPE: AtomKind.TOKEN,
    TokenKind.FUNCTION: AtomKind.FUNCTION,
    TokenKind.KEYWORD: AtomKind.KEYWORD,
    TokenKind.STRING: AtomKind.STRING,
}

_SEQUENCE_END = frozenset(
    {
        TokenKind.COMMA,
        TokenKind.BAR,
        TokenKind.DOUBLE_BAR,
        TokenKind.DOUBLE_AMP,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    }
)

_RANGE_BODY_RE = re.compile(r"\{\s*(\d+)\s*(?:(,)\s*(\d*)\s*)?\}")


class _Parser:
    """Recursive descent parser for value definition syntax."""

    def __init__(self, tokens: list[Token], source: str) -> None:
        self.tokens = tokens
        self.source = source
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.current
        if tok.kind != kind:
            got = repr(tok.value) if tok.value else "end of input"
            raise make_syntax_error(f"Expected {kind}, got {got}", self.source, tok.pos)
        return self.advance()

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.current.kind in kinds:
            return self.advance()
        return None

    def error(self, message: str, tok: Token | None = None) -> SyntaxParseError:
        return make_syntax_error(message, self.source, (tok or self.current).pos)

    # -- Grammar rules --

    def parse_comma_list(self) -> Node:
        items = [self.parse_choice()]
        while self.match(TokenKind.COMMA):
            items.append(self.parse_choice())
        return items[0] if len(items) == 1 else CommaList(items=items)

    def parse_choice(self) -> Node:
        options = [self.parse_any_order()]
        while self.match(TokenKind.BAR):
            options.append(self.parse_any_order())
        return options[0] if len(options) == 1 else Choice(options=options)

    def parse_any_order(self) -> Node:
        operands = [self.parse_all_order()]
        while self.match(TokenKind.DOUBLE_BAR):
            operands.append(self.parse_all_order())
        return operands[0] if len(operands) == 1 else AnyOrder(operands=operands)

    def parse_all_order(self) -> Node:
        operands = [self.parse_sequence()]
        while self.match(TokenKind.DOUBLE_AMP):
            operands.append(self.parse_sequence())
        return operands[0] if len(operands) == 1 else AllOrder(operands=operands)

    def parse_sequence(self) -> Node:
        items: list[Node] = []
        while self.current.kind not in _SEQUENCE_END:
            if self.match(TokenKind.SLASH):
                items.append(Separator(char="/"))
                continue
            items.append(self.parse_term())

        if not any(not isinstance(item, Separator) for item in items):
            raise self.error("Expected a keyword, data type, function or group")
        return items[0] if len(items) == 1 else Sequence(items=items)

    def parse_term(self) -> Node:
        node = self.parse_primary()
        while self.current.kind in MULTIPLIER_KINDS:
            node = self.parse_multiplier(node)
        return node

    def parse_multiplier(self, node: Node) -> Multiplied:
        tok = self.advance()
        if tok.kind == TokenKind.QUESTION:
            return Multiplied(node=node, min_count=0, max_count=1, suffix="?")
        if tok.kind == TokenKind.STAR:
            return Multiplied(node=node, min_count=0, suffix="*")
        if tok.kind == TokenKind.PLUS:
            return Multiplied(node=node, min_count=1, suffix="+")
        if tok.kind == TokenKind.BANG:
            if not isinstance(node, Group):
                raise self.error("'!' may only follow a bracketed group", tok)
            return Multiplied(node=node, min_count=1, max_count=1, required=True, suffix="!")
        if tok.kind == TokenKind.HASH:
            range_tok = self.match(TokenKind.RANGE)
            if range_tok is None:
                return Multiplied(node=node, min_count=1, comma=True, suffix="#")
            low, high = self._range_bounds(range_tok)
            return Multiplied(
                node=node,
                min_count=low,
                max_count=high,
                comma=True,
                suffix="#" + range_tok.value,
            )
        low, high = self._range_bounds(tok)
        return Multiplied(node=node, min_count=low, max_count=high, suffix=tok.value)

    def _range_bounds(self, tok: Token) -> tuple[int, int | None]:
        m = _RANGE_BODY_RE.fullmatch(tok.value)
        if m is None:
            raise self.error(f"Malformed multiplier {tok.value!r}", tok)
        low = int(m.group(1))
        if m.group(2) is None:
            return low, low
        if not m.group(3):
            return low, None
        high = int(m.group(3))
        if high < low:
            raise self.error(f"Multiplier {tok.value!r} has max below min", tok)
        return low, high

    def parse_primary(self) -> Node:
        tok = self.current
        if tok.kind in _ATOM_KINDS:
            self.advance()
            return Atom(kind=_ATOM_KINDS[tok.kind], text=tok.value)
        if tok.kind == TokenKind.LBRACKET:
            self.advance()
            body = self.parse_comma_list()
            self.expect(TokenKind.RBRACKET)
            return Group(body=body)
        if tok.kind in MULTIPLIER_KINDS:
            raise self.error(f"Multiplier {tok.value!r} has nothing to repeat", tok)
        if tok.kind == TokenKind.EOF:
            raise self.error("Unexpected end of syntax", tok)
        raise self.error(f"Unexpected {tok.value!r}", tok)


def parse_syntax(source: str) -> Node | None:
    """
    Parse a syntax string into an AST.

    Args:
        source: Token-expanded value definition syntax

    Returns:
        Root node, or None for a blank syntax

    Raises:
        SyntaxParseError: If the syntax is malformed
    """
    if not source.strip():
        return None
    tokens = tokenize(source)
    parser = _Parser(tokens, source)
    node = parser.parse_comma_list()
    if parser.current.kind != TokenKind.EOF:
        raise parser.error(f"Unexpected {parser.current.value!r}")
    return node
