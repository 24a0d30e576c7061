"""Unitless numbers: ``<number>`` and ``<integer>``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import INTEGER_RE, NUMBER_RE, TokenType

if TYPE_CHECKING:
    from ..registry import GrammarContext


class NumberType(TokenType):
    key = "number"
    priority = 4
    match_order = 60

    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        return "<number>" if NUMBER_RE.match(value.strip()) else None


class IntegerType(TokenType):
    """Whole numbers; every integer is also a ``<number>``."""

    key = "integer"
    priority = 5
    match_order = 50

    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        return "<integer>" if INTEGER_RE.match(value.strip()) else None
