"""Composed tokens, defined entirely by other tokens (``<length-percentage>``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ir.options import OptionDefinition
from ..strings import join_advanced
from .base import TokenType

if TYPE_CHECKING:
    from ..registry import GrammarContext


class ComposedType(TokenType):
    """
    Never matched by a value directly: token expansion replaces a composed
    reference by its definition before variants are built.
    """

    key = "composed"
    priority = 99
    match_order = 999

    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        return None

    def default_value(self, token_raw: str, ctx: GrammarContext) -> str | None:
        from ..tokens import default_value

        explicit = super().default_value(token_raw, ctx)
        if explicit is not None:
            return explicit
        expanded = ctx.expand(token_raw)
        if expanded.is_empty:
            return None
        first = expanded.variants[0]
        parts = [default_value(fragment, ctx) for fragment in first.parsed]
        if any(part is None for part in parts):
            return None
        return join_advanced(parts, list(first.separators))

    def create_option(self, token_raw: str, ctx: GrammarContext) -> OptionDefinition | None:
        return None
