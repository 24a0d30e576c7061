"""Dimensions: a number followed by a registered unit (``10px``, ``50%``, ``45deg``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ir.options import OptionDefinition
from ..ir.tokens import UnitType
from .base import DIMENSION_RE, NUMBER_RE, TokenType, data_type_base

if TYPE_CHECKING:
    from ..registry import GrammarContext


class LengthType(TokenType):
    """
    Every unit-bearing data type (``<length>``, ``<percentage>``, ``<angle>``...).

    A dimension classifies to ``<{unit.type}>``. A unitless zero is a valid
    ``<length>``.
    """

    key = "length"
    category = "length"
    priority = 0
    match_order = 40

    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        m = DIMENSION_RE.match(value.strip())
        if m:
            unit = ctx.units.get(m.group(2).lower())
            return f"<{unit.type}>" if unit else None
        if NUMBER_RE.match(value.strip()) and float(value) == 0:
            return f"<{UnitType.LENGTH}>"
        return None

    def units_for(self, token_raw: str, ctx: GrammarContext) -> tuple[str, ...]:
        base = data_type_base(token_raw)
        return tuple(unit.key for unit in ctx.units.all() if unit.type == base)

    def create_option(self, token_raw: str, ctx: GrammarContext) -> OptionDefinition | None:
        option = super().create_option(token_raw, ctx)
        if option is None:
            return None
        return option.model_copy(update={"units": self.units_for(token_raw, ctx)})
