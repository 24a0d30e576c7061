"""
Token type base class.

A token type is the behaviour bundle for one category of grammar symbol:
how a raw reference canonicalizes, which parameters it carries, which
concrete values instantiate it, what it defaults to and which option the
slot editor offers for it.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from ..ir.options import OptionDefinition
from ..ir.tokens import RangeParam, TokenParam

if TYPE_CHECKING:
    from ..registry import GrammarContext

FUNCTION_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9-]*)\((.*)\)$", re.DOTALL)
DATA_TYPE_RE = re.compile(r"^<([a-zA-Z][a-zA-Z0-9-]*)((?:\s*\[[^\]]*\])*)\s*>$")
KEYWORD_RE = re.compile(r"^-?[a-zA-Z_][a-zA-Z0-9_-]*$")
RANGE_RE = re.compile(r"\[\s*([^,\]]+?)\s*,\s*([^\]]+?)\s*\]")
NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
INTEGER_RE = re.compile(r"^[+-]?\d+$")
DIMENSION_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)([a-zA-Z%]+)$")

_INFINITY = {"∞", "+∞", "inf", "+inf", "infinity", "+infinity"}


def parse_bound(text: str) -> float:
    """Parse one end of a ``[min,max]`` range; ``∞`` and ``-∞`` are accepted."""
    text = text.strip().lower()
    if text in _INFINITY:
        return math.inf
    if text.startswith("-") and text[1:] in _INFINITY:
        return -math.inf
    return float(text)


def parse_range(token_raw: str) -> RangeParam | None:
    """
    Intersect every ``[min,max]`` annotation on a token reference.

    Examples:
        >>> parse_range("<number [0,∞] [0,10]>")
        RangeParam(type='range', min=0.0, max=10.0)
        >>> parse_range("<length>") is None
        True
    """
    bounds = RANGE_RE.findall(token_raw)
    if not bounds:
        return None
    result = RangeParam()
    for low, high in bounds:
        try:
            result = result.intersect(RangeParam(min=parse_bound(low), max=parse_bound(high)))
        except ValueError:
            return None
    return result


def format_number(number: float) -> str:
    """Format a bound as CSS would write it (no trailing ``.0``)."""
    if number == int(number):
        return str(int(number))
    return repr(number)


def data_type_base(token_raw: str) -> str | None:
    """``<length [0,∞]>`` -> ``length``."""
    m = DATA_TYPE_RE.match(token_raw.strip())
    return m.group(1) if m else None


class TokenType(ABC):
    """
    Behaviour shared by every token of one category.

    Attributes:
        key: Category key referenced by ``TokenDefinition.type``
        category: Widget family reported on options
        priority: Lower wins when several categories are legal in one slot
        match_order: Order in which value classification tries categories
    """

    key: ClassVar[str]
    category: ClassVar[str] = "other"
    priority: ClassVar[int] = 100
    match_order: ClassVar[int] = 100

    def canonicalize(self, token_raw: str) -> str | None:
        """Strip range annotations from a data-type reference."""
        base = data_type_base(token_raw)
        return f"<{base}>" if base else None

    def owns(self, token_canonical: str, ctx: GrammarContext) -> bool:
        """True when the registered definition of the token declares this type."""
        definition = ctx.tokens.get(token_canonical)
        return definition is not None and definition.type == self.key

    def extract_params(self, token_raw: str) -> TokenParam | None:
        return parse_range(token_raw)

    @abstractmethod
    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        """Return the canonical token a concrete value instantiates, or None."""

    def default_value(self, token_raw: str, ctx: GrammarContext) -> str | None:
        """Registered default literal, moved into the token's range when needed."""
        canonical = self.canonicalize(token_raw)
        definition = ctx.tokens.get(canonical) if canonical else None
        if definition is None or definition.default is None:
            return None
        bound = self.extract_params(token_raw)
        if isinstance(bound, RangeParam):
            return clamp_literal(definition.default, bound)
        return definition.default

    def create_option(self, token_raw: str, ctx: GrammarContext) -> OptionDefinition | None:
        canonical = self.canonicalize(token_raw)
        value = self.default_value(token_raw, ctx)
        if canonical is None or value is None:
            return None
        bound = self.extract_params(token_raw)
        return OptionDefinition(
            name=canonical,
            value=value,
            type=self.key,
            category=self.category,
            min=bound.min if isinstance(bound, RangeParam) else None,
            max=bound.max if isinstance(bound, RangeParam) else None,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


def clamp_literal(literal: str, bound: RangeParam) -> str:
    """
    Move the numeric part of a default literal into a range.

    Examples:
        >>> clamp_literal("0", RangeParam(min=1))
        '1'
        >>> clamp_literal("0px", RangeParam(min=0, max=10))
        '0px'
    """
    m = DIMENSION_RE.match(literal)
    number_text, unit = (m.group(1), m.group(2)) if m else (literal, "")
    if not NUMBER_RE.match(number_text):
        return literal
    number = float(number_text)
    if bound.contains(number):
        return literal
    clamped = bound.min if number < bound.min else bound.max
    if math.isinf(clamped):
        return literal
    return f"{format_number(clamped)}{unit}"
