"""Function tokens such as ``fit-content(<length-percentage>)`` or ``url(<link>)``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..ir.options import OptionDefinition
from ..ir.tokens import FunctionParam, TokenParam
from ..strings import extract_between, join_advanced
from .base import FUNCTION_RE, TokenType

if TYPE_CHECKING:
    from ..registry import GrammarContext

logger = logging.getLogger(__name__)


def split_call(token_raw: str) -> tuple[str, str] | None:
    """
    ``fit-content(<length>)`` -> ``("fit-content", "<length>")``.

    None unless a single call spans the whole token, so ``a(b) c(d)`` is not
    a function.
    """
    token = token_raw.strip()
    m = FUNCTION_RE.match(token)
    if not m:
        return None
    name = m.group(1)
    arguments = extract_between(token, "()")
    if arguments is None or len(name) + len(arguments) + 2 != len(token):
        return None
    return name, arguments.strip()


class FunctionType(TokenType):
    key = "function"
    category = "function"
    priority = 3
    match_order = 30

    def canonicalize(self, token_raw: str) -> str | None:
        call = split_call(token_raw)
        return f"{call[0]}()" if call else None

    def owns(self, token_canonical: str, ctx: GrammarContext) -> bool:
        return self.canonicalize(token_canonical) == token_canonical

    def extract_params(self, token_raw: str) -> TokenParam | None:
        call = split_call(token_raw)
        if call is None:
            return None
        return FunctionParam(syntax=call[1])

    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        return self.canonicalize(value)

    def default_value(self, token_raw: str, ctx: GrammarContext) -> str | None:
        """``name(...)`` filled with the defaults of the first argument variant."""
        from ..tokens import default_value

        call = split_call(token_raw)
        if call is None:
            return None
        name, arguments = call
        if not arguments:
            return f"{name}()"

        expanded = ctx.expand(arguments)
        if expanded.is_empty:
            logger.debug("No argument variants for %s", token_raw)
            return None
        first = expanded.variants[0]
        parts: list[str] = []
        for fragment in first.parsed:
            literal = default_value(fragment, ctx)
            if literal is None:
                return None
            parts.append(literal)
        return f"{name}({join_advanced(parts, list(first.separators))})"

    def create_option(self, token_raw: str, ctx: GrammarContext) -> OptionDefinition | None:
        canonical = self.canonicalize(token_raw)
        value = self.default_value(token_raw, ctx)
        if canonical is None or value is None:
            return None
        param = self.extract_params(token_raw)
        return OptionDefinition(
            name=canonical,
            value=value,
            type=self.key,
            category=self.category,
            syntax=param.syntax if isinstance(param, FunctionParam) else None,
        )
