"""Bare identifiers such as ``auto`` or ``min-content``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..ir.options import OptionDefinition
from ..ir.tokens import TokenParam
from .base import KEYWORD_RE, TokenType

if TYPE_CHECKING:
    from ..registry import GrammarContext


class KeywordType(TokenType):
    key = "keyword"
    category = "keyword"
    priority = 1
    match_order = 70

    def canonicalize(self, token_raw: str) -> str | None:
        token = token_raw.strip()
        return token if KEYWORD_RE.match(token) else None

    def owns(self, token_canonical: str, ctx: GrammarContext) -> bool:
        return bool(KEYWORD_RE.match(token_canonical))

    def extract_params(self, token_raw: str) -> TokenParam | None:
        return None

    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        """Keywords are ASCII case-insensitive: ``AUTO`` instantiates ``auto``."""
        return self.canonicalize(value.lower())

    def default_value(self, token_raw: str, ctx: GrammarContext) -> str | None:
        return self.canonicalize(token_raw)

    def create_option(self, token_raw: str, ctx: GrammarContext) -> OptionDefinition | None:
        keyword = self.canonicalize(token_raw)
        if keyword is None:
            return None
        return OptionDefinition(name=keyword, value=keyword, type=self.key, category=self.category)
