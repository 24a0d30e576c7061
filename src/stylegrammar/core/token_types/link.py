"""Links: URL or path literals, bare or quoted (``"https://example.com/a.png"``)."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .base import TokenType

if TYPE_CHECKING:
    from ..registry import GrammarContext

LINK_RE = re.compile(
    r"""^(?P<q>["']?)(?:[a-zA-Z][a-zA-Z0-9+.-]*://\S+|data:\S+|\.{0,2}/\S*)(?P=q)$"""
)


class LinkType(TokenType):
    key = "link"
    priority = 6
    match_order = 10

    def value_token(self, value: str, ctx: GrammarContext) -> str | None:
        return "<link>" if LINK_RE.match(value.strip()) else None
