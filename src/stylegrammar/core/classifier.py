"""
Value classification.

Maps a concrete value fragment (``10px``, ``auto``, ``rgb(0,0,0)``) to the
canonical tokens it can instantiate. Token types are tried in their
``match_order``, so the first candidate is the most specific reading.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .ir.options import OptionDefinition
from .ir.results import UnclassifiableValue
from .registry import GrammarContext

logger = logging.getLogger(__name__)


def value_candidates(fragment: str, ctx: GrammarContext) -> list[str]:
    """
    Every canonical token ``fragment`` can instantiate, most specific first.

    Examples:
        >>> value_candidates("0", ctx)
        ['<length>', '<integer>', '<number>']
        >>> value_candidates("red", ctx)
        ['<color>', 'red']
    """
    fragment = fragment.strip()
    if not fragment:
        return []
    candidates: list[str] = []
    for token_type in ctx.types.in_match_order():
        token = token_type.value_token(fragment, ctx)
        if token is not None and token not in candidates:
            candidates.append(token)
    return candidates


def classify_value(fragment: str, ctx: GrammarContext) -> str | None:
    """
    Best-guess canonical token for a value fragment.

    Examples:
        >>> classify_value("10px", ctx)
        '<length>'
        >>> classify_value("fit-content(10px)", ctx)
        'fit-content()'
    """
    candidates = value_candidates(fragment, ctx)
    return candidates[0] if candidates else None


def classify_values(fragments: Iterable[str], ctx: GrammarContext) -> list[str]:
    """Best guess per fragment; fragments matching nothing are dropped."""
    result = []
    for fragment in fragments:
        token = classify_value(fragment, ctx)
        if token is None:
            logger.debug("Dropping unclassifiable fragment %r", fragment)
            continue
        result.append(token)
    return result


def find_unclassifiable(
    fragments: list[str], ctx: GrammarContext, literals: Iterable[str] = ()
) -> UnclassifiableValue | None:
    """First fragment that matches no token type (nor one of ``literals``), if any."""
    allowed = set(literals)
    for index, fragment in enumerate(fragments):
        if fragment not in allowed and not value_candidates(fragment, ctx):
            return UnclassifiableValue(value=" ".join(fragments), fragment=fragment, index=index)
    return None


def pick_default_category(options: Iterable[OptionDefinition], ctx: GrammarContext) -> str | None:
    """
    Token type key the slot editor should open with.

    The lowest ``priority`` wins: length before keyword, colour, function,
    number, integer and link.
    """
    best: tuple[int, str] | None = None
    for option in options:
        token_type = ctx.types.get(option.type)
        if token_type is None:
            continue
        if best is None or token_type.priority < best[0]:
            best = (token_type.priority, token_type.key)
    return best[1] if best else None
