"""
Expansion of a syntax AST into concrete variants.

Each node expands to a list of *pieces*: tuples of fragments interleaved with
the separator marks "," and "/". ``_finalize`` turns pieces into a
``SyntaxVariant`` by inserting a space between adjacent fragments and
dropping separators with nothing on one side.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..combinatorics import all_subsets, cross_product, dedupe, permutations
from ..config import EngineConfig
from ..errors import CombinatorLimitError
from ..ir.grammar import (
    AllOrder,
    AnyOrder,
    Atom,
    Choice,
    CommaList,
    Group,
    Multiplied,
    Node,
    Separator,
    Sequence,
)
from ..ir.syntax import ExpandedSyntax, SyntaxVariant
from ..registry import GrammarContext
from ..strings import join_advanced
from ..tokens import canonicalize, classify_token, expand_tokens, find_unknown_tokens
from .parser import parse_syntax

logger = logging.getLogger(__name__)

Pieces = tuple[str, ...]

SEPARATOR_MARKS = frozenset({",", "/"})


def _finalize(pieces: Pieces) -> tuple[list[str], list[str]]:
    """Split pieces into fragments and the separator at each boundary."""
    fragments: list[str] = []
    separators: list[str] = []
    pending: str | None = None
    for piece in pieces:
        if piece in SEPARATOR_MARKS:
            if fragments and pending is None:
                pending = piece
            continue
        if fragments:
            separators.append(pending or " ")
        fragments.append(piece)
        pending = None
    return fragments, separators


def _render(pieces: Pieces) -> str:
    fragments, separators = _finalize(pieces)
    return join_advanced(fragments, separators)


def _has_fragment(pieces: Pieces) -> bool:
    return any(piece not in SEPARATOR_MARKS for piece in pieces)


def _by_length(variants: list[Pieces]) -> list[Pieces]:
    """Deduplicate, then stable-sort by rendered length."""
    return sorted(dedupe(variants), key=lambda p: len(_render(p)))


def _concat(groups: list[list[Pieces]], joiner: str | None = None) -> list[Pieces]:
    """Cross product of piece lists, concatenated (optionally with a joiner mark)."""
    result: list[Pieces] = []
    for combo in cross_product(groups):
        pieces: list[str] = []
        for part in combo:
            if joiner and pieces and _has_fragment(part):
                pieces.append(joiner)
            pieces.extend(part)
        result.append(tuple(pieces))
    return result


class _Expander:
    """Walks a syntax AST, producing every variant within the engine limits."""

    def __init__(self, config: EngineConfig, syntax: str) -> None:
        self.config = config
        self.syntax = syntax
        self.truncated = False
        self._dispatch: dict[type, Callable[[Node], list[Pieces]]] = {
            Atom: self._atom,
            Separator: self._separator,
            Sequence: self._sequence,
            Choice: self._choice,
            AnyOrder: self._any_order,
            AllOrder: self._all_order,
            CommaList: self._comma_list,
            Group: self._group,
            Multiplied: self._multiplied,
        }

    def expand(self, node: Node) -> list[Pieces]:
        return self._limit(self._dispatch[type(node)](node))

    def _limit(self, variants: list[Pieces]) -> list[Pieces]:
        if len(variants) > self.config.max_variants:
            self.truncated = True
            return variants[: self.config.max_variants]
        return variants

    def _check_operands(self, operands: list[Node], combinator: str) -> None:
        if len(operands) > self.config.max_operands:
            raise CombinatorLimitError(
                f"'{combinator}' has {len(operands)} operands in {self.syntax!r}; "
                f"at most {self.config.max_operands} are allowed"
            )

    def _atom(self, node: Atom) -> list[Pieces]:
        return [(node.text,)]

    def _separator(self, node: Separator) -> list[Pieces]:
        return [(node.char,)]

    def _sequence(self, node: Sequence) -> list[Pieces]:
        return self._limit(_concat([self.expand(item) for item in node.items]))

    def _choice(self, node: Choice) -> list[Pieces]:
        variants: list[Pieces] = []
        for option in node.options:
            variants.extend(self.expand(option))
        return _by_length(variants)

    def _any_order(self, node: AnyOrder) -> list[Pieces]:
        self._check_operands(node.operands, "||")
        expanded = [self.expand(operand) for operand in node.operands]
        variants: list[Pieces] = []
        for subset in all_subsets(expanded):
            if not subset:
                continue
            for ordering in permutations(subset):
                variants.extend(_concat(ordering))
        return _by_length(variants)

    def _all_order(self, node: AllOrder) -> list[Pieces]:
        self._check_operands(node.operands, "&&")
        expanded = [self.expand(operand) for operand in node.operands]
        variants: list[Pieces] = []
        for ordering in permutations(expanded):
            variants.extend(_concat(ordering))
        return _by_length(variants)

    def _comma_list(self, node: CommaList) -> list[Pieces]:
        return self._limit(_concat([self.expand(item) for item in node.items], joiner=","))

    def _group(self, node: Group) -> list[Pieces]:
        return self.expand(node.body)

    def _multiplied(self, node: Multiplied) -> list[Pieces]:
        inner = self.expand(node.node)
        if node.required:
            return [pieces for pieces in inner if _has_fragment(pieces)]

        high = node.max_count
        if high is None:
            high = max(node.min_count, self.config.max_repeat)
        joiner = "," if node.comma else None

        variants: list[Pieces] = []
        for count in range(node.min_count, high + 1):
            variants.extend(_concat([inner] * count, joiner=joiner))
            if len(variants) > self.config.max_variants:
                break
        return dedupe(variants)


def _to_variant(pieces: Pieces, ctx: GrammarContext) -> tuple[SyntaxVariant | None, list[str]]:
    """Build a variant; returns the unknown tokens that prevented it, if any."""
    fragments, separators = _finalize(pieces)
    canonical: list[str] = []
    unknown: list[str] = []
    for fragment in fragments:
        if fragment[0] in ('"', "'"):
            canonical.append(fragment)
            continue
        token = canonicalize(fragment, ctx)
        if token is None or classify_token(token, ctx) is None:
            unknown.append(token or fragment)
            continue
        canonical.append(token)
    if unknown:
        return None, unknown
    variant = SyntaxVariant(
        parsed=tuple(fragments), canonical=tuple(canonical), separators=tuple(separators)
    )
    return variant, []


def _expand_uncached(syntax: str, ctx: GrammarContext) -> ExpandedSyntax:
    expanded = expand_tokens(syntax, ctx)
    unknown: list[str] = find_unknown_tokens(expanded, ctx)

    root = parse_syntax(expanded)
    if root is None:
        return ExpandedSyntax(syntax=syntax, expanded=expanded)

    expander = _Expander(ctx.config, syntax)
    variants: list[SyntaxVariant] = []
    seen: set[tuple[tuple[str, ...], tuple[str, ...]]] = set()
    for pieces in expander.expand(root):
        if not _has_fragment(pieces):
            continue
        variant, missing = _to_variant(pieces, ctx)
        unknown.extend(token for token in missing if token not in unknown)
        if variant is None:
            continue
        key = (variant.parsed, variant.separators)
        if key in seen:
            continue
        seen.add(key)
        variants.append(variant)

    if expander.truncated:
        logger.warning(
            "Expansion of %r exceeded %d variants; result truncated",
            syntax,
            ctx.config.max_variants,
        )
    if unknown:
        logger.warning("Skipped variants of %r with unknown tokens: %s", syntax, ", ".join(unknown))

    return ExpandedSyntax(
        syntax=syntax,
        expanded=expanded,
        variants=tuple(variants),
        unknown_tokens=tuple(unknown),
    )


def expand_syntax(syntax: str, ctx: GrammarContext) -> ExpandedSyntax:
    """
    Expand a raw syntax string into every concrete variant.

    Results are memoized per context, keyed by the raw string.

    Args:
        syntax: Raw value definition syntax, e.g. ``auto | <length [0,∞]>``
        ctx: Grammar context supplying tokens, types and limits

    Returns:
        ExpandedSyntax with the ordered variants and any unknown tokens

    Raises:
        SyntaxParseError: If the syntax is malformed
        CyclicTokenDefinitionError: If a referenced token definition is cyclic
        CombinatorLimitError: If "||" or "&&" has too many operands

    Examples:
        >>> expand_syntax("a || b", ctx).variants_canonical
        ['a', 'b', 'a b', 'b a']
    """
    cached = ctx.cached(syntax)
    if cached is not None:
        logger.debug("Expansion cache hit for %r", syntax)
        return cached

    logger.debug("Expansion cache miss for %r", syntax)
    result = _expand_uncached(syntax, ctx)
    ctx.remember(syntax, result)
    logger.debug("Expanded %r into %d variants", syntax, len(result.variants))
    return result
