"""
Slot matching and option tables.

A value being edited is split into fragments, each fragment is a *slot*.
The slot matcher finds the syntax variant the fragments belong to, offers
the legal choices for every slot (plus one trailing slot for adding the
next fragment) and applies single-slot edits.

Separators are part of the match: ``10px 20px`` and ``10px/20px`` belong to
different variants of ``border-radius``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .classifier import classify_values, find_unclassifiable, value_candidates
from .combinatorics import column_sets
from .ir.options import OptionDefinition, SlotTable, VariantMatch
from .ir.results import NoMatchingVariant, UnclassifiableValue, UnknownToken
from .ir.syntax import ExpandedSyntax, SyntaxVariant
from .registry import GrammarContext
from .tokens import create_option, default_value
from .values import join_value, split_with_separators

logger = logging.getLogger(__name__)

SlotOptions = list[list[OptionDefinition]]
Unplaceable = UnknownToken | UnclassifiableValue
# None at a boundary accepts any separator
Separators = Sequence[str | None]


def _is_literal(fragment: str) -> bool:
    return fragment[:1] in ('"', "'")


def _fits(canonical: str, fragment: str, candidates: list[str]) -> bool:
    return canonical == fragment or canonical in candidates


def _separators_agree(variant: SyntaxVariant, separators: Separators | None) -> bool:
    if separators is None:
        return True
    return all(
        wanted is None or wanted == actual
        for wanted, actual in zip(separators, variant.separators)
    )


def _fits_except(
    variant: SyntaxVariant,
    fragments: list[str],
    candidates: list[list[str]],
    skip: int | None = None,
    separators: Separators | None = None,
) -> bool:
    """True when every fragment but ``skip`` fits the variant at its position."""
    if len(variant) < len(fragments):
        return False
    if not _separators_agree(variant, separators):
        return False
    return all(
        _fits(variant.canonical[i], fragments[i], candidates[i])
        for i in range(len(fragments))
        if i != skip
    )


def match_variant(
    expanded: ExpandedSyntax,
    fragments: list[str],
    ctx: GrammarContext,
    separators: Separators | None = None,
) -> VariantMatch | None:
    """
    Find the variant a value's fragments belong to.

    The first variant matching exactly wins; failing that, the first variant
    the fragments are a strict prefix of. When ``separators`` is given the
    variant's separators must agree at every boundary between fragments;
    ``None`` skips the check.

    Examples:
        >>> match = match_variant(ctx.expand("<length> <length> <color>"), ["10px"], ctx)
        >>> match.complete, match.missing
        (False, ('<length>', '<color>'))
    """
    candidates = [value_candidates(f, ctx) for f in fragments]
    for variant in expanded.variants:
        if len(variant) == len(fragments) and _fits_except(
            variant, fragments, candidates, separators=separators
        ):
            return VariantMatch(variant=variant, matched=len(fragments))
    for variant in expanded.variants:
        if len(variant) > len(fragments) and _fits_except(
            variant, fragments, candidates, separators=separators
        ):
            return VariantMatch(variant=variant, matched=len(fragments))
    return None


def backfill(match: VariantMatch, fragments: list[str], ctx: GrammarContext) -> list[str] | None:
    """Complete a prefix match with each missing token's default; None if one has none."""
    filled = list(fragments)
    for token in match.missing:
        literal = default_value(token, ctx)
        if literal is None:
            logger.debug("No default for %s in %r", token, match.variant.syntax)
            return None
        filled.append(literal)
    return filled


def _option_for(token_raw: str, ctx: GrammarContext) -> OptionDefinition | None:
    if _is_literal(token_raw):
        return OptionDefinition(name=token_raw, value=token_raw, type="keyword", category="keyword")
    return create_option(token_raw, ctx)


def _slot_options(
    expanded: ExpandedSyntax,
    fragments: list[str],
    candidates: list[list[str]],
    separators: Separators,
    index: int,
    ctx: GrammarContext,
) -> list[OptionDefinition]:
    """
    Options for slot ``index``: every raw token at that position in a variant
    the rest of the value still fits when the slot is substituted.
    """
    rows = [
        variant.parsed
        for variant in expanded.variants
        if len(variant) > index
        and _fits_except(variant, fragments, candidates, skip=index, separators=separators)
    ]
    if not rows:
        return []

    options: list[OptionDefinition] = []
    seen: set[tuple[str, str]] = set()
    for token_raw in column_sets(rows)[index]:
        option = _option_for(token_raw, ctx)
        if option is None:
            continue
        key = (option.type, option.name)
        if key in seen:
            continue
        seen.add(key)
        options.append(option)
    return options


def _prepare(
    syntax: str, value: str, ctx: GrammarContext
) -> tuple[ExpandedSyntax, list[str], list[str], list[list[str]]] | Unplaceable:
    expanded = ctx.expand(syntax)
    if expanded.is_empty and expanded.unknown_tokens:
        return UnknownToken(token=expanded.unknown_tokens[0], syntax=syntax)
    fragments, separators = split_with_separators(value)
    # Quoted strings in the grammar match themselves only
    literals = {f for v in expanded.variants for f in v.parsed if _is_literal(f)}
    unclassifiable = find_unclassifiable(fragments, ctx, literals)
    if unclassifiable is not None:
        return unclassifiable.model_copy(update={"value": value})
    return expanded, fragments, separators, [value_candidates(f, ctx) for f in fragments]


def build_slot_table(
    syntax: str, value: str, ctx: GrammarContext
) -> SlotTable | NoMatchingVariant | Unplaceable:
    """
    Map a value onto per-slot option menus.

    Args:
        syntax: Raw syntax of the property
        value: Current value (may be empty or a prefix of a complete value)
        ctx: Grammar context

    Returns:
        SlotTable, or a not-found result when the value cannot be placed
    """
    prepared = _prepare(syntax, value, ctx)
    if not isinstance(prepared, tuple):
        return prepared
    expanded, fragments, separators, candidates = prepared

    match = match_variant(expanded, fragments, ctx, separators)
    if match is None:
        return NoMatchingVariant(
            syntax=syntax, value=value, value_tokens=tuple(classify_values(fragments, ctx))
        )

    slots = [
        _slot_options(expanded, fragments, candidates, separators, index, ctx)
        for index in range(len(fragments))
    ]
    trailing = _slot_options(expanded, fragments, candidates, separators, len(fragments), ctx)
    if trailing:
        slots.append(trailing)

    filled = backfill(match, fragments, ctx) if not match.complete else fragments
    return SlotTable(
        value=value,
        fragments=tuple(fragments),
        value_tokens=tuple(classify_values(fragments, ctx)),
        variant=match.variant,
        complete=match.complete,
        filled=tuple(filled or ()),
        slots=tuple(tuple(options) for options in slots),
    )


def build_slot_options(
    syntax: str, value: str, ctx: GrammarContext
) -> SlotOptions | NoMatchingVariant | Unplaceable:
    """Option lists per slot; the last entry is the "add next value" slot when present."""
    table = build_slot_table(syntax, value, ctx)
    if not isinstance(table, SlotTable):
        return table
    return [list(options) for options in table.slots]


def _edit_separators(
    separators: list[str | None], slot_index: int, count: int, added: int, inner: list[str]
) -> list[str | None]:
    """Separators after replacing, appending to or removing fragment ``slot_index``."""
    if slot_index == count:
        boundary: list[str | None] = [None] if count and added else []
        return [*separators, *boundary, *inner]
    if added:
        return [*separators[:slot_index], *inner, *separators[slot_index:]]
    # Removing a fragment drops the separator in front of it
    if slot_index == 0:
        return separators[1:]
    return [*separators[: slot_index - 1], *separators[slot_index:]]


def apply_slot_edit(
    syntax: str,
    fragments: list[str],
    slot_index: int,
    new_value: str,
    ctx: GrammarContext,
    separators: list[str] | None = None,
) -> str | NoMatchingVariant | Unplaceable:
    """
    Replace one fragment and re-serialize the value.

    ``slot_index == len(fragments)`` appends; an empty ``new_value`` removes
    the fragment. The result is completed with defaults up to the matched
    variant's length and joined with that variant's separators.

    ``separators`` are the value's separators between fragments. A variant
    whose separators agree with them is required; an appended fragment takes
    the last separator when a variant allows it, otherwise any. Without
    ``separators`` space-separated variants are preferred before any other.

    Raises:
        IndexError: If ``slot_index`` is outside ``0..len(fragments)``
        ValueError: If ``separators`` does not hold one entry per boundary

    Examples:
        >>> apply_slot_edit("<length> <length> <color>", ["10px"], 0, "12px", ctx)
        '12px 0px #ffffff'
    """
    count = len(fragments)
    if not 0 <= slot_index <= count:
        raise IndexError(f"slot {slot_index} out of range for {count} fragments")
    if separators is not None and len(separators) != max(count - 1, 0):
        raise ValueError(f"expected {max(count - 1, 0)} separators, got {len(separators)}")

    replacement, inner = split_with_separators(new_value)
    if slot_index == count:
        edited = [*fragments, *replacement]
    else:
        edited = [*fragments[:slot_index], *replacement, *fragments[slot_index + 1 :]]

    if not edited:
        return ""

    given: list[str | None] = (
        [" " if sep.isspace() else sep for sep in separators]
        if separators is not None
        else [" "] * max(count - 1, 0)
    )
    wanted = _edit_separators(given, slot_index, count, len(replacement), inner)
    appended_with = given[-1] if given else " "
    preferred = [appended_with if sep is None else sep for sep in wanted]
    attempts: list[Separators | None] = [preferred]
    relaxed = wanted if separators is not None else None
    if relaxed != preferred:
        attempts.append(relaxed)

    value = join_value(edited, preferred)
    prepared = _prepare(syntax, value, ctx)
    if not isinstance(prepared, tuple):
        logger.warning("Rejected edit of slot %d: %s", slot_index, prepared)
        return prepared
    expanded = prepared[0]

    match = None
    for attempt in attempts:
        match = match_variant(expanded, edited, ctx, attempt)
        if match is not None:
            break
    filled = backfill(match, edited, ctx) if match is not None else None
    if match is None or filled is None:
        logger.warning("Rejected edit of slot %d: no variant of %r fits %r", slot_index, syntax, value)
        return NoMatchingVariant(
            syntax=syntax, value=value, value_tokens=tuple(classify_values(edited, ctx))
        )
    return join_value(filled, list(match.variant.separators[: len(filled) - 1]))


def is_value_valid(syntax: str, value: str, ctx: GrammarContext) -> bool:
    """
    True when ``value`` matches a variant exactly, separators included. An
    empty value is valid: it clears the property.
    """
    if not value.strip():
        return True
    prepared = _prepare(syntax, value, ctx)
    if not isinstance(prepared, tuple):
        return False
    expanded, fragments, separators, _ = prepared
    match = match_variant(expanded, fragments, ctx, separators)
    return match is not None and match.complete
