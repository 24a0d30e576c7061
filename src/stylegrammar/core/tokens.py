"""
Token canonicalization, classification and substitution.

Raw token references come in three shapes: data types (``<length [0,∞]>``),
function calls (``fit-content(<length>)``) and keywords (``auto``). Every
operation dispatches to the owning ``TokenType`` registered in the context.
"""

from __future__ import annotations

import logging
import re

from .errors import CyclicTokenDefinitionError
from .ir.options import OptionDefinition
from .ir.tokens import TokenParam
from .registry import GrammarContext
from .token_types.base import DATA_TYPE_RE, FUNCTION_RE, KEYWORD_RE, TokenType, data_type_base

logger = logging.getLogger(__name__)

REFERENCE_RE = re.compile(r"<([a-zA-Z][a-zA-Z0-9-]*)((?:\s*\[[^\]]*\])*)\s*>")
_RANGE_LITERAL_RE = re.compile(r"\[[^\]]*\]")
_ATOM_RE = re.compile(
    r"^(?:" + DATA_TYPE_RE.pattern[1:-1] + r"|" + KEYWORD_RE.pattern[1:-1] + r")$"
)


def _owner(token_raw: str, ctx: GrammarContext) -> TokenType | None:
    canonical = canonicalize(token_raw, ctx)
    return classify_token(canonical, ctx) if canonical else None


def canonicalize(token_raw: str, ctx: GrammarContext) -> str | None:
    """
    Reduce a raw token reference to its comparable form.

    Examples:
        >>> canonicalize("<length [0,∞]>", ctx)
        '<length>'
        >>> canonicalize("fit-content(<length>)", ctx)
        'fit-content()'
        >>> canonicalize("auto", ctx)
        'auto'
    """
    token = token_raw.strip()
    if not token:
        return None

    if token.startswith("<"):
        base = data_type_base(token)
        if base is None:
            return None
        definition = ctx.tokens.get(f"<{base}>")
        token_type = ctx.types.get(definition.type) if definition else None
        if token_type is not None:
            return token_type.canonicalize(token)
        return f"<{base}>"

    if FUNCTION_RE.match(token):
        function_type = ctx.types.get("function")
        return function_type.canonicalize(token) if function_type else None

    if KEYWORD_RE.match(token):
        keyword_type = ctx.types.get("keyword")
        return keyword_type.canonicalize(token) if keyword_type else None

    return None


def classify_token(token_canonical: str, ctx: GrammarContext) -> TokenType | None:
    """
    Owning token type of a canonical token.

    Returns None for unregistered data types; callers treat such branches as
    unsupported.
    """
    for token_type in ctx.types.in_match_order():
        if token_type.owns(token_canonical, ctx):
            return token_type
    return None


def extract_params(token_raw: str, ctx: GrammarContext) -> TokenParam | None:
    """Range of a data type reference or argument syntax of a function token."""
    token_type = _owner(token_raw, ctx)
    return token_type.extract_params(token_raw.strip()) if token_type else None


def default_value(token_raw: str, ctx: GrammarContext) -> str | None:
    """Literal that fills a slot holding ``token_raw`` when the user has not set one."""
    token_type = _owner(token_raw, ctx)
    return token_type.default_value(token_raw.strip(), ctx) if token_type else None


def create_option(token_raw: str, ctx: GrammarContext) -> OptionDefinition | None:
    token_type = _owner(token_raw, ctx)
    return token_type.create_option(token_raw.strip(), ctx) if token_type else None


# =============================================================================
# Substitution
# =============================================================================


def _top_level_references(syntax: str) -> list[re.Match[str]]:
    """References outside function-call parentheses."""
    matches = []
    depth = 0
    scanned = 0
    for m in REFERENCE_RE.finditer(syntax):
        for c in syntax[scanned : m.start()]:
            if c == "(":
                depth += 1
            elif c == ")" and depth > 0:
                depth -= 1
        scanned = m.start()
        if depth == 0:
            matches.append(m)
    return matches


def _append_ranges(syntax: str, ranges: list[str]) -> str:
    """Add ``ranges`` to every top-level data type reference in ``syntax``."""
    suffix = " ".join(ranges)
    out: list[str] = []
    pos = 0
    for m in _top_level_references(syntax):
        out.append(syntax[pos : m.start()])
        out.append(f"<{m.group(1)}{m.group(2).rstrip()} {suffix}>")
        pos = m.end()
    out.append(syntax[pos:])
    return "".join(out)


def _is_atom(syntax: str) -> bool:
    return bool(_ATOM_RE.match(syntax)) or bool(FUNCTION_RE.match(syntax))


def _substitute(syntax: str, ctx: GrammarContext, chain: tuple[str, ...]) -> str:
    out: list[str] = []
    pos = 0
    for m in _top_level_references(syntax):
        key = f"<{m.group(1)}>"
        definition = ctx.tokens.get(key)
        if definition is None or definition.is_primitive:
            continue
        if key in chain:
            raise CyclicTokenDefinitionError([*chain, key])

        body = _substitute(definition.syntax.strip(), ctx, (*chain, key))
        ranges = _RANGE_LITERAL_RE.findall(m.group(2))
        if ranges:
            body = _append_ranges(body, ranges)
        if not _is_atom(body):
            body = f"[ {body} ]"

        out.append(syntax[pos : m.start()])
        out.append(body)
        pos = m.end()
    out.append(syntax[pos:])
    return "".join(out)


def expand_tokens(syntax: str, ctx: GrammarContext) -> str:
    """
    Recursively replace registered token references by their definitions.

    Primitive tokens (defined as themselves) are leaves. Ranges on a
    reference are appended to every reference its definition introduces, and
    a definition that is more than a single atom is bracketed so the outer
    multipliers and combinators still bind to it as a whole. References
    inside function arguments are left for the function's own expansion.

    Args:
        syntax: Raw syntax string
        ctx: Grammar context

    Returns:
        Syntax with only primitive, unknown, keyword and function tokens left

    Raises:
        CyclicTokenDefinitionError: If a definition refers back to itself

    Examples:
        >>> expand_tokens("<length-percentage>{1,4}", ctx)
        '[ <length> | <percentage> ]{1,4}'
        >>> expand_tokens("<ratio [0,10]>", ctx)
        '[ <number [0,∞] [0,10]> [ / <number [0,∞] [0,10]> ]? ]'
    """
    if not syntax.strip():
        return syntax
    expanded = _substitute(syntax, ctx, ())
    if expanded != syntax:
        logger.debug("Expanded tokens %r -> %r", syntax, expanded)
    return expanded


def find_unknown_tokens(syntax: str, ctx: GrammarContext) -> list[str]:
    """Canonical data type references in ``syntax`` with no registered definition."""
    unknown: list[str] = []
    for m in _top_level_references(syntax):
        key = f"<{m.group(1)}>"
        if key not in ctx.tokens and key not in unknown:
            unknown.append(key)
    return unknown
