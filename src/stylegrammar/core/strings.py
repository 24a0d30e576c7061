"""
String utility functions for stylegrammar.

Top-level splitting and joining that respects nested brackets and quotes,
shared by the syntax tokenizer, the token registry and the value serializer.
"""

from __future__ import annotations

_OPENERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_CLOSERS = {v: k for k, v in _OPENERS.items()}

_SYMBOL_PAIRS = {
    "()": ("(", ")"),
    "[]": ("[", "]"),
    "{}": ("{", "}"),
    "<>": ("<", ">"),
}


def _scan_top_level(
    text: str, separators: list[str]
) -> tuple[list[str], list[str]]:
    """Scan text once, returning top-level parts and the separator before each part."""
    # Longest first so "||" wins over "|"
    seps = sorted((s for s in separators if s), key=len, reverse=True)
    parts: list[str] = []
    found: list[str] = []
    depth = {opener: 0 for opener in _OPENERS}
    quote: str | None = None
    pending: str | None = None
    buf: list[str] = []

    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if quote:
            if c == quote:
                quote = None
        elif c in ('"', "'") and text.find(c, i + 1) != -1:
            # An unmatched quote is an ordinary character
            quote = c
        elif c in _OPENERS:
            depth[c] += 1
        elif c in _CLOSERS and depth[_CLOSERS[c]] > 0:
            depth[_CLOSERS[c]] -= 1

        matched = None
        if quote is None and not any(depth.values()):
            for sep in seps:
                if text.startswith(sep, i):
                    matched = sep
                    break

        if matched is None:
            buf.append(c)
            i += 1
            continue

        chunk = "".join(buf).strip()
        buf = []
        if chunk:
            if parts:
                found.append(pending if pending is not None else " ")
            parts.append(chunk)
            pending = matched
        elif parts:
            # Runs of separators collapse; anything beats a space
            if pending is None or pending.isspace():
                pending = matched
        i += len(matched)

    chunk = "".join(buf).strip()
    if chunk:
        if parts:
            found.append(pending if pending is not None else " ")
        parts.append(chunk)
    return parts, found


def split_advanced(text: str, separators: str | list[str]) -> list[str]:
    """
    Split a string by one or more separators at the top level only.

    Separators inside (), [], {}, <> or quotes are ignored. Parts are
    trimmed and empty parts dropped.

    Args:
        text: String to split
        separators: Separator string or list of separator strings

    Returns:
        List of top-level parts

    Examples:
        >>> split_advanced("rgb(0, 0, 0) 10px", " ")
        ['rgb(0, 0, 0)', '10px']
        >>> split_advanced("a || [b | c]", "|")
        ['a', '[b | c]']
    """
    seps = [separators] if isinstance(separators, str) else list(separators)
    parts, _ = _scan_top_level(text, seps)
    return parts


def split_advanced_with_separators(
    text: str, separators: list[str]
) -> tuple[list[str], list[str]]:
    """
    Split like ``split_advanced`` and also return the separator at each boundary.

    Consecutive separators collapse to one; a non-space separator wins over
    surrounding whitespace, so ``"1px , 2px"`` yields ``[","]``.

    Returns:
        Tuple of (parts, separators) where ``len(separators) == len(parts) - 1``
    """
    return _scan_top_level(text, separators)


def join_advanced(parts: list[str], separators: list[str]) -> str:
    """
    Join parts with the separator recorded for each boundary.

    If no separators are provided, joins with a single space. Missing trailing
    separators default to a space.

    Examples:
        >>> join_advanced(["16", "9"], ["/"])
        '16/9'
        >>> join_advanced(["1px", "solid"], [])
        '1px solid'
    """
    if not separators:
        return " ".join(parts)
    out: list[str] = []
    for index, part in enumerate(parts):
        if index > 0:
            out.append(separators[index - 1] if index - 1 < len(separators) else " ")
        out.append(part)
    return "".join(out).strip()


def extract_between(text: str, symbol: str) -> str | None:
    """
    Extract the content of the first top-level pair of symbols.

    Args:
        text: String to search
        symbol: One of "()", "[]", "{}", "<>"

    Returns:
        Content between the first opening symbol and its matching close, or None

    Examples:
        >>> extract_between("fit-content(<length [0,∞]>)", "()")
        '<length [0,∞]>'
        >>> extract_between("<length [0,10]>", "[]")
        '0,10'
    """
    open_char, close_char = _SYMBOL_PAIRS[symbol]
    depth = 0
    start = -1
    quote: str | None = None
    for i, c in enumerate(text):
        if quote:
            if c == quote:
                quote = None
        elif c in ('"', "'") and text.find(c, i + 1) != -1:
            quote = c
        elif c == open_char:
            if depth == 0:
                start = i + 1
            depth += 1
        elif c == close_char and depth > 0:
            depth -= 1
            if depth == 0 and start != -1:
                return text[start:i]
    return None
