"""
Splitting and serializing concrete CSS values.

A value splits at the top level on whitespace, commas and slashes; function
arguments and quoted strings stay whole. The separator found at each
boundary is kept so a value can be rebuilt exactly.
"""

from __future__ import annotations

from .strings import join_advanced, split_advanced, split_advanced_with_separators

VALUE_SEPARATORS = [" ", "\t", "\n", ",", "/"]


def _normalize(separators: list[str]) -> list[str]:
    return [" " if sep.isspace() else sep for sep in separators]


def split_value(value: str) -> list[str]:
    """
    Split a value into fragments.

    Examples:
        >>> split_value("rgba(0,0,0,0.5) 10px")
        ['rgba(0,0,0,0.5)', '10px']
        >>> split_value("16 / 9")
        ['16', '9']
        >>> split_value("")
        []
    """
    return split_advanced(value, VALUE_SEPARATORS)


def split_with_separators(value: str) -> tuple[list[str], list[str]]:
    """
    Split a value into fragments and the separator at each boundary.

    Runs of separator characters collapse to one; a comma or slash wins over
    surrounding whitespace.

    Examples:
        >>> split_with_separators("1px , 2px 3px")
        (['1px', '2px', '3px'], [',', ' '])
    """
    fragments, separators = split_advanced_with_separators(value, VALUE_SEPARATORS)
    return fragments, _normalize(separators)


def separators_of(value: str) -> list[str]:
    return split_with_separators(value)[1]


def join_value(fragments: list[str], separators: list[str]) -> str:
    """
    Rebuild a value from fragments, using the recorded separator per boundary.

    Examples:
        >>> join_value(["16", "9"], ["/"])
        '16/9'
        >>> join_value(["10px", "auto"], [])
        '10px auto'
    """
    return join_advanced(list(fragments), list(separators))
