"""
Combinatorial helpers for grammar expansion.

All functions return lists in a deterministic order so expansion results are
reproducible.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def cross_product(groups: Sequence[Sequence[T]]) -> list[list[T]]:
    """
    Pick one item from each group, in every possible way.

    Examples:
        >>> cross_product([[1, 2], ["a", "b"]])
        [[1, 'a'], [1, 'b'], [2, 'a'], [2, 'b']]
        >>> cross_product([])
        [[]]
    """
    result: list[list[T]] = [[]]
    for group in groups:
        result = [prefix + [item] for prefix in result for item in group]
    return result


def all_subsets(items: Sequence[T]) -> list[list[T]]:
    """
    Return the power set in bit-mask order, empty subset first.

    Examples:
        >>> all_subsets(["a", "b"])
        [[], ['a'], ['b'], ['a', 'b']]
    """
    total = 1 << len(items)
    return [
        [item for bit, item in enumerate(items) if mask & (1 << bit)]
        for mask in range(total)
    ]


def permutations(items: Sequence[T]) -> list[list[T]]:
    """
    Return every ordering of the items, lexicographic by position.

    Examples:
        >>> permutations(["a", "b"])
        [['a', 'b'], ['b', 'a']]
    """
    if not items:
        return [[]]
    result: list[list[T]] = []
    for index, current in enumerate(items):
        rest = list(items[:index]) + list(items[index + 1 :])
        for perm in permutations(rest):
            result.append([current, *perm])
    return result


def column_sets(rows: Sequence[Sequence[H]]) -> list[list[H]]:
    """
    Collect the unique values of each column across ragged rows.

    Examples:
        >>> column_sets([["a", "b"], ["a", "c"], ["d"]])
        [['a', 'd'], ['b', 'c']]
    """
    columns: list[list[H]] = []
    for row in rows:
        for index, value in enumerate(row):
            if index == len(columns):
                columns.append([])
            if value not in columns[index]:
                columns[index].append(value)
    return columns


def dedupe(items: Sequence[H]) -> list[H]:
    """Remove duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(items))
