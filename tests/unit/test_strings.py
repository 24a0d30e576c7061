"""Tests for stylegrammar.core.strings and stylegrammar.core.combinatorics."""

from stylegrammar.core.combinatorics import (
    all_subsets,
    column_sets,
    cross_product,
    dedupe,
    permutations,
)
from stylegrammar.core.strings import (
    extract_between,
    join_advanced,
    split_advanced,
    split_advanced_with_separators,
)


class TestSplitAdvanced:
    """Tests for top-level splitting."""

    def test_splits_on_spaces(self):
        assert split_advanced("a b  c", " ") == ["a", "b", "c"]

    def test_keeps_function_arguments_whole(self):
        assert split_advanced("rgb(0, 0, 0) 10px", " ") == ["rgb(0, 0, 0)", "10px"]

    def test_keeps_brackets_whole(self):
        assert split_advanced("a || [b | c]", "|") == ["a", "[b | c]"]

    def test_keeps_data_type_ranges_whole(self):
        assert split_advanced("<length [0,∞]>, auto", ",") == ["<length [0,∞]>", "auto"]

    def test_keeps_quoted_strings_whole(self):
        assert split_advanced('"Open Sans" serif', " ") == ['"Open Sans"', "serif"]
        assert split_advanced("'a b' c", " ") == ["'a b'", "c"]

    def test_unmatched_quote_is_ordinary(self):
        assert split_advanced("it's a", " ") == ["it's", "a"]
        assert split_advanced('a "b c', " ") == ["a", '"b', "c"]

    def test_multiple_separators(self):
        assert split_advanced("1px,2px/3px 4px", [" ", ",", "/"]) == ["1px", "2px", "3px", "4px"]

    def test_empty_string(self):
        assert split_advanced("", " ") == []
        assert split_advanced("   ", " ") == []


class TestSplitWithSeparators:
    """Tests for splitting that keeps the separator at each boundary."""

    def test_records_each_separator(self):
        parts, seps = split_advanced_with_separators("16/9 auto", [" ", "/"])
        assert parts == ["16", "9", "auto"]
        assert seps == ["/", " "]

    def test_comma_beats_surrounding_space(self):
        parts, seps = split_advanced_with_separators("1px , 2px", [" ", ","])
        assert parts == ["1px", "2px"]
        assert seps == [","]

    def test_one_separator_per_boundary(self):
        parts, seps = split_advanced_with_separators("a b c d", [" "])
        assert len(seps) == len(parts) - 1


class TestJoinAdvanced:
    """Tests for joining with recorded separators."""

    def test_join_with_separators(self):
        assert join_advanced(["16", "9"], ["/"]) == "16/9"
        assert join_advanced(["1px", "2px"], [","]) == "1px,2px"

    def test_join_without_separators_uses_space(self):
        assert join_advanced(["1px", "solid", "red"], []) == "1px solid red"

    def test_missing_trailing_separators_default_to_space(self):
        assert join_advanced(["a", "b", "c"], ["/"]) == "a/b c"

    def test_join_empty(self):
        assert join_advanced([], []) == ""


class TestExtractBetween:
    """Tests for extracting bracketed content."""

    def test_parentheses(self):
        assert extract_between("fit-content(<length [0,∞]>)", "()") == "<length [0,∞]>"

    def test_nested(self):
        assert extract_between("repeat(2, minmax(1px, 2px))", "()") == "2, minmax(1px, 2px)"

    def test_square_brackets(self):
        assert extract_between("<length [0,10]>", "[]") == "0,10"

    def test_ignores_symbols_in_quotes(self):
        assert extract_between('url("a)b")', "()") == '"a)b"'

    def test_missing(self):
        assert extract_between("auto", "()") is None


# =============================================================================
# Combinatorics
# =============================================================================


class TestCombinatorics:
    """Tests for the deterministic combinatorial helpers."""

    def test_cross_product(self) -> None:
        assert cross_product([[1, 2], ["a", "b"]]) == [[1, "a"], [1, "b"], [2, "a"], [2, "b"]]

    def test_cross_product_of_nothing_is_one_empty_row(self) -> None:
        assert cross_product([]) == [[]]

    def test_cross_product_with_empty_group(self) -> None:
        assert cross_product([[1], []]) == []

    def test_all_subsets_bitmask_order(self) -> None:
        assert all_subsets(["a", "b"]) == [[], ["a"], ["b"], ["a", "b"]]
        assert len(all_subsets(["a", "b", "c", "d"])) == 16

    def test_permutations(self) -> None:
        assert permutations(["a", "b"]) == [["a", "b"], ["b", "a"]]
        result = permutations(["a", "b", "c"])
        assert len(result) == 6
        assert result[0] == ["a", "b", "c"]
        assert result[-1] == ["c", "b", "a"]

    def test_permutations_of_nothing(self) -> None:
        assert permutations([]) == [[]]

    def test_column_sets(self) -> None:
        assert column_sets([["a", "b"], ["a", "c"], ["d"]]) == [["a", "d"], ["b", "c"]]

    def test_dedupe_keeps_first_occurrence(self) -> None:
        assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
