"""Tests for stylegrammar.core.values (value splitting and serialization)."""

from __future__ import annotations

from stylegrammar.core.values import join_value, separators_of, split_value, split_with_separators


class TestSplitValue:
    """Tests for splitting concrete values into fragments."""

    def test_function_arguments_stay_whole(self) -> None:
        assert split_value("rgba(0,0,0,0.5) 10px") == ["rgba(0,0,0,0.5)", "10px"]

    def test_slash(self) -> None:
        assert split_value("16 / 9") == ["16", "9"]
        assert split_value("16/9") == ["16", "9"]

    def test_comma(self) -> None:
        assert split_value("1s, 2s") == ["1s", "2s"]

    def test_whitespace_kinds(self) -> None:
        assert split_value("a\tb\nc") == ["a", "b", "c"]

    def test_quoted(self) -> None:
        assert split_value('"Open Sans", serif') == ['"Open Sans"', "serif"]

    def test_apostrophe_does_not_swallow_the_rest(self) -> None:
        assert split_value("it's a, b") == ["it's", "a", "b"]

    def test_empty(self) -> None:
        assert split_value("") == []
        assert split_value("   ") == []


class TestSeparators:
    """Tests for the separator recorded at each boundary."""

    def test_mixed(self) -> None:
        assert split_with_separators("1px , 2px 3px") == (["1px", "2px", "3px"], [",", " "])

    def test_whitespace_normalized(self) -> None:
        assert separators_of("a\tb") == [" "]

    def test_slash_beats_space(self) -> None:
        assert separators_of("16 / 9") == ["/"]

    def test_single_fragment(self) -> None:
        assert separators_of("auto") == []


class TestJoinValue:
    def test_uses_recorded_separators(self) -> None:
        assert join_value(["16", "9"], ["/"]) == "16/9"

    def test_defaults_to_space(self) -> None:
        assert join_value(["10px", "auto"], []) == "10px auto"
        assert join_value(["a", "b", "c"], [","]) == "a,b c"

    def test_round_trip(self) -> None:
        for value in ("16/9", "1px,2px 3px", "rgba(0,0,0,0.5) 10px", "auto"):
            fragments, separators = split_with_separators(value)
            assert join_value(fragments, separators) == value
