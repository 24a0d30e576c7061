"""
Tests for the value definition syntax language.

Covers:
- Tokenizer: atoms, combinators, multipliers, error positions
- Parser: precedence, groups, multipliers, malformed input
- Expander: combinator semantics, ordering, separators, multipliers,
  engine limits, unknown tokens and memoization
"""

from __future__ import annotations

import logging

import pytest

from stylegrammar.core.errors import CombinatorLimitError, SyntaxParseError
from stylegrammar.core.ir import (
    AllOrder,
    AnyOrder,
    Atom,
    AtomKind,
    Choice,
    CommaList,
    Group,
    Multiplied,
    Separator,
    Sequence,
)
from stylegrammar.core.syntax_lang import TokenKind, expand_syntax, parse_syntax, tokenize

# =============================================================================
# Tokenizer Tests
# =============================================================================


def _kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(source)]


class TestTokenizer:
    """Tests for the syntax tokenizer."""

    def test_data_type_with_ranges_is_one_token(self) -> None:
        tokens = tokenize("<number [0,∞] [0,10]>")
        assert tokens[0].kind == TokenKind.DATA_TYPE
        assert tokens[0].value == "<number [0,∞] [0,10]>"
        assert tokens[1].kind == TokenKind.EOF

    def test_function_call_is_one_token(self) -> None:
        tokens = tokenize("minmax(<length>, fit-content(<length>)) auto")
        assert tokens[0].kind == TokenKind.FUNCTION
        assert tokens[0].value == "minmax(<length>, fit-content(<length>))"
        assert tokens[1].kind == TokenKind.KEYWORD

    def test_keywords(self) -> None:
        tokens = tokenize("min-content -webkit-box")
        assert [t.value for t in tokens[:-1]] == ["min-content", "-webkit-box"]

    def test_string_literal(self) -> None:
        tokens = tokenize('"a b" \'c\'')
        assert [t.kind for t in tokens[:-1]] == [TokenKind.STRING, TokenKind.STRING]
        assert tokens[0].value == '"a b"'

    def test_combinators(self) -> None:
        assert _kinds("a | b || c && d") == [
            TokenKind.KEYWORD,
            TokenKind.BAR,
            TokenKind.KEYWORD,
            TokenKind.DOUBLE_BAR,
            TokenKind.KEYWORD,
            TokenKind.DOUBLE_AMP,
            TokenKind.KEYWORD,
            TokenKind.EOF,
        ]

    def test_multipliers(self) -> None:
        assert _kinds("a? b* c+ d# e{1,4} [f]!") == [
            TokenKind.KEYWORD,
            TokenKind.QUESTION,
            TokenKind.KEYWORD,
            TokenKind.STAR,
            TokenKind.KEYWORD,
            TokenKind.PLUS,
            TokenKind.KEYWORD,
            TokenKind.HASH,
            TokenKind.KEYWORD,
            TokenKind.RANGE,
            TokenKind.LBRACKET,
            TokenKind.KEYWORD,
            TokenKind.RBRACKET,
            TokenKind.BANG,
            TokenKind.EOF,
        ]

    def test_literal_separators(self) -> None:
        assert _kinds("a / b , c") == [
            TokenKind.KEYWORD,
            TokenKind.SLASH,
            TokenKind.KEYWORD,
            TokenKind.COMMA,
            TokenKind.KEYWORD,
            TokenKind.EOF,
        ]

    def test_positions(self) -> None:
        tokens = tokenize("a  || b")
        assert [t.pos for t in tokens] == [0, 3, 6, 7]

    def test_unexpected_character(self) -> None:
        with pytest.raises(SyntaxParseError) as exc_info:
            tokenize("a & b")
        assert exc_info.value.context.position == 2
        assert "Unexpected character" in str(exc_info.value)

    def test_unbalanced_function(self) -> None:
        with pytest.raises(SyntaxParseError, match="Unbalanced"):
            tokenize("fit-content(<length>")

    def test_malformed_data_type(self) -> None:
        with pytest.raises(SyntaxParseError, match="data type"):
            tokenize("<length")

    def test_malformed_range(self) -> None:
        with pytest.raises(SyntaxParseError):
            tokenize("a{x}")

    def test_unterminated_string(self) -> None:
        with pytest.raises(SyntaxParseError, match="Unterminated"):
            tokenize('"abc')


# =============================================================================
# Parser Tests
# =============================================================================


class TestParser:
    """Tests for the recursive descent parser."""

    def test_blank_is_none(self) -> None:
        assert parse_syntax("") is None
        assert parse_syntax("   ") is None

    def test_atom(self) -> None:
        node = parse_syntax("<length [0,∞]>")
        assert node == Atom(kind=AtomKind.TOKEN, text="<length [0,∞]>")

    def test_sequence_binds_tighter_than_bar(self) -> None:
        node = parse_syntax("a b | c")
        assert isinstance(node, Choice)
        assert isinstance(node.options[0], Sequence)
        assert str(node) == "a b | c"

    def test_precedence_chain(self) -> None:
        node = parse_syntax("a | b || c && d e")
        assert isinstance(node, Choice)
        any_order = node.options[1]
        assert isinstance(any_order, AnyOrder)
        all_order = any_order.operands[1]
        assert isinstance(all_order, AllOrder)
        assert isinstance(all_order.operands[1], Sequence)

    def test_comma_is_lowest(self) -> None:
        node = parse_syntax("a | b, c")
        assert isinstance(node, CommaList)
        assert isinstance(node.items[0], Choice)

    def test_slash_in_sequence(self) -> None:
        node = parse_syntax("a / b")
        assert isinstance(node, Sequence)
        assert node.items[1] == Separator(char="/")

    def test_group_with_multiplier(self) -> None:
        node = parse_syntax("[a b]?")
        assert isinstance(node, Multiplied)
        assert isinstance(node.node, Group)
        assert (node.min_count, node.max_count) == (0, 1)

    def test_multiplier_bounds(self) -> None:
        assert (parse_syntax("a*").min_count, parse_syntax("a*").max_count) == (0, None)
        assert (parse_syntax("a+").min_count, parse_syntax("a+").max_count) == (1, None)
        assert (parse_syntax("a{2}").min_count, parse_syntax("a{2}").max_count) == (2, 2)
        assert (parse_syntax("a{1,}").min_count, parse_syntax("a{1,}").max_count) == (1, None)
        assert (parse_syntax("a{1,4}").min_count, parse_syntax("a{1,4}").max_count) == (1, 4)

    def test_hash_with_range(self) -> None:
        node = parse_syntax("a#{1,3}")
        assert node.comma is True
        assert (node.min_count, node.max_count) == (1, 3)
        assert str(node) == "a#{1,3}"

    def test_bang_after_group(self) -> None:
        node = parse_syntax("[a? b?]!")
        assert isinstance(node, Multiplied)
        assert node.required is True

    def test_stacked_multipliers(self) -> None:
        node = parse_syntax("a+?")
        assert isinstance(node, Multiplied)
        assert isinstance(node.node, Multiplied)

    @pytest.mark.parametrize(
        "source",
        [
            "[a b",
            "a ]",
            "| a",
            "a ||",
            "a && && b",
            "?",
            "a!",
            "a{3,1}",
            "/",
            "[]",
        ],
    )
    def test_malformed(self, source: str) -> None:
        with pytest.raises(SyntaxParseError):
            parse_syntax(source)

    def test_error_carries_position(self) -> None:
        with pytest.raises(SyntaxParseError) as exc_info:
            parse_syntax("a ]")
        assert exc_info.value.context.position == 2
        assert "^" in str(exc_info.value)


# =============================================================================
# Expander Tests
# =============================================================================


class TestCombinators:
    """Variant sets of the combinators."""

    def test_bar(self, ctx) -> None:
        assert expand_syntax("a | b", ctx).variants_canonical == ["a", "b"]

    def test_double_amp(self, ctx) -> None:
        assert expand_syntax("a && b", ctx).variants_canonical == ["a b", "b a"]

    def test_double_bar(self, ctx) -> None:
        assert expand_syntax("a || b", ctx).variants_canonical == ["a", "b", "a b", "b a"]

    def test_double_bar_counts(self, ctx) -> None:
        # 4 + 12 + 24 + 24
        assert len(expand_syntax("a || b || c || d", ctx).variants) == 64

    def test_bar_sorted_by_length(self, ctx) -> None:
        assert expand_syntax("long-word | a | mid", ctx).variants_parsed == [
            "a",
            "mid",
            "long-word",
        ]

    def test_sequence(self, ctx) -> None:
        assert expand_syntax("a [b | c]", ctx).variants_canonical == ["a b", "a c"]

    def test_brackets_only_group(self, ctx) -> None:
        assert expand_syntax("[a]", ctx).variants_canonical == ["a"]

    def test_comma_list(self, ctx) -> None:
        result = expand_syntax("a | b, c", ctx)
        assert result.variants_canonical == ["a,c", "b,c"]
        assert result.separators_per_variant == [[","], [","]]

    def test_duplicates_removed(self, ctx) -> None:
        assert expand_syntax("a | a | b", ctx).variants_canonical == ["a", "b"]


class TestTokensInVariants:
    """Canonical forms and separators of expanded variants."""

    def test_parsed_keeps_ranges(self, ctx) -> None:
        result = expand_syntax("auto | <length [0,∞]>", ctx)
        assert result.variants_parsed == ["auto", "<length [0,∞]>"]
        assert result.variants_canonical == ["auto", "<length>"]

    def test_width_property(self, ctx) -> None:
        result = expand_syntax(ctx.style_syntax("width"), ctx)
        assert result.variants_canonical == [
            "auto",
            "min-content",
            "max-content",
            "fit-content",
            "<length>",
            "<percentage>",
        ]

    def test_composed_token_with_multiplier(self, ctx) -> None:
        result = expand_syntax("<length-percentage>{1,2}", ctx)
        assert result.variants_canonical == [
            "<length>",
            "<percentage>",
            "<length> <length>",
            "<length> <percentage>",
            "<percentage> <length>",
            "<percentage> <percentage>",
        ]

    def test_slash_separator(self, ratio_ctx) -> None:
        result = expand_syntax("<ratio>", ratio_ctx)
        assert result.variants_canonical == ["<number>/<number>"]
        assert result.separators_per_variant == [["/"]]

    def test_optional_slash_group(self, ctx) -> None:
        result = expand_syntax("<ratio>", ctx)
        assert result.variants_canonical == ["<number>", "<number>/<number>"]
        assert result.separators_per_variant == [[], ["/"]]

    def test_function_token(self, ctx) -> None:
        result = expand_syntax("fit-content(<length-percentage [0,∞]>) | none", ctx)
        assert result.variants_canonical == ["none", "fit-content()"]
        assert result.variants_parsed[1] == "fit-content(<length-percentage [0,∞]>)"

    def test_quoted_string_is_its_own_canonical(self, ctx) -> None:
        result = expand_syntax('"x" <length>', ctx)
        assert result.variants[0].canonical == ('"x"', "<length>")

    def test_variant_shape(self, ctx) -> None:
        variant = expand_syntax("a / b c", ctx).variants[0]
        assert variant.parsed == ("a", "b", "c")
        assert variant.separators == ("/", " ")
        assert variant.syntax == "a/b c"
        assert len(variant) == 3


class TestMultipliers:
    """Repetition and optionality."""

    def test_optional(self, ctx) -> None:
        assert expand_syntax("a b?", ctx).variants_canonical == ["a", "a b"]

    def test_exact(self, ctx) -> None:
        assert expand_syntax("a{2}", ctx).variants_canonical == ["a a"]

    def test_range_over_choice(self, ctx) -> None:
        assert expand_syntax("[a | b]{1,2}", ctx).variants_canonical == [
            "a",
            "b",
            "a a",
            "a b",
            "b a",
            "b b",
        ]

    def test_plus_capped_by_max_repeat(self, ctx, make_ctx) -> None:
        assert expand_syntax("a+", ctx).variants_canonical == ["a", "a a"]
        wide = make_ctx(max_repeat=3)
        assert expand_syntax("a+", wide).variants_canonical == ["a", "a a", "a a a"]

    def test_star_drops_empty_variant(self, ctx) -> None:
        assert expand_syntax("a*", ctx).variants_canonical == ["a", "a a"]

    def test_open_range_minimum_exceeds_cap(self, ctx) -> None:
        assert expand_syntax("a{3,}", ctx).variants_canonical == ["a a a"]

    def test_hash_is_comma_separated(self, ctx) -> None:
        result = expand_syntax("a#{1,3}", ctx)
        assert result.variants_parsed == ["a", "a,a", "a,a,a"]
        assert result.separators_per_variant[2] == [",", ","]

    def test_bang_requires_a_value(self, ctx) -> None:
        assert expand_syntax("x [a? b?]!", ctx).variants_canonical == ["x b", "x a", "x a b"]
        assert expand_syntax("x [a? b?]", ctx).variants_canonical == [
            "x",
            "x b",
            "x a",
            "x a b",
        ]


class TestExpansionEdgeCases:
    """Empty input, unknown tokens and engine limits."""

    def test_empty_syntax(self, ctx) -> None:
        result = expand_syntax("", ctx)
        assert result.is_empty
        assert result.variants_parsed == []

    def test_unknown_token_branches_skipped(self, ctx) -> None:
        result = expand_syntax("foo || <bar>", ctx)
        assert result.expanded == "foo || <bar>"
        assert result.variants_canonical == ["foo"]
        assert result.unknown_tokens == ("<bar>",)

    def test_too_many_operands(self, ctx) -> None:
        with pytest.raises(CombinatorLimitError):
            expand_syntax("a || b || c || d || e", ctx)
        with pytest.raises(CombinatorLimitError):
            expand_syntax("a && b && c && d && e", ctx)

    def test_operand_limit_configurable(self, make_ctx) -> None:
        small = make_ctx(max_operands=2)
        with pytest.raises(CombinatorLimitError):
            expand_syntax("a || b || c", small)

    def test_truncated_with_warning(self, make_ctx, caplog) -> None:
        small = make_ctx(max_variants=3)
        with caplog.at_level(logging.WARNING, logger="stylegrammar"):
            result = expand_syntax("a | b | c | d", small)
        assert result.variants_canonical == ["a", "b", "c"]
        assert "truncated" in caplog.text

    def test_malformed_syntax_raises(self, ctx) -> None:
        with pytest.raises(SyntaxParseError):
            expand_syntax("a ||", ctx)


class TestExpansionCache:
    """Memoization per context."""

    def test_repeat_calls_share_result(self, ctx) -> None:
        first = expand_syntax("a || b", ctx)
        second = expand_syntax("a || b", ctx)
        assert first is second
        assert ctx.cache_hits == 1

    def test_deterministic_across_contexts(self, ctx, make_ctx) -> None:
        other = make_ctx()
        syntax = "a || <length> || b"
        assert expand_syntax(syntax, ctx).variants == expand_syntax(syntax, other).variants

    def test_lru_eviction(self, make_ctx) -> None:
        small = make_ctx(cache_size=2)
        for syntax in ("a", "b", "c"):
            expand_syntax(syntax, small)
        assert small.cache_size == 2
        misses = small.cache_misses
        expand_syntax("a", small)
        assert small.cache_misses == misses + 1

    def test_clear_cache(self, ctx) -> None:
        expand_syntax("a", ctx)
        ctx.clear_cache()
        assert ctx.cache_size == 0
        assert ctx.cache_hits == 0
