"""
Expanded syntax types.

A ``SyntaxVariant`` is one combinator-free reading of a grammar. Variants are
derived data: recomputed (or served from cache) from the raw syntax string.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..strings import join_advanced


class SyntaxVariant(BaseModel):
    """
    One concrete alternative of a syntax.

    Examples:
        ``a | b c`` has the variants ``a`` and ``b c``; the second has
        ``parsed=("b", "c")`` and ``separators=(" ",)``.
    """

    parsed: tuple[str, ...] = Field(description="Raw fragments in original order")
    canonical: tuple[str, ...] = Field(description="Fragments reduced to canonical tokens")
    separators: tuple[str, ...] = Field(description="Separator between each adjacent pair")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_shape(self) -> SyntaxVariant:
        if len(self.parsed) != len(self.canonical):
            raise ValueError("parsed and canonical fragments differ in length")
        if self.parsed and len(self.separators) != len(self.parsed) - 1:
            raise ValueError("need exactly one separator per fragment boundary")
        return self

    @property
    def syntax(self) -> str:
        return join_advanced(list(self.parsed), list(self.separators))

    @property
    def canonical_syntax(self) -> str:
        return join_advanced(list(self.canonical), list(self.separators))

    def __len__(self) -> int:
        return len(self.parsed)

    def __str__(self) -> str:
        return self.syntax


class ExpandedSyntax(BaseModel):
    """Every variant of a raw syntax string, plus what could not be expanded."""

    syntax: str = Field(description="Raw syntax as supplied")
    expanded: str = Field(description="Syntax after token substitution")
    variants: tuple[SyntaxVariant, ...] = ()
    unknown_tokens: tuple[str, ...] = Field(
        default=(), description="Unregistered token references whose branches were skipped"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def variants_parsed(self) -> list[str]:
        return [v.syntax for v in self.variants]

    @property
    def variants_canonical(self) -> list[str]:
        return [v.canonical_syntax for v in self.variants]

    @property
    def separators_per_variant(self) -> list[list[str]]:
        return [list(v.separators) for v in self.variants]

    @property
    def is_empty(self) -> bool:
        return not self.variants
