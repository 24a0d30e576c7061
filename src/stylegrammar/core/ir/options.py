"""
Slot option types consumed by the style editor widgets.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .syntax import SyntaxVariant


class OptionDefinition(BaseModel):
    """
    One selectable choice for a slot.

    Keywords yield one option each; every other category yields one
    representative option carrying the data the widget needs (range, units,
    function argument syntax).
    """

    name: str = Field(description="Canonical token, e.g. 'auto', '<length>', 'fit-content()'")
    value: str = Field(description="Literal inserted when the option is picked")
    type: str = Field(description="Token type key")
    category: str = Field(description="Widget family: keyword, length, function, other")
    min: float | None = None
    max: float | None = None
    units: tuple[str, ...] | None = Field(default=None, description="Units for length options")
    syntax: str | None = Field(default=None, description="Argument syntax for function options")

    model_config = ConfigDict(frozen=True)


class SlotTable(BaseModel):
    """
    The option menus for a value being edited.

    ``slots`` has one entry per fragment of ``fragments`` plus, when the
    grammar allows more, one trailing entry for adding the next fragment.
    """

    value: str
    fragments: tuple[str, ...]
    value_tokens: tuple[str, ...] = Field(description="Best-guess canonical token per fragment")
    variant: SyntaxVariant | None = Field(default=None, description="Active variant")
    complete: bool = Field(description="Value matches the active variant exactly")
    filled: tuple[str, ...] = Field(
        default=(), description="Fragments back-filled with defaults up to the variant length"
    )
    slots: tuple[tuple[OptionDefinition, ...], ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def next_slot(self) -> tuple[OptionDefinition, ...]:
        """Options for appending a fragment; empty when nothing may follow."""
        if len(self.slots) > len(self.fragments):
            return self.slots[len(self.fragments)]
        return ()


class VariantMatch(BaseModel):
    """The variant a value's fragments were matched against."""

    variant: SyntaxVariant
    matched: int = Field(ge=0, description="Number of leading fragments matched")

    model_config = ConfigDict(frozen=True)

    @property
    def complete(self) -> bool:
        """Fragments cover the whole variant, not just a prefix."""
        return self.matched == len(self.variant)

    @property
    def missing(self) -> tuple[str, ...]:
        """Raw tokens still to be filled, in order."""
        return self.variant.parsed[self.matched :]
