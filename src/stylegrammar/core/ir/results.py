"""
Not-found results returned across the engine's public boundary.

These describe expected conditions so UI layers can degrade gracefully (for
example by showing a plain text box). They are values, never raised.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UnknownToken(BaseModel):
    """A syntax referenced a token with no registered definition."""

    token: str
    syntax: str

    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"Unknown token {self.token} in {self.syntax!r}"


class UnclassifiableValue(BaseModel):
    """A value fragment matched no registered token type."""

    value: str
    fragment: str
    index: int = Field(ge=0, description="Position of the fragment in the value")

    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"Cannot classify {self.fragment!r} (fragment {self.index} of {self.value!r})"


class NoMatchingVariant(BaseModel):
    """A value's tokens match no variant of the syntax, not even as a prefix."""

    syntax: str
    value: str
    value_tokens: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        tokens = " ".join(self.value_tokens) or "<empty>"
        return f"No variant of {self.syntax!r} matches {self.value!r} ({tokens})"


NotFound = UnknownToken | UnclassifiableValue | NoMatchingVariant
