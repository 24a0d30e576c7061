"""
Token, unit and style definition types.

These are the static catalog entries a ``GrammarContext`` is built from.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnitType(StrEnum):
    """Data type a unit belongs to; ``<{type}>`` is the token a dimension maps to."""

    LENGTH = "length"
    PERCENTAGE = "percentage"
    ANGLE = "angle"
    FLEX = "flex"
    TIME = "time"
    RESOLUTION = "resolution"


class TokenDefinition(BaseModel):
    """
    A primitive or composed grammar symbol.

    Attributes:
        key: Canonical reference, e.g. ``<length>``
        syntax: Defining syntax; equal to ``key`` for primitives
        type: Key of the owning token type (``length``, ``color``, ``composed``, ...)
        default: Literal used to back-fill a slot holding this token
    """

    key: str
    syntax: str
    type: str
    default: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("key")
    @classmethod
    def _key_is_reference(cls, v: str) -> str:
        if not (v.startswith("<") and v.endswith(">")) or len(v) < 3:
            raise ValueError(f"token key must look like <name>, got {v!r}")
        return v

    @property
    def is_primitive(self) -> bool:
        """Defined as itself (a leaf of token expansion)."""
        return self.syntax.strip() == self.key


class UnitDefinition(BaseModel):
    """A CSS unit (``px``, ``%``, ``deg``) and the data type it produces."""

    key: str
    type: UnitType
    category: str = Field(default="absolute", description="relative, absolute, angle, ...")
    supported: str = Field(default="widely", description="Browser support: widely / not widely")

    model_config = ConfigDict(frozen=True)


class RangeParam(BaseModel):
    """Numeric bound written as ``[min,max]`` in a token reference."""

    type: Literal["range"] = "range"
    min: float = -math.inf
    max: float = math.inf

    model_config = ConfigDict(frozen=True)

    def contains(self, number: float) -> bool:
        return self.min <= number <= self.max

    def intersect(self, other: RangeParam) -> RangeParam:
        return RangeParam(min=max(self.min, other.min), max=min(self.max, other.max))


class FunctionParam(BaseModel):
    """Argument syntax of a function token, e.g. ``<length-percentage>`` in ``fit-content(...)``."""

    type: Literal["function"] = "function"
    syntax: str

    model_config = ConfigDict(frozen=True)


TokenParam = RangeParam | FunctionParam


class StyleDefinition(BaseModel):
    """A style property and the syntax of its legal values."""

    key: str
    syntax: str
    description: str = ""

    model_config = ConfigDict(frozen=True)
