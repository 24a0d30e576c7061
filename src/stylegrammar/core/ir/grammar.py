"""
Value Definition Syntax AST types.

The parser in ``stylegrammar.core.syntax_lang.parser`` produces these nodes
from a token-expanded syntax string; the expander walks them to produce the
concrete variants.

Supports:
- Atoms: keywords, <data-type> references, function calls, quoted strings
- Literal separators: "/" and "," inside sequences
- Sequences (juxtaposition), "|", "||", "&&" and top-level "," lists
- Bracket groups with multipliers: ?, *, +, #, {m}, {m,}, {m,n}, !
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AtomKind(StrEnum):
    """Kinds of indivisible syntax fragments."""

    KEYWORD = "keyword"
    TOKEN = "token"  # <length [0,∞]>
    FUNCTION = "function"  # fit-content(<length>)
    STRING = "string"  # "literal"


class Atom(BaseModel):
    """A single fragment of a value: one slot in the editor."""

    kind: AtomKind
    text: str = Field(description="Fragment text exactly as written in the syntax")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.text


class Separator(BaseModel):
    """A literal "/" or "," written between fragments of a sequence."""

    char: str = Field(description="Separator character")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.char


class Sequence(BaseModel):
    """Juxtaposed items, all required, in order."""

    items: list[Node]

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self.items)


class Choice(BaseModel):
    """Exactly one of the options ("|")."""

    options: list[Node]

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return " | ".join(str(o) for o in self.options)


class AnyOrder(BaseModel):
    """One or more of the operands, in any order ("||")."""

    operands: list[Node]

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return " || ".join(str(o) for o in self.operands)


class AllOrder(BaseModel):
    """All operands, in any order ("&&")."""

    operands: list[Node]

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return " && ".join(str(o) for o in self.operands)


class CommaList(BaseModel):
    """Independent comma-separated parts of a top-level list (",")."""

    items: list[Node]

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return ", ".join(str(i) for i in self.items)


class Group(BaseModel):
    """A bracketed group "[ ... ]"."""

    body: Node

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"[ {self.body} ]"


class Multiplied(BaseModel):
    """
    A node followed by a multiplier.

    ``max_count`` of None means unbounded; the expander caps it with
    ``EngineConfig.max_repeat``.
    """

    node: Node
    min_count: int = Field(ge=0)
    max_count: int | None = Field(default=None)
    comma: bool = Field(default=False, description="Repetitions are comma separated (#)")
    required: bool = Field(default=False, description="Group must not be empty (!)")
    suffix: str = Field(default="", description="Multiplier as written")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.node}{self.suffix}"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Node = Atom | Separator | Sequence | Choice | AnyOrder | AllOrder | CommaList | Group | Multiplied

# Rebuild models for recursive forward references
Sequence.model_rebuild()
Choice.model_rebuild()
AnyOrder.model_rebuild()
AllOrder.model_rebuild()
CommaList.model_rebuild()
Group.model_rebuild()
Multiplied.model_rebuild()
