"""
stylegrammar Intermediate Representation (IR) types.

All types are immutable pydantic models, re-exported from this package.
"""

# Syntax AST
from .grammar import (
    AllOrder,
    AnyOrder,
    Atom,
    AtomKind,
    Choice,
    CommaList,
    Group,
    Multiplied,
    Node,
    Separator,
    Sequence,
)

# Slot options
from .options import (
    OptionDefinition,
    SlotTable,
    VariantMatch,
)

# Not-found results
from .results import (
    NoMatchingVariant,
    NotFound,
    UnclassifiableValue,
    UnknownToken,
)

# Expanded syntax
from .syntax import (
    ExpandedSyntax,
    SyntaxVariant,
)

# Catalog entries
from .tokens import (
    FunctionParam,
    RangeParam,
    StyleDefinition,
    TokenDefinition,
    TokenParam,
    UnitDefinition,
    UnitType,
)

__all__ = [
    # Syntax AST
    "AllOrder",
    "AnyOrder",
    "Atom",
    "AtomKind",
    "Choice",
    "CommaList",
    "Group",
    "Multiplied",
    "Node",
    "Separator",
    "Sequence",
    # Slot options
    "OptionDefinition",
    "SlotTable",
    "VariantMatch",
    # Results
    "NoMatchingVariant",
    "NotFound",
    "UnclassifiableValue",
    "UnknownToken",
    # Expanded syntax
    "ExpandedSyntax",
    "SyntaxVariant",
    # Catalog entries
    "FunctionParam",
    "RangeParam",
    "StyleDefinition",
    "TokenDefinition",
    "TokenParam",
    "UnitDefinition",
    "UnitType",
]
