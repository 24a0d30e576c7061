"""
Token type implementations, one per category of grammar symbol.
"""

from .base import TokenType, parse_range
from .color import ColorType, is_color
from .composed import ComposedType
from .function import FunctionType
from .keyword import KeywordType
from .length import LengthType
from .link import LinkType
from .number import IntegerType, NumberType


def builtin_token_types() -> list[TokenType]:
    """Fresh instances of every built-in category."""
    return [
        KeywordType(),
        FunctionType(),
        LengthType(),
        NumberType(),
        IntegerType(),
        ColorType(),
        LinkType(),
        ComposedType(),
    ]


__all__ = [
    "ColorType",
    "ComposedType",
    "FunctionType",
    "IntegerType",
    "KeywordType",
    "LengthType",
    "LinkType",
    "NumberType",
    "TokenType",
    "builtin_token_types",
    "is_color",
    "parse_range",
]
