"""
CSS Value Definition Syntax: tokenizer, parser and variant expander.

Usage:
    from stylegrammar.core.syntax_lang import expand_syntax

    expanded = expand_syntax("auto | <length [0,∞]>", ctx)
    expanded.variants_canonical  # ['auto', '<length>']
"""

from .expander import expand_syntax
from .parser import parse_syntax
from .tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "expand_syntax",
    "parse_syntax",
    "tokenize",
]
