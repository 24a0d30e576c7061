"""Core stylegrammar functionality: IR, token registry, syntax expansion, classification, slots."""

from . import ir
from .classifier import (
    classify_value,
    classify_values,
    find_unclassifiable,
    pick_default_category,
    value_candidates,
)
from .config import EngineConfig, find_config, load_config
from .errors import (
    CombinatorLimitError,
    ConfigError,
    CyclicTokenDefinitionError,
    ErrorContext,
    RegistryError,
    StyleGrammarError,
    SyntaxParseError,
)
from .registry import GrammarContext
from .slots import (
    apply_slot_edit,
    build_slot_options,
    build_slot_table,
    is_value_valid,
    match_variant,
)
from .syntax_lang import expand_syntax
from .tokens import (
    canonicalize,
    classify_token,
    default_value,
    expand_tokens,
    extract_params,
    find_unknown_tokens,
)
from .values import join_value, separators_of, split_value, split_with_separators

__all__ = [
    "ir",
    # Errors
    "StyleGrammarError",
    "SyntaxParseError",
    "CyclicTokenDefinitionError",
    "RegistryError",
    "CombinatorLimitError",
    "ConfigError",
    "ErrorContext",
    # Configuration and context
    "EngineConfig",
    "load_config",
    "find_config",
    "GrammarContext",
    # Tokens
    "canonicalize",
    "classify_token",
    "extract_params",
    "expand_tokens",
    "find_unknown_tokens",
    "default_value",
    # Expansion
    "expand_syntax",
    # Classification
    "value_candidates",
    "classify_value",
    "classify_values",
    "find_unclassifiable",
    "pick_default_category",
    # Slots
    "match_variant",
    "build_slot_table",
    "build_slot_options",
    "apply_slot_edit",
    "is_value_valid",
    # Values
    "split_value",
    "split_with_separators",
    "separators_of",
    "join_value",
]
