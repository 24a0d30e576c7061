"""Shared pytest fixtures for stylegrammar tests."""

from __future__ import annotations

import pytest

from stylegrammar.core.catalog import BUILTIN_UNITS, PRIMITIVE_TOKENS
from stylegrammar.core.config import EngineConfig
from stylegrammar.core.ir import TokenDefinition
from stylegrammar.core.registry import GrammarContext


@pytest.fixture
def ctx() -> GrammarContext:
    """Context with the built-in catalog."""
    return GrammarContext.default()


@pytest.fixture
def make_ctx():
    """Factory for small contexts: primitives + units + the given composed tokens."""

    def _make(composed: dict[str, str] | None = None, **config: int) -> GrammarContext:
        tokens = list(PRIMITIVE_TOKENS)
        for key, syntax in (composed or {}).items():
            tokens.append(TokenDefinition(key=key, syntax=syntax, type="composed"))
        return GrammarContext(tokens=tokens, units=BUILTIN_UNITS, config=EngineConfig(**config))

    return _make


@pytest.fixture
def ratio_ctx(make_ctx) -> GrammarContext:
    """Context where <ratio> requires its denominator."""
    return make_ctx({"<ratio>": "<number [0,∞]> [ / <number [0,∞]> ]"})
