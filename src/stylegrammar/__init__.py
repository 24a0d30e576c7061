"""
stylegrammar - CSS Value Definition Syntax engine for visual style editors.

Expands property grammars into concrete variants, maps in-progress values
onto per-slot option menus and applies single-slot edits.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import StyleGrammarError, SyntaxParseError
from .core.registry import GrammarContext
from .core.slots import apply_slot_edit, build_slot_options, build_slot_table
from .core.syntax_lang import expand_syntax


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("stylegrammar")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "GrammarContext",
    "StyleGrammarError",
    "SyntaxParseError",
    "expand_syntax",
    "build_slot_table",
    "build_slot_options",
    "apply_slot_edit",
]
