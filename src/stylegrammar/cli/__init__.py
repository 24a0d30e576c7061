"""
stylegrammar CLI Package.

- app.py: main typer application and entry point
- grammar.py: expand, tokens, properties
- values.py: classify, slots, edit
- utils.py: shared utilities (version, logging, grammar context)
"""

from stylegrammar.cli.app import app, main
from stylegrammar.cli.utils import get_version, version_callback

__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
