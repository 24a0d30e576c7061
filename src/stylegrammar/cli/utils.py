"""
stylegrammar CLI utilities.

Shared helpers used across CLI modules: version reporting, logging setup and
the grammar context built from the global options.
"""

from __future__ import annotations

import logging
import os
import platform
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from stylegrammar.core.config import EngineConfig, find_config, load_config
from stylegrammar.core.errors import StyleGrammarError
from stylegrammar.core.registry import GrammarContext

LOG_LEVEL_ENV = "STYLEGRAMMAR_LOG_LEVEL"

console = Console()
err_console = Console(stderr=True)

# Set by the main callback
_config_path: Path | None = None
_context: GrammarContext | None = None


def get_version() -> str:
    """Get stylegrammar version from the package."""
    from stylegrammar import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"stylegrammar version {get_version()}")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Configure root logging from ``--verbose`` or ``STYLEGRAMMAR_LOG_LEVEL``."""
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("stylegrammar").setLevel(level)


def set_config_path(path: Path | None) -> None:
    global _config_path, _context
    _config_path = path
    _context = None


def get_context() -> GrammarContext:
    """Built-in grammar context with the configured engine limits (built once)."""
    global _context
    if _context is None:
        try:
            config: EngineConfig = load_config(_config_path) if _config_path else find_config()
            _context = GrammarContext.default(config)
        except StyleGrammarError as e:
            raise fail(str(e)) from e
    return _context


def fail(message: str) -> typer.Exit:
    err_console.print(f"[red]{escape(message)}[/red]")
    return typer.Exit(code=1)


def resolve_syntax(syntax: str | None, property_name: str | None) -> str:
    """Pick the syntax from ``--syntax``/argument or a catalogued ``--property``."""
    if property_name:
        try:
            return get_context().style_syntax(property_name)
        except StyleGrammarError as e:
            raise fail(str(e)) from e
    if syntax is None:
        raise fail("Provide a syntax or --property NAME")
    return syntax
