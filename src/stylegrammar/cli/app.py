"""
stylegrammar command line interface.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from .grammar import expand_command, properties_command, tokens_command
from .utils import configure_logging, set_config_path, version_callback
from .values import classify_command, edit_command, slots_command

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""stylegrammar – CSS Value Definition Syntax engine

Commands:
  • Grammar: expand, tokens, properties
  • Values:  classify, slots, edit
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Engine config (stylegrammar.toml or pyproject.toml)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
) -> None:
    """stylegrammar CLI main callback for global options."""
    configure_logging(verbose)
    set_config_path(config)


# =============================================================================
# Grammar Commands (imported from cli.grammar)
# =============================================================================

app.command(name="expand")(expand_command)
app.command(name="tokens")(tokens_command)
app.command(name="properties")(properties_command)


# =============================================================================
# Value Commands (imported from cli.values)
# =============================================================================

app.command(name="classify")(classify_command)
app.command(name="slots")(slots_command)
app.command(name="edit")(edit_command)


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
