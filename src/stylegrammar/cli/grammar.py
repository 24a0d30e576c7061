"""
Grammar inspection commands: expand, tokens, properties.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from stylegrammar.core.errors import StyleGrammarError
from stylegrammar.core.tokens import expand_tokens, find_unknown_tokens

from .utils import console, fail, get_context, resolve_syntax


def expand_command(
    syntax: Annotated[str | None, typer.Argument(help="Value definition syntax")] = None,
    property_name: Annotated[
        str | None, typer.Option("--property", "-p", help="Expand a catalogued property")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Print every variant of a syntax: parsed, canonical and separators."""
    source = resolve_syntax(syntax, property_name)
    try:
        expanded = get_context().expand(source)
    except StyleGrammarError as e:
        raise fail(str(e)) from e

    if output_json:
        typer.echo(
            json.dumps(
                {
                    "syntax": expanded.syntax,
                    "expanded": expanded.expanded,
                    "variants_parsed": expanded.variants_parsed,
                    "variants_canonical": expanded.variants_canonical,
                    "separators": expanded.separators_per_variant,
                    "unknown_tokens": list(expanded.unknown_tokens),
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    table = Table(title=escape(source))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Parsed", style="cyan")
    table.add_column("Canonical", style="green")
    table.add_column("Separators")
    for index, variant in enumerate(expanded.variants):
        table.add_row(
            str(index),
            escape(variant.syntax),
            escape(variant.canonical_syntax),
            " ".join(repr(sep) for sep in variant.separators),
        )
    console.print(table)
    console.print(f"{len(expanded.variants)} variants")
    if expanded.unknown_tokens:
        console.print(f"[yellow]Unknown tokens: {escape(', '.join(expanded.unknown_tokens))}[/yellow]")


def tokens_command(
    syntax: Annotated[str, typer.Argument(help="Value definition syntax")],
) -> None:
    """Print the syntax with every registered token reference substituted."""
    ctx = get_context()
    try:
        expanded = expand_tokens(syntax, ctx)
    except StyleGrammarError as e:
        raise fail(str(e)) from e
    typer.echo(expanded)
    unknown = find_unknown_tokens(expanded, ctx)
    if unknown:
        console.print(f"[yellow]Unknown tokens: {escape(', '.join(unknown))}[/yellow]")


def properties_command(
    search: Annotated[
        str | None, typer.Argument(help="Only show properties whose name contains this")
    ] = None,
) -> None:
    """List the catalogued style properties."""
    table = Table(title="Style properties")
    table.add_column("Property", style="cyan")
    table.add_column("Syntax", style="green")
    table.add_column("Description", style="dim")
    for style in get_context().styles:
        if search and search not in style.key:
            continue
        table.add_row(style.key, escape(style.syntax), escape(style.description))
    console.print(table)
