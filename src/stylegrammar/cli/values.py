"""
Value commands: classify, slots, edit.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from stylegrammar.core.classifier import pick_default_category, value_candidates
from stylegrammar.core.errors import StyleGrammarError
from stylegrammar.core.ir import OptionDefinition, SlotTable
from stylegrammar.core.slots import apply_slot_edit, build_slot_table
from stylegrammar.core.values import split_value, split_with_separators

from .utils import console, fail, get_context, resolve_syntax

SyntaxOption = Annotated[
    str | None, typer.Option("--syntax", "-s", help="Value definition syntax")
]
PropertyOption = Annotated[
    str | None, typer.Option("--property", "-p", help="Catalogued property name")
]


def _describe(option: OptionDefinition) -> str:
    text = option.name
    if option.units:
        text += f" ({', '.join(option.units)})"
    if option.min is not None or option.max is not None:
        low = "-∞" if option.min is None else f"{option.min:g}"
        high = "∞" if option.max is None else f"{option.max:g}"
        text += f" [{low},{high}]"
    return text


def classify_command(
    values: Annotated[list[str], typer.Argument(help="Values to classify")],
) -> None:
    """Print the candidate tokens of every fragment of each value."""
    ctx = get_context()
    table = Table(title="Classification")
    table.add_column("Fragment", style="cyan")
    table.add_column("Best guess", style="green")
    table.add_column("Candidates")
    for value in values:
        for fragment in split_value(value):
            candidates = value_candidates(fragment, ctx)
            best = candidates[0] if candidates else "[red]unclassifiable[/red]"
            table.add_row(
                escape(fragment),
                escape(best) if candidates else best,
                escape(", ".join(candidates)),
            )
    console.print(table)


def slots_command(
    value: Annotated[str, typer.Argument(help="Current value, may be empty")] = "",
    syntax: SyntaxOption = None,
    property_name: PropertyOption = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Print the option table for a value."""
    source = resolve_syntax(syntax, property_name)
    ctx = get_context()
    try:
        table = build_slot_table(source, value, ctx)
    except StyleGrammarError as e:
        raise fail(str(e)) from e
    if not isinstance(table, SlotTable):
        raise fail(str(table))

    if output_json:
        typer.echo(json.dumps(table.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    view = Table(title=escape(f"{source}  ←  {value!r}"))
    view.add_column("Slot", justify="right", style="dim")
    view.add_column("Fragment", style="cyan")
    view.add_column("Default", style="green")
    view.add_column("Options")
    for index, options in enumerate(table.slots):
        fragment = table.fragments[index] if index < len(table.fragments) else "(add)"
        view.add_row(
            str(index),
            escape(fragment),
            pick_default_category(options, ctx) or "",
            escape(", ".join(_describe(o) for o in options)),
        )
    console.print(view)
    status = "complete" if table.complete else f"incomplete, filled as {' '.join(table.filled)!r}"
    console.print(escape(f"Variant: {table.variant} ({status})"))


def edit_command(
    value: Annotated[str, typer.Argument(help="Current value")],
    slot: Annotated[int, typer.Argument(help="Slot index; one past the last appends")],
    new_value: Annotated[str, typer.Argument(help="New fragment; empty removes the slot")],
    syntax: SyntaxOption = None,
    property_name: PropertyOption = None,
) -> None:
    """Apply a single slot edit and print the new value."""
    source = resolve_syntax(syntax, property_name)
    ctx = get_context()
    try:
        fragments, separators = split_with_separators(value)
        result = apply_slot_edit(source, fragments, slot, new_value, ctx, separators)
    except (IndexError, ValueError, StyleGrammarError) as e:
        raise fail(str(e)) from e
    if not isinstance(result, str):
        raise fail(str(result))
    typer.echo(result)
