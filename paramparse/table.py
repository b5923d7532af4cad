# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich table views of a parsed token sequence and of bound fields.

Functions:
- build_parameter_table(parser): Positional values, named values and options.
- build_binding_table(target, bindings): The values `bind()` assigned.
"""
from __future__ import annotations

from typing import Any, Iterable

from rich import box
from rich.markup import escape
from rich.table import Table

from paramparse.binding import FieldBinding
from paramparse.parameter_parser import ParameterParser
from paramparse.tokens import POSITIONAL_KEY_PREFIX


def build_parameter_table(parser: ParameterParser, title: str = "Parameters") -> Table:
    """Table with one row per stored value and one per option."""
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Kind")
    table.add_column("Key")
    table.add_column("Value")

    for key, value in parser.parameters.items():
        kind = "[named]named[/]"
        if key.startswith(POSITIONAL_KEY_PREFIX):
            kind = "[positional]positional[/]"
        table.add_row(kind, escape(key), f"[value]{escape(value)}[/]")

    for name in sorted(parser.options):
        table.add_row("[option]option[/]", escape(name), "[muted]present[/]")

    return table


def build_binding_table(
    target: Any, bindings: Iterable[FieldBinding], title: str = "Bound fields"
) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Field")
    table.add_column("Source")
    table.add_column("Value")

    for binding in bindings:
        source = binding.name
        if binding.position is not None:
            source = f"{binding.name} | {POSITIONAL_KEY_PREFIX}{binding.position}"
        table.add_row(
            escape(binding.field),
            f"[muted]{escape(source)}[/]",
            f"[value]{escape(repr(getattr(target, binding.field)))}[/]",
        )
    return table
