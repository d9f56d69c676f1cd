"""Console output formatters using Rich."""

from typing import Any

import msgspec
from rich.console import Console
from rich.markup import escape

from .tree import symbol_to_dict
from ..document import TextDocument
from ..models import Selection, Symbol

console = Console()


def print_json(data: Any):
    """Print data as indented JSON to stdout.

    Accepts plain containers as well as the model dataclasses (Symbol,
    Selection, ...), which msgspec encodes field by field.
    """
    encoded = msgspec.json.format(msgspec.json.encode(data), indent=2)
    print(encoded.decode("utf-8"))


def print_symbols(symbols: list[Symbol], as_json: bool = False):
    """Print a flat symbol listing."""
    if as_json:
        print_json([symbol_to_dict(s) for s in symbols])
        return

    if not symbols:
        console.print("[dim]No symbols found[/dim]")
        return

    for s in symbols:
        kind = f"{escape(s.kind)}: " if s.kind else ""
        console.print(
            f"{kind}[bold]{escape(s.qualified_name)}[/bold] "
            f"[dim]{s.range} in {escape(s.container_kind or '-')}[/dim]"
        )


def print_candidates(paths: list[list[Symbol]], as_json: bool = False):
    """Print multiple candidate symbols."""
    if as_json:
        print_json([
            {
                **symbol_to_dict(path[-1]),
                "path": [s.name for s in path],
            }
            for path in paths
        ])
    else:
        console.print(f"[yellow]Found {len(paths)} candidates:[/yellow]")
        for i, path in enumerate(paths, 1):
            symbol = path[-1]
            console.print(f"  [{i}] {escape(symbol.kind or 'symbol')}: {escape(symbol.qualified_name)}")
            console.print(f"      {symbol.range}")


def print_selection(
    symbol: Symbol, selection: Selection, document: TextDocument, as_json: bool = False
):
    """Print the selection made for a symbol."""
    line = document.line_of(selection.start)
    col = document.column_of(selection.start)
    if as_json:
        print_json({
            "symbol": symbol.qualified_name,
            "start": selection.start,
            "length": selection.length,
            "line": line + 1,
            "column": col + 1,
            "text": document.selected_text,
        })
    else:
        console.print(f"[bold]{escape(symbol.qualified_name)}[/bold]")
        console.print(f"  Selection: start={selection.start} length={selection.length}")
        console.print(f"  Location: {line + 1}:{col + 1}")
        console.print(f"  Text: {escape(document.selected_text or '')}")
