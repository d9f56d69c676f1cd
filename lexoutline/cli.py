"""Main CLI application."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import msgspec
import typer
from rich.console import Console

from .catalog import DumpSymbolProvider, fetch_catalog
from .config import OutlineConfig, load_config
from .document import TextDocument
from .errors import BadLocationError, NameNotFoundInRange, StaleRangeError, SymbolFetchError
from .models import Symbol
from .outline import OutlineTree
from .queries import OutlineQuery, ResolveQuery, SelectQuery
from .output import (
    outline_to_dict,
    print_candidates,
    print_json,
    print_outline_tree,
    print_selection,
    print_symbols,
)

app = typer.Typer(
    name="lexoutline",
    help="Outline source files from language service symbol dumps",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Outline source files from language service symbol dumps."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def get_config(config: Optional[Path]) -> OutlineConfig:
    """Load config file or return defaults."""
    if config is None:
        return OutlineConfig()
    try:
        return load_config(config)
    except FileNotFoundError:
        err_console.print(f"[red]Error: Config file not found: {config}[/red]")
        raise typer.Exit(1)
    except msgspec.DecodeError as e:
        err_console.print(f"[red]Error: Invalid config file {config}: {e}[/red]")
        raise typer.Exit(1)


def get_tree(file: str, symbols: Path, config: OutlineConfig) -> OutlineTree:
    """Fetch a fresh catalog for file and wrap it in an outline tree."""
    provider = DumpSymbolProvider(symbols)
    try:
        catalog = fetch_catalog(provider, file)
    except SymbolFetchError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    return OutlineTree(catalog, root_kind=config.root_kind)


def to_document_offsets(symbol: Symbol, document: TextDocument) -> Symbol:
    """Translate a symbol range from UTF-16 code units into document indexes.

    Raises:
        StaleRangeError: If the range does not fit the current document.
    """
    try:
        return replace(symbol, range=document.range_from_utf16(symbol.range))
    except BadLocationError as e:
        raise StaleRangeError(symbol, symbol.range.start, symbol.range.length) from e


# =============================================================================
# Commands
# =============================================================================


@app.command()
def outline(
    file: str = typer.Argument(..., help="Source file to outline"),
    symbols: Path = typer.Option(..., "--symbols", "-s", help="Path to symbol dump JSON"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Maximum depth to expand"),
    filter_text: Optional[str] = typer.Option(None, "--filter", "-f", help="Only show names containing text"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config JSON"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show the outline tree of a file."""
    cfg = get_config(config)
    tree = get_tree(file, symbols, cfg)
    max_depth = depth if depth is not None else cfg.max_depth
    result = OutlineQuery(tree).execute(max_depth=max_depth, pattern=filter_text)

    if json_output:
        print_json(outline_to_dict(result))
    else:
        print_outline_tree(result, console)


@app.command("symbols")
def symbols_cmd(
    file: str = typer.Argument(..., help="Source file to list symbols for"),
    symbols: Path = typer.Option(..., "--symbols", "-s", help="Path to symbol dump JSON"),
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="Only list symbols of this kind"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config JSON"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """List the flat symbol catalog of a file, in provider order."""
    tree = get_tree(file, symbols, get_config(config))
    if kind:
        listed = tree.catalog.filter(lambda s: s.kind == kind)
    else:
        listed = list(tree.catalog)
    print_symbols(listed, as_json=json_output)


@app.command()
def select(
    file: Path = typer.Argument(..., help="Source file containing the symbol"),
    name: str = typer.Argument(..., help="Qualified name of the symbol, e.g. Foo.bar"),
    symbols: Path = typer.Option(..., "--symbols", "-s", help="Path to symbol dump JSON"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config JSON"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Select the name of a symbol in its file."""
    if not file.exists():
        err_console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        document = TextDocument.from_path(file)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error: Cannot read {file}: {e}[/red]")
        raise typer.Exit(1)

    cfg = get_config(config)
    tree = get_tree(str(file), symbols, cfg)
    resolve_result = ResolveQuery(tree).execute(name)

    if not resolve_result.found:
        if json_output:
            print_json({"error": "Symbol not found", "query": name})
        else:
            err_console.print(f"[red]Symbol not found: {name}[/red]")
        raise typer.Exit(1)

    if not resolve_result.unique:
        print_candidates(resolve_result.candidates, as_json=json_output)
        raise typer.Exit(1)

    symbol = resolve_result.symbols[0]
    try:
        if cfg.offset_encoding == "utf-16":
            symbol = to_document_offsets(symbol, document)
        selection = SelectQuery(tree, document).execute(symbol)
    except (NameNotFoundInRange, StaleRangeError) as e:
        if json_output:
            print_json({"error": str(e), "query": name})
        else:
            err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    print_selection(symbol, selection, document, as_json=json_output)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
