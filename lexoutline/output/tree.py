"""Tree output formatters for outlines."""

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ..models import OutlineEntry, OutlineResult, Symbol
from ..outline import label_for


def symbol_to_dict(symbol: Symbol) -> dict:
    """Convert a symbol to a JSON-serializable dict."""
    return {
        "name": symbol.name,
        "qualified_name": symbol.qualified_name,
        "kind": symbol.kind,
        "container_name": symbol.container_name,
        "container_kind": symbol.container_kind,
        "start": symbol.range.start,
        "end": symbol.range.end,
        "icon": symbol.display_icon,
    }


def _format_label(entry: OutlineEntry) -> str:
    label = label_for(entry.symbol)
    text = escape(label.text)
    if not entry.matched:
        text = f"[dim]{text}[/dim]"
    elif label.icon:
        text = f"{escape(label.icon)} {text}"
    if entry.symbol.kind:
        text += f" [dim]{escape(entry.symbol.kind)}[/dim]"
    text += f" [dim]{entry.symbol.range}[/dim]"
    return text


def print_outline_tree(result: OutlineResult, console: Console):
    """Print an outline as a tree.

    Args:
        result: OutlineResult with tree structure.
        console: Rich console for output.
    """
    title = escape(result.file_path or "<outline>")
    if result.pattern:
        title += f" [dim](filter: {escape(result.pattern)})[/dim]"
    root = Tree(f"[bold]{title}[/bold]")

    def add_children(parent: Tree, entries: list[OutlineEntry]):
        for entry in entries:
            branch = parent.add(_format_label(entry))
            if entry.children:
                add_children(branch, entry.children)

    add_children(root, result.tree)
    console.print(root)
    if not result.tree:
        console.print("[dim]No symbols[/dim]")


def outline_to_dict(result: OutlineResult) -> dict:
    """Convert an outline to JSON-serializable dict.

    Args:
        result: OutlineResult with tree structure.

    Returns:
        Dictionary suitable for JSON serialization.
    """
    def entry_to_dict(entry: OutlineEntry) -> dict:
        data = symbol_to_dict(entry.symbol)
        data["depth"] = entry.depth
        if result.pattern:
            data["matched"] = entry.matched
        data["children"] = [entry_to_dict(c) for c in entry.children]
        return data

    return {
        "file": result.file_path,
        "max_depth": result.max_depth,
        "pattern": result.pattern,
        "total": result.total,
        "tree": [entry_to_dict(e) for e in result.tree],
    }
