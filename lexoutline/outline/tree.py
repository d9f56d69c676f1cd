"""Outline tree reconstructed from container names.

The tree is never materialized: every query scans the catalog, so answers
always agree with the snapshot they were computed from.
"""

from typing import Iterator, Optional

from ..catalog import SymbolCatalog
from ..errors import UnsupportedOperation
from ..models import ROOT_CONTAINER_KIND, Symbol


def qualified_name(symbol: Symbol) -> str:
    """Return the key children of symbol carry as their container name."""
    return symbol.qualified_name


class OutlineTree:
    """Navigable view over a SymbolCatalog.

    A symbol is a root when its container kind equals the root marker. The
    children of a symbol are all symbols whose container name equals its
    qualified name exactly. Symbols matching neither rule are unreachable.
    """

    def __init__(self, catalog: SymbolCatalog, root_kind: str = ROOT_CONTAINER_KIND):
        self.catalog = catalog
        self.root_kind = root_kind

    def root_symbols(self) -> list[Symbol]:
        """Top level of the tree, in catalog order."""
        return self.catalog.filter(lambda s: s.container_kind == self.root_kind)

    def children_of(self, symbol: Symbol) -> list[Symbol]:
        """Direct children of symbol, in catalog order. O(n) per call."""
        name = qualified_name(symbol)
        return self.catalog.filter(lambda s: s.container_name == name)

    def has_children(self, symbol: Symbol) -> bool:
        return len(self.children_of(symbol)) > 0

    def parent_of(self, symbol: Symbol) -> Symbol:
        """Not supported: a container name does not identify a unique parent.

        Use path_to() to recover ancestry by walking down from the roots.
        """
        raise UnsupportedOperation(
            f"Parent lookup is not supported (symbol {symbol.qualified_name!r})"
        )

    def _paths(self, max_depth: Optional[int] = None) -> Iterator[tuple[Symbol, ...]]:
        """Yield root-to-node paths in pre-order."""

        def visit(path: tuple[Symbol, ...]) -> Iterator[tuple[Symbol, ...]]:
            yield path
            if max_depth is not None and len(path) > max_depth:
                return
            for child in self.children_of(path[-1]):
                yield from visit(path + (child,))

        for root in self.root_symbols():
            yield from visit((root,))

    def walk(self, max_depth: Optional[int] = None) -> Iterator[tuple[int, Symbol]]:
        """Depth-first iteration of (depth, symbol) over reachable symbols.

        Roots have depth 0. With max_depth, symbols deeper than it are skipped.
        """
        for path in self._paths(max_depth):
            yield len(path) - 1, path[-1]

    def path_to(self, symbol: Symbol) -> Optional[list[Symbol]]:
        """Return the symbols from a root down to symbol, or None if unreachable.

        The same object is preferred; otherwise the first equal symbol wins.
        """
        fallback = None
        for path in self._paths():
            if path[-1] is symbol:
                return list(path)
            if fallback is None and path[-1] == symbol:
                fallback = list(path)
        return fallback

    def find(self, name: str) -> list[list[Symbol]]:
        """Return one path per reachable symbol whose qualified name equals name.

        A symbol under duplicated parents is reachable along several paths;
        only the first path to each catalog entry is kept.
        """
        paths = []
        seen = set()
        for path in self._paths():
            symbol = path[-1]
            if symbol.qualified_name == name and id(symbol) not in seen:
                seen.add(id(symbol))
                paths.append(list(path))
        return paths
