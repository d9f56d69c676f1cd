"""Outline expansion query."""

from typing import Optional

from ..models import OutlineEntry, OutlineResult, Symbol
from .base import Query


class OutlineQuery(Query[OutlineResult]):
    """Expand the outline tree from its roots."""

    def execute(
        self, max_depth: Optional[int] = None, pattern: Optional[str] = None
    ) -> OutlineResult:
        """Execute outline expansion.

        Args:
            max_depth: Deepest level to expand (roots are level 0), None for all.
            pattern: Quick-outline filter. Keeps symbols whose name contains it
                (case-insensitive) and the ancestors of such symbols.

        Returns:
            OutlineResult with the expanded tree.
        """
        needle = pattern.lower() if pattern else None

        def build(symbol: Symbol, depth: int) -> Optional[OutlineEntry]:
            matched = needle is None or needle in symbol.name.lower()
            children = []
            if max_depth is None or depth < max_depth:
                for child in self.tree.children_of(symbol):
                    entry = build(child, depth + 1)
                    if entry is not None:
                        children.append(entry)
            if not matched and not children:
                return None
            return OutlineEntry(depth=depth, symbol=symbol, matched=matched, children=children)

        tree = []
        for root in self.tree.root_symbols():
            entry = build(root, 0)
            if entry is not None:
                tree.append(entry)

        return OutlineResult(
            file_path=self.file_path,
            max_depth=max_depth,
            tree=tree,
            pattern=pattern,
        )
