"""Query result types."""

from dataclasses import dataclass, field
from typing import Optional

from .symbol import Symbol


@dataclass(frozen=True)
class Selection:
    """Absolute text selection produced for a picked symbol."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass
class OutlineEntry:
    """Single node of an expanded outline tree."""

    depth: int
    symbol: Symbol
    matched: bool = True
    children: list["OutlineEntry"] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.symbol.name

    @property
    def qualified_name(self) -> str:
        return self.symbol.qualified_name


@dataclass
class OutlineResult:
    """Result of an outline query: the tree expanded from its roots."""

    file_path: str
    max_depth: Optional[int]
    tree: list[OutlineEntry] = field(default_factory=list)
    pattern: Optional[str] = None

    @property
    def total(self) -> int:
        def count(entries: list[OutlineEntry]) -> int:
            return sum(1 + count(e.children) for e in entries)

        return count(self.tree)


@dataclass
class ResolveResult:
    """Result of resolving a qualified name to reachable symbols."""

    query: str
    candidates: list[list[Symbol]]

    @property
    def found(self) -> bool:
        return len(self.candidates) > 0

    @property
    def unique(self) -> bool:
        return len(self.candidates) == 1

    @property
    def symbols(self) -> list[Symbol]:
        """Matched symbols, last element of each candidate path."""
        return [path[-1] for path in self.candidates]
