"""Symbol data model."""

from dataclasses import dataclass
from typing import Optional

# containerKind emitted for symbols declared directly in the file
ROOT_CONTAINER_KIND = "script"


@dataclass(frozen=True)
class TextRange:
    """Half-open character range [start, end) into a document."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"Range start must be non-negative: {self.start}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


@dataclass(frozen=True)
class Symbol:
    """One entry of the flat lexical structure of a file."""

    name: str
    container_name: str
    container_kind: str
    range: TextRange
    display_icon: Optional[str] = None

    # Carried through from the analysis service, not used for tree building
    kind: str = ""
    kind_modifiers: str = ""
    match_kind: str = ""
    file_name: str = ""

    def __post_init__(self):
        if not self.name:
            raise ValueError("Symbol name must not be empty")

    @property
    def qualified_name(self) -> str:
        """Container path joined with the symbol's own name."""
        if not self.container_name:
            return self.name
        return f"{self.container_name}.{self.name}"
