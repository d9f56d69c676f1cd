"""Interfaces of the external collaborators used by the outline engine."""

from typing import Protocol, Sequence

from .models import Symbol


class SymbolProvider(Protocol):
    """Language analysis service returning the flat symbol list of a file."""

    def fetch_symbols(self, file_path: str) -> Sequence[Symbol]:
        """Return symbols in service order.

        Raises:
            SymbolFetchError: If analysis is unavailable for the file.
        """
        ...


class DocumentAccessor(Protocol):
    """Editor document: text access and selection control."""

    def read_text(self, start: int, length: int) -> str:
        """Return text at [start, start + length).

        Raises:
            BadLocationError: If the range is outside the current document.
        """
        ...

    def select_and_reveal(self, start: int, length: int) -> None:
        """Select [start, start + length) and scroll it into view.

        Raises:
            BadLocationError: If the range is outside the current document.
        """
        ...
