"""Immutable snapshot of the symbols of one file."""

import logging
from typing import Callable, Iterable, Iterator, Sequence, overload

from ..models import Symbol
from ..protocols import SymbolProvider

logger = logging.getLogger(__name__)


class SymbolCatalog(Sequence[Symbol]):
    """Flat symbol list exactly as returned by the symbol provider.

    Order, duplicates and field values are preserved. The catalog is only
    valid against the document text it was produced from.
    """

    def __init__(self, symbols: Iterable[Symbol], file_path: str = ""):
        self._symbols: tuple[Symbol, ...] = tuple(symbols)
        self.file_path = file_path

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        return self._symbols

    def filter(self, predicate: Callable[[Symbol], bool]) -> list[Symbol]:
        """Return symbols matching predicate, in catalog order."""
        return [s for s in self._symbols if predicate(s)]

    @overload
    def __getitem__(self, index: int) -> Symbol: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Symbol, ...]: ...

    def __getitem__(self, index):
        return self._symbols[index]

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolCatalog({self.file_path!r}, {len(self._symbols)} symbols)"


def fetch_catalog(provider: SymbolProvider, file_path: str) -> SymbolCatalog:
    """Ask the provider for a fresh catalog of file_path.

    Raises:
        SymbolFetchError: Propagated from the provider.
    """
    symbols = provider.fetch_symbols(file_path)
    logger.debug(f"Fetched {len(symbols)} symbols for {file_path}")
    return SymbolCatalog(symbols, file_path=file_path)
