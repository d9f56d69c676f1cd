"""Symbol provider backed by a symbol dump file."""

import logging
from pathlib import Path, PurePath

import msgspec

from ..errors import SymbolFetchError
from ..models import Symbol
from .loader import load_symbol_dump

logger = logging.getLogger(__name__)


class DumpSymbolProvider:
    """Serve file symbols from a JSON dump written by the language service.

    The dump is re-read on every fetch so each outline open sees the
    current analysis output.
    """

    def __init__(self, dump_path: str | Path):
        self.dump_path = Path(dump_path)

    def fetch_symbols(self, file_path: str) -> list[Symbol]:
        """Return the symbols of file_path in dump order.

        Raises:
            SymbolFetchError: If the dump is unreadable, malformed, or has no
                entry for file_path.
        """
        try:
            dump = load_symbol_dump(self.dump_path)
        except OSError as e:
            raise SymbolFetchError(file_path, f"analysis unavailable ({e})") from e
        except msgspec.DecodeError as e:
            raise SymbolFetchError(file_path, f"invalid symbol dump ({e})") from e

        entries = dump.files.get(file_path)
        if entries is None:
            entries = dump.files.get(PurePath(file_path.replace("\\", "/")).as_posix())
        if entries is None:
            raise SymbolFetchError(file_path, "file not recognized")

        try:
            symbols = [entry.to_symbol() for entry in entries]
        except ValueError as e:
            raise SymbolFetchError(file_path, f"invalid symbol entry ({e})") from e

        logger.debug(f"Read {len(symbols)} symbols for {file_path} from {self.dump_path}")
        return symbols
