"""JSON loading utilities for symbol dumps.

A symbol dump is the lexical structure reported by the language service for
one or more files, keyed by file path. Uses msgspec typed structs so that
malformed entries are rejected while decoding.
"""

from pathlib import Path
from typing import Annotated, Optional

import msgspec

from ..models import Symbol, TextRange

Name = Annotated[str, msgspec.Meta(min_length=1)]
Offset = Annotated[int, msgspec.Meta(ge=0)]


class SymbolSpec(msgspec.Struct, rename="camel", omit_defaults=True):
    """Symbol entry in a dump, with camelCase keys on the wire."""

    name: Name
    min_char: Offset
    lim_char: Offset
    container_name: str = ""
    container_kind: str = ""
    kind: str = ""
    kind_modifiers: str = ""
    match_kind: str = ""
    file_name: str = ""
    icon: Optional[str] = None

    def to_symbol(self) -> Symbol:
        """Convert to a Symbol.

        Raises:
            ValueError: If limChar is before minChar.
        """
        return Symbol(
            name=self.name,
            container_name=self.container_name,
            container_kind=self.container_kind,
            range=TextRange(self.min_char, self.lim_char),
            display_icon=self.icon,
            kind=self.kind,
            kind_modifiers=self.kind_modifiers,
            match_kind=self.match_kind,
            file_name=self.file_name,
        )

    @classmethod
    def from_symbol(cls, symbol: Symbol) -> "SymbolSpec":
        return cls(
            name=symbol.name,
            min_char=symbol.range.start,
            lim_char=symbol.range.end,
            container_name=symbol.container_name,
            container_kind=symbol.container_kind,
            kind=symbol.kind,
            kind_modifiers=symbol.kind_modifiers,
            match_kind=symbol.match_kind,
            file_name=symbol.file_name,
            icon=symbol.display_icon,
        )


class SymbolDumpSpec(msgspec.Struct, omit_defaults=True):
    """Full symbol dump specification."""

    version: str = "1.0"
    files: dict[str, list[SymbolSpec]] = {}


# Create reusable decoder/encoder for performance
_decoder = msgspec.json.Decoder(SymbolDumpSpec)
_encoder = msgspec.json.Encoder()


def load_symbol_dump(path: str | Path) -> SymbolDumpSpec:
    """Load a symbol dump from file.

    Args:
        path: Path to the dump JSON file.

    Returns:
        Parsed SymbolDumpSpec struct.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        msgspec.DecodeError: If the file is not valid JSON or an entry is malformed.
    """
    with open(path, "rb") as f:
        return _decoder.decode(f.read())


def write_symbol_dump(path: str | Path, files: dict[str, list[Symbol]]) -> Path:
    """Write symbols per file as a dump readable by load_symbol_dump."""
    dump = SymbolDumpSpec(
        files={
            file_path: [SymbolSpec.from_symbol(s) for s in symbols]
            for file_path, symbols in files.items()
        }
    )
    path = Path(path)
    with open(path, "wb") as f:
        f.write(_encoder.encode(dump))
    return path
