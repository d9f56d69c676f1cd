"""Catalog module for loading symbol snapshots."""

from .catalog import SymbolCatalog, fetch_catalog
from .loader import SymbolDumpSpec, SymbolSpec, load_symbol_dump, write_symbol_dump
from .provider import DumpSymbolProvider

__all__ = [
    "SymbolCatalog",
    "fetch_catalog",
    "SymbolDumpSpec",
    "SymbolSpec",
    "load_symbol_dump",
    "write_symbol_dump",
    "DumpSymbolProvider",
]
