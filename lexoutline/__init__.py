"""lexoutline - Outline trees from flat language service symbol lists."""

from .catalog import DumpSymbolProvider, SymbolCatalog, fetch_catalog
from .config import OutlineConfig, load_config
from .document import TextDocument
from .errors import (
    BadLocationError,
    NameNotFoundInRange,
    OutlineError,
    StaleRangeError,
    SymbolFetchError,
    UnsupportedOperation,
)
from .models import ROOT_CONTAINER_KIND, Selection, Symbol, TextRange
from .outline import OutlineTree, SelectionResolver, qualified_name
from .queries import OutlineQuery, ResolveQuery, SelectQuery

__version__ = "0.1.0"

__all__ = [
    "ROOT_CONTAINER_KIND",
    "Symbol",
    "TextRange",
    "Selection",
    "SymbolCatalog",
    "fetch_catalog",
    "DumpSymbolProvider",
    "OutlineConfig",
    "load_config",
    "TextDocument",
    "OutlineTree",
    "qualified_name",
    "SelectionResolver",
    "OutlineQuery",
    "ResolveQuery",
    "SelectQuery",
    "OutlineError",
    "SymbolFetchError",
    "UnsupportedOperation",
    "BadLocationError",
    "NameNotFoundInRange",
    "StaleRangeError",
]
