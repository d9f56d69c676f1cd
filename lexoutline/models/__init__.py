"""Data models for the outline engine."""

from .symbol import ROOT_CONTAINER_KIND, Symbol, TextRange
from .results import OutlineEntry, OutlineResult, ResolveResult, Selection

__all__ = [
    "ROOT_CONTAINER_KIND",
    "Symbol",
    "TextRange",
    "Selection",
    "OutlineEntry",
    "OutlineResult",
    "ResolveResult",
]
