"""Query classes for the outline engine."""

from .base import Query
from .outline import OutlineQuery
from .resolve import ResolveQuery
from .select import SelectQuery

__all__ = [
    "Query",
    "OutlineQuery",
    "ResolveQuery",
    "SelectQuery",
]
