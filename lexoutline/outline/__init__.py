"""Outline tree building and selection mapping."""

from .labels import OutlineLabel, label_for, label_icon, label_text
from .resolver import SelectionResolver
from .tree import OutlineTree, qualified_name

__all__ = [
    "OutlineTree",
    "qualified_name",
    "SelectionResolver",
    "OutlineLabel",
    "label_for",
    "label_text",
    "label_icon",
]
