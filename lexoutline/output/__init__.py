"""Output formatting module."""

from .console import print_candidates, print_json, print_selection, print_symbols
from .tree import outline_to_dict, print_outline_tree, symbol_to_dict

__all__ = [
    "print_json",
    "print_symbols",
    "print_candidates",
    "print_selection",
    "print_outline_tree",
    "outline_to_dict",
    "symbol_to_dict",
]
