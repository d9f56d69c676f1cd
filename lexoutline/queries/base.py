"""Shared plumbing for outline queries."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..catalog import SymbolCatalog
from ..outline import OutlineTree

ResultT = TypeVar("ResultT")


class Query(ABC, Generic[ResultT]):
    """A question asked of one outline tree.

    Queries never cache: each execute() scans the catalog snapshot the tree
    was built from, so a new catalog needs a new tree and new queries.
    """

    def __init__(self, tree: OutlineTree):
        self.tree = tree

    @property
    def catalog(self) -> SymbolCatalog:
        return self.tree.catalog

    @property
    def file_path(self) -> str:
        return self.tree.catalog.file_path

    @abstractmethod
    def execute(self, **params) -> ResultT:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.file_path!r})"
