"""Symbol selection query."""

from ..models import Selection, Symbol
from ..outline import OutlineTree, SelectionResolver
from ..protocols import DocumentAccessor
from .base import Query


class SelectQuery(Query[Selection]):
    """Select the name of a symbol in the document the tree was built from."""

    def __init__(self, tree: OutlineTree, document: DocumentAccessor):
        super().__init__(tree)
        self.resolver = SelectionResolver(document)

    def execute(self, symbol: Symbol) -> Selection:
        """Execute selection.

        Raises:
            StaleRangeError: If the document no longer matches the catalog.
            NameNotFoundInRange: If the name is missing from the symbol range.
        """
        return self.resolver.select(symbol)
