"""Qualified name resolution query."""

from ..models import ResolveResult
from .base import Query


class ResolveQuery(Query[ResolveResult]):
    """Resolve a qualified name to reachable symbols."""

    def execute(self, name: str) -> ResolveResult:
        """Execute qualified name resolution.

        Args:
            name: Exact qualified name, e.g. "Foo.bar".

        Returns:
            ResolveResult with one root-to-symbol path per match.
        """
        return ResolveResult(query=name, candidates=self.tree.find(name))
