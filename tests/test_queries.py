"""Tests for outline, resolve and select queries."""

import pytest

from conftest import make_symbol
from lexoutline.catalog import SymbolCatalog
from lexoutline.document import TextDocument
from lexoutline.errors import NameNotFoundInRange
from lexoutline.outline import OutlineTree
from lexoutline.queries import OutlineQuery, ResolveQuery, SelectQuery


@pytest.fixture
def tree(catalog):
    return OutlineTree(catalog)


def shape(entries):
    """Nested (name, children) tuples for easy comparison."""
    return [(e.name, shape(e.children)) for e in entries]


class TestOutlineQuery:
    def test_full_expansion(self, tree):
        result = OutlineQuery(tree).execute()
        assert shape(result.tree) == [
            ("Shapes", [
                ("Point", [("constructor", []), ("getDist", [])]),
                ("origin", []),
            ]),
            ("main", []),
        ]
        assert result.total == 6
        assert result.file_path == "src/shapes.ts"

    def test_depths(self, tree):
        result = OutlineQuery(tree).execute()
        point = result.tree[0].children[0]
        assert result.tree[0].depth == 0
        assert point.depth == 1
        assert point.children[0].depth == 2

    def test_max_depth(self, tree):
        result = OutlineQuery(tree).execute(max_depth=1)
        assert shape(result.tree) == [
            ("Shapes", [("Point", []), ("origin", [])]),
            ("main", []),
        ]
        assert result.max_depth == 1

    def test_filter_keeps_ancestors(self, tree):
        result = OutlineQuery(tree).execute(pattern="dist")
        assert shape(result.tree) == [("Shapes", [("Point", [("getDist", [])])])]
        shapes = result.tree[0]
        assert not shapes.matched
        assert shapes.children[0].children[0].matched

    def test_filter_keeps_matching_subtree_parent(self, tree):
        result = OutlineQuery(tree).execute(pattern="POINT")
        point = result.tree[0].children[0]
        assert point.matched
        # non-matching children of a match are dropped
        assert point.children == []

    def test_filter_no_match(self, tree):
        result = OutlineQuery(tree).execute(pattern="zzz")
        assert result.tree == []
        assert result.total == 0


class TestResolveQuery:
    def test_unique(self, tree):
        result = ResolveQuery(tree).execute("Shapes.origin")
        assert result.found
        assert result.unique
        assert result.symbols[0].name == "origin"
        assert [s.name for s in result.candidates[0]] == ["Shapes", "origin"]

    def test_not_found(self, tree):
        result = ResolveQuery(tree).execute("origin")
        assert not result.found
        assert not result.unique

    def test_duplicate_names_are_ambiguous(self):
        tree = OutlineTree(SymbolCatalog([make_symbol("Foo"), make_symbol("Foo")]))
        result = ResolveQuery(tree).execute("Foo")
        assert result.found
        assert not result.unique
        assert len(result.candidates) == 2

    def test_child_of_duplicated_parent_is_unique(self):
        child = make_symbol("bar", "Foo", "class")
        tree = OutlineTree(SymbolCatalog([make_symbol("Foo"), make_symbol("Foo"), child]))
        result = ResolveQuery(tree).execute("Foo.bar")
        assert result.unique
        assert result.symbols[0] is child


class TestSelectQuery:
    def test_select(self, tree, source):
        document = TextDocument(source)
        symbol = ResolveQuery(tree).execute("Shapes.Point.getDist").symbols[0]

        selection = SelectQuery(tree, document).execute(symbol)

        assert document.selected_text == "getDist"
        assert selection.length == len("getDist")

    def test_select_orphan_name_missing(self, tree, source, symbols):
        # "lost" is declared over the text of main()
        with pytest.raises(NameNotFoundInRange):
            SelectQuery(tree, TextDocument(source)).execute(symbols[-1])


class TestQueryBase:
    def test_exposes_catalog(self, tree, catalog):
        query = OutlineQuery(tree)
        assert query.catalog is catalog
        assert query.file_path == "src/shapes.ts"
        assert repr(query) == "OutlineQuery('src/shapes.ts')"
