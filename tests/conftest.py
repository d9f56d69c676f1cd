"""Shared fixtures: a small TypeScript file and its lexical structure."""

import pytest

from lexoutline.catalog import SymbolCatalog
from lexoutline.models import Symbol, TextRange

SOURCE = """module Shapes {
    export class Point {
        constructor(public x: number, public y: number) {}
        public getDist() { return 0; }
    }
    export var origin = new Point(0, 0);
}
function main() {}
"""


def span(snippet: str) -> TextRange:
    """Range of the first occurrence of snippet in SOURCE."""
    start = SOURCE.index(snippet)
    return TextRange(start, start + len(snippet))


def make_symbol(name, container_name="", container_kind="script", snippet=None, kind=""):
    return Symbol(
        name=name,
        container_name=container_name,
        container_kind=container_kind,
        range=span(snippet) if snippet else TextRange(0, 0),
        kind=kind,
    )


@pytest.fixture
def source():
    return SOURCE


@pytest.fixture
def symbols():
    return [
        make_symbol("Shapes", "", "script", "module Shapes {", "module"),
        make_symbol("Point", "Shapes", "module", "export class Point {", "class"),
        make_symbol(
            "constructor", "Shapes.Point", "class",
            "constructor(public x: number, public y: number) {}", "constructor",
        ),
        make_symbol("getDist", "Shapes.Point", "class", "public getDist() { return 0; }", "method"),
        make_symbol("origin", "Shapes", "module", "export var origin = new Point(0, 0);", "var"),
        make_symbol("main", "", "script", "function main() {}", "function"),
        make_symbol("lost", "Nowhere", "class", "function main() {}", "method"),
    ]


@pytest.fixture
def catalog(symbols):
    return SymbolCatalog(symbols, file_path="src/shapes.ts")
