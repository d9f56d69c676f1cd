"""Tests for the in-memory text document."""

import pytest

from lexoutline.document import TextDocument
from lexoutline.errors import BadLocationError
from lexoutline.models import TextRange


class TestTextDocument:
    def test_read_text(self):
        document = TextDocument("hello world")
        assert document.read_text(6, 5) == "world"
        assert document.read_text(11, 0) == ""

    @pytest.mark.parametrize("start,length", [(-1, 2), (0, -1), (8, 4), (12, 0)])
    def test_read_out_of_bounds(self, start, length):
        with pytest.raises(BadLocationError):
            TextDocument("hello world").read_text(start, length)

    def test_select_and_reveal(self):
        document = TextDocument("line one\nline two\n")
        document.select_and_reveal(14, 3)
        assert document.selection == (14, 3)
        assert document.selected_text == "two"
        assert document.caret == 17
        assert document.revealed_line == 1

    def test_select_out_of_bounds_keeps_selection(self):
        document = TextDocument("abc")
        document.select_and_reveal(0, 1)
        with pytest.raises(BadLocationError):
            document.select_and_reveal(2, 5)
        assert document.selection == (0, 1)

    def test_no_selection(self):
        document = TextDocument("abc")
        assert document.selection is None
        assert document.selected_text is None
        assert document.caret is None

    def test_line_and_column(self):
        document = TextDocument("ab\ncd\nef")
        assert document.line_of(0) == 0
        assert document.line_of(4) == 1
        assert document.column_of(4) == 1
        assert document.column_of(6) == 0

    def test_from_path(self, tmp_path):
        path = tmp_path / "a.ts"
        path.write_text("let a = 1;\r\nlet b = 2;\n", encoding="utf-8")
        document = TextDocument.from_path(path)
        # newlines are kept verbatim so offsets match the analysis service
        assert document.read_text(10, 2) == "\r\n"
        assert len(document) == 23


class TestUtf16Offsets:
    # "🎉" is one code point but two UTF-16 code units
    TEXT = "a\U0001F389b\nc"

    def test_bmp_text_unchanged(self):
        document = TextDocument("plain ascii é")
        assert document.from_utf16(0) == 0
        assert document.from_utf16(13) == 13
        assert document.utf16_length == 13

    def test_offsets_after_astral_char_shift(self):
        document = TextDocument(self.TEXT)
        assert document.utf16_length == 6
        assert document.from_utf16(1) == 1
        assert document.from_utf16(3) == 2
        assert document.from_utf16(6) == 5

    @pytest.mark.parametrize("offset", [-1, 2, 7])
    def test_invalid_offsets(self, offset):
        # 2 falls between the two halves of the surrogate pair
        with pytest.raises(BadLocationError):
            TextDocument(self.TEXT).from_utf16(offset)

    def test_range_from_utf16(self):
        document = TextDocument(self.TEXT)
        converted = document.range_from_utf16(TextRange(3, 6))
        assert converted == TextRange(2, 5)
        assert document.read_text(converted.start, converted.length) == "b\nc"
