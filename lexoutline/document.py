"""In-memory document implementing the document accessor interface."""

from bisect import bisect_left
from pathlib import Path
from typing import Optional

from .errors import BadLocationError
from .models import TextRange


class TextDocument:
    """Plain text document with a single selection.

    Offsets are indexes into ``text`` (code points). Ranges reported in
    UTF-16 code units, as the TypeScript language service does, go through
    from_utf16() first.
    """

    def __init__(self, text: str):
        self.text = text
        self.selection: Optional[tuple[int, int]] = None
        self.revealed_line: Optional[int] = None
        self._utf16_starts: Optional[list[int]] = None

    @classmethod
    def from_path(cls, path: str | Path, encoding: str = "utf-8") -> "TextDocument":
        """Read a document from disk, keeping line endings verbatim.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid in encoding.
        """
        with open(path, "r", encoding=encoding, newline="") as f:
            return cls(f.read())

    def __len__(self) -> int:
        return len(self.text)

    def _check(self, start: int, length: int):
        if start < 0 or length < 0 or start + length > len(self.text):
            raise BadLocationError(start, length, len(self.text))

    def read_text(self, start: int, length: int) -> str:
        self._check(start, length)
        return self.text[start:start + length]

    def select_and_reveal(self, start: int, length: int) -> None:
        self._check(start, length)
        self.selection = (start, length)
        self.revealed_line = self.line_of(start)

    @property
    def caret(self) -> Optional[int]:
        """Caret offset, placed at the end of the selection."""
        if self.selection is None:
            return None
        start, length = self.selection
        return start + length

    @property
    def selected_text(self) -> Optional[str]:
        if self.selection is None:
            return None
        start, length = self.selection
        return self.text[start:start + length]

    def line_of(self, offset: int) -> int:
        """Return the 0-based line containing offset."""
        return self.text.count("\n", 0, offset)

    def column_of(self, offset: int) -> int:
        """Return the 0-based column of offset within its line."""
        return offset - (self.text.rfind("\n", 0, offset) + 1)

    @property
    def utf16_length(self) -> int:
        return self._utf16_index()[-1]

    def from_utf16(self, offset: int) -> int:
        """Convert a UTF-16 code unit offset into an index into text.

        Characters outside the BMP take two code units, so every offset after
        one of them is shifted.

        Raises:
            BadLocationError: If offset is negative, past the end of the
                document, or falls between the halves of a surrogate pair.
        """
        starts = self._utf16_index()
        index = bisect_left(starts, offset)
        if offset < 0 or index == len(starts) or starts[index] != offset:
            raise BadLocationError(offset, 0, starts[-1])
        return index

    def range_from_utf16(self, text_range: TextRange) -> TextRange:
        """Convert a range in UTF-16 code units into a range of text indexes."""
        return TextRange(self.from_utf16(text_range.start), self.from_utf16(text_range.end))

    def _utf16_index(self) -> list[int]:
        """Code unit offset of each character, followed by the total length."""
        if self._utf16_starts is None:
            starts = [0]
            for char in self.text:
                starts.append(starts[-1] + (2 if ord(char) > 0xFFFF else 1))
            self._utf16_starts = starts
        return self._utf16_starts
