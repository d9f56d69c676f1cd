"""Map a picked symbol onto the text of its bare name."""

from ..errors import BadLocationError, NameNotFoundInRange, StaleRangeError
from ..models import Selection, Symbol
from ..protocols import DocumentAccessor


class SelectionResolver:
    """Select the name of a symbol in a document.

    A symbol range covers the whole declaration (modifiers, keywords, body);
    the selection covers only the first occurrence of the name inside it.
    """

    def __init__(self, document: DocumentAccessor):
        self.document = document

    def resolve(self, symbol: Symbol) -> Selection:
        """Compute the selection for symbol without touching the document.

        Raises:
            StaleRangeError: If the document rejects the symbol range.
            NameNotFoundInRange: If the name does not occur in the range text.
        """
        start, length = symbol.range.start, symbol.range.length
        try:
            text = self.document.read_text(start, length)
        except BadLocationError as e:
            raise StaleRangeError(symbol, start, length) from e

        offset = text.find(symbol.name)
        if offset < 0:
            raise NameNotFoundInRange(symbol, text)

        return Selection(start=start + offset, length=len(symbol.name))

    def select(self, symbol: Symbol) -> Selection:
        """Select and reveal the name of symbol in the document.

        Raises:
            StaleRangeError: If the document rejects the range or the selection.
            NameNotFoundInRange: If the name does not occur in the range text.
        """
        selection = self.resolve(symbol)
        try:
            self.document.select_and_reveal(selection.start, selection.length)
        except BadLocationError as e:
            raise StaleRangeError(symbol, selection.start, selection.length) from e
        return selection
