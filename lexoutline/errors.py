"""Error taxonomy for the outline engine."""

from typing import Optional


class OutlineError(Exception):
    """Base class for all outline engine errors."""


class SymbolFetchError(OutlineError):
    """The symbol provider could not produce a catalog for a file."""

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Cannot fetch symbols for {file_path}: {reason}")


class UnsupportedOperation(OutlineError, NotImplementedError):
    """Operation is intentionally not supported by the outline tree."""


class BadLocationError(OutlineError):
    """A document accessor rejected an offset range."""

    def __init__(self, start: int, length: int, size: Optional[int] = None):
        self.start = start
        self.length = length
        self.size = size
        msg = f"Bad location: start={start} length={length}"
        if size is not None:
            msg += f" (document size {size})"
        super().__init__(msg)


class NameNotFoundInRange(OutlineError):
    """A symbol's name does not occur inside its own declaration range."""

    def __init__(self, symbol, text: str):
        self.symbol = symbol
        self.text = text
        super().__init__(
            f"Name {symbol.name!r} not found in range "
            f"[{symbol.range.start}, {symbol.range.end})"
        )


class StaleRangeError(OutlineError):
    """A symbol range no longer matches the current document content."""

    def __init__(self, symbol, start: int, length: int):
        self.symbol = symbol
        self.start = start
        self.length = length
        super().__init__(
            f"Range of {symbol.qualified_name!r} is stale: "
            f"start={start} length={length}"
        )
