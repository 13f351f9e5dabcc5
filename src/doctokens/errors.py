from __future__ import annotations


class DocTokensError(Exception):
    """Base class for errors raised by doctokens."""


class TokenIndexError(DocTokensError, IndexError):
    """Raised when a token index falls outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Token index {index} out of range for length {size}")
        self.index = index
        self.size = size


class InvalidSpanError(DocTokensError, IndexError):
    """Raised when a half-open token range is malformed or out of bounds."""

    def __init__(self, start: int, end: int, size: int) -> None:
        super().__init__(
            f"Range [{start}, {end}) out of bounds for length {size}"
        )
        self.start = start
        self.end = end
        self.size = size


class TextMismatchError(DocTokensError, ValueError):
    """Raised in strict mode when supplied text disagrees with the tokens."""


class TokenOrderError(DocTokensError, ValueError):
    """Raised in strict mode when token indices are not ``0..n-1``."""
