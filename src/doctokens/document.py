from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence, Tuple

from .errors import InvalidSpanError, TextMismatchError, TokenIndexError, TokenOrderError
from .models import TokenRecord
from .textutils import (
    leading_trim_length,
    reconstruct_trimmed,
    reconstruct_with_whitespace,
    trim,
)
from .views import Span, TokenView

logger = logging.getLogger(__name__)


class Document:
    """An immutable sequence of token records plus the document text.

    The document is the only owner of its records. ``Span`` and ``TokenView``
    objects handed out by it hold a reference back to the document and a pair
    of indices, so deriving views never copies token data.
    """

    __slots__ = ("_text", "_token_data", "_char_shift")

    def __init__(
        self, text: str, token_data: Iterable[TokenRecord], char_shift: int = 0
    ) -> None:
        self._text = text
        self._token_data: Tuple[TokenRecord, ...] = tuple(token_data)
        self._char_shift = char_shift

    @classmethod
    def create(
        cls,
        tokens: Iterable[TokenRecord],
        text: str | None = None,
        *,
        validate: bool = False,
    ) -> "Document":
        """Build a document from upstream token records.

        When ``text`` is omitted it is rebuilt from the tokens and trimmed.
        Supplied text is trusted as-is unless ``validate`` is set, in which case
        the token indices and the rebuilt text are checked against it.
        """
        records = tuple(tokens)
        char_shift = 0
        if text is None:
            raw = reconstruct_with_whitespace(records)
            text = trim(raw)
            char_shift = leading_trim_length(raw)
        elif validate:
            _check_text(text, records)
        if validate:
            _check_indices(records)
        logger.debug("Created document with %d tokens (%d chars)", len(records), len(text))
        return cls(text, records, char_shift)

    @property
    def text(self) -> str:
        return self._text

    @property
    def token_data(self) -> Tuple[TokenRecord, ...]:
        """Raw records, e.g. for external serialization."""
        return self._token_data

    @property
    def char_shift(self) -> int:
        """Leading characters trimmed off the rebuilt text.

        Token offsets count from the untrimmed text; subtract this to index
        into ``text``.
        """
        return self._char_shift

    def is_empty(self) -> bool:
        return not self._token_data

    def size(self) -> int:
        return len(self._token_data)

    def __len__(self) -> int:
        return len(self._token_data)

    def start_char(self) -> int:
        """Offset of the first token, or 0 for an empty document."""
        if self.is_empty():
            return 0
        return self._token_data[0].begin_offset

    def end_char(self) -> int:
        """Begin offset of the last token, or 0 for an empty document.

        This is where the last token starts, not where it ends.
        """
        if self.is_empty():
            return 0
        return self._token_data[-1].begin_offset

    def tokens(self) -> List[TokenView]:
        """One view per token, in index order."""
        return [TokenView(self, i) for i in range(len(self._token_data))]

    def stream(self) -> Iterator[TokenView]:
        """Lazily yield the same views as ``tokens()``."""
        for i in range(len(self._token_data)):
            yield TokenView(self, i)

    def __iter__(self) -> Iterator[TokenView]:
        return self.stream()

    def get_token(self, i: int) -> TokenView:
        """Return the token at position ``i``; negative indices are rejected."""
        if not 0 <= i < len(self._token_data):
            raise TokenIndexError(i, len(self._token_data))
        return TokenView(self, i)

    def span_of(self, start: int, end: int) -> Span:
        """Return the span covering tokens ``[start, end)``."""
        if not 0 <= start <= end <= len(self._token_data):
            raise InvalidSpanError(start, end, len(self._token_data))
        return Span(self, start, end)

    def __getitem__(self, key: int | slice) -> Span:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("Document slices do not support a step")
            start = 0 if key.start is None else key.start
            end = len(self._token_data) if key.stop is None else key.stop
            return self.span_of(start, end)
        return self.get_token(key)

    def sentences(self, implicit_start: bool = False) -> List[Span]:
        """Split the tokens into sentence spans using the sentence-start flags.

        Each span runs from a flagged token up to the next flagged token or the
        end of the document. Tokens before the first flag belong to no sentence
        unless ``implicit_start`` treats index 0 as a boundary.
        """
        boundaries = [
            i for i, record in enumerate(self._token_data) if record.is_sentence_start
        ]
        if implicit_start and self._token_data and (not boundaries or boundaries[0] != 0):
            boundaries.insert(0, 0)
        boundaries.append(len(self._token_data))
        return [
            Span(self, start, end)
            for start, end in zip(boundaries, boundaries[1:])
            if end > start
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._text == other._text and self._token_data == other._token_data

    def __hash__(self) -> int:
        return hash((self._text, self._token_data))

    def __repr__(self) -> str:
        preview = self._text if len(self._text) <= 50 else self._text[:50] + "..."
        return f"Document({preview!r}, tokens={len(self._token_data)})"


def _check_indices(records: Sequence[TokenRecord]) -> None:
    for position, record in enumerate(records):
        if record.index != position:
            logger.warning(
                "Token at position %d carries index %d", position, record.index
            )
            raise TokenOrderError(
                f"Token at position {position} has index {record.index}"
            )


def _check_text(text: str, records: Sequence[TokenRecord]) -> None:
    rebuilt = reconstruct_trimmed(records)
    if rebuilt != text:
        logger.warning(
            "Supplied text (%d chars) does not match tokens (%d chars)",
            len(text),
            len(rebuilt),
        )
        raise TextMismatchError("Supplied text does not match the token records")
