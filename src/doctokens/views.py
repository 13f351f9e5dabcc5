from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Tuple

from .errors import InvalidSpanError, TokenIndexError
from .models import TokenRecord
from .textutils import reconstruct_with_whitespace

if TYPE_CHECKING:
    from .document import Document


class Span:
    """A read-only ``[start, end)`` slice of a document's tokens.

    A span only stores a reference to its document and two indices; every
    attribute is resolved through ``Document.token_data`` on access. Spans are
    obtained from ``Document.span_of`` and ``Document.sentences`` rather than
    built directly.
    """

    __slots__ = ("_doc", "_start", "_end")

    def __init__(self, doc: "Document", start: int, end: int) -> None:
        if not 0 <= start <= end <= doc.size():
            raise InvalidSpanError(start, end, doc.size())
        self._doc = doc
        self._start = start
        self._end = end

    @property
    def doc(self) -> "Document":
        return self._doc

    @property
    def start(self) -> int:
        """Index of the first token in the span."""
        return self._start

    @property
    def end(self) -> int:
        """Index one past the last token in the span."""
        return self._end

    def __len__(self) -> int:
        return self._end - self._start

    def is_empty(self) -> bool:
        return self._end == self._start

    def get_token(self, i: int) -> "TokenView":
        """Return the token at local position ``i`` within the span."""
        if not 0 <= i < len(self):
            raise TokenIndexError(i, len(self))
        return TokenView(self._doc, self._start + i)

    def __getitem__(self, key: int | slice) -> "Span":
        if isinstance(key, slice):
            return self._local_span(key)
        return self.get_token(key)

    def _local_span(self, key: slice) -> "Span":
        if key.step not in (None, 1):
            raise ValueError("Span slices do not support a step")
        start = 0 if key.start is None else key.start
        end = len(self) if key.stop is None else key.stop
        if not 0 <= start <= end <= len(self):
            raise InvalidSpanError(start, end, len(self))
        return self._doc.span_of(self._start + start, self._start + end)

    def __iter__(self) -> Iterator["TokenView"]:
        for index in range(self._start, self._end):
            yield TokenView(self._doc, index)

    def tokens(self) -> List["TokenView"]:
        return list(self)

    @property
    def token_data(self) -> Tuple[TokenRecord, ...]:
        """Records covered by the span."""
        return self._doc.token_data[self._start : self._end]

    def start_char(self) -> int:
        if self.is_empty():
            return 0
        return self._doc.token_data[self._start].begin_offset

    def end_char(self) -> int:
        # Begin offset of the last covered token, mirroring Document.end_char().
        if self.is_empty():
            return 0
        return self._doc.token_data[self._end - 1].begin_offset

    @property
    def text(self) -> str:
        """Text covered by the span, sliced from the document text."""
        if self.is_empty():
            return ""
        first = self._doc.token_data[self._start]
        last = self._doc.token_data[self._end - 1]
        shift = self._doc.char_shift
        return self._doc.text[first.begin_offset - shift : last.end_offset - shift]

    @property
    def text_with_ws(self) -> str:
        """Text rebuilt from the covered tokens, including their whitespace."""
        return reconstruct_with_whitespace(self.token_data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (
            self._doc is other._doc
            and self._start == other._start
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((id(self._doc), self._start, self._end))

    def __repr__(self) -> str:
        return f"Span(start={self._start}, end={self._end}, text={self.text!r})"


class TokenView(Span):
    """A single token: a span of length one with attribute passthrough."""

    __slots__ = ()

    def __init__(self, doc: "Document", index: int) -> None:
        if not 0 <= index < doc.size():
            raise TokenIndexError(index, doc.size())
        super().__init__(doc, index, index + 1)

    @property
    def record(self) -> TokenRecord:
        """The underlying record owned by the document."""
        return self._doc.token_data[self._start]

    @property
    def index(self) -> int:
        return self.record.index

    @property
    def text(self) -> str:
        return self.record.text

    @property
    def text_with_ws(self) -> str:
        return self.record.text + self.record.whitespace_after

    @property
    def begin_offset(self) -> int:
        return self.record.begin_offset

    @property
    def end_offset(self) -> int:
        return self.record.end_offset

    @property
    def whitespace_before(self) -> str:
        return self.record.whitespace_before

    @property
    def whitespace_after(self) -> str:
        return self.record.whitespace_after

    @property
    def is_sentence_start(self) -> bool:
        return self.record.is_sentence_start

    @property
    def lemma(self) -> str | None:
        return self.record.lemma

    @property
    def pos(self) -> str | None:
        return self.record.pos

    @property
    def tag(self) -> str | None:
        return self.record.tag

    @property
    def dependency(self) -> str | None:
        return self.record.dependency

    @property
    def entity_type(self) -> str | None:
        return self.record.entity_type

    @property
    def entity_iob(self) -> str | None:
        return self.record.entity_iob

    def head(self) -> "TokenView":
        """Syntactic head of this token; a root token is its own head."""
        head_index = self.record.head_index
        if head_index is None or head_index == self._start:
            return self
        return self._doc.get_token(head_index)

    def children(self) -> List["TokenView"]:
        """Tokens whose head is this token, in document order."""
        return [
            token
            for token in self._doc.tokens()
            if token.record.head_index == self._start and token.start != self._start
        ]

    def sent(self) -> Span | None:
        """Sentence span containing this token, if the document has one."""
        for sentence in self._doc.sentences():
            if sentence.start <= self._start < sentence.end:
                return sentence
        return None

    def __repr__(self) -> str:
        return f"TokenView({self._start}: {self.record.text!r})"
