from __future__ import annotations

from typing import Sequence, Tuple

from doctokens.document import Document
from doctokens.models import TokenRecord


def make_records(
    pieces: Sequence[Tuple[str, str, bool]], leading: str = ""
) -> list[TokenRecord]:
    """Build consistent records from (text, whitespace_after, sentence_start) triples."""
    records: list[TokenRecord] = []
    offset = len(leading)
    previous_after = leading
    for idx, (text, after, sent_start) in enumerate(pieces):
        records.append(
            TokenRecord(
                index=idx,
                begin_offset=offset,
                text=text,
                whitespace_before=previous_after,
                whitespace_after=after,
                is_sentence_start=sent_start,
            )
        )
        offset += len(text) + len(after)
        previous_after = after
    return records


def cat_sat_doc() -> Document:
    """The three-token 'The cat sat' document."""
    return Document.create(
        make_records(
            [
                ("The", " ", True),
                ("cat", " ", False),
                ("sat", "", False),
            ]
        )
    )
