from __future__ import annotations

from typing import Iterable

from .models import TokenRecord

# Control characters and the ASCII space; other Unicode whitespace such as
# U+00A0 is kept.
TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def reconstruct_with_whitespace(tokens: Iterable[TokenRecord]) -> str:
    """Rebuild the surface text, keeping leading and trailing whitespace."""
    parts: list[str] = []
    for token in tokens:
        if not parts:
            parts.append(token.whitespace_before)
        parts.append(token.text)
        parts.append(token.whitespace_after)
    return "".join(parts)


def trim(value: str) -> str:
    """Strip characters up to and including U+0020 from both ends."""
    return value.strip(TRIM_CHARS)


def leading_trim_length(value: str) -> int:
    """Number of characters ``trim`` removes from the start of ``value``."""
    return len(value) - len(value.lstrip(TRIM_CHARS))


def reconstruct_trimmed(tokens: Iterable[TokenRecord]) -> str:
    """Rebuild the surface text with outer whitespace stripped."""
    return trim(reconstruct_with_whitespace(tokens))
