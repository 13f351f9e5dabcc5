"""
doctokens package exports the document model and its views for library consumers.
"""

from __future__ import annotations

from .config import DocumentConfig, build_document, config_from_dict, config_from_yaml, load_config
from .document import Document
from .errors import (
    DocTokensError,
    InvalidSpanError,
    TextMismatchError,
    TokenIndexError,
    TokenOrderError,
)
from .models import TokenRecord, records_from_dicts, records_to_dicts
from .textutils import reconstruct_trimmed, reconstruct_with_whitespace
from .views import Span, TokenView

__all__ = [
    "Document",
    "DocumentConfig",
    "DocTokensError",
    "InvalidSpanError",
    "Span",
    "TextMismatchError",
    "TokenIndexError",
    "TokenOrderError",
    "TokenRecord",
    "TokenView",
    "build_document",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "reconstruct_trimmed",
    "reconstruct_with_whitespace",
    "records_from_dicts",
    "records_to_dicts",
]

__version__ = "0.1.0"
