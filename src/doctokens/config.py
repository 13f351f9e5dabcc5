from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Iterable, Mapping, MutableMapping

import yaml

from .document import Document
from .models import TokenRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DocumentConfig:
    """Policy applied when building documents from upstream records."""

    validate_text: bool = False
    implicit_sentence_start: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> DocumentConfig:
    """Build a DocumentConfig from a dictionary-like input."""
    if data is None:
        return DocumentConfig()
    allowed = {field.name for field in fields(DocumentConfig)}
    return DocumentConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> DocumentConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    logger.debug("Loaded document config from %s", path)
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> DocumentConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return DocumentConfig()
    return config_from_yaml(path)


def build_document(
    records: Iterable[TokenRecord],
    text: str | None = None,
    config: DocumentConfig | None = None,
) -> Document:
    """Create a Document, validating it when the config asks for it."""
    cfg = config or DocumentConfig()
    return Document.create(records, text, validate=cfg.validate_text)
