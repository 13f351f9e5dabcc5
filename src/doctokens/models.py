from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Iterable, List, Mapping


@dataclass(frozen=True, slots=True)
class TokenRecord:
    """One token's attributes and character offsets, as produced upstream."""

    index: int
    begin_offset: int
    text: str
    whitespace_before: str = ""
    whitespace_after: str = ""
    is_sentence_start: bool = False
    lemma: str | None = None
    pos: str | None = None
    tag: str | None = None
    dependency: str | None = None
    head_index: int | None = None
    entity_type: str | None = None
    entity_iob: str | None = None

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            _check_type(name, getattr(self, name), int, optional=name == "head_index")
        for name in _STR_FIELDS:
            _check_type(name, getattr(self, name), str, optional=name in _OPTIONAL_STR_FIELDS)
        if not isinstance(self.is_sentence_start, bool):
            raise TypeError(
                f"is_sentence_start must be bool, got {type(self.is_sentence_start).__name__}"
            )

    @property
    def end_offset(self) -> int:
        """Offset one past the token's last character."""
        return self.begin_offset + len(self.text)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary of every field."""
        return dict(asdict(self))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenRecord":
        """Build a record from a mapping, ignoring keys that are not fields."""
        allowed = {field.name for field in fields(cls)}
        return cls(**{key: data[key] for key in data if key in allowed})


_INT_FIELDS = ("index", "begin_offset", "head_index")
_STR_FIELDS = (
    "text",
    "whitespace_before",
    "whitespace_after",
    "lemma",
    "pos",
    "tag",
    "dependency",
    "entity_type",
    "entity_iob",
)
_OPTIONAL_STR_FIELDS = frozenset(_STR_FIELDS[3:])


def _check_type(name: str, value: Any, expected: type, optional: bool) -> None:
    if value is None and optional:
        return
    # bool is a subclass of int but never a valid offset or index.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise TypeError(f"{name} must be {expected.__name__}, got {type(value).__name__}")


def records_from_dicts(items: Iterable[Mapping[str, Any]]) -> List[TokenRecord]:
    """Convert raw mappings (e.g. decoded JSON) into token records."""
    return [TokenRecord.from_dict(item) for item in items]


def records_to_dicts(records: Iterable[TokenRecord]) -> List[dict[str, Any]]:
    return [record.to_dict() for record in records]
