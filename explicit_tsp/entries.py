# explicit_tsp/entries.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from .errors import CompletenessError, EntryKindError, ValidationError
from .matrices import parse_int

# Accepted specification values
PROBLEM_TYPE = "TSP"
EXPLICIT = "EXPLICIT"
NO_COORDS = "NO_COORDS"
TWOD_DISPLAY = "TWOD_DISPLAY"
NO_DISPLAY = "NO_DISPLAY"

SPECIFICATION_KEYS = (
    "NAME",
    "TYPE",
    "COMMENT",
    "DIMENSION",
    "EDGE_WEIGHT_TYPE",
    "EDGE_WEIGHT_FORMAT",
    "NODE_COORD_TYPE",
    "DISPLAY_DATA_TYPE",
)


class EntryKind(Enum):
    TEXT = "text"
    INTEGER = "integer"


@dataclass(frozen=True)
class EntryValue:
    kind: EntryKind
    value: Union[str, int]

    @classmethod
    def text(cls, value: str) -> "EntryValue":
        return cls(EntryKind.TEXT, value)

    @classmethod
    def integer(cls, value: int) -> "EntryValue":
        return cls(EntryKind.INTEGER, value)


class EntryStore:
    """Specification key -> typed value. A key is written once and never replaced."""

    def __init__(self):
        self._values: Dict[str, EntryValue] = {}

    def insert(self, key: str, value: EntryValue) -> bool:
        # a repeated key keeps its first value
        if key in self._values:
            return False
        self._values[key] = value
        return True

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def keys(self) -> List[str]:
        return list(self._values)

    def _get(self, key: str, kind: EntryKind) -> Optional[EntryValue]:
        entry = self._values.get(key)
        if entry is not None and entry.kind is not kind:
            raise EntryKindError(
                f"Field {key} holds a {entry.kind.value} value, not {kind.value}"
            )
        return entry

    def get_text(self, key: str) -> Optional[str]:
        entry = self._get(key, EntryKind.TEXT)
        return None if entry is None else str(entry.value)

    def get_int(self, key: str) -> Optional[int]:
        entry = self._get(key, EntryKind.INTEGER)
        return None if entry is None else int(entry.value)

    def require_text(self, key: str) -> str:
        value = self.get_text(key)
        if value is None:
            raise CompletenessError(f"Field {key} not defined!")
        return value

    def require_int(self, key: str) -> int:
        value = self.get_int(key)
        if value is None:
            raise CompletenessError(f"Field {key} not defined!")
        return value

    def as_dict(self) -> Dict[str, Union[str, int]]:
        return {k: v.value for k, v in self._values.items()}


def _invalid_value(key: str, value: str) -> ValidationError:
    return ValidationError(f"Field {key} does not support the value {value}.")


def _parse_dimension(value: str) -> int:
    try:
        n = parse_int(value)
    except ValueError:
        raise _invalid_value("DIMENSION", value) from None
    if n <= 0:
        raise _invalid_value("DIMENSION", value)
    return n


def validate_specification(entries: EntryStore, key: str, value: str) -> None:
    """Check one 'KEY: value' header line and record it in the store."""
    stored = EntryValue.text(value)
    if key in ("NAME", "COMMENT"):
        pass
    elif key == "TYPE":
        if value != PROBLEM_TYPE:
            raise _invalid_value(key, value)
    elif key == "DIMENSION":
        stored = EntryValue.integer(_parse_dimension(value))
    elif key == "EDGE_WEIGHT_TYPE":
        if value != EXPLICIT:
            raise _invalid_value(key, value)
    elif key == "EDGE_WEIGHT_FORMAT":
        pass  # checked when EDGE_WEIGHT_SECTION is read
    elif key == "NODE_COORD_TYPE":
        if value != NO_COORDS:
            raise _invalid_value(key, value)
    elif key == "DISPLAY_DATA_TYPE":
        if value not in (TWOD_DISPLAY, NO_DISPLAY):
            raise _invalid_value(key, value)
    else:
        raise ValidationError(f"Field {key} is unsupported.")
    entries.insert(key, stored)
