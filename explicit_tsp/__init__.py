# explicit_tsp package initializer
from .config import ParserConfig, load_config
from .entries import EntryKind, EntryStore, EntryValue
from .errors import (
    CompletenessError,
    DataError,
    EntryKindError,
    ParseError,
    StreamError,
    StructureError,
    ValidationError,
)
from .instance import Instance
from .matrices import EdgeWeightFormat
from .parser import InstanceParser, SectionState, load_instance, parse_lines, parse_text

__all__ = [
    "CompletenessError",
    "DataError",
    "EdgeWeightFormat",
    "EntryKind",
    "EntryKindError",
    "EntryStore",
    "EntryValue",
    "Instance",
    "InstanceParser",
    "ParseError",
    "ParserConfig",
    "SectionState",
    "StreamError",
    "StructureError",
    "ValidationError",
    "load_config",
    "load_instance",
    "parse_lines",
    "parse_text",
]
