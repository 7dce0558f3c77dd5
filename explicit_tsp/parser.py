# explicit_tsp/parser.py
from __future__ import annotations
from enum import Enum
from typing import IO, Iterable, Optional

import numpy as np

from .config import ParserConfig
from .entries import EntryStore, validate_specification
from .errors import CompletenessError, ParseError, StreamError, StructureError, ValidationError
from .instance import Instance
from .lines import EOF_MARKER, Entry, LineSource, classify_line
from .sections import DISPLAY_DATA_SECTION, EDGE_WEIGHT_SECTION, parse_display_data, parse_edge_weights


class SectionState(Enum):
    SPECIFICATION = "specification"
    DATA = "data"


def next_state(state: SectionState, entry: Entry) -> SectionState:
    """
    A data marker moves the parser into DATA for good. Header entries are
    only legal before that.
    """
    if entry.is_data_marker:
        return SectionState.DATA
    if state is SectionState.DATA:
        raise StructureError("Corrupted file: specification found in the data section.")
    return SectionState.SPECIFICATION


class InstanceParser:
    """
    One-shot parser over a line source.

      with InstanceParser.open("br17.tsp") as p:
          ins = p.parse()
    """

    def __init__(self, source: LineSource, config: Optional[ParserConfig] = None,
                 handle: Optional[IO[str]] = None):
        self.source = source
        self.cfg = config or ParserConfig()
        self._handle = handle

    @classmethod
    def open(cls, path, config: Optional[ParserConfig] = None) -> "InstanceParser":
        cfg = config or ParserConfig()
        try:
            f = open(path, "r", encoding=cfg.encoding, errors=cfg.errors)
        except (OSError, LookupError) as e:
            raise StreamError(f"Could not open {path}: {getattr(e, 'strerror', None) or e}") from e
        return cls(LineSource(f), cfg, handle=f)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "InstanceParser":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def parse(self) -> Instance:
        entries = EntryStore()
        distances: Optional[np.ndarray] = None
        coordinates: Optional[np.ndarray] = None
        state = SectionState.SPECIFICATION

        while True:
            line = self.source.next_substantive()
            if line is None:
                raise CompletenessError("Input ended before the EOF marker.")
            if line == EOF_MARKER:
                break
            line_number = self.source.line_number
            try:
                entry = classify_line(line)
                state = next_state(state, entry)
                if not entry.is_data_marker:
                    validate_specification(entries, entry.key, entry.value)
                elif entry.key == DISPLAY_DATA_SECTION:
                    coordinates = parse_display_data(self.source, entries)
                elif entry.key == EDGE_WEIGHT_SECTION:
                    distances = parse_edge_weights(self.source, entries, self.cfg.integer_weights)
                else:
                    raise ValidationError(f"Field {entry.key} is unsupported.")
            except ParseError as err:
                err.attach(line, line_number)
                raise

        # an ill-formed file may never define the matrix
        if distances is None:
            raise CompletenessError("Distance matrix not defined.")
        return Instance(
            distances=distances,
            name=entries.get_text("NAME"),
            comment=entries.get_text("COMMENT"),
            coordinates=coordinates,
            entries=entries,
        )


def parse_lines(lines: Iterable[str], config: Optional[ParserConfig] = None) -> Instance:
    return InstanceParser(LineSource(lines), config).parse()


def parse_text(text: str, config: Optional[ParserConfig] = None) -> Instance:
    # split on newlines only, form feeds and vertical tabs are blanks inside a line
    return parse_lines(text.split("\n"), config)


def load_instance(path, config: Optional[ParserConfig] = None) -> Instance:
    """Open, parse and close. Raises ParseError (a ValueError) on any failure."""
    with InstanceParser.open(path, config) as parser:
        return parser.parse()
