# explicit_tsp/sections.py
from __future__ import annotations

import numpy as np

from .entries import TWOD_DISPLAY, EntryStore
from .errors import DataError, ValidationError
from .lines import LineSource
from .matrices import EdgeWeightFormat, build_distance_matrix, parse_int, parse_number

EDGE_WEIGHT_SECTION = "EDGE_WEIGHT_SECTION"
DISPLAY_DATA_SECTION = "DISPLAY_DATA_SECTION"


def parse_edge_weights(source: LineSource, entries: EntryStore, integer: bool = False) -> np.ndarray:
    """
    EDGE_WEIGHT_SECTION: needs DIMENSION and EDGE_WEIGHT_FORMAT from the header.
    The format name is only checked here, not when the header line was read.
    """
    n = entries.require_int("DIMENSION")
    fmt = EdgeWeightFormat.from_name(entries.require_text("EDGE_WEIGHT_FORMAT"))
    return build_distance_matrix(source, fmt, n, integer)


def _read_display_token(source: LineSource, row: int, what: str) -> str:
    tok = source.read_token()
    if tok is None:
        raise DataError(f"DISPLAY_DATA_SECTION ended early while reading {what} of entry {row}.", row=row)
    return tok


def parse_display_data(source: LineSource, entries: EntryStore) -> np.ndarray:
    """
    DISPLAY_DATA_SECTION: n lines of 'node x y' in any order, node ids one-based.
    Returns an (n, 2) array indexed by zero-based node id.
    """
    n = entries.require_int("DIMENSION")
    display_type = entries.require_text("DISPLAY_DATA_TYPE")
    if display_type != TWOD_DISPLAY:
        raise ValidationError(f"Field DISPLAY_DATA_TYPE does not support the value {display_type}.")

    coords = np.zeros((n, 2), dtype=np.float64)
    visited = np.zeros(n, dtype=bool)
    for row in range(n):
        node_tok = _read_display_token(source, row, "the node id")
        x_tok = _read_display_token(source, row, "x")
        y_tok = _read_display_token(source, row, "y")
        try:
            node = parse_int(node_tok)
            x = parse_number(x_tok)
            y = parse_number(y_tok)
        except ValueError:
            raise DataError(
                f"Invalid entry '{node_tok} {x_tok} {y_tok}' in DISPLAY_DATA_SECTION.", row=row
            ) from None
        idx = node - 1  # number -> index
        if not 0 <= idx < n or visited[idx]:
            raise DataError(f"Invalid node {node} in DISPLAY_DATA_SECTION.", row=row)
        coords[idx, 0] = x
        coords[idx, 1] = y
        visited[idx] = True
    return coords
