# explicit_tsp/matrices.py
from __future__ import annotations
import math
import re
from enum import Enum
from typing import Union

import numpy as np

from .errors import DataError, ValidationError
from .lines import LineSource

Number = Union[int, float]

_INT = re.compile(r"[+-]?[0-9]+")
_REAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INT64 = np.iinfo(np.int64)


class EdgeWeightFormat(Enum):
    FULL_MATRIX = "FULL_MATRIX"
    UPPER_ROW = "UPPER_ROW"
    LOWER_DIAG_ROW = "LOWER_DIAG_ROW"

    @classmethod
    def from_name(cls, name: str) -> "EdgeWeightFormat":
        try:
            return cls(name)
        except ValueError:
            raise ValidationError(f"Unsupported EDGE_WEIGHT_FORMAT with value '{name}'.") from None


def allocate_distance_matrix(n: int, integer: bool = False) -> np.ndarray:
    # zeros gives the cleared main diagonal
    return np.zeros((n, n), dtype=np.int64 if integer else np.float64)


def parse_int(tok: str) -> int:
    """Plain ASCII integer that fits in int64, raises ValueError otherwise."""
    if _INT.fullmatch(tok) is None:
        raise ValueError(f"not an integer: {tok!r}")
    val = int(tok)
    if not _INT64.min <= val <= _INT64.max:
        raise ValueError(f"integer out of range: {tok!r}")
    return val


def parse_number(tok: str, integer: bool = False) -> Number:
    """Raises ValueError for anything that is not a finite number."""
    if integer:
        return parse_int(tok)
    if _REAL.fullmatch(tok) is None:
        raise ValueError(f"not a number: {tok!r}")
    val = float(tok)
    if not math.isfinite(val):
        raise ValueError(f"non-finite value {tok!r}")
    return val


def read_weight(source: LineSource, i: int, j: int, integer: bool = False) -> Number:
    tok = source.read_token()
    if tok is None:
        raise DataError(f"Error on row {i}, col {j}: input ended early.", row=i, col=j)
    try:
        return parse_number(tok, integer)
    except ValueError:
        raise DataError(f"Error on row {i}, col {j}: '{tok}' is not a number.", row=i, col=j) from None


def build_full_matrix(source: LineSource, m: np.ndarray, integer: bool = False) -> None:
    # Taken as read, no symmetry is imposed
    n = m.shape[0]
    for i in range(n):
        for j in range(n):
            m[i, j] = read_weight(source, i, j, integer)


def build_upper_row(source: LineSource, m: np.ndarray, integer: bool = False) -> None:
    n = m.shape[0]
    for i in range(n):
        for j in range(i + 1, n):
            m[i, j] = m[j, i] = read_weight(source, i, j, integer)


def build_lower_diag_row(source: LineSource, m: np.ndarray, integer: bool = False) -> None:
    # Diagonal values come from the input as well
    n = m.shape[0]
    for i in range(n):
        for j in range(i + 1):
            m[i, j] = m[j, i] = read_weight(source, i, j, integer)


def build_distance_matrix(source: LineSource, fmt: EdgeWeightFormat, n: int,
                          integer: bool = False) -> np.ndarray:
    m = allocate_distance_matrix(n, integer)
    if fmt is EdgeWeightFormat.FULL_MATRIX:
        build_full_matrix(source, m, integer)
    elif fmt is EdgeWeightFormat.UPPER_ROW:
        build_upper_row(source, m, integer)
    else:  # LOWER_DIAG_ROW
        build_lower_diag_row(source, m, integer)
    return m
