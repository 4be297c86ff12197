from __future__ import annotations

import math
import numbers
from enum import Enum
from typing import Dict, Union

CellValue = Union[None, int, float, str]
Row = Dict[str, CellValue]

UNKNOWN_TYPE = "unknown"


class CellKind(str, Enum):
    """Closed set of variants a cell can hold."""
    NULL = "null"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"


def cell_kind(value: CellValue) -> CellKind:
    """
    Classify a cell value.

    numpy scalars coming out of pandas are covered by the numbers ABCs, so
    they classify the same as the builtin int/float they stand for.
    """
    if value is None:
        return CellKind.NULL
    if isinstance(value, numbers.Integral):
        return CellKind.INTEGER
    if isinstance(value, numbers.Real):
        return CellKind.FLOAT
    return CellKind.TEXT


def is_numeric(value: CellValue) -> bool:
    return cell_kind(value) in (CellKind.INTEGER, CellKind.FLOAT)


def type_tag(value: CellValue) -> str:
    """Column type tag for a sample value ('unknown' for nulls)."""
    kind = cell_kind(value)
    if kind is CellKind.NULL:
        return UNKNOWN_TYPE
    return kind.value


def cell_key(value: CellValue) -> tuple:
    """
    Kind-aware hashable identity of a cell.

    Plain Python equality merges 1, 1.0 and True; the cell model keeps
    integers and floats distinct. Every NaN maps to the same key, so NaN
    cells group and de-duplicate together.
    """
    kind = cell_kind(value)
    if kind is CellKind.FLOAT and math.isnan(value):
        return kind, "nan"
    return kind, value
