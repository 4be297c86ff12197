from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .cells import CellKind, CellValue, Row, cell_key, cell_kind, is_numeric
from .exceptions import InvalidAggregationError

logger = logging.getLogger(__name__)

Predicate = Callable[[CellValue], bool]


class AggregationType(str, Enum):
    SUM = "SUM"
    AVERAGE = "AVERAGE"
    COUNT = "COUNT"


@dataclass(frozen=True)
class Transformation:
    """
    A named, pure operation over a row sequence.

    - name: short machine name ("filter", "sort", "aggregate")
    - description: human-readable summary for menus / history labels
    - apply: rows -> new rows; never mutates its input
    - output_columns: column set the result redefines, or None when the
      schema is left untouched
    """
    name: str
    description: str
    apply: Callable[[Sequence[Row]], List[Row]]
    output_columns: Optional[Tuple[str, ...]] = None


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------
def make_filter(column: str, predicate: Predicate) -> Transformation:
    """
    Keep rows whose `column` cell satisfies `predicate`.

    Rows without the column are dropped. A predicate that trips over an
    incompatible cell (TypeError, e.g. `"abc" > 15`) rejects that row.
    """

    def _accept(row: Row) -> bool:
        if column not in row:
            return False
        try:
            return bool(predicate(row[column]))
        except TypeError:
            return False

    def apply(rows: Sequence[Row]) -> List[Row]:
        return [row for row in rows if _accept(row)]

    return Transformation(
        name="filter",
        description=f"Filter data on column: {column}",
        apply=apply,
    )


# ---------------------------------------------------------------------------
# Sort
# ---------------------------------------------------------------------------
def compare_cells(a: CellValue, b: CellValue) -> int:
    """
    Three-way comparison used by the sort transformation.

    Null sorts before everything else. Numbers compare with numbers and
    text with text; any other pairing compares equal.
    """
    kind_a, kind_b = cell_kind(a), cell_kind(b)

    if kind_a is CellKind.NULL and kind_b is CellKind.NULL:
        return 0
    if kind_a is CellKind.NULL:
        return -1
    if kind_b is CellKind.NULL:
        return 1

    both_numeric = is_numeric(a) and is_numeric(b)
    both_text = kind_a is CellKind.TEXT and kind_b is CellKind.TEXT
    if not (both_numeric or both_text):
        return 0

    return (a > b) - (a < b)


def make_sort(column: str, ascending: bool = True) -> Transformation:
    """
    Stable sort on `column`. Descending reverses the comparator, so nulls
    end up last; rows that compare equal keep their relative order either way.
    """
    key = cmp_to_key(lambda r1, r2: compare_cells(r1.get(column), r2.get(column)))

    def apply(rows: Sequence[Row]) -> List[Row]:
        return sorted(rows, key=key, reverse=not ascending)

    direction = "ascending" if ascending else "descending"
    return Transformation(
        name="sort",
        description=f"Sort {direction} by column: {column}",
        apply=apply,
    )


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
def coerce_aggregation_type(kind: Union[AggregationType, str]) -> AggregationType:
    if isinstance(kind, AggregationType):
        return kind
    try:
        return AggregationType(str(kind).strip().upper())
    except ValueError:
        raise InvalidAggregationError(
            f"Unknown aggregation type: {kind!r}. "
            f"Expected one of {[t.value for t in AggregationType]}"
        ) from None


def _reduce(values: List[float], kind: AggregationType) -> float:
    if kind is AggregationType.SUM:
        return math.fsum(values)
    if kind is AggregationType.AVERAGE:
        return math.fsum(values) / len(values)
    if kind is AggregationType.COUNT:
        return float(len(values))
    raise InvalidAggregationError(f"Unknown aggregation type: {kind!r}")


def make_aggregation(
    group_column: str,
    value_column: str,
    kind: Union[AggregationType, str],
) -> Transformation:
    """
    Group rows by the raw `group_column` value and reduce the numeric
    `value_column` cells of each group.

    Notes:
    - Null is a valid group key
    - Non-numeric cells are left out of a group's value list; a group whose
      list stays empty produces no output row
    - COUNT is the size of that numeric list, not the number of rows
      sharing the key
    - Output rows carry exactly (group_column, value_column), in order of
      first appearance of each group

    Raises:
        InvalidAggregationError: if `kind` is not SUM, AVERAGE or COUNT
    """
    agg_type = coerce_aggregation_type(kind)
    output_columns = tuple(dict.fromkeys((group_column, value_column)))

    def apply(rows: Sequence[Row]) -> List[Row]:
        groups: Dict[tuple, Tuple[CellValue, List[float]]] = {}

        for row in rows:
            value = row.get(value_column)
            if not is_numeric(value):
                continue
            group_value = row.get(group_column)
            _, collected = groups.setdefault(cell_key(group_value), (group_value, []))
            collected.append(float(value))

        result: List[Row] = []
        for group_value, collected in groups.values():
            result.append(
                {
                    group_column: group_value,
                    value_column: _reduce(collected, agg_type),
                }
            )

        logger.debug(
            "Aggregated rows",
            extra={
                "group_column": group_column,
                "value_column": value_column,
                "kind": agg_type.value,
                "n_in": len(rows),
                "n_groups": len(result),
            },
        )
        return result

    return Transformation(
        name="aggregate",
        description=f"{agg_type.value} {value_column} grouped by {group_column}",
        apply=apply,
        output_columns=output_columns,
    )
