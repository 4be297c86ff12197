from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

from .cells import Row, is_numeric


@dataclass(frozen=True)
class ColumnStats:
    """
    Descriptive summary of the numeric cells of one column.

    std_dev is the population standard deviation (divisor = count).
    """
    count: int
    sum: float
    mean: float
    min: float
    max: float
    median: float
    std_dev: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def numeric_values(rows: Sequence[Row], column: str) -> List[float]:
    """Numeric cells of `column` as floats; nulls, text and missing keys are skipped."""
    return [float(row[column]) for row in rows if is_numeric(row.get(column))]


def median_of_sorted(values: Sequence[float]) -> float:
    size = len(values)
    mid = size // 2
    if size % 2 == 0:
        return (values[mid - 1] + values[mid]) / 2.0
    return values[mid]


def basic_stats(rows: Sequence[Row], column: str) -> Optional[ColumnStats]:
    """
    Compute count / sum / mean / min / max / median / std_dev for `column`.

    Returns None when the column holds no numeric cell at all (unknown
    columns included).
    """
    values = numeric_values(rows, column)
    if not values:
        return None

    count = 0
    low = math.inf
    high = -math.inf
    for value in values:
        count += 1
        if value < low:
            low = value
        if value > high:
            high = value

    total = math.fsum(values)
    mean = total / count

    ordered = sorted(values)
    variance = math.fsum((v - mean) ** 2 for v in values) / count

    return ColumnStats(
        count=count,
        sum=total,
        mean=mean,
        min=low,
        max=high,
        median=median_of_sorted(ordered),
        std_dev=math.sqrt(variance),
    )
