from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from tab_browser.core.cells import Row, cell_key, is_numeric


@dataclass(frozen=True)
class ColumnSummary:
    """
    Per-column overview for the analysis panel.

    Numeric columns (decided by their first non-null value) fill the
    mean/median/std_dev/min/max fields, using the sample standard deviation.
    Other columns fill unique_count instead.
    """
    column: str
    total_values: int
    null_count: int
    mean: Optional[float] = None
    median: Optional[float] = None
    std_dev: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    unique_count: Optional[int] = None

    @property
    def is_numeric(self) -> bool:
        return self.mean is not None

    def to_text(self) -> str:
        lines = [
            f"Column: {self.column}",
            f"Total values: {self.total_values}",
            f"Null values: {self.null_count}",
        ]
        if self.is_numeric:
            lines += [
                f"Mean: {self.mean:.2f}",
                f"Median: {self.median:.2f}",
                f"Std Dev: {self.std_dev:.2f}",
                f"Min: {self.min:.2f}",
                f"Max: {self.max:.2f}",
            ]
        elif self.unique_count is not None:
            lines.append(f"Unique values: {self.unique_count}")
        return "\n".join(lines)


def summarise_column(rows: Sequence[Row], column: str) -> ColumnSummary:
    values = []
    null_count = 0
    for row in rows:
        value = row.get(column)
        if value is None:
            null_count += 1
        else:
            values.append(value)

    if not values:
        return ColumnSummary(column=column, total_values=0, null_count=null_count)

    if is_numeric(values[0]):
        series = pd.Series([float(v) for v in values if is_numeric(v)], dtype=float)
        std = series.std(ddof=1)
        return ColumnSummary(
            column=column,
            total_values=len(values),
            null_count=null_count,
            mean=float(series.mean()),
            median=float(series.median()),
            # a single value has no sample deviation
            std_dev=0.0 if pd.isna(std) else float(std),
            min=float(series.min()),
            max=float(series.max()),
        )

    unique_count = len({cell_key(v) for v in values})
    return ColumnSummary(
        column=column,
        total_values=len(values),
        null_count=null_count,
        unique_count=unique_count,
    )


def summarise_columns(rows: Sequence[Row], columns: Sequence[str]) -> List[ColumnSummary]:
    """Summaries for `columns`, in the given order."""
    return [summarise_column(rows, column) for column in columns]
