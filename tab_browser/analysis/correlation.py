from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from tab_browser.core.cells import Row, is_numeric


def pearson_correlation(rows: Sequence[Row], column_a: str, column_b: str) -> Optional[float]:
    """
    Pearson's correlation coefficient between two columns.

    Only rows where both cells are numeric take part. Returns None when there
    is no such row, and NaN when the coefficient is undefined (a single pair,
    or a constant column).
    """
    xs = []
    ys = []
    for row in rows:
        a, b = row.get(column_a), row.get(column_b)
        if is_numeric(a) and is_numeric(b):
            xs.append(float(a))
            ys.append(float(b))

    if not xs:
        return None
    if len(xs) < 2:
        return float("nan")

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if np.all(x == x[0]) or np.all(y == y[0]):
        return float("nan")

    return float(np.corrcoef(x, y)[0, 1])
