from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from tab_browser.core.cells import CellKind, CellValue, Row, cell_kind
from tab_browser.core.exceptions import ImportFormatError

from .importer import SUPPORTED_SUFFIXES

logger = logging.getLogger(__name__)


def rows_to_frame(rows: Sequence[Row], headers: Sequence[str]) -> pd.DataFrame:
    """
    DataFrame with exactly `headers` as columns; missing cells become None.

    Built from object columns so integers are not widened to float by NaN.
    """
    data = {h: pd.Series([row.get(h) for row in rows], dtype=object) for h in headers}
    return pd.DataFrame(data, columns=list(headers))


def json_cell(value: CellValue) -> CellValue:
    """JSON has no NaN or Infinity literal; those cells are written as null."""
    if cell_kind(value) is CellKind.FLOAT and not math.isfinite(value):
        return None
    return value


def write_table(path: Path | str, rows: Sequence[Row], headers: Sequence[str]) -> None:
    """
    Write rows to CSV or JSON.

    CSV: header row = `headers`, None written as an empty field.
    JSON: pretty-printed list of row objects (keys in `headers` order),
    NaN and infinite cells written as null.

    :raises ImportFormatError: unsupported extension
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ImportFormatError(
            f"Unsupported file type '{path.suffix}'. Expected one of {list(SUPPORTED_SUFFIXES)}"
        )

    headers = list(headers)
    try:
        if suffix == ".csv":
            rows_to_frame(rows, headers).to_csv(path, index=False, na_rep="")
        else:
            records: List[dict] = [{h: json_cell(row.get(h)) for h in headers} for row in rows]
            path.write_text(json.dumps(records, indent=2, allow_nan=False), encoding="utf-8")
    except Exception:
        logger.exception("Failed to export table", extra={"path": str(path)})
        raise

    logger.info(
        "Table exported",
        extra={"path": str(path), "n_rows": len(rows), "columns": headers},
    )
