from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd

from tab_browser.core.cells import CellValue, Row
from tab_browser.core.exceptions import ImportFormatError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".json")

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_text_cell(raw: str) -> CellValue:
    """
    Turn one CSV field into a cell.

    Integer literals become int and decimal or exponent literals (plus
    NaN and Infinity) become float. Everything else stays as the trimmed
    text, so "1_000", "inf" and an empty field are not numbers.
    """
    text = raw.strip()
    if _INT_PATTERN.fullmatch(text):
        return int(text)
    if _FLOAT_PATTERN.fullmatch(text):
        return float(text)
    return text


def to_cell(value: Any) -> CellValue:
    """
    Fold a decoded JSON value into the cell domain.

    Booleans and nested structures have no cell variant, so they are kept as
    their JSON text.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool) or isinstance(value, (list, dict)):
        return json.dumps(value)
    if isinstance(value, (int, float)):
        return value
    return str(value)


def _read_csv(path: Path) -> Tuple[List[Row], List[str]]:
    df = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        skipinitialspace=True,
        encoding="utf-8",
    )
    headers = [str(c).strip() for c in df.columns]
    df.columns = headers

    rows: List[Row] = [
        {header: parse_text_cell(raw) for header, raw in record.items()}
        for record in df.to_dict(orient="records")
    ]
    return rows, headers


def read_json_records(raw: Any) -> Tuple[List[Row], List[str]]:
    """Rows and headers from an already-decoded JSON document (a list of objects)."""
    if not isinstance(raw, list):
        raise ImportFormatError("JSON data must be a list of objects")

    rows: List[Row] = []
    for i, record in enumerate(raw):
        if not isinstance(record, dict):
            raise ImportFormatError(f"JSON item {i} is not an object")
        rows.append({str(k): to_cell(v) for k, v in record.items()})

    headers = list(rows[0].keys()) if rows else []
    return rows, headers


def _read_json(path: Path) -> Tuple[List[Row], List[str]]:
    with path.open(encoding="utf-8") as f:
        raw: Any = json.load(f)
    return read_json_records(raw)


def read_table(path: Path | str) -> Tuple[List[Row], List[str]]:
    """
    Load a CSV or JSON file into (rows, headers) ready for DatasetStore.set_data.

    CSV: first line is the header row, every field goes through parse_text_cell.
    JSON: a list of objects; headers come from the first object's keys.

    :raises ImportFormatError: unsupported extension or malformed JSON layout
    :raises FileNotFoundError: if the file does not exist
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ImportFormatError(
            f"Unsupported file type '{path.suffix}'. Expected one of {list(SUPPORTED_SUFFIXES)}"
        )

    logger.info("Importing table", extra={"path": str(path), "format": suffix.lstrip(".")})
    try:
        if suffix == ".csv":
            rows, headers = _read_csv(path)
        else:
            rows, headers = _read_json(path)
    except ImportFormatError as e:
        logger.error("Malformed table file", extra={"path": str(path), "error": str(e)})
        raise
    except Exception:
        logger.exception("Unexpected error while importing table", extra={"path": str(path)})
        raise

    logger.info(
        "Table imported",
        extra={"path": str(path), "n_rows": len(rows), "columns": headers},
    )
    return rows, headers
