from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from .cells import CellValue, Row, cell_key, type_tag
from .history import ChangeHistory, restore_rows
from .notifier import ChangeNotifier, Listener, Subscription
from .statistics import ColumnStats, basic_stats
from .transformations import Transformation

logger = logging.getLogger(__name__)


class DatasetStore:
    """
    In-memory tabular dataset: the aggregate root every collaborator talks to.

    Owns:
    - the live row list (returned as-is by get_data, never copied)
    - the ordered column names and the column -> type tag mapping
    - the undo/redo history and the change notifier

    Every mutator records the pre-mutation rows in the history, applies the
    change and fires the notifier exactly once. undo/redo move between
    snapshots and notify, without recording.

    Not thread-safe: callers sharing a store across threads must serialise
    every mutating call themselves.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(self, history_depth: Optional[int] = None) -> None:
        self._rows: List[Row] = []
        self._column_names: List[str] = []
        self._column_types: Dict[str, str] = {}

        self._history = ChangeHistory(max_depth=history_depth)
        self._notifier = ChangeNotifier()

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------
    def add_listener(self, callback: Listener) -> Subscription:
        """Subscribe `callback` (no arguments) to every data change."""
        return self._notifier.add_listener(callback)

    def remove_listener(self, handle: Subscription) -> None:
        self._notifier.remove_listener(handle)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    def get_data(self) -> List[Row]:
        """
        Return the canonical row list.

        This is the store itself: edits made through it are visible to every
        later read, but they bypass history and notification.
        """
        return self._rows

    def get_column_names(self) -> Tuple[str, ...]:
        return tuple(self._column_names)

    def get_column_types(self) -> Mapping[str, str]:
        return MappingProxyType(self._column_types)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def get_basic_stats(self, column: str) -> Optional[ColumnStats]:
        """Descriptive statistics for `column`, or None if it has no numeric cell."""
        return basic_stats(self._rows, column)

    def to_frame(self) -> pd.DataFrame:
        """Copy of the current rows as a DataFrame, columns in display order."""
        return pd.DataFrame(self._rows, columns=list(self._column_names))

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------
    def set_data(self, rows: Iterable[Mapping[str, CellValue]], headers: Sequence[str]) -> None:
        """
        Replace the whole dataset.

        Column types are inferred from the first row only; later rows are
        assumed to agree with it and are never inspected.
        """
        new_rows = [dict(row) for row in rows]
        headers = list(dict.fromkeys(headers))

        self._history.record(self._rows)

        self._rows[:] = new_rows
        self._column_names[:] = headers
        self._column_types.clear()
        self._column_types.update(self._infer_column_types(new_rows, headers))

        logger.info(
            "Dataset replaced",
            extra={"n_rows": len(new_rows), "columns": headers},
        )
        self._notifier.notify()

    def apply_transformation(self, transformation: Transformation) -> None:
        """
        Run `transformation` over the current rows and make the result current.

        The result is computed before anything is recorded, so a failing
        transformation leaves rows and history untouched.
        """
        new_rows = transformation.apply(list(self._rows))

        self._history.record(self._rows)
        self._rows[:] = new_rows

        if transformation.output_columns is not None:
            columns = list(transformation.output_columns)
            self._column_names[:] = columns
            kept = {c: self._column_types[c] for c in columns if c in self._column_types}
            self._column_types.clear()
            self._column_types.update(kept)

        logger.debug(
            "Transformation applied",
            extra={
                "transformation": transformation.name,
                "description": transformation.description,
                "n_rows": len(new_rows),
            },
        )
        self._notifier.notify()

    def update_value(self, row_index: int, column: str, value: CellValue) -> None:
        """
        Replace a single cell.

        Out-of-range indexes (negative ones included) and columns outside the
        current column set are ignored: nothing is recorded or notified.
        """
        if not 0 <= row_index < len(self._rows):
            logger.debug("Ignoring update outside row range", extra={"row_index": row_index})
            return
        if column not in self._column_names:
            logger.debug("Ignoring update of unknown column", extra={"column": column})
            return

        self._history.record(self._rows)
        self._rows[row_index][column] = value
        self._notifier.notify()

    def clear_data(self) -> None:
        self._history.record(self._rows)

        self._rows.clear()
        self._column_names.clear()
        self._column_types.clear()

        logger.info("Dataset cleared")
        self._notifier.notify()

    def remove_null_values(self, column: str) -> None:
        """Drop rows whose `column` cell is None (missing keys and empty text are kept)."""
        self._history.record(self._rows)

        before = len(self._rows)
        self._rows[:] = [row for row in self._rows if not (column in row and row[column] is None)]

        logger.debug(
            "Removed null rows",
            extra={"column": column, "n_removed": before - len(self._rows)},
        )
        self._notifier.notify()

    def remove_duplicates(self) -> None:
        """Keep the first occurrence of each structurally equal row, in order."""
        self._history.record(self._rows)

        seen = set()
        unique: List[Row] = []
        for row in self._rows:
            key = frozenset((name, cell_key(value)) for name, value in row.items())
            if key in seen:
                continue
            seen.add(key)
            unique.append(row)

        before = len(self._rows)
        self._rows[:] = unique

        logger.debug("Removed duplicate rows", extra={"n_removed": before - len(unique)})
        self._notifier.notify()

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------
    def undo(self) -> None:
        """Restore the previous row sequence; column names and types stay as they are."""
        snapshot = self._history.undo(self._rows)
        if snapshot is None:
            return
        self._rows[:] = restore_rows(snapshot)
        self._notifier.notify()

    def redo(self) -> None:
        snapshot = self._history.redo(self._rows)
        if snapshot is None:
            return
        self._rows[:] = restore_rows(snapshot)
        self._notifier.notify()

    # -------------------------------------------------------------------------
    # Internal: type inference
    # -------------------------------------------------------------------------
    @staticmethod
    def _infer_column_types(rows: Sequence[Row], headers: Sequence[str]) -> Dict[str, str]:
        if not rows:
            return {}
        first_row = rows[0]
        return {column: type_tag(first_row.get(column)) for column in headers}
