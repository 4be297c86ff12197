from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from .cells import CellValue, Row

Snapshot = Tuple[Mapping[str, CellValue], ...]


def take_snapshot(rows: Sequence[Row]) -> Snapshot:
    """Independent, read-only copy of a row sequence."""
    return tuple(MappingProxyType(dict(row)) for row in rows)


def restore_rows(snapshot: Snapshot) -> List[Row]:
    """Fresh mutable rows built from a snapshot."""
    return [dict(row) for row in snapshot]


class ChangeHistory:
    """
    Whole-snapshot undo/redo over the row sequence.

    Only rows are captured; column names and types are not part of a
    snapshot and are never rolled back.

    max_depth=None keeps every snapshot. With a cap, the oldest entries of
    a stack are dropped once it grows past max_depth.
    """

    def __init__(self, max_depth: Optional[int] = None) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be >= 1 or None, got {max_depth}")
        self.max_depth = max_depth
        self._undo: List[Snapshot] = []
        self._redo: List[Snapshot] = []

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def record(self, rows: Sequence[Row]) -> None:
        """Push the pre-mutation rows and invalidate the redo branch."""
        self._push(self._undo, take_snapshot(rows))
        self._redo.clear()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def undo(self, current: Sequence[Row]) -> Optional[Snapshot]:
        """
        Return the snapshot to restore, or None if there is nothing to undo.
        The current rows move onto the redo stack.
        """
        if not self._undo:
            return None
        self._push(self._redo, take_snapshot(current))
        return self._undo.pop()

    def redo(self, current: Sequence[Row]) -> Optional[Snapshot]:
        if not self._redo:
            return None
        self._push(self._undo, take_snapshot(current))
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def _push(self, stack: List[Snapshot], snapshot: Snapshot) -> None:
        stack.append(snapshot)
        if self.max_depth is not None and len(stack) > self.max_depth:
            del stack[: len(stack) - self.max_depth]
