from __future__ import annotations

import pytest

from tab_browser.core.history import ChangeHistory, restore_rows, take_snapshot


def test_snapshot_is_independent_of_live_rows():
    rows = [{"v": 1}]
    snap = take_snapshot(rows)

    rows[0]["v"] = 2
    rows.append({"v": 3})

    assert restore_rows(snap) == [{"v": 1}]


def test_snapshot_rows_are_read_only():
    snap = take_snapshot([{"v": 1}])

    with pytest.raises(TypeError):
        snap[0]["v"] = 5


def test_undo_on_empty_returns_none():
    history = ChangeHistory()

    assert history.undo([{"v": 1}]) is None
    assert history.redo([{"v": 1}]) is None
    assert not history.can_undo
    assert not history.can_redo


def test_record_undo_redo_cycle():
    history = ChangeHistory()
    history.record([{"v": 1}])

    restored = history.undo([{"v": 2}])
    assert restore_rows(restored) == [{"v": 1}]
    assert history.can_redo

    again = history.redo([{"v": 1}])
    assert restore_rows(again) == [{"v": 2}]
    assert history.can_undo
    assert not history.can_redo


def test_record_clears_redo():
    history = ChangeHistory()
    history.record([{"v": 1}])
    history.undo([{"v": 2}])

    history.record([{"v": 1}])

    assert not history.can_redo


def test_max_depth_drops_oldest():
    history = ChangeHistory(max_depth=2)
    for i in range(4):
        history.record([{"v": i}])

    assert history.undo_depth == 2
    assert restore_rows(history.undo([])) == [{"v": 3}]
    assert restore_rows(history.undo([])) == [{"v": 2}]
    assert history.undo([]) is None


def test_invalid_max_depth():
    with pytest.raises(ValueError):
        ChangeHistory(max_depth=0)
