from __future__ import annotations

import pytest

from tab_browser.core.exceptions import InvalidAggregationError
from tab_browser.core.transformations import (
    AggregationType,
    compare_cells,
    make_aggregation,
    make_filter,
    make_sort,
)


def _rows():
    return [
        {"id": 1, "value": 10.5, "category": "A"},
        {"id": 2, "value": 20.5, "category": "B"},
        {"id": 3, "value": 30.5, "category": "A"},
    ]


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------
def test_filter_keeps_matching_rows_in_order():
    rows = [{"v": 10}, {"v": 20}, {"v": 30}]

    out = make_filter("v", lambda v: v > 15).apply(rows)

    assert out == [{"v": 20}, {"v": 30}]


def test_filter_does_not_mutate_input():
    rows = _rows()

    make_filter("value", lambda v: v > 15.0).apply(rows)

    assert len(rows) == 3


def test_filter_drops_rows_missing_the_column():
    rows = [{"v": 20}, {"w": 20}]

    out = make_filter("v", lambda v: True).apply(rows)

    assert out == [{"v": 20}]


def test_filter_predicate_type_error_rejects_row():
    rows = [{"v": 20}, {"v": "text"}, {"v": None}]

    out = make_filter("v", lambda v: v > 15).apply(rows)

    assert out == [{"v": 20}]


def test_filter_description():
    assert make_filter("value", bool).description == "Filter data on column: value"


# ---------------------------------------------------------------------------
# Sort
# ---------------------------------------------------------------------------
def test_compare_cells_rules():
    assert compare_cells(None, None) == 0
    assert compare_cells(None, 1) == -1
    assert compare_cells(1, None) == 1
    assert compare_cells(1, 2.5) == -1
    assert compare_cells("b", "a") == 1
    # incompatible kinds compare equal
    assert compare_cells("a", 1) == 0


def test_sort_ascending_puts_nulls_first():
    rows = [{"v": 3}, {"v": None}, {"v": 1}]

    out = make_sort("v").apply(rows)

    assert [r["v"] for r in out] == [None, 1, 3]


def test_sort_descending_puts_nulls_last():
    rows = [{"v": 3}, {"v": None}, {"v": 1}]

    out = make_sort("v", ascending=False).apply(rows)

    assert [r["v"] for r in out] == [3, 1, None]


def test_sort_is_stable_for_ties():
    rows = [
        {"id": 1, "k": "b"},
        {"id": 2, "k": "a"},
        {"id": 3, "k": "b"},
        {"id": 4, "k": "a"},
    ]

    asc = make_sort("k").apply(rows)
    desc = make_sort("k", ascending=False).apply(rows)

    assert [r["id"] for r in asc] == [2, 4, 1, 3]
    assert [r["id"] for r in desc] == [1, 3, 2, 4]


def test_sort_descending_reverses_ascending_for_distinct_values():
    rows = _rows()

    asc = make_sort("value").apply(rows)
    desc = make_sort("value", ascending=False).apply(asc)

    assert desc == list(reversed(asc))


def test_sort_mixes_ints_and_floats():
    rows = [{"v": 2.5}, {"v": 1}, {"v": 2}]

    out = make_sort("v").apply(rows)

    assert [r["v"] for r in out] == [1, 2, 2.5]


def test_sort_description():
    assert make_sort("value", ascending=False).description == "Sort descending by column: value"


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
def test_aggregation_sum_and_average():
    rows = _rows()

    total = make_aggregation("category", "value", AggregationType.SUM).apply(rows)
    avg = make_aggregation("category", "value", AggregationType.AVERAGE).apply(rows)

    assert total == [{"category": "A", "value": 41.0}, {"category": "B", "value": 20.5}]
    assert avg == [{"category": "A", "value": 20.5}, {"category": "B", "value": 20.5}]


def test_aggregation_count_counts_numeric_values_only():
    rows = [
        {"g": "A", "v": 1},
        {"g": "A", "v": 2},
        {"g": "A", "v": "n/a"},
        {"g": "B", "v": None},
    ]

    out = make_aggregation("g", "v", "COUNT").apply(rows)

    # "n/a" in group A and the null-only group B are not counted
    assert out == [{"g": "A", "v": 2.0}]


def test_aggregation_null_is_a_group_key():
    rows = [{"g": None, "v": 1}, {"g": None, "v": 2}, {"g": "x", "v": 5}]

    out = make_aggregation("g", "v", "SUM").apply(rows)

    assert out == [{"g": None, "v": 3.0}, {"g": "x", "v": 5.0}]


def test_aggregation_keeps_int_and_float_keys_apart():
    rows = [{"g": 1, "v": 1}, {"g": 1.0, "v": 1}]

    out = make_aggregation("g", "v", "COUNT").apply(rows)

    assert len(out) == 2


def test_aggregation_groups_nan_keys_together():
    rows = [{"g": float("nan"), "v": 1}, {"g": float("nan"), "v": 2}]

    out = make_aggregation("g", "v", "SUM").apply(rows)

    assert len(out) == 1
    assert out[0]["v"] == 3.0


def test_aggregation_drops_other_columns():
    out = make_aggregation("category", "value", "SUM").apply(_rows())

    assert all(set(row) == {"category", "value"} for row in out)


def test_aggregation_output_columns():
    t = make_aggregation("category", "value", "AVERAGE")

    assert t.output_columns == ("category", "value")
    assert t.description == "AVERAGE value grouped by category"


def test_aggregation_unknown_value_column_is_empty():
    out = make_aggregation("category", "missing", "SUM").apply(_rows())

    assert out == []


def test_aggregation_accepts_lowercase_kind():
    t = make_aggregation("category", "value", "sum")

    assert t.description.startswith("SUM")


def test_aggregation_unknown_kind_raises():
    with pytest.raises(InvalidAggregationError):
        make_aggregation("category", "value", "MEDIAN")

    # also a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        make_aggregation("category", "value", "MODE")
