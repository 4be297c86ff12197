import math

import pytest

from tab_browser.analysis.correlation import pearson_correlation


def test_perfect_positive_and_negative():
    rows = [{"a": i, "b": 2 * i + 1, "c": -i} for i in range(5)]

    assert pearson_correlation(rows, "a", "b") == pytest.approx(1.0)
    assert pearson_correlation(rows, "a", "c") == pytest.approx(-1.0)


def test_only_rows_with_both_numeric_take_part():
    rows = [
        {"a": 1, "b": 1},
        {"a": 2, "b": 2},
        {"a": 3, "b": 3},
        {"a": 4, "b": "x"},
        {"a": None, "b": 100},
    ]

    assert pearson_correlation(rows, "a", "b") == pytest.approx(1.0)


def test_no_numeric_pairs_returns_none():
    rows = [{"a": "x", "b": 1}]

    assert pearson_correlation(rows, "a", "b") is None
    assert pearson_correlation(rows, "missing", "b") is None


def test_undefined_coefficient_is_nan():
    assert math.isnan(pearson_correlation([{"a": 1, "b": 2}], "a", "b"))
    assert math.isnan(pearson_correlation([{"a": 1, "b": 2}, {"a": 1, "b": 3}], "a", "b"))
