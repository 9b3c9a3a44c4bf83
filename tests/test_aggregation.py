from datetime import datetime, timezone

import pytest

from upi_insights.aggregation import (
    current_month,
    distinct_months,
    filter_by_month,
    group_by_category,
    normalize_month,
    total_of,
)
from upi_insights.core.models import Transaction


def _tx(idx, amount, category, date):
    return Transaction(id=idx, amount=amount, category=category, date=date)


SAMPLE = [
    _tx(1, 10, "food", "2024-05"),
    _tx(2, 5, "food", "2024-05"),
    _tx(3, 20, "fuel", "2024-06"),
]


def test_filter_by_month_returns_matching_subset_in_order():
    assert filter_by_month(SAMPLE, "2024-05") == SAMPLE[:2]
    assert filter_by_month(SAMPLE, "2024-06") == SAMPLE[2:]


def test_filter_by_month_is_a_prefix_match():
    txs = [_tx(1, 1, "a", "2024-01"), _tx(2, 1, "a", "2024-10"), _tx(3, 1, "a", "2024-12")]
    assert filter_by_month(txs, "2024-1") == txs[1:]
    assert filter_by_month(txs, "2024") == txs
    assert filter_by_month(txs, "2024-01") == txs[:1]


def test_group_by_category_sums_in_first_seen_order():
    txs = [
        _tx(1, 10, "food", "2024-05"),
        _tx(2, 20, "fuel", "2024-05"),
        _tx(3, 5, "food", "2024-05"),
        _tx(4, 1, "Food", "2024-05"),
    ]
    totals = group_by_category(txs)
    assert totals == {"food": 15, "fuel": 20, "Food": 1}
    assert list(totals) == ["food", "fuel", "Food"]


def test_total_of_sums_amounts():
    same_month = [_tx(i, tx.amount, tx.category, "2024-05") for i, tx in enumerate(SAMPLE)]
    assert total_of(filter_by_month(same_month, "2024-05")) == 35
    assert total_of([_tx(1, 1.5, "a", "2024-05"), _tx(2, -0.5, "b", "2024-05")]) == 1.0


def test_empty_month_yields_empty_results():
    filtered = filter_by_month(SAMPLE, "2023-01")
    assert filtered == []
    assert group_by_category(filtered) == {}
    assert total_of(filtered) == 0


def test_none_input_degrades_gracefully():
    assert filter_by_month(None, "2024-05") == []
    assert group_by_category(None) == {}
    assert total_of(None) == 0
    assert distinct_months(None) == []


def test_distinct_months_keeps_first_seen_order():
    assert distinct_months(SAMPLE + [_tx(4, 1, "a", "2024-05")]) == ["2024-05", "2024-06"]


@pytest.mark.parametrize(
    "value, expected",
    [("2024-05", "2024-05"), ("2024-5", "2024-05"), (" 2024-12 ", "2024-12"), ("1999-1", "1999-01")],
)
def test_normalize_month(value, expected):
    assert normalize_month(value) == expected


@pytest.mark.parametrize("value", ["", "2024", "2024-13", "2024-00", "24-05", "2024/05", "2024-05-01", None])
def test_normalize_month_rejects_bad_values(value):
    with pytest.raises(ValueError):
        normalize_month(value)


def test_current_month_formats_utc():
    assert current_month(datetime(2025, 3, 31, 23, 59, tzinfo=timezone.utc)) == "2025-03"
    assert len(current_month()) == 7
