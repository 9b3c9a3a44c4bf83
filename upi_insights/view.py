# upi_insights/view.py
"""Dashboard view model shared by the terminal, workbook and web renderers.

The chart sections use the Chart.js ``data`` shape so the web template can
hand them to the browser unchanged.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from upi_insights.aggregation import (
    distinct_months,
    filter_by_month,
    group_by_category,
    total_of,
)
from upi_insights.config import PALETTE
from upi_insights.core.models import Transaction


def _chart_data(totals: Dict[str, float], palette: List[str], label: Optional[str] = None) -> dict:
    dataset = {
        "data": list(totals.values()),
        "backgroundColor": list(palette),
    }
    if label:
        dataset = {"label": label, **dataset}
    return {"labels": list(totals.keys()), "datasets": [dataset]}


def build_dashboard(
    transactions: Optional[Iterable[Transaction]],
    month: str,
    palette: Optional[List[str]] = None,
) -> dict:
    """
    Derive everything the dashboard shows for ``month``.

    ``months`` lists every month in the full history, not just the
    filtered view. The palette is passed through as-is: categories past
    its length are left to the renderer's default colour.
    """
    history = list(transactions or [])
    palette = PALETTE if palette is None else palette
    filtered = filter_by_month(history, month)
    totals = group_by_category(filtered)
    return {
        "month": month,
        "months": distinct_months(history),
        "total": total_of(filtered),
        "category_totals": totals,
        "transactions": [tx.to_dict() for tx in filtered],
        "bar": _chart_data(totals, palette, label="Spending"),
        "pie": _chart_data(totals, palette),
    }


def format_amount(value: float, symbol: str = "") -> str:
    """Format an amount for display: 35 -> "35", 12.5 -> "12.5", 0.1 + 0.2 -> "0.3".

    Amounts are rounded to two decimals; anything smaller than a cent is
    shown unrounded (0.001 -> "0.001").
    """
    if isinstance(value, int) or float(value).is_integer():
        text = str(int(value))
    elif abs(value) < 0.01:
        text = repr(value)
    else:
        text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text.startswith("-"):
        return f"-{symbol}{text[1:]}"
    return f"{symbol}{text}"


def color_for(index: int, palette: List[str]) -> Optional[str]:
    """Palette colour of the index-th category, or None past the palette."""
    return palette[index] if index < len(palette) else None
