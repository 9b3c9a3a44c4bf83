# upi_insights/aggregation.py
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from upi_insights.core.models import Number, Transaction

_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


def current_month(now: Optional[datetime] = None) -> str:
    """Return the current UTC month as YYYY-MM."""
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m")


def normalize_month(value: str) -> str:
    """
    Turn a YYYY-M or YYYY-MM string into a zero-padded YYYY-MM key.
    Raises ValueError for anything else.
    """
    match = _MONTH_RE.match((value or "").strip())
    if not match:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM.")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{value}', month must be between 01 and 12.")
    return f"{year:04d}-{month:02d}"


def filter_by_month(
    transactions: Optional[Iterable[Transaction]], month: str
) -> List[Transaction]:
    """
    Return the transactions whose date starts with ``month``.

    This is a plain string-prefix match, so a short key such as "2024-1"
    also matches "2024-10" through "2024-12". Callers pass keys through
    normalize_month first.
    """
    if transactions is None:
        return []
    return [tx for tx in transactions if tx.date.startswith(month)]


def group_by_category(
    transactions: Optional[Iterable[Transaction]],
) -> Dict[str, Number]:
    """Sum amounts per category, keeping first-seen category order."""
    totals: Dict[str, Number] = {}
    if transactions is None:
        return totals
    for tx in transactions:
        totals[tx.category] = totals.get(tx.category, 0) + tx.amount
    return totals


def total_of(transactions: Optional[Iterable[Transaction]]) -> Number:
    if transactions is None:
        return 0
    return sum((tx.amount for tx in transactions), 0)


def distinct_months(transactions: Optional[Iterable[Transaction]]) -> List[str]:
    if transactions is None:
        return []
    return list(dict.fromkeys(tx.date for tx in transactions))
