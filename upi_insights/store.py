# upi_insights/store.py
from __future__ import annotations

import logging
import math
import time
from typing import Callable, List, Optional, Tuple

from upi_insights.aggregation import current_month, distinct_months
from upi_insights.core.models import Number, Transaction
from upi_insights.storage.base import BaseStorage

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def parse_amount(value) -> Number:
    """
    Convert form input to a number. Integral values come back as int so
    that "10" is persisted as 10 rather than 10.0.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount '{value}'.")
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid amount '{value}'.") from exc
    if not math.isfinite(number):
        raise ValueError(f"Invalid amount '{value}'.")
    return int(number) if number.is_integer() else number


class TransactionStore:
    """Append-only, in-memory transaction list backed by a storage slot.

    Every append builds a new tuple and hands the full sequence to the
    storage backend; the previous tuple is never modified.
    """

    def __init__(self, storage: BaseStorage, clock: Optional[Callable[[], int]] = None):
        self.storage = storage
        self.clock = clock or _now_ms
        self._transactions: Tuple[Transaction, ...] = ()

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def load(self) -> Tuple[Transaction, ...]:
        self._transactions = tuple(self.storage.load())
        logger.info("Loaded %d transaction(s) from %s", len(self._transactions), self.storage)
        return self._transactions

    def append(self, amount, category, date: str | None = None) -> Transaction | None:
        """
        Record a new transaction and persist the whole list.

        Returns None without touching the store when amount or category is
        empty. A non-numeric amount raises ValueError.
        """
        if amount is None or amount == "" or not category:
            logger.debug("Skipping transaction with empty amount or category")
            return None

        tx = Transaction(
            id=self.clock(),
            amount=parse_amount(amount),
            category=category,
            date=date or current_month(),
        )
        updated = self._transactions + (tx,)
        self.storage.save(updated)
        self._transactions = updated
        logger.debug("Appended transaction %s", tx)
        return tx

    def months(self) -> List[str]:
        return distinct_months(self._transactions)
