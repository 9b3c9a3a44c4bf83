# upi_insights/core/models.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]

FIELDS = ("id", "amount", "category", "date")


def _is_number(value) -> bool:
    """True for JSON numbers Python can write back out: no bools, NaN or Infinity."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _is_integral(value) -> bool:
    return _is_number(value) and (isinstance(value, int) or value.is_integer())


@dataclass(frozen=True)
class Transaction:
    id: int
    amount: Number
    category: str
    date: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "category": self.category,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, entry) -> "Transaction":
        """Build a Transaction from its persisted form.

        Raises ``ValueError`` when a field is missing or has the wrong type.
        """
        if not isinstance(entry, dict):
            raise ValueError(f"Transaction entry must be an object: {entry!r}")
        missing = [name for name in FIELDS if name not in entry]
        if missing:
            raise ValueError(f"Missing {', '.join(missing)} in transaction entry: {entry}")
        if not _is_integral(entry["id"]):
            raise ValueError(f"Unrecognized id in transaction entry: {entry}")
        if not _is_number(entry["amount"]):
            raise ValueError(f"Unrecognized amount in transaction entry: {entry}")
        if not isinstance(entry["category"], str) or not isinstance(entry["date"], str):
            raise ValueError(f"Category and date must be strings: {entry}")
        return cls(
            id=int(entry["id"]),
            amount=entry["amount"],
            category=entry["category"],
            date=entry["date"],
        )
