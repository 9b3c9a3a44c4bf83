# upi_insights/storage/base.py
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

from upi_insights.core.models import Transaction

logger = logging.getLogger(__name__)


class BaseStorage(ABC):
    """A single key-value slot holding the whole transaction list as JSON.

    Subclasses only move the serialized payload in and out of the slot;
    encoding, decoding and the malformed-data fallback live here.
    """

    @abstractmethod
    def read_slot(self) -> str | None:
        """Return the raw payload, or None when nothing was persisted.

        Raise ValueError when the slot exists but cannot be read back.
        """

    @abstractmethod
    def write_slot(self, payload: str) -> None:
        """Replace the slot content with payload."""

    def load(self) -> List[Transaction]:
        try:
            raw = self.read_slot()
            if raw is None or raw == "":
                return []
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("Ignoring malformed transaction data in %s: %s", self, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring transaction data in %s: expected a list, got %s", self, type(data).__name__)
            return []
        try:
            return [Transaction.from_dict(entry) for entry in data]
        except ValueError as exc:
            logger.warning("Ignoring malformed transaction data in %s: %s", self, exc)
            return []

    def save(self, transactions: Iterable[Transaction]) -> None:
        payload = json.dumps(
            [tx.to_dict() for tx in transactions],
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        self.write_slot(payload)
