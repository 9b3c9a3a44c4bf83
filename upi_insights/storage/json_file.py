# upi_insights/storage/json_file.py
from __future__ import annotations

from pathlib import Path

from upi_insights.storage.base import BaseStorage


class JSONFileStorage(BaseStorage):
    """Keep the transaction list in a single UTF-8 JSON file."""

    def __init__(self, config: dict):
        storage_cfg = config.get("storage", {})
        self.path = Path(storage_cfg.get("path", "transactions.json"))

    def __repr__(self) -> str:
        return f"JSONFileStorage({str(self.path)!r})"

    def read_slot(self) -> str | None:
        try:
            return self.path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError):
            return None

    def write_slot(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")
