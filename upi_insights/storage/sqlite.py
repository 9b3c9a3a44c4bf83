# upi_insights/storage/sqlite.py
from __future__ import annotations

import sqlite3
from pathlib import Path

from upi_insights.storage.base import BaseStorage


def _init_db(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS slots (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
        """
    )
    conn.commit()


class SQLiteStorage(BaseStorage):
    """Keep the transaction list in one row of a SQLite key-value table."""

    def __init__(self, config: dict):
        storage_cfg = config.get("storage", {})
        self.db_path = Path(storage_cfg.get("path", "upi_insights.db"))
        self.key = storage_cfg.get("key", "transactions")

    def __repr__(self) -> str:
        return f"SQLiteStorage({str(self.db_path)!r}, key={self.key!r})"

    def read_slot(self) -> str | None:
        if not self.db_path.exists():
            return None
        conn = sqlite3.connect(self.db_path)
        try:
            _init_db(conn)
            row = conn.execute(
                "SELECT value FROM slots WHERE key = ?", (self.key,)
            ).fetchone()
            return row[0] if row else None
        except sqlite3.DatabaseError as exc:
            raise ValueError(f"Unreadable database {self.db_path}: {exc}") from exc
        finally:
            conn.close()

    def write_slot(self, payload: str) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        try:
            _init_db(conn)
            conn.execute(
                "INSERT OR REPLACE INTO slots (key, value) VALUES (?, ?)",
                (self.key, payload),
            )
            conn.commit()
        finally:
            conn.close()
