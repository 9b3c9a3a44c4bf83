# upi_insights/storage/memory.py
from upi_insights.storage.base import BaseStorage


class MemoryStorage(BaseStorage):
    """In-process slot; nothing survives the process."""

    def __init__(self, config=None):
        storage_cfg = (config or {}).get("storage", {})
        self.key = storage_cfg.get("key", "transactions")
        self.slots = {}

    def __repr__(self):
        return f"MemoryStorage(key={self.key!r})"

    def read_slot(self):
        return self.slots.get(self.key)

    def write_slot(self, payload):
        self.slots[self.key] = payload
