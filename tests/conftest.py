import itertools

import pytest
import yaml

from upi_insights.storage.memory import MemoryStorage
from upi_insights.store import TransactionStore


@pytest.fixture
def clock():
    ticks = itertools.count(1_700_000_000_000)
    return lambda: next(ticks)


@pytest.fixture
def memory_store(clock):
    return TransactionStore(MemoryStorage(), clock=clock)


@pytest.fixture
def config_file(tmp_path):
    """Write a config.yaml pointing storage and outputs into tmp_path."""
    def _write(backend="json", **overrides):
        suffix = "db" if backend == "sqlite" else "json"
        cfg = {
            "storage": {
                "backend": backend,
                "path": str(tmp_path / f"transactions.{suffix}"),
            },
            "output_dir": str(tmp_path / "data"),
        }
        cfg.update(overrides)
        path = tmp_path / "config.yaml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(cfg, f, allow_unicode=True)
        return path
    return _write
