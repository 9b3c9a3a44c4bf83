from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Dict

import yaml

PALETTE = ["#FF6384", "#36A2EB", "#FFCE56"]

DEFAULT_CONFIG: Dict[str, object] = {
    "storage": {
        "backend": "json",
        "path": "transactions.json",
        "key": "transactions",
    },
    "storage_backends": {
        "json": "upi_insights.storage.json_file.JSONFileStorage",
        "sqlite": "upi_insights.storage.sqlite.SQLiteStorage",
        "memory": "upi_insights.storage.memory.MemoryStorage",
    },
    "output_modules": {
        "text": "upi_insights.outputs.text_output.TextOutput",
        "excel": "upi_insights.outputs.excel_output.ExcelOutput",
    },
    "output_dir": "data",
    "currency_symbol": "₹",
    "palette": PALETTE,
}

CONFIG_ENV = "UPI_INSIGHTS_CONFIG"


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    """
    Read the YAML config at ``path`` (or $UPI_INSIGHTS_CONFIG) and fill in
    defaults. A missing file yields the defaults.
    """
    target = path or os.environ.get(CONFIG_ENV)
    if not target or not Path(target).exists():
        return _merge_defaults({}, copy.deepcopy(DEFAULT_CONFIG))
    with Path(target).open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {target} must contain a mapping.")
    return _merge_defaults(data, copy.deepcopy(DEFAULT_CONFIG))
