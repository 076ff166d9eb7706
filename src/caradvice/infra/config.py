from __future__ import annotations

import os
from pathlib import Path

# Dataset shipped with the package, used unless CATALOG_DATA_PATH is set
DEFAULT_CATALOG_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "vehicles.json"


def catalog_data_path() -> Path:
    path = os.getenv("CATALOG_DATA_PATH")

    if not path:
        return DEFAULT_CATALOG_DATA_PATH

    return Path(path)


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
