"""Environment-variable-based configuration for the nightly scheduler."""

from __future__ import annotations

import os
from pathlib import Path

PROGRESS_STORE_PATH: Path = Path(
    os.environ.get("PROGRESS_STORE_PATH", "data/progress.json")
).expanduser()
CATALOG_PATH: Path = Path(os.environ.get("CATALOG_PATH", "data/programs.json")).expanduser()
NIGHTLY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "2"))
NIGHTLY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
