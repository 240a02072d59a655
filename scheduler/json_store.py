"""JSON-file implementations of the progress store and program catalog.

Good enough for a single-process scheduler: every write rewrites the file
through a temp file and ``os.replace`` so readers see either the old or
the new document, and a lock serializes writers in this process. The
version compare for conditional writes happens under the same lock.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from program_engine.exceptions import (
    ProgramConfigurationError,
    ProgressStoreError,
    StaleStateError,
)
from program_engine.interfaces import ProgramCatalog, ProgressStore
from program_engine.models.phase_state import ProgramPhaseState

logger = logging.getLogger(__name__)


class JsonProgressStore(ProgressStore):
    """Stores ``{user_id: ProgramPhaseState.to_dict()}`` in one JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def read(self, user_id: str) -> ProgramPhaseState | None:
        record = self._load().get(user_id)
        if record is None:
            return None
        try:
            return ProgramPhaseState.from_dict(record)
        except (KeyError, ValueError, TypeError) as exc:
            raise ProgressStoreError(f"Corrupt progress record for {user_id}: {exc}") from exc

    def write_atomic(
        self,
        user_id: str,
        state: ProgramPhaseState,
        expected_version: int | None = None,
    ) -> None:
        with self._lock:
            data = self._load()
            if expected_version is not None:
                record = data.get(user_id)
                stored_version = int(record.get("version", 0)) if record is not None else None
                if stored_version != expected_version:
                    raise StaleStateError(user_id, expected_version, stored_version)
            data[user_id] = state.to_dict()
            self._dump(data)

    def user_ids(self) -> list[str]:
        return sorted(self._load())

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise ProgressStoreError(f"Cannot read {self.path}: {exc}") from exc

    def _dump(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise ProgressStoreError(f"Cannot write {self.path}: {exc}") from exc


class JsonProgramCatalog(ProgramCatalog):
    """Reads a JSON list of program records; a missing file is an empty catalog."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def list_programs(self) -> list[dict]:
        if not self.path.exists():
            logger.warning("Catalog file %s not found, using empty catalog", self.path)
            return []
        with open(self.path) as f:
            programs = json.load(f)
        if not isinstance(programs, list):
            raise ProgramConfigurationError(f"{self.path} must contain a JSON list of programs")
        return programs
