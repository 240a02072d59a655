"""Boundaries to the external collaborators the engine calls but never implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from program_engine.models.phase_state import ProgramPhaseState
from program_engine.models.program import CatalogEntry


class ProgressStore(ABC):
    """Persistence for each user's ProgramPhaseState.

    The transition monitor and the per-workout day advance both
    read-modify-write the same record. Writers pass the ``version`` they
    read as ``expected_version``; the store compares and replaces in one
    step and raises StaleStateError when another writer got there first.
    """

    @abstractmethod
    def read(self, user_id: str) -> ProgramPhaseState | None:
        """Return the stored state, or None if the user has no program yet."""
        ...

    @abstractmethod
    def write_atomic(
        self,
        user_id: str,
        state: ProgramPhaseState,
        expected_version: int | None = None,
    ) -> None:
        """Replace the whole stored record in one step. Partial writes are not allowed.

        Args:
            user_id: Owner of the record.
            state: The complete new record.
            expected_version: Version the caller read. None writes
                unconditionally (program assignment).

        Raises:
            StaleStateError: If the stored version differs from
                ``expected_version``, or the record is gone.
        """
        ...


class ProgramCatalog(ABC):
    """Source of candidate programs."""

    @abstractmethod
    def list_programs(self) -> Sequence[CatalogEntry | Mapping[str, Any]]:
        """Return every program, in catalog order. May be empty or legacy-shaped."""
        ...
