"""Custom exception hierarchy for the program engine.

Gaps in a user's assessment answers are never errors; these exceptions
cover catalog and configuration defects only.
"""

from __future__ import annotations


class ProgramEngineError(Exception):
    """Base exception for all program_engine errors."""


class ProgramConfigurationError(ProgramEngineError, ValueError):
    """Structurally invalid program data, e.g. a non-positive length in weeks.

    Always propagates to the caller: it signals a catalog defect that needs
    operator attention, not a user input problem.
    """


class CatalogEntryError(ProgramEngineError):
    """A single catalog entry is missing or has unreadable required fields."""

    def __init__(self, message: str, entry_id: object | None = None) -> None:
        super().__init__(message)
        self.entry_id = entry_id


class ProgressStoreError(ProgramEngineError):
    """Raised by progress-store implementations when a read or write fails."""


class StaleStateError(ProgressStoreError):
    """A conditional write found a different stored version than the one it was computed from."""

    def __init__(self, user_id: str, expected_version: int, stored_version: int | None) -> None:
        super().__init__(
            f"Stale write for user {user_id}: expected version {expected_version}, "
            f"stored {stored_version}"
        )
        self.user_id = user_id
        self.expected_version = expected_version
        self.stored_version = stored_version
