"""Program phase state: where a user sits in their periodized program."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from program_engine.models.enums import ProgramPhase


@dataclass(frozen=True)
class ProgramPhaseState:
    """Immutable phase/week/day position for one user.

    ``current_week`` and ``current_day`` are zero-based; renumbering for
    display is the caller's job. The record is always written as a whole
    so a reader never sees a new ``phase`` next to a stale ``current_week``.
    ``version`` lets a store reject a write computed from an older read.
    """

    phase: ProgramPhase
    program_id: str
    current_week: int  # 0-indexed
    current_day: int  # 0-6
    start_date: date
    event_date: date | None = None
    main_program_start_date: date | None = None
    virtual_start_date: date | None = None
    event_completed: bool = False
    version: int = 0  # bumped on every stored write

    def to_dict(self) -> dict:
        """Serialize to plain JSON-compatible values (dates as ISO strings)."""
        return {
            "phase": self.phase.name,
            "program_id": self.program_id,
            "current_week": self.current_week,
            "current_day": self.current_day,
            "start_date": self.start_date.isoformat(),
            "event_date": _iso(self.event_date),
            "main_program_start_date": _iso(self.main_program_start_date),
            "virtual_start_date": _iso(self.virtual_start_date),
            "event_completed": self.event_completed,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ProgramPhaseState:
        """Inverse of ``to_dict()``."""
        return cls(
            phase=ProgramPhase[data["phase"]],
            program_id=str(data["program_id"]),
            current_week=int(data["current_week"]),
            current_day=int(data["current_day"]),
            start_date=date.fromisoformat(data["start_date"]),
            event_date=_from_iso(data.get("event_date")),
            main_program_start_date=_from_iso(data.get("main_program_start_date")),
            virtual_start_date=_from_iso(data.get("virtual_start_date")),
            event_completed=bool(data.get("event_completed", False)),
            version=int(data.get("version", 0)),
        )


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _from_iso(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None
