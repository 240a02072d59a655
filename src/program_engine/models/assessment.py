"""Frozen assessment answers: the raw input to every recommendation.

Answers arrive from web forms and older API clients in several shapes.
``AssessmentAnswers.from_mapping()`` coerces all of them into one typed
record and never raises: anything absent or unreadable becomes 0, an
empty string or an empty set.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

# snake_case field -> accepted source keys, checked in order
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "events_completed": ("events_completed", "hyroxEventsCompleted", "eventsCompleted"),
    "best_finish_time_s": ("best_finish_time", "bestFinishTime"),
    "fitness_years": ("fitness_years", "generalFitnessYears", "fitnessYears"),
    "training_background": (
        "training_background",
        "primaryTrainingBackground",
        "trainingBackground",
    ),
    "weekly_training_days": ("weekly_training_days", "weeklyTrainingDays"),
    "avg_session_length_h": ("avg_session_length", "avgSessionLength"),
    "competition_format": ("competition_format", "competitionFormat"),
    "age": ("age",),
    "injury_history": ("injury_history", "injuryHistory"),
    "injury_recent": ("injury_recent", "injuryRecent"),
    "kilometer_run_time_min": ("kilometer_run_time", "kilometerRunTime"),
    "squat_max_reps": ("squat_max_reps", "squatMaxReps"),
    "goals": ("goals",),
    "equipment_access": ("equipment_access", "equipmentAccess"),
}

_TRUE_STRINGS = frozenset({"true", "yes", "y", "1"})


@dataclass(frozen=True)
class AssessmentAnswers:
    """Immutable snapshot of a user's fitness assessment.

    String fields that are matched against lookup tables
    (``training_background``, ``competition_format``, ``equipment_access``,
    ``goals``) are stored stripped and lowercased.
    """

    events_completed: int = 0
    best_finish_time_s: float = 0.0
    fitness_years: float = 0.0
    training_background: str = ""
    weekly_training_days: int = 0
    avg_session_length_h: float = 0.0
    competition_format: str = ""
    age: int = 0
    injury_history: bool = False
    injury_recent: bool = False
    kilometer_run_time_min: float = 0.0
    squat_max_reps: int = 0
    goals: frozenset[str] = field(default_factory=frozenset)
    equipment_access: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> AssessmentAnswers:
        """Build answers from a loosely-typed mapping (form post, JSON body)."""
        if not data:
            return cls()

        raw = {name: _first_present(data, keys) for name, keys in _FIELD_ALIASES.items()}
        return cls(
            events_completed=_to_int(raw["events_completed"]),
            best_finish_time_s=parse_finish_time(raw["best_finish_time_s"]),
            fitness_years=_to_float(raw["fitness_years"]),
            training_background=_to_key(raw["training_background"]),
            weekly_training_days=_to_int(raw["weekly_training_days"]),
            avg_session_length_h=_to_float(raw["avg_session_length_h"]),
            competition_format=_to_key(raw["competition_format"]),
            age=_to_int(raw["age"]),
            injury_history=_to_bool(raw["injury_history"]),
            injury_recent=_to_bool(raw["injury_recent"]),
            kilometer_run_time_min=_to_float(raw["kilometer_run_time_min"]),
            squat_max_reps=_to_int(raw["squat_max_reps"]),
            goals=_to_goals(raw["goals"]),
            equipment_access=_to_key(raw["equipment_access"]),
        )


def parse_finish_time(value: Any) -> float:
    """Parse a finish time into seconds.

    Accepts ``"H:MM:SS"``, ``"MM:SS"`` or a plain number of seconds.
    Unreadable values give 0.0.
    """
    if isinstance(value, str) and ":" in value:
        parts = [_to_float(p) for p in value.split(":")]
        seconds = 0.0
        for part in parts[-3:]:
            seconds = seconds * 60 + part
        return seconds
    return _to_float(value)


def _first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def _to_int(value: Any) -> int:
    return int(_to_float(value))


def _to_key(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(value, (int, float)):
        return value == 1
    return False


def _to_goals(value: Any) -> frozenset[str]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, Iterable):
        return frozenset()
    return frozenset(g for g in (_to_key(v) for v in value) if g)
