"""Per-workout day advance, triggered when a workout is completed or skipped."""

from __future__ import annotations

import dataclasses

from program_engine.models.enums import DAYS_PER_WEEK
from program_engine.models.phase_state import ProgramPhaseState


def advance_day(state: ProgramPhaseState) -> ProgramPhaseState:
    """Move *state* forward one training day.

    Day 6 rolls over to day 0 of the next week. Everything other than
    ``current_week``/``current_day`` is carried over unchanged, and the
    result must be written back as a whole record.
    """
    next_day = state.current_day + 1
    next_week = state.current_week
    if next_day >= DAYS_PER_WEEK:
        next_day = 0
        next_week += 1
    return dataclasses.replace(state, current_week=next_week, current_day=next_day)
