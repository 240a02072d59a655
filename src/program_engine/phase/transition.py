"""Phase transition monitor: decide when a stored phase state is out of date.

Checks run in priority order:

1. PREP -> MAIN once the event is within the main program window.
2. MAIN -> MAINTENANCE once the event has passed.
3. Cycle rollover in PREP or MAINTENANCE once the user reaches the end of
   the active program, so week/day never grow without bound.

A MAIN state mid-program never transitions here; its week/day only move
through the per-workout day advance.

The reported reason names what the recomputed state actually is: a check
that fires on the last PREP day (event exactly one main program away)
recomputes a fresh PREP cycle and is reported as ``cycle_rollover``.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date

from program_engine.exceptions import ProgramConfigurationError
from program_engine.interfaces import ProgressStore
from program_engine.models.enums import DAYS_PER_WEEK, ProgramPhase
from program_engine.models.phase_state import ProgramPhaseState
from program_engine.phase.calculator import as_date, calculate_phase_state

logger = logging.getLogger(__name__)

PREP_TO_MAIN = "prep_to_main"
MAIN_TO_MAINTENANCE = "main_to_maintenance"
CYCLE_ROLLOVER = "cycle_rollover"

_PHASE_CHANGE_REASONS = {
    (ProgramPhase.PREP, ProgramPhase.MAIN): PREP_TO_MAIN,
    (ProgramPhase.MAIN, ProgramPhase.MAINTENANCE): MAIN_TO_MAINTENANCE,
}


@dataclass(frozen=True)
class TransitionCheck:
    """Result of a transition check. ``new_state`` is set iff ``should_transition``."""

    should_transition: bool
    new_state: ProgramPhaseState | None = None
    reason: str = ""


NO_TRANSITION = TransitionCheck(should_transition=False)


def check_for_phase_transition(
    state: ProgramPhaseState,
    total_weeks: int,
    today: date | None = None,
    maintenance_program_id: str | None = None,
) -> TransitionCheck:
    """Decide whether *state* must be recomputed.

    Args:
        state: The persisted phase state.
        total_weeks: Length in weeks of the state's active program.
        today: Reference date (a datetime is truncated). Defaults to
            ``date.today()``.
        maintenance_program_id: Program to switch to after the event;
            None keeps the current program.

    Returns:
        A TransitionCheck. ``new_state`` carries the same ``version`` as
        *state*; bumping it is the writer's job. A recomputed state
        identical to *state* is not reported as a transition.

    Raises:
        ProgramConfigurationError: If total_weeks is not positive.
    """
    if total_weeks <= 0:
        raise ProgramConfigurationError(
            f"Program {state.program_id!r} must last at least 1 week, got {total_weeks}"
        )
    today = as_date(today) if today is not None else date.today()

    program_id = state.program_id
    due = False
    if state.event_date is not None:
        days_until_event = (state.event_date - today).days
        if state.phase == ProgramPhase.PREP and days_until_event <= total_weeks * DAYS_PER_WEEK:
            due = True
        elif state.phase == ProgramPhase.MAIN and days_until_event < 0:
            due = True
            program_id = maintenance_program_id or state.program_id

    if not due and state.phase in (ProgramPhase.PREP, ProgramPhase.MAINTENANCE):
        due = _elapsed_week(state, today) >= total_weeks

    if not due:
        return NO_TRANSITION

    new_state = dataclasses.replace(
        calculate_phase_state(program_id, state.event_date, total_weeks, today),
        version=state.version,
    )
    if new_state == state:
        return NO_TRANSITION

    reason = _PHASE_CHANGE_REASONS.get((state.phase, new_state.phase), CYCLE_ROLLOVER)
    logger.debug(
        "Transition %s: %s week %d -> %s week %d",
        reason,
        state.phase.name,
        state.current_week,
        new_state.phase.name,
        new_state.current_week,
    )
    return TransitionCheck(should_transition=True, new_state=new_state, reason=reason)


def transition_user_to_phase(
    store: ProgressStore,
    user_id: str,
    new_state: ProgramPhaseState,
    expected_version: int | None = None,
) -> None:
    """Persist *new_state* for *user_id* as one atomic record.

    Raises:
        StaleStateError: If *expected_version* is given and no longer
            matches the stored record.
    """
    store.write_atomic(user_id, new_state, expected_version)
    logger.info(
        "User %s moved to %s (program=%s, week=%d, day=%d)",
        user_id,
        new_state.phase.name,
        new_state.program_id,
        new_state.current_week,
        new_state.current_day,
    )


def _elapsed_week(state: ProgramPhaseState, today: date) -> int:
    """Week reached, by stored position or by calendar time, whichever is further."""
    calendar_week = (today - state.start_date).days // DAYS_PER_WEEK
    return max(state.current_week, calendar_week)
