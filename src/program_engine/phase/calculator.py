"""Phase calculator: PREP / MAIN / MAINTENANCE position from calendar dates.

The main program is anchored backward from the event date:

    |<--- PREP (4-week cycles) --->|<--- MAIN (total_weeks) --->| event |<--- MAINTENANCE (4-week cycles) ...

* No event date: open-ended MAIN from today.
* Event inside the MAIN window (0 <= days until event < total_weeks * 7):
  MAIN, positioned by days since the main program start.
* Event further out: PREP, cycling in 4-week blocks until MAIN begins.
* Event passed: MAINTENANCE, cycling in 4-week blocks from the event date.

All weeks and days are zero-based. A week is always DAYS_PER_WEEK days.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta

from program_engine import config
from program_engine.exceptions import ProgramConfigurationError
from program_engine.models.enums import DAYS_PER_WEEK, ProgramPhase
from program_engine.models.phase_state import ProgramPhaseState


def calculate_phase_state(
    program_id: str,
    event_date: date | None,
    total_weeks: int,
    today: date | None = None,
) -> ProgramPhaseState:
    """Compute a user's phase, week and day for *today*.

    Deterministic for a given (today, event_date, total_weeks); pass
    ``today`` explicitly in tests and batch jobs.

    Args:
        program_id: Active program, copied into the state unchanged.
        event_date: Target event, or None for an open-ended program.
        total_weeks: Length of the main program in weeks.
        today: Reference date. Defaults to ``date.today()``.

    Returns:
        A new ProgramPhaseState.

    Raises:
        ProgramConfigurationError: If total_weeks is not positive.
    """
    if total_weeks <= 0:
        raise ProgramConfigurationError(
            f"Program {program_id!r} must last at least 1 week, got {total_weeks}"
        )

    today = as_date(today) if today is not None else date.today()
    if event_date is None:
        return ProgramPhaseState(
            phase=ProgramPhase.MAIN,
            program_id=program_id,
            current_week=0,
            current_day=0,
            start_date=today,
            virtual_start_date=today,
        )

    event_date = as_date(event_date)
    days_until_event = (event_date - today).days
    main_window_days = total_weeks * DAYS_PER_WEEK

    if days_until_event < 0:
        return _maintenance_state(program_id, event_date, today, -days_until_event)
    if days_until_event < main_window_days:
        return _main_state(program_id, event_date, today, total_weeks)
    return _prep_state(program_id, event_date, today, total_weeks, days_until_event)


def main_program_start(event_date: date, total_weeks: int) -> date:
    """First day of the main program: *total_weeks* before the event."""
    return event_date - timedelta(weeks=total_weeks)


def _maintenance_state(
    program_id: str, event_date: date, today: date, days_since_event: int
) -> ProgramPhaseState:
    cycle_weeks = config.MAINTENANCE_CYCLE_WEEKS
    weeks_since_event = days_since_event // DAYS_PER_WEEK
    # Snap start to the beginning of the current maintenance cycle
    completed_cycle_weeks = (weeks_since_event // cycle_weeks) * cycle_weeks

    return ProgramPhaseState(
        phase=ProgramPhase.MAINTENANCE,
        program_id=program_id,
        current_week=weeks_since_event % cycle_weeks,
        current_day=days_since_event % DAYS_PER_WEEK,
        start_date=event_date + timedelta(weeks=completed_cycle_weeks),
        event_date=event_date,
        virtual_start_date=today,
        event_completed=True,
    )


def _main_state(
    program_id: str, event_date: date, today: date, total_weeks: int
) -> ProgramPhaseState:
    main_start = main_program_start(event_date, total_weeks)
    offset = (today - main_start).days

    return ProgramPhaseState(
        phase=ProgramPhase.MAIN,
        program_id=program_id,
        current_week=offset // DAYS_PER_WEEK,
        current_day=offset % DAYS_PER_WEEK,
        start_date=main_start,
        event_date=event_date,
        main_program_start_date=main_start,
        virtual_start_date=main_start,
    )


def _prep_state(
    program_id: str,
    event_date: date,
    today: date,
    total_weeks: int,
    days_until_event: int,
) -> ProgramPhaseState:
    main_window_days = total_weeks * DAYS_PER_WEEK
    total_prep_weeks = math.ceil((days_until_event - main_window_days) / DAYS_PER_WEEK)
    current_week = total_prep_weeks % config.PREP_CYCLE_WEEKS
    current_day = days_until_event % DAYS_PER_WEEK
    main_start = main_program_start(event_date, total_weeks)

    return ProgramPhaseState(
        phase=ProgramPhase.PREP,
        program_id=program_id,
        current_week=current_week,
        current_day=current_day,
        # Display anchor: start of the user's current partial cycle
        start_date=today - timedelta(days=current_week * DAYS_PER_WEEK + current_day),
        event_date=event_date,
        main_program_start_date=main_start,
        # Keeps day counting continuous across prep cycles
        virtual_start_date=main_start - timedelta(weeks=total_prep_weeks),
    )


def as_date(value: date) -> date:
    """Drop the time part of a datetime; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value
