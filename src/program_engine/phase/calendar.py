"""Day-by-day projection of the phase calculator, for calendar views."""

from __future__ import annotations

from datetime import date

import pandas as pd

from program_engine.exceptions import ProgramConfigurationError
from program_engine.phase.calculator import calculate_phase_state

CALENDAR_COLUMNS = ["date", "phase", "week", "day", "event_completed"]


def build_phase_calendar(
    program_id: str,
    event_date: date | None,
    total_weeks: int,
    start: date,
    days: int,
) -> pd.DataFrame:
    """Evaluate the phase calculator for each of *days* dates from *start*.

    ``week`` and ``day`` are renumbered 1-based for display.

    Raises:
        ProgramConfigurationError: If total_weeks is not positive.
    """
    if total_weeks <= 0:
        raise ProgramConfigurationError(
            f"Program {program_id!r} must last at least 1 week, got {total_weeks}"
        )

    rows = []
    for timestamp in pd.date_range(start=start, periods=max(0, days), freq="D"):
        state = calculate_phase_state(program_id, event_date, total_weeks, timestamp.date())
        rows.append(
            {
                "date": timestamp.date(),
                "phase": state.phase.name,
                "week": state.current_week + 1,
                "day": state.current_day + 1,
                "event_completed": state.event_completed,
            }
        )
    return pd.DataFrame(rows, columns=CALENDAR_COLUMNS)


def phase_boundaries(calendar: pd.DataFrame) -> pd.DataFrame:
    """First date of each contiguous run of the same phase."""
    if calendar.empty:
        return calendar.loc[:, ["date", "phase"]]
    changed = calendar["phase"].ne(calendar["phase"].shift())
    return calendar.loc[changed, ["date", "phase"]].reset_index(drop=True)
