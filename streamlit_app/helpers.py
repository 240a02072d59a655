"""Utility helpers bridging the Streamlit UI and the program engine.

Pure functions for formatting and turning engine results into tables.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from program_engine.models.enums import (
    CATEGORY_LABELS,
    DIFFICULTY_LABELS,
    RACE_CATEGORY_LABELS,
    ProgramPhase,
)
from program_engine.models.phase_state import ProgramPhaseState
from program_engine.models.recommendation import RecommendationResult

PHASE_LABELS = {
    ProgramPhase.PREP: "Preparation",
    ProgramPhase.MAIN: "Main Program",
    ProgramPhase.MAINTENANCE: "Maintenance",
}

PHASE_COLORS = {
    "PREP": "#7FB3D5",
    "MAIN": "#E67E22",
    "MAINTENANCE": "#52BE80",
}

BACKGROUND_OPTIONS = ["", "running", "crossfit", "powerlifting", "general", "beginner"]
GOAL_OPTIONS = ["first-hyrox", "improve-time", "strength", "general-fitness"]
FORMAT_OPTIONS = ["singles", "doubles", "both"]
EQUIPMENT_OPTIONS = ["full", "limited", "minimal"]


def format_score(score: float) -> str:
    """0.734 -> '73%'."""
    return f"{score * 100:.0f}%"


def ranking_table(result: RecommendationResult) -> pd.DataFrame:
    """One row per ranked program with its score breakdown."""
    rows = []
    for rank, scored in enumerate(result.ranked_programs, start=1):
        meta = scored.metadata
        rows.append(
            {
                "Rank": rank,
                "Program": scored.program.name,
                "Difficulty": DIFFICULTY_LABELS[meta.difficulty],
                "Category": CATEGORY_LABELS[meta.category],
                "Format": RACE_CATEGORY_LABELS[meta.race_category],
                "Sessions/wk": meta.weekly_frequency,
                "Weeks": meta.total_weeks,
                "Score": round(scored.total_score, 3),
                "Difficulty fit": scored.breakdown.difficulty,
                "Frequency fit": scored.breakdown.frequency,
                "Category fit": round(scored.breakdown.category, 3),
                "Format fit": scored.breakdown.race_category,
            }
        )
    return pd.DataFrame(rows)


def modifications_table(result: RecommendationResult) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Type": m.type.name.title(), "Action": m.action, "Reason": m.reason}
            for m in result.modifications
        ],
        columns=["Type", "Action", "Reason"],
    )


def describe_state(state: ProgramPhaseState) -> dict[str, str]:
    """Display fields for a phase state, with week/day numbered from 1."""
    return {
        "Phase": PHASE_LABELS[state.phase],
        "Week": str(state.current_week + 1),
        "Day": str(state.current_day + 1),
        "Cycle start": state.start_date.isoformat(),
        "Main program starts": _fmt_date(state.main_program_start_date),
        "Event": _fmt_date(state.event_date),
        "Event completed": "Yes" if state.event_completed else "No",
    }


def answers_from_form(
    events: int,
    fitness_years: float,
    background: str,
    weekly_days: int,
    session_hours: float,
    competition_format: str,
    age: int,
    injury_history: bool,
    injury_recent: bool,
    goals: list[str],
    equipment: str,
) -> dict:
    """Assemble form widgets into the camelCase shape the assessment API posts."""
    return {
        "hyroxEventsCompleted": events,
        "generalFitnessYears": fitness_years,
        "primaryTrainingBackground": background,
        "weeklyTrainingDays": weekly_days,
        "avgSessionLength": session_hours,
        "competitionFormat": competition_format,
        "age": age,
        "injuryHistory": injury_history,
        "injuryRecent": injury_recent,
        "goals": list(goals),
        "equipmentAccess": equipment,
    }


def _fmt_date(value: date | None) -> str:
    return value.isoformat() if value is not None else "--"
