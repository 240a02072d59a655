"""Tests for the dashboard's table and formatting helpers."""

from datetime import date

from program_engine.catalog.defaults import DEFAULT_CATALOG
from program_engine.phase.calculator import calculate_phase_state
from program_engine.scoring.recommender import recommend_programs
from streamlit_app.helpers import (
    answers_from_form,
    describe_state,
    format_score,
    modifications_table,
    ranking_table,
)


def test_format_score() -> None:
    assert format_score(0.734) == "73%"
    assert format_score(1.0) == "100%"


def test_ranking_table_rows_in_rank_order(intermediate_answers) -> None:
    result = recommend_programs(intermediate_answers, DEFAULT_CATALOG)
    table = ranking_table(result)
    assert len(table) == len(DEFAULT_CATALOG)
    assert list(table["Rank"]) == list(range(1, len(DEFAULT_CATALOG) + 1))
    assert table.iloc[0]["Program"] == result.top_program.program.name
    assert table["Score"].is_monotonic_decreasing


def test_modifications_table_empty_keeps_columns(intermediate_answers) -> None:
    result = recommend_programs(intermediate_answers, DEFAULT_CATALOG)
    table = modifications_table(result)
    assert table.empty
    assert list(table.columns) == ["Type", "Action", "Reason"]


def test_describe_state_is_one_based(today) -> None:
    state = calculate_phase_state("P", date(2024, 4, 10), 14, today)
    fields = describe_state(state)
    assert fields["Phase"] == "Preparation"
    assert fields["Week"] == "2"
    assert fields["Day"] == "3"
    assert fields["Main program starts"] == "2024-01-03"


def test_form_answers_round_trip_through_recommender() -> None:
    answers = answers_from_form(
        events=7,
        fitness_years=5.0,
        background="crossfit",
        weekly_days=5,
        session_hours=1.5,
        competition_format="singles",
        age=30,
        injury_history=False,
        injury_recent=False,
        goals=["improve-time"],
        equipment="full",
    )
    result = recommend_programs(answers, DEFAULT_CATALOG)
    assert result.top_program.program.program_id == "AdvancedProgram"
