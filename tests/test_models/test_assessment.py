"""Tests for AssessmentAnswers coercion from loosely-typed mappings."""

import pytest

from program_engine.models.assessment import AssessmentAnswers, parse_finish_time


class TestFromMapping:
    def test_none_gives_defaults(self) -> None:
        assert AssessmentAnswers.from_mapping(None) == AssessmentAnswers()

    def test_camel_case_keys(self) -> None:
        answers = AssessmentAnswers.from_mapping(
            {
                "hyroxEventsCompleted": 3,
                "generalFitnessYears": "4",
                "primaryTrainingBackground": " CrossFit ",
                "weeklyTrainingDays": 5,
                "competitionFormat": "Doubles",
                "goals": ["Strength", "first-hyrox"],
                "equipmentAccess": "Minimal",
            }
        )
        assert answers.events_completed == 3
        assert answers.fitness_years == 4.0
        assert answers.training_background == "crossfit"
        assert answers.weekly_training_days == 5
        assert answers.competition_format == "doubles"
        assert answers.goals == frozenset({"strength", "first-hyrox"})
        assert answers.equipment_access == "minimal"

    def test_snake_case_keys(self) -> None:
        answers = AssessmentAnswers.from_mapping(
            {"events_completed": 1, "fitness_years": 2.5, "weekly_training_days": 4}
        )
        assert answers.events_completed == 1
        assert answers.fitness_years == 2.5
        assert answers.weekly_training_days == 4

    def test_missing_weekly_days_is_zero(self) -> None:
        assert AssessmentAnswers.from_mapping({"age": 30}).weekly_training_days == 0

    @pytest.mark.parametrize("value", ["abc", None, float("nan"), [], True])
    def test_unreadable_numbers_become_zero(self, value) -> None:
        assert AssessmentAnswers.from_mapping({"age": value}).age == 0

    @pytest.mark.parametrize(
        "value,expected",
        [(True, True), ("yes", True), ("true", True), (1, True), ("no", False), (0, False), ("", False)],
    )
    def test_boolean_coercion(self, value, expected) -> None:
        assert AssessmentAnswers.from_mapping({"injuryHistory": value}).injury_history is expected

    def test_comma_separated_goals(self) -> None:
        answers = AssessmentAnswers.from_mapping({"goals": "strength, general-fitness,"})
        assert answers.goals == frozenset({"strength", "general-fitness"})

    def test_non_string_background_is_empty(self) -> None:
        assert AssessmentAnswers.from_mapping({"trainingBackground": 7}).training_background == ""


class TestParseFinishTime:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1:30:00", 5400.0),
            ("65:00", 3900.0),
            (4200, 4200.0),
            ("4200", 4200.0),
            ("", 0.0),
            (None, 0.0),
        ],
    )
    def test_formats(self, value, expected) -> None:
        assert parse_finish_time(value) == expected
