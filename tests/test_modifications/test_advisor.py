"""Tests for the modification advisor."""

import pytest

from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.enums import ModificationType
from program_engine.modifications.advisor import advise_for_answers, advise_modifications


def _types(mods) -> list[ModificationType]:
    return [m.type for m in mods]


class TestAdviseModifications:
    def test_no_risk_factors(self) -> None:
        assert advise_modifications(age=30, frequency_score=1.0, equipment_access="full") == []

    @pytest.mark.parametrize("age,expected", [(49, []), (50, [ModificationType.RECOVERY])])
    def test_masters_recovery(self, age: int, expected) -> None:
        assert _types(advise_modifications(age=age)) == expected

    @pytest.mark.parametrize("history,recent", [(True, False), (False, True), (True, True)])
    def test_any_injury_reduces_volume(self, history: bool, recent: bool) -> None:
        mods = advise_modifications(injury_history=history, injury_recent=recent)
        assert _types(mods) == [ModificationType.VOLUME]
        assert "15%" in mods[0].action

    @pytest.mark.parametrize(
        "score,expected",
        [(None, []), (1.0, []), (0.8, []), (0.7, [ModificationType.FREQUENCY])],
    )
    def test_frequency_threshold(self, score, expected) -> None:
        assert _types(advise_modifications(frequency_score=score)) == expected

    def test_minimal_equipment(self) -> None:
        assert _types(advise_modifications(equipment_access="minimal")) == [
            ModificationType.EQUIPMENT
        ]
        assert advise_modifications(equipment_access="limited") == []

    def test_fixed_order(self) -> None:
        mods = advise_modifications(
            age=60, injury_recent=True, frequency_score=0.1, equipment_access="minimal"
        )
        assert _types(mods) == [
            ModificationType.RECOVERY,
            ModificationType.VOLUME,
            ModificationType.FREQUENCY,
            ModificationType.EQUIPMENT,
        ]


def test_advise_for_answers_reads_risk_factors() -> None:
    answers = AssessmentAnswers(age=52, injury_history=True)
    assert _types(advise_for_answers(answers)) == [
        ModificationType.RECOVERY,
        ModificationType.VOLUME,
    ]
