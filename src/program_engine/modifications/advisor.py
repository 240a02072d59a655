"""Modification advisor: training-load adjustments from profile risk factors.

Independent of the scoring weights; the output is simply attached to a
recommendation.
"""

from __future__ import annotations

from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.enums import (
    FREQUENCY_MODIFICATION_THRESHOLD,
    MASTERS_RECOVERY_AGE,
    ModificationType,
)
from program_engine.models.recommendation import Modification


def advise_modifications(
    age: int = 0,
    injury_history: bool = False,
    injury_recent: bool = False,
    frequency_score: float | None = None,
    equipment_access: str = "",
) -> list[Modification]:
    """Return adjustments in a fixed order: recovery, volume, frequency, equipment.

    Args:
        age: User age in years; 0 when unknown.
        injury_history: Any past injury reported.
        injury_recent: An injury in the recent past.
        frequency_score: Frequency score of the chosen program, or None if
            no program has been chosen.
        equipment_access: Lowercased equipment access answer.
    """
    modifications: list[Modification] = []

    if age >= MASTERS_RECOVERY_AGE:
        modifications.append(
            Modification(
                type=ModificationType.RECOVERY,
                action="Add an extra rest day between intense sessions",
                reason="Enhanced recovery for Masters 50+ category",
            )
        )

    if injury_history or injury_recent:
        modifications.append(
            Modification(
                type=ModificationType.VOLUME,
                action="Reduce training volume by 15% for first 2 weeks",
                reason="Gradual progression due to injury history",
            )
        )

    if frequency_score is not None and frequency_score < FREQUENCY_MODIFICATION_THRESHOLD:
        modifications.append(
            Modification(
                type=ModificationType.FREQUENCY,
                action="Consider combining shorter sessions or reducing rest periods",
                reason="Program frequency exceeds your available training days",
            )
        )

    if equipment_access == "minimal":
        modifications.append(
            Modification(
                type=ModificationType.EQUIPMENT,
                action="Focus on bodyweight and running variations",
                reason="Adapted for minimal equipment access",
            )
        )

    return modifications


def advise_for_answers(
    answers: AssessmentAnswers, frequency_score: float | None = None
) -> list[Modification]:
    """Convenience wrapper pulling the risk factors out of *answers*."""
    return advise_modifications(
        age=answers.age,
        injury_history=answers.injury_history,
        injury_recent=answers.injury_recent,
        frequency_score=frequency_score,
        equipment_access=answers.equipment_access,
    )
