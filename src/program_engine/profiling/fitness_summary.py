"""Descriptive assessment labels shown next to a recommendation.

None of these feed the scorer. They turn raw answers into the wording the
coaching UI uses ("HYROX Novice", "Masters 40-49", ...).
"""

from __future__ import annotations

from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.recommendation import AssessmentSummary, FitnessProfile

# Finish-time ceilings in seconds for the experience ladder
_NOVICE_STEP_UP_S = 5400  # 1:30:00
_INTERMEDIATE_STEP_UP_S = 4200  # 1:10:00
_ADVANCED_STEP_UP_S = 3900  # 1:05:00

# Weekly hours ladder: (upper bound exclusive, label)
_TIME_AVAILABILITY_STEPS = (
    (3.0, "Very Limited"),
    (5.0, "Limited"),
    (8.0, "Moderate"),
    (12.0, "Substantial"),
)

_BACKGROUND_DIFFERENCE_THRESHOLD = 2.0
_RUNNING_BASELINE_MIN_PER_KM = 5.0
_STRENGTH_BASELINE_REPS = 30.0
_RATING_SCALE = 10.0


def summarize_assessment(answers: AssessmentAnswers) -> AssessmentSummary:
    """Collect every descriptive label for *answers*."""
    return AssessmentSummary(
        experience_level=assess_experience_level(answers),
        training_background=assess_training_background(answers),
        time_availability=assess_time_availability(answers),
        special_category=check_special_category(answers),
        fitness_profile=assess_fitness_profile(answers),
    )


def assess_experience_level(answers: AssessmentAnswers) -> str:
    """Place the user on the Complete Beginner → Elite ladder.

    More events move the user up a rung; a fast enough best finish time
    moves them up one more.
    """
    events = answers.events_completed
    finish = answers.best_finish_time_s

    def _faster_than(limit_s: int) -> bool:
        return 0 < finish <= limit_s

    if events == 0:
        return "Fitness Enthusiast" if answers.fitness_years > 1 else "Complete Beginner"
    if events <= 2:
        return "Intermediate" if _faster_than(_NOVICE_STEP_UP_S) else "HYROX Novice"
    if events <= 5:
        return "Advanced" if _faster_than(_INTERMEDIATE_STEP_UP_S) else "Intermediate"
    return "Elite" if _faster_than(_ADVANCED_STEP_UP_S) else "Advanced"


def assess_training_background(answers: AssessmentAnswers) -> str:
    """Stated background if given, otherwise inferred from benchmarks."""
    stated = answers.training_background
    if stated and stated != "no significant background":
        return stated

    strength = _strength_score(answers)
    endurance = _endurance_score(answers)
    if strength == 0 and endurance == 0:
        return "No Significant Background"
    if abs(strength - endurance) < _BACKGROUND_DIFFERENCE_THRESHOLD:
        return "General Fitness"
    return "Strength/CrossFit" if strength > endurance else "Running/Endurance"


def assess_time_availability(answers: AssessmentAnswers) -> str:
    weekly_hours = answers.weekly_training_days * answers.avg_session_length_h
    for ceiling, label in _TIME_AVAILABILITY_STEPS:
        if weekly_hours < ceiling:
            return label
    return "Extensive"


def check_special_category(answers: AssessmentAnswers) -> str:
    """Competition or population category that warrants special handling."""
    if answers.competition_format == "doubles":
        return "Doubles Competitor"
    if answers.competition_format == "relay":
        return "Relay Team"
    if answers.age >= 50:
        return "Masters 50+"
    if answers.age >= 40:
        return "Masters 40-49"
    if answers.injury_history and answers.injury_recent:
        return "Injury Rehabilitation"
    return "Standard"


def assess_fitness_profile(answers: AssessmentAnswers) -> FitnessProfile:
    return FitnessProfile(
        running_capacity=_rate(
            answers.kilometer_run_time_min, _RUNNING_BASELINE_MIN_PER_KM, lower_is_better=True
        ),
        strength_foundation=_rate(
            answers.squat_max_reps, _STRENGTH_BASELINE_REPS, lower_is_better=False
        ),
    )


def _rate(value: float, baseline: float, lower_is_better: bool) -> float:
    """Rate *value* against *baseline* on a 0-10 scale; baseline scores 5."""
    if value <= 0:
        return _RATING_SCALE / 2
    ratio = baseline / value if lower_is_better else value / baseline
    return min(_RATING_SCALE, max(0.0, ratio * _RATING_SCALE / 2))


def _strength_score(answers: AssessmentAnswers) -> float:
    if answers.squat_max_reps <= 0:
        return 0.0
    return min(5.0, answers.squat_max_reps / 10)


def _endurance_score(answers: AssessmentAnswers) -> float:
    if answers.kilometer_run_time_min <= 0:
        return 0.0
    return min(5.0, (5 / answers.kilometer_run_time_min) * 2.5)
