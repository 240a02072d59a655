"""Profile builder: normalize assessment answers into a UserProfile.

All functions are pure and never raise. Missing answers have already been
coerced to 0 / "" / empty by ``AssessmentAnswers.from_mapping()``, so every
branch below has a defined outcome for them.
"""

from __future__ import annotations

from types import MappingProxyType

from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.enums import (
    BACKGROUND_CATEGORY_BONUSES,
    BASE_CATEGORY_SCORES,
    CONFIDENCE_BACKGROUND_BONUS,
    CONFIDENCE_BASE,
    CONFIDENCE_LONG_FITNESS_BONUS,
    CONFIDENCE_MANY_EVENTS_BONUS,
    CONFIDENCE_SOME_EVENTS_BONUS,
    CONFIDENCE_SOME_FITNESS_BONUS,
    CONFIDENT_BACKGROUNDS,
    FREQUENCY_STEPS,
    GOAL_CATEGORY_BONUSES,
    MAX_FREQUENCY,
    MIN_FREQUENCY,
    STRONG_BACKGROUNDS_ADVANCED,
    WEAK_BACKGROUNDS_BEGINNER,
    Category,
    Difficulty,
    RaceCategory,
)
from program_engine.models.profile import UserProfile


def build_user_profile(answers: AssessmentAnswers) -> UserProfile:
    """Derive the full UserProfile from assessment answers."""
    return UserProfile(
        preferred_difficulty=assess_difficulty_preference(answers),
        available_frequency=assess_frequency_capacity(answers),
        category_preferences=MappingProxyType(assess_category_preferences(answers)),
        preferred_race_category=assess_race_category_preference(answers),
        difficulty_confidence=calculate_difficulty_confidence(answers),
    )


def assess_difficulty_preference(answers: AssessmentAnswers) -> Difficulty:
    """Decision table mapping event count, experience and background to a level.

    Advanced rules only fire with 3+ events and Beginner rules only with
    zero events, so the order of the two groups never matters.
    """
    events = answers.events_completed
    years = answers.fitness_years
    background = answers.training_background

    if events >= 6 or (events >= 3 and years >= 3):
        return Difficulty.ADVANCED
    if events >= 3 and background in STRONG_BACKGROUNDS_ADVANCED:
        return Difficulty.ADVANCED
    if events == 0 and (years < 1 or background == "beginner"):
        return Difficulty.BEGINNER
    if events == 0 and years < 2 and background in WEAK_BACKGROUNDS_BEGINNER:
        return Difficulty.BEGINNER
    return Difficulty.INTERMEDIATE


def assess_frequency_capacity(answers: AssessmentAnswers) -> int:
    """Sessions per week the user can absorb, from their weekly training days.

    Step function clamped to [MIN_FREQUENCY, MAX_FREQUENCY].
    """
    days = answers.weekly_training_days
    for max_days, sessions in FREQUENCY_STEPS:
        if days <= max_days:
            return max(MIN_FREQUENCY, min(MAX_FREQUENCY, sessions))
    return MAX_FREQUENCY


def assess_category_preferences(answers: AssessmentAnswers) -> dict[Category, float]:
    """Score every category in [0, 1] with the top category at exactly 1.0.

    Goal and background bonuses are additive on top of the base scores;
    unknown goals or backgrounds add nothing.
    """
    scores = dict(BASE_CATEGORY_SCORES)

    for goal in sorted(answers.goals):
        for category, bonus in GOAL_CATEGORY_BONUSES.get(goal, {}).items():
            scores[category] += bonus

    for category, bonus in BACKGROUND_CATEGORY_BONUSES.get(
        answers.training_background, {}
    ).items():
        scores[category] += bonus

    max_score = max(scores.values())
    return {category: score / max_score for category, score in scores.items()}


def assess_race_category_preference(answers: AssessmentAnswers) -> RaceCategory:
    """Explicit "doubles" picks Doubles/Relay; everything else is Singles."""
    if answers.competition_format == "doubles":
        return RaceCategory.DOUBLES_RELAY
    return RaceCategory.SINGLES


def calculate_difficulty_confidence(answers: AssessmentAnswers) -> float:
    """How much signal the answers carry about the user's true level, 0-1."""
    confidence = CONFIDENCE_BASE

    if answers.events_completed >= 3:
        confidence += CONFIDENCE_MANY_EVENTS_BONUS
    elif answers.events_completed >= 1:
        confidence += CONFIDENCE_SOME_EVENTS_BONUS

    if answers.training_background in CONFIDENT_BACKGROUNDS:
        confidence += CONFIDENCE_BACKGROUND_BONUS

    if answers.fitness_years >= 3:
        confidence += CONFIDENCE_LONG_FITNESS_BONUS
    elif answers.fitness_years >= 1:
        confidence += CONFIDENCE_SOME_FITNESS_BONUS

    return min(1.0, round(confidence, 10))
