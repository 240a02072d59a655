"""Program scorer: fit of one catalog program against a user profile.

Each dimension scores in [0, 1]; the total is a fixed weighted sum:

    total = 0.35 * difficulty + 0.25 * frequency
          + 0.25 * category + 0.15 * race_category
"""

from __future__ import annotations

import logging

import numpy as np

from program_engine.models.enums import (
    CATEGORY_DEFAULT_SCORE,
    DIFFICULTY_ADJACENT_BASE,
    DIFFICULTY_LOW_CONFIDENCE_BONUS,
    DIFFICULTY_LOW_CONFIDENCE_THRESHOLD,
    DIFFICULTY_MATCH_SCORE,
    DIFFICULTY_STEP_UP_BONUS,
    DIFFICULTY_TWO_APART_SCORE,
    FREQUENCY_FAR_OVER_SCORE,
    FREQUENCY_OVERAGE_SCORES,
    RACE_CATEGORY_MATCH_SCORE,
    RACE_CATEGORY_MISMATCH_SCORE,
    WEIGHT_CATEGORY,
    WEIGHT_DIFFICULTY,
    WEIGHT_FREQUENCY,
    WEIGHT_RACE_CATEGORY,
    Category,
    Difficulty,
    RaceCategory,
)
from program_engine.models.profile import UserProfile
from program_engine.models.program import CatalogEntry, ScoreBreakdown, ScoredProgram

logger = logging.getLogger(__name__)

# Order matches ScoreBreakdown fields
SCORE_WEIGHTS = np.array(
    [WEIGHT_DIFFICULTY, WEIGHT_FREQUENCY, WEIGHT_CATEGORY, WEIGHT_RACE_CATEGORY],
    dtype=np.float64,
)
assert np.isclose(SCORE_WEIGHTS.sum(), 1.0), "score weights must sum to 1.0"


def score_program(entry: CatalogEntry, profile: UserProfile) -> ScoredProgram:
    """Score a single catalog entry against *profile*."""
    meta = entry.metadata
    breakdown = ScoreBreakdown(
        difficulty=score_difficulty(meta.difficulty, profile),
        frequency=score_frequency(meta.weekly_frequency, profile),
        category=score_category(meta.category, profile),
        race_category=score_race_category(meta.race_category, profile),
    )
    total = weighted_total(breakdown)
    logger.debug("Scored %s: %.3f (%s)", entry.program_id, total, breakdown)
    return ScoredProgram(program=entry, total_score=total, breakdown=breakdown)


def weighted_total(breakdown: ScoreBreakdown) -> float:
    """Combine the four dimension scores with SCORE_WEIGHTS."""
    scores = np.array(
        [
            breakdown.difficulty,
            breakdown.frequency,
            breakdown.category,
            breakdown.race_category,
        ],
        dtype=np.float64,
    )
    return float(np.dot(scores, SCORE_WEIGHTS))


def score_difficulty(program_difficulty: Difficulty, profile: UserProfile) -> float:
    """Exact match 1.0, adjacent 0.6-0.9, two levels apart 0.2.

    For adjacent levels the step-up bonus (program is the harder one) and
    the low-confidence bonus are independent and add together.
    """
    distance = program_difficulty - profile.preferred_difficulty

    if distance == 0:
        return DIFFICULTY_MATCH_SCORE
    if abs(distance) == 1:
        score = DIFFICULTY_ADJACENT_BASE
        if distance > 0:
            score += DIFFICULTY_STEP_UP_BONUS
        if profile.difficulty_confidence < DIFFICULTY_LOW_CONFIDENCE_THRESHOLD:
            score += DIFFICULTY_LOW_CONFIDENCE_BONUS
        return round(score, 10)
    return DIFFICULTY_TWO_APART_SCORE


def score_frequency(required_sessions: int, profile: UserProfile) -> float:
    """1.0 while the program fits the user's week, falling off per extra session."""
    overage = max(0, required_sessions - profile.available_frequency)
    return FREQUENCY_OVERAGE_SCORES.get(overage, FREQUENCY_FAR_OVER_SCORE)


def score_category(category: Category, profile: UserProfile) -> float:
    return profile.category_preferences.get(category, CATEGORY_DEFAULT_SCORE)


def score_race_category(race_category: RaceCategory, profile: UserProfile) -> float:
    if race_category == profile.preferred_race_category:
        return RACE_CATEGORY_MATCH_SCORE
    return RACE_CATEGORY_MISMATCH_SCORE
