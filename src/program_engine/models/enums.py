"""Enumerations and scoring constants for the program engine.

Every table the profile builder and scorer read from lives here so the
algorithm can be audited in one place.
"""

from enum import IntEnum, auto


class Difficulty(IntEnum):
    """Program difficulty levels, ordered easiest first.

    The integer ordering is what the scorer uses to measure level distance.
    """

    BEGINNER = 0
    INTERMEDIATE = 1
    ADVANCED = 2


class Category(IntEnum):
    """Training focus of a program."""

    HYROX = auto()
    STRENGTH = auto()
    RUNNING = auto()
    MIXED = auto()


class RaceCategory(IntEnum):
    """Competition format a program prepares for."""

    SINGLES = auto()
    DOUBLES_RELAY = auto()


class ProgramPhase(IntEnum):
    """Periodization phase of a user's program."""

    PREP = auto()
    MAIN = auto()
    MAINTENANCE = auto()


class ModificationType(IntEnum):
    """Kinds of auxiliary training-load adjustment."""

    RECOVERY = auto()
    VOLUME = auto()
    FREQUENCY = auto()
    EQUIPMENT = auto()


DIFFICULTY_LABELS = {
    Difficulty.BEGINNER: "Beginner",
    Difficulty.INTERMEDIATE: "Intermediate",
    Difficulty.ADVANCED: "Advanced",
}

CATEGORY_LABELS = {
    Category.HYROX: "Hyrox",
    Category.STRENGTH: "Strength",
    Category.RUNNING: "Running",
    Category.MIXED: "Mixed",
}

RACE_CATEGORY_LABELS = {
    RaceCategory.SINGLES: "Singles",
    RaceCategory.DOUBLES_RELAY: "Doubles/Relay",
}

# ---------------------------------------------------------------------------
# Calendar constants
# ---------------------------------------------------------------------------
# A training week is always 7 calendar days (day indices 0-6).
DAYS_PER_WEEK = 7

# ---------------------------------------------------------------------------
# Profile builder tables
# ---------------------------------------------------------------------------
STRONG_BACKGROUNDS_ADVANCED = frozenset({"crossfit", "powerlifting"})
WEAK_BACKGROUNDS_BEGINNER = frozenset({"beginner", "general"})
CONFIDENT_BACKGROUNDS = frozenset({"crossfit", "powerlifting", "running"})

MIN_FREQUENCY = 3
MAX_FREQUENCY = 6

# (upper bound on weekly training days, sessions the user can absorb)
FREQUENCY_STEPS = (
    (2, 3),
    (3, 4),
    (4, 5),
    (5, 6),
)

BASE_CATEGORY_SCORES = {
    Category.HYROX: 0.5,
    Category.STRENGTH: 0.3,
    Category.RUNNING: 0.3,
    Category.MIXED: 0.4,
}

GOAL_CATEGORY_BONUSES = {
    "first-hyrox": {Category.HYROX: 0.4},
    "improve-time": {Category.HYROX: 0.4},
    "strength": {Category.STRENGTH: 0.5},
    "general-fitness": {Category.MIXED: 0.3},
}

BACKGROUND_CATEGORY_BONUSES = {
    "running": {Category.RUNNING: 0.4, Category.HYROX: 0.2},
    "crossfit": {Category.HYROX: 0.3, Category.MIXED: 0.2},
    "powerlifting": {Category.STRENGTH: 0.3, Category.HYROX: 0.2},
    "general": {Category.MIXED: 0.3, Category.HYROX: 0.2},
    "beginner": {Category.MIXED: 0.2},
}

CONFIDENCE_BASE = 0.5
CONFIDENCE_MANY_EVENTS_BONUS = 0.3  # 3+ events
CONFIDENCE_SOME_EVENTS_BONUS = 0.2  # 1-2 events
CONFIDENCE_BACKGROUND_BONUS = 0.2
CONFIDENCE_LONG_FITNESS_BONUS = 0.2  # 3+ years
CONFIDENCE_SOME_FITNESS_BONUS = 0.1  # 1-2 years

# ---------------------------------------------------------------------------
# Scoring weights and tables
# ---------------------------------------------------------------------------
WEIGHT_DIFFICULTY = 0.35
WEIGHT_FREQUENCY = 0.25
WEIGHT_CATEGORY = 0.25
WEIGHT_RACE_CATEGORY = 0.15

DIFFICULTY_MATCH_SCORE = 1.0
DIFFICULTY_ADJACENT_BASE = 0.6
DIFFICULTY_STEP_UP_BONUS = 0.1
DIFFICULTY_LOW_CONFIDENCE_BONUS = 0.2
DIFFICULTY_LOW_CONFIDENCE_THRESHOLD = 0.6
DIFFICULTY_TWO_APART_SCORE = 0.2

# Sessions over the user's capacity -> score. Anything beyond the table
# scores FREQUENCY_FAR_OVER_SCORE.
FREQUENCY_OVERAGE_SCORES = {
    0: 1.0,
    1: 0.7,
    2: 0.4,
}
FREQUENCY_FAR_OVER_SCORE = 0.1

CATEGORY_DEFAULT_SCORE = 0.3

RACE_CATEGORY_MATCH_SCORE = 1.0
RACE_CATEGORY_MISMATCH_SCORE = 0.6

# ---------------------------------------------------------------------------
# Modification advisor thresholds
# ---------------------------------------------------------------------------
MASTERS_RECOVERY_AGE = 50
FREQUENCY_MODIFICATION_THRESHOLD = 0.8
