"""Data models for the program engine."""

from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.enums import (
    Category,
    Difficulty,
    ModificationType,
    ProgramPhase,
    RaceCategory,
)
from program_engine.models.phase_state import ProgramPhaseState
from program_engine.models.profile import UserProfile
from program_engine.models.program import (
    CatalogEntry,
    ProgramMetadata,
    ScoreBreakdown,
    ScoredProgram,
)
from program_engine.models.recommendation import (
    AssessmentSummary,
    FitnessProfile,
    Modification,
    RecommendationResult,
)

__all__ = [
    "AssessmentAnswers",
    "AssessmentSummary",
    "CatalogEntry",
    "Category",
    "Difficulty",
    "FitnessProfile",
    "Modification",
    "ModificationType",
    "ProgramMetadata",
    "ProgramPhase",
    "ProgramPhaseState",
    "RaceCategory",
    "RecommendationResult",
    "ScoreBreakdown",
    "ScoredProgram",
    "UserProfile",
]
