"""Recommendation output: ranked programs plus the context behind them."""

from __future__ import annotations

from dataclasses import dataclass, field

from program_engine.models.enums import ModificationType
from program_engine.models.profile import UserProfile
from program_engine.models.program import ScoredProgram


@dataclass(frozen=True)
class Modification:
    """One auxiliary training-load adjustment suggested alongside a program."""

    type: ModificationType
    action: str
    reason: str


@dataclass(frozen=True)
class FitnessProfile:
    """0-10 ratings of the user's physical capacities (5 = average)."""

    running_capacity: float = 5.0
    strength_foundation: float = 5.0
    movement_quality: float = 5.0
    work_capacity: float = 5.0
    station_efficiency: float = 5.0


@dataclass(frozen=True)
class AssessmentSummary:
    """Descriptive labels for display. Not used by the scorer."""

    experience_level: str
    training_background: str
    time_availability: str
    special_category: str
    fitness_profile: FitnessProfile = field(default_factory=FitnessProfile)


@dataclass(frozen=True)
class RecommendationResult:
    """Everything produced for one assessment.

    ``ranked_programs`` is sorted by descending ``total_score`` and is
    never empty: an empty catalog yields the single fallback program with
    ``used_fallback`` set.
    """

    ranked_programs: tuple[ScoredProgram, ...]
    user_profile: UserProfile
    modifications: tuple[Modification, ...]
    reasoning_explanation: str
    assessment_summary: AssessmentSummary | None = None
    used_fallback: bool = False

    @property
    def top_program(self) -> ScoredProgram:
        """The best-fitting program."""
        return self.ranked_programs[0]
