"""Catalog programs and their scored counterparts."""

from __future__ import annotations

from dataclasses import dataclass

from program_engine.exceptions import ProgramConfigurationError
from program_engine.models.enums import Category, Difficulty, RaceCategory


@dataclass(frozen=True)
class ProgramMetadata:
    """The attributes of a program the scorer compares against a profile.

    Raises:
        ProgramConfigurationError: If ``weekly_frequency`` or
            ``total_weeks`` is not positive.
    """

    difficulty: Difficulty
    weekly_frequency: int
    category: Category
    race_category: RaceCategory
    total_weeks: int

    def __post_init__(self) -> None:
        if self.weekly_frequency <= 0:
            raise ProgramConfigurationError(
                f"weekly_frequency must be positive, got {self.weekly_frequency}"
            )
        if self.total_weeks <= 0:
            raise ProgramConfigurationError(
                f"total_weeks must be positive, got {self.total_weeks}"
            )


@dataclass(frozen=True)
class CatalogEntry:
    """A program as supplied by the catalog: identity plus metadata."""

    program_id: str
    name: str
    metadata: ProgramMetadata
    description: str = ""


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-dimension scores, each in [0, 1], before weighting."""

    difficulty: float
    frequency: float
    category: float
    race_category: float


@dataclass(frozen=True)
class ScoredProgram:
    """A catalog entry with its fit score. Computed and discarded per request."""

    program: CatalogEntry
    total_score: float
    breakdown: ScoreBreakdown

    @property
    def metadata(self) -> ProgramMetadata:
        return self.program.metadata
