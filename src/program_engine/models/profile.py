"""Derived user profile: recomputed from assessment answers on every call."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from program_engine.models.enums import Category, Difficulty, RaceCategory


@dataclass(frozen=True)
class UserProfile:
    """What the scorer needs to know about a user.

    Never persisted on its own: storing it would let it drift from the
    assessment answers it was derived from.
    """

    preferred_difficulty: Difficulty
    available_frequency: int  # sessions per week, 3-6
    category_preferences: Mapping[Category, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
    preferred_race_category: RaceCategory = RaceCategory.SINGLES
    difficulty_confidence: float = 0.5  # 0.0-1.0

    @property
    def preferred_category(self) -> Category | None:
        """Highest-scoring category; ties go to the first in enum order."""
        if not self.category_preferences:
            return None
        return max(
            sorted(self.category_preferences),
            key=lambda c: self.category_preferences[c],
        )
