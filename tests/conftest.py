"""Shared test fixtures: assessment answers, profiles, in-memory collaborators."""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Callable

import pytest

from program_engine.exceptions import StaleStateError
from program_engine.interfaces import ProgramCatalog, ProgressStore
from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.enums import Category, Difficulty, RaceCategory
from program_engine.models.phase_state import ProgramPhaseState
from program_engine.models.profile import UserProfile
from program_engine.models.program import CatalogEntry, ProgramMetadata


class InMemoryProgressStore(ProgressStore):
    """Dict-backed store that records every write.

    ``after_next_read`` runs once, right after the next read returns its
    value, to let another writer slip in between a read and its write.
    """

    def __init__(self) -> None:
        self.states: dict[str, ProgramPhaseState] = {}
        self.writes: list[tuple[str, ProgramPhaseState]] = []
        self.after_next_read: Callable[[], object] | None = None

    def read(self, user_id: str) -> ProgramPhaseState | None:
        state = self.states.get(user_id)
        hook, self.after_next_read = self.after_next_read, None
        if hook is not None:
            hook()
        return state

    def write_atomic(
        self,
        user_id: str,
        state: ProgramPhaseState,
        expected_version: int | None = None,
    ) -> None:
        if expected_version is not None:
            current = self.states.get(user_id)
            stored_version = current.version if current is not None else None
            if stored_version != expected_version:
                raise StaleStateError(user_id, expected_version, stored_version)
        self.states[user_id] = state
        self.writes.append((user_id, state))


class ListCatalog(ProgramCatalog):
    def __init__(self, programs: list | None = None) -> None:
        self.programs = list(programs or [])

    def list_programs(self) -> list:
        return self.programs


@pytest.fixture
def today() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def novice_answers() -> AssessmentAnswers:
    """No events, under a year of training, 2 days a week."""
    return AssessmentAnswers(
        events_completed=0,
        fitness_years=0.5,
        training_background="beginner",
        weekly_training_days=2,
        avg_session_length_h=1.0,
        competition_format="singles",
        age=28,
        goals=frozenset({"first-hyrox"}),
        equipment_access="full",
    )


@pytest.fixture
def intermediate_answers() -> AssessmentAnswers:
    """Two events, 2 years running, trains 3 days a week."""
    return AssessmentAnswers(
        events_completed=2,
        best_finish_time_s=5700,
        fitness_years=2,
        training_background="running",
        weekly_training_days=3,
        avg_session_length_h=1.5,
        competition_format="singles",
        age=35,
        goals=frozenset({"improve-time"}),
        equipment_access="full",
    )


@pytest.fixture
def veteran_answers() -> AssessmentAnswers:
    """Seven events, CrossFit, 5 days a week."""
    return AssessmentAnswers(
        events_completed=7,
        best_finish_time_s=3800,
        fitness_years=8,
        training_background="crossfit",
        weekly_training_days=5,
        avg_session_length_h=1.5,
        competition_format="singles",
        age=31,
        goals=frozenset({"improve-time"}),
        equipment_access="full",
    )


@pytest.fixture
def make_profile() -> Callable[..., UserProfile]:
    """Factory for profiles with a flat Hyrox-first category table."""

    def _make(
        difficulty: Difficulty = Difficulty.INTERMEDIATE,
        frequency: int = 4,
        confidence: float = 0.8,
        race_category: RaceCategory = RaceCategory.SINGLES,
        categories: dict[Category, float] | None = None,
    ) -> UserProfile:
        if categories is None:
            categories = {
                Category.HYROX: 1.0,
                Category.STRENGTH: 0.5,
                Category.RUNNING: 0.5,
                Category.MIXED: 0.6,
            }
        return UserProfile(
            preferred_difficulty=difficulty,
            available_frequency=frequency,
            category_preferences=MappingProxyType(categories),
            preferred_race_category=race_category,
            difficulty_confidence=confidence,
        )

    return _make


@pytest.fixture
def make_entry() -> Callable[..., CatalogEntry]:
    def _make(
        program_id: str = "P",
        difficulty: Difficulty = Difficulty.INTERMEDIATE,
        frequency: int = 4,
        category: Category = Category.HYROX,
        race_category: RaceCategory = RaceCategory.SINGLES,
        total_weeks: int = 14,
    ) -> CatalogEntry:
        return CatalogEntry(
            program_id=program_id,
            name=f"{program_id} Program",
            metadata=ProgramMetadata(
                difficulty=difficulty,
                weekly_frequency=frequency,
                category=category,
                race_category=race_category,
                total_weeks=total_weeks,
            ),
        )

    return _make


@pytest.fixture
def store() -> InMemoryProgressStore:
    return InMemoryProgressStore()


@pytest.fixture
def list_catalog() -> Callable[..., ListCatalog]:
    return ListCatalog
