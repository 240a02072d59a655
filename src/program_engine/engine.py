"""ProgramEngine — wires the pure components to the catalog and progress store."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from program_engine import config
from program_engine.catalog.defaults import default_catalog_by_id
from program_engine.catalog.normalizer import normalize_catalog
from program_engine.exceptions import ProgramConfigurationError, StaleStateError
from program_engine.interfaces import ProgramCatalog, ProgressStore
from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.phase_state import ProgramPhaseState
from program_engine.models.program import CatalogEntry
from program_engine.models.recommendation import RecommendationResult
from program_engine.phase.calculator import calculate_phase_state
from program_engine.phase.day_advance import advance_day
from program_engine.phase.transition import (
    NO_TRANSITION,
    TransitionCheck,
    check_for_phase_transition,
    transition_user_to_phase,
)
from program_engine.scoring.recommender import recommend_programs

logger = logging.getLogger(__name__)

# Conditional-write attempts per read-modify-write before giving up
MAX_WRITE_ATTEMPTS = 3


class ProgramEngine:
    """Recommends programs, assigns them and keeps phase state current.

    The engine holds no per-user state; everything it knows about a user
    comes from the progress store on each call. Every read-modify-write
    (transition, day advance) writes conditionally on the version it read
    and starts over from a fresh read if another writer got in between.

    Usage:
        engine = ProgramEngine(catalog, store)
        result, state = engine.assign_program("user-1", answers, event_date)
        engine.run_transition("user-1")
    """

    def __init__(
        self,
        catalog: ProgramCatalog,
        store: ProgressStore,
        maintenance_program_id: str | None = None,
    ) -> None:
        self.catalog = catalog
        self.store = store
        self.maintenance_program_id = maintenance_program_id or config.MAINTENANCE_PROGRAM_ID or None

    def recommend(
        self, answers: AssessmentAnswers | Mapping[str, Any] | None
    ) -> RecommendationResult:
        """Rank the current catalog for *answers*."""
        return recommend_programs(answers, self.catalog.list_programs())

    def assign_program(
        self,
        user_id: str,
        answers: AssessmentAnswers | Mapping[str, Any] | None,
        event_date: date | None = None,
        today: date | None = None,
    ) -> tuple[RecommendationResult, ProgramPhaseState]:
        """Recommend, place the user in the top program and store the state.

        Assignment replaces whatever the user had; the stored version keeps
        counting up so in-flight writers based on the old record fail.
        """
        result = self.recommend(answers)
        top = result.top_program.program
        state = calculate_phase_state(
            top.program_id, event_date, top.metadata.total_weeks, today
        )
        previous = self.store.read(user_id)
        if previous is not None:
            state = dataclasses.replace(state, version=previous.version + 1)
        self.store.write_atomic(user_id, state)
        logger.info(
            "Assigned %s to user %s in %s phase (week %d, day %d)",
            top.program_id,
            user_id,
            state.phase.name,
            state.current_week,
            state.current_day,
        )
        return result, state

    def check_transition(self, user_id: str, today: date | None = None) -> TransitionCheck:
        """Check whether *user_id*'s stored phase is out of date. Does not write."""
        state = self.store.read(user_id)
        if state is None:
            return NO_TRANSITION
        return self._check(state, today)

    def run_transition(self, user_id: str, today: date | None = None) -> TransitionCheck:
        """Check and, if needed, store the recomputed phase state.

        Returns:
            The check; when it fired, ``new_state`` is the record as stored.

        Raises:
            StaleStateError: If the record kept changing under every attempt.
        """
        for attempt in range(1, MAX_WRITE_ATTEMPTS + 1):
            state = self.store.read(user_id)
            if state is None:
                return NO_TRANSITION
            check = self._check(state, today)
            if not check.should_transition or check.new_state is None:
                return check
            stored = dataclasses.replace(check.new_state, version=state.version + 1)
            try:
                transition_user_to_phase(self.store, user_id, stored, state.version)
            except StaleStateError:
                self._log_retry(user_id, "transition", attempt)
                continue
            return dataclasses.replace(check, new_state=stored)
        raise StaleStateError(user_id, state.version, None)

    def record_workout(self, user_id: str) -> ProgramPhaseState | None:
        """Advance *user_id* one day after a completed or skipped workout.

        Raises:
            StaleStateError: If the record kept changing under every attempt.
        """
        for attempt in range(1, MAX_WRITE_ATTEMPTS + 1):
            state = self.store.read(user_id)
            if state is None:
                logger.warning("No program state for user %s; workout not recorded", user_id)
                return None
            new_state = dataclasses.replace(advance_day(state), version=state.version + 1)
            try:
                self.store.write_atomic(user_id, new_state, state.version)
            except StaleStateError:
                self._log_retry(user_id, "day advance", attempt)
                continue
            return new_state
        raise StaleStateError(user_id, state.version, None)

    def program_total_weeks(self, program_id: str) -> int:
        """Length of *program_id*, from the catalog or the built-in programs.

        Raises:
            ProgramConfigurationError: If the program is unknown.
        """
        entry = self._find_program(program_id)
        if entry is None:
            raise ProgramConfigurationError(f"Unknown program {program_id!r}")
        return entry.metadata.total_weeks

    def _check(self, state: ProgramPhaseState, today: date | None) -> TransitionCheck:
        return check_for_phase_transition(
            state,
            self.program_total_weeks(state.program_id),
            today,
            self.maintenance_program_id,
        )

    def _find_program(self, program_id: str) -> CatalogEntry | None:
        for entry in normalize_catalog(self.catalog.list_programs()):
            if entry.program_id == program_id:
                return entry
        return default_catalog_by_id().get(program_id)

    @staticmethod
    def _log_retry(user_id: str, operation: str, attempt: int) -> None:
        logger.warning(
            "Concurrent update of user %s during %s (attempt %d/%d); retrying",
            user_id,
            operation,
            attempt,
            MAX_WRITE_ATTEMPTS,
        )
