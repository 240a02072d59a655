"""Rank a program catalog for one assessment and explain the choice."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from program_engine.catalog.defaults import fallback_entry
from program_engine.catalog.normalizer import normalize_catalog
from program_engine.models.assessment import AssessmentAnswers
from program_engine.models.enums import (
    CATEGORY_LABELS,
    DIFFICULTY_LABELS,
    RACE_CATEGORY_LABELS,
)
from program_engine.models.profile import UserProfile
from program_engine.models.program import CatalogEntry, ScoredProgram
from program_engine.models.recommendation import RecommendationResult
from program_engine.modifications.advisor import advise_for_answers
from program_engine.profiling.fitness_summary import summarize_assessment
from program_engine.profiling.profile_builder import build_user_profile
from program_engine.scoring.scorer import score_program

logger = logging.getLogger(__name__)

# How many ranked programs the explanation mentions
EXPLAINED_PROGRAMS = 3


def recommend_programs(
    answers: AssessmentAnswers | Mapping[str, Any] | None,
    candidates: Iterable[CatalogEntry | Mapping[str, Any]] | None,
) -> RecommendationResult:
    """Score every candidate against the user's profile and rank them.

    The profile is built once per call. Ties keep catalog order. If no
    usable candidate remains, the designated fallback program is returned
    as the only entry.

    Raises:
        ProgramConfigurationError: If a candidate is structurally invalid.
    """
    if not isinstance(answers, AssessmentAnswers):
        answers = AssessmentAnswers.from_mapping(answers)

    profile = build_user_profile(answers)
    entries = normalize_catalog(candidates or ())

    used_fallback = not entries
    if used_fallback:
        logger.warning("No usable catalog programs; assigning fallback program")
        entries = [fallback_entry()]

    scored = [score_program(entry, profile) for entry in entries]
    # sorted() is stable, so equal scores keep catalog order
    ranked = tuple(sorted(scored, key=lambda s: s.total_score, reverse=True))

    top = ranked[0]
    return RecommendationResult(
        ranked_programs=ranked,
        user_profile=profile,
        modifications=tuple(advise_for_answers(answers, top.breakdown.frequency)),
        reasoning_explanation=explain_recommendation(
            profile, ranked[:EXPLAINED_PROGRAMS], answers, used_fallback
        ),
        assessment_summary=summarize_assessment(answers),
        used_fallback=used_fallback,
    )


def explain_recommendation(
    profile: UserProfile,
    top_programs: Sequence[ScoredProgram],
    answers: AssessmentAnswers,
    used_fallback: bool = False,
) -> str:
    """Templated explanation of why the top programs were chosen."""
    top = top_programs[0]
    meta = top.metadata
    background = answers.training_background or "general"

    parts = [
        f"Based on your profile ({answers.events_completed} HYROX events, "
        f"{background} background), we recommend {top.program.name}, a "
        f"{DIFFICULTY_LABELS[meta.difficulty]} level program in the "
        f"{CATEGORY_LABELS[meta.category]} category.",
        f"Your assessment points to {DIFFICULTY_LABELS[profile.preferred_difficulty]} "
        f"difficulty, and this program {_frequency_phrase(top, profile)}.",
    ]

    alternatives = top_programs[1:]
    if alternatives:
        described = " and ".join(
            f"{alt.program.name} ({CATEGORY_LABELS[alt.metadata.category]}, "
            f"{_frequency_phrase(alt, profile)})"
            for alt in alternatives
        )
        parts.append(f"Alternative options include {described}.")

    parts.append(
        f"The program focuses on "
        f"{RACE_CATEGORY_LABELS[meta.race_category].lower()} competition preparation."
    )
    if used_fallback:
        parts.append("No catalog programs were available, so the default program was assigned.")
    return " ".join(parts)


def _frequency_phrase(scored: ScoredProgram, profile: UserProfile) -> str:
    required = scored.metadata.weekly_frequency
    available = profile.available_frequency
    fit = "fits" if required <= available else "exceeds"
    return f"{fit} your schedule ({required} workouts/week vs your {available} available)"
