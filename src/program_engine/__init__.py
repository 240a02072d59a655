"""Program phase & recommendation engine.

Ranks training programs against a user's fitness assessment and tracks the
user's position (PREP / MAIN / MAINTENANCE, week, day) relative to a target
event date. Pure library: storage and catalog access go through the
collaborator interfaces in ``program_engine.interfaces``.
"""

from program_engine.engine import ProgramEngine
from program_engine.exceptions import (
    CatalogEntryError,
    ProgramConfigurationError,
    ProgramEngineError,
    ProgressStoreError,
    StaleStateError,
)
from program_engine.phase.calculator import calculate_phase_state
from program_engine.phase.transition import (
    TransitionCheck,
    check_for_phase_transition,
    transition_user_to_phase,
)
from program_engine.scoring.recommender import recommend_programs
from program_engine.scoring.scorer import score_program

__all__ = [
    "CatalogEntryError",
    "ProgramConfigurationError",
    "ProgramEngine",
    "ProgramEngineError",
    "ProgressStoreError",
    "StaleStateError",
    "TransitionCheck",
    "calculate_phase_state",
    "check_for_phase_transition",
    "recommend_programs",
    "score_program",
    "transition_user_to_phase",
]
