"""Environment-variable-based configuration for the program engine."""

from __future__ import annotations

import os

DEFAULT_PROGRAM_ID: str = os.environ.get(
    "PROGRAM_ENGINE_DEFAULT_PROGRAM_ID", "IntermediateProgram"
)
MAIN_PROGRAM_TOTAL_WEEKS: int = int(os.environ.get("PROGRAM_ENGINE_MAIN_PROGRAM_WEEKS", "14"))
PREP_CYCLE_WEEKS: int = int(os.environ.get("PROGRAM_ENGINE_PREP_CYCLE_WEEKS", "4"))
MAINTENANCE_CYCLE_WEEKS: int = int(
    os.environ.get("PROGRAM_ENGINE_MAINTENANCE_CYCLE_WEEKS", "4")
)
# Program users move to once their event has passed. Set to an empty
# string to keep them on their main program.
MAINTENANCE_PROGRAM_ID: str = os.environ.get(
    "PROGRAM_ENGINE_MAINTENANCE_PROGRAM_ID", "MaintenanceProgram"
)
