"""Built-in program catalog and the designated fallback program.

Used when the external catalog is empty, so a user is never left without
an assigned program.
"""

from __future__ import annotations

from program_engine import config
from program_engine.models.enums import Category, Difficulty, RaceCategory
from program_engine.models.program import CatalogEntry, ProgramMetadata

DEFAULT_CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        program_id="BeginnerProgram",
        name="Complete Beginner 14-Week Program",
        description="For those new to HYROX or structured training. Builds foundational fitness.",
        metadata=ProgramMetadata(
            difficulty=Difficulty.BEGINNER,
            weekly_frequency=3,
            category=Category.HYROX,
            race_category=RaceCategory.SINGLES,
            total_weeks=14,
        ),
    ),
    CatalogEntry(
        program_id="IntermediateProgram",
        name="Intermediate Performance 14-Week Program",
        description="Some HYROX experience or a good fitness base, looking to improve performance.",
        metadata=ProgramMetadata(
            difficulty=Difficulty.INTERMEDIATE,
            weekly_frequency=4,
            category=Category.HYROX,
            race_category=RaceCategory.SINGLES,
            total_weeks=14,
        ),
    ),
    CatalogEntry(
        program_id="AdvancedProgram",
        name="Advanced Competitor 14-Week Program",
        description="Experienced HYROX athletes aiming for competitive times.",
        metadata=ProgramMetadata(
            difficulty=Difficulty.ADVANCED,
            weekly_frequency=5,
            category=Category.HYROX,
            race_category=RaceCategory.SINGLES,
            total_weeks=14,
        ),
    ),
    CatalogEntry(
        program_id="RunnerProgram",
        name="Improve your Running Program",
        description="Running capacity and speed work alongside HYROX training.",
        metadata=ProgramMetadata(
            difficulty=Difficulty.INTERMEDIATE,
            weekly_frequency=4,
            category=Category.RUNNING,
            race_category=RaceCategory.SINGLES,
            total_weeks=4,
        ),
    ),
    CatalogEntry(
        program_id="StrengthProgram",
        name="Improve your Strength Program",
        description="Strength and power for runners training for HYROX.",
        metadata=ProgramMetadata(
            difficulty=Difficulty.INTERMEDIATE,
            weekly_frequency=4,
            category=Category.STRENGTH,
            race_category=RaceCategory.SINGLES,
            total_weeks=4,
        ),
    ),
    CatalogEntry(
        program_id="DoublesProgram",
        name="HYROX Doubles/Relay Performance Program",
        description="Tailored for HYROX Doubles and Relay competitions.",
        metadata=ProgramMetadata(
            difficulty=Difficulty.INTERMEDIATE,
            weekly_frequency=4,
            category=Category.HYROX,
            race_category=RaceCategory.DOUBLES_RELAY,
            total_weeks=14,
        ),
    ),
    CatalogEntry(
        program_id="MaintenanceProgram",
        name="Post-Event Maintenance Program",
        description="Repeating 4-week block to hold fitness between events.",
        metadata=ProgramMetadata(
            difficulty=Difficulty.INTERMEDIATE,
            weekly_frequency=3,
            category=Category.MIXED,
            race_category=RaceCategory.SINGLES,
            total_weeks=4,
        ),
    ),
)


def default_catalog_by_id() -> dict[str, CatalogEntry]:
    return {entry.program_id: entry for entry in DEFAULT_CATALOG}


def fallback_entry() -> CatalogEntry:
    """The designated default program (``config.DEFAULT_PROGRAM_ID``).

    Falls back to the Intermediate program if the configured id is not in
    the built-in catalog.
    """
    catalog = default_catalog_by_id()
    return catalog.get(config.DEFAULT_PROGRAM_ID, catalog["IntermediateProgram"])
