"""Normalize loosely-shaped catalog records into CatalogEntry objects.

Catalog collaborators hand over whatever their storage holds: older rows
use free-text difficulty ("Advanced Level"), ``frequency`` instead of
``weeklyFrequency``, lowercase ``racecategory`` and so on. This module is
the one place that knows those shapes.

Two failure modes are kept apart:

* ``CatalogEntryError``: a required field is missing or unreadable. The
  batch normalizer logs it and skips the entry.
* ``ProgramConfigurationError``: the field is there but structurally
  invalid (non-positive weeks or frequency). It propagates.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from program_engine import config
from program_engine.exceptions import CatalogEntryError
from program_engine.models.enums import Category, Difficulty, RaceCategory
from program_engine.models.program import CatalogEntry, ProgramMetadata

logger = logging.getLogger(__name__)

# Checked in order; first substring hit wins.
_DIFFICULTY_KEYWORDS = (
    ("beginner", Difficulty.BEGINNER),
    ("intermediate", Difficulty.INTERMEDIATE),
    ("advanced", Difficulty.ADVANCED),
)
_CATEGORY_KEYWORDS = (
    ("hyrox", Category.HYROX),
    ("strength", Category.STRENGTH),
    ("running", Category.RUNNING),
    ("mixed", Category.MIXED),
)
_DOUBLES_KEYWORDS = ("doubles", "relay")

_ID_KEYS = ("program_id", "id")
_FREQUENCY_KEYS = ("weekly_frequency", "weeklyFrequency", "frequency")
_TOTAL_WEEKS_KEYS = ("total_weeks", "totalWeeks", "duration")
_RACE_CATEGORY_KEYS = ("race_category", "raceCategory", "racecategory")


def normalize_catalog(
    entries: Iterable[CatalogEntry | Mapping[str, Any]],
) -> list[CatalogEntry]:
    """Normalize a batch, skipping entries with missing required fields.

    Order is preserved, which the ranker relies on for stable tie-breaks.

    Raises:
        ProgramConfigurationError: If any entry is structurally invalid.
    """
    normalized: list[CatalogEntry] = []
    for index, raw in enumerate(entries):
        try:
            normalized.append(normalize_program(raw))
        except CatalogEntryError as exc:
            logger.warning(
                "Skipping catalog entry #%d (id=%r): %s", index, exc.entry_id, exc
            )
    return normalized


def normalize_program(raw: CatalogEntry | Mapping[str, Any]) -> CatalogEntry:
    """Convert one catalog record into a CatalogEntry.

    Raises:
        CatalogEntryError: If a required field is missing or unrecognised.
        ProgramConfigurationError: If frequency or total weeks is not positive.
    """
    if isinstance(raw, CatalogEntry):
        return raw
    if not isinstance(raw, Mapping):
        raise CatalogEntryError(f"expected a mapping, got {type(raw).__name__}")

    program_id = _first(raw, _ID_KEYS)
    if program_id is None or str(program_id).strip() == "":
        raise CatalogEntryError("missing program id")
    program_id = str(program_id)

    metadata = ProgramMetadata(
        difficulty=_match_keyword(raw.get("difficulty"), _DIFFICULTY_KEYWORDS, "difficulty", program_id),
        weekly_frequency=_require_int(raw, _FREQUENCY_KEYS, "weekly frequency", program_id),
        category=_match_keyword(raw.get("category"), _CATEGORY_KEYWORDS, "category", program_id),
        race_category=parse_race_category(_first(raw, _RACE_CATEGORY_KEYS)),
        total_weeks=_total_weeks(raw, program_id),
    )
    return CatalogEntry(
        program_id=program_id,
        name=str(raw.get("name") or program_id),
        metadata=metadata,
        description=str(raw.get("description") or ""),
    )


def parse_race_category(value: Any) -> RaceCategory:
    """Doubles/relay wording maps to DOUBLES_RELAY; anything else, or nothing, to SINGLES."""
    if isinstance(value, RaceCategory):
        return value
    text = str(value or "").lower()
    if any(keyword in text for keyword in _DOUBLES_KEYWORDS):
        return RaceCategory.DOUBLES_RELAY
    return RaceCategory.SINGLES


def _first(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def _match_keyword(value: Any, keywords: tuple, field_name: str, program_id: str) -> Any:
    enum_type = type(keywords[0][1])
    if isinstance(value, enum_type):
        return value
    if value is None or str(value).strip() == "":
        raise CatalogEntryError(f"missing {field_name}", entry_id=program_id)
    text = str(value).lower()
    for keyword, member in keywords:
        if keyword in text:
            return member
    raise CatalogEntryError(f"unrecognised {field_name} {value!r}", entry_id=program_id)


def _require_int(raw: Mapping[str, Any], keys: tuple[str, ...], field_name: str, program_id: str) -> int:
    value = _first(raw, keys)
    if value is None or isinstance(value, bool):
        raise CatalogEntryError(f"missing {field_name}", entry_id=program_id)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise CatalogEntryError(
            f"{field_name} is not a number: {value!r}", entry_id=program_id
        ) from None
    if not math.isfinite(number) or not number.is_integer():
        raise CatalogEntryError(
            f"{field_name} is not a whole number: {value!r}", entry_id=program_id
        )
    return int(number)


def _total_weeks(raw: Mapping[str, Any], program_id: str) -> int:
    """Program length; rows that predate the column get the standard main program length."""
    if _first(raw, _TOTAL_WEEKS_KEYS) is None:
        return config.MAIN_PROGRAM_TOTAL_WEEKS
    return _require_int(raw, _TOTAL_WEEKS_KEYS, "total weeks", program_id)
