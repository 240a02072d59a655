"""Tests for catalog normalization and the built-in catalog."""

import pytest

from program_engine.catalog.defaults import DEFAULT_CATALOG, default_catalog_by_id, fallback_entry
from program_engine.catalog.normalizer import normalize_catalog, normalize_program, parse_race_category
from program_engine.exceptions import CatalogEntryError, ProgramConfigurationError
from program_engine.models.enums import Category, Difficulty, RaceCategory


def _row(**overrides) -> dict:
    row = {
        "id": "row-1",
        "name": "Row Program",
        "difficulty": "Advanced",
        "category": "Hyrox",
        "weeklyFrequency": 5,
        "raceCategory": "Singles",
        "totalWeeks": 14,
    }
    row.update(overrides)
    return row


class TestNormalizeProgram:
    def test_camel_case_row(self) -> None:
        entry = normalize_program(_row())
        assert entry.program_id == "row-1"
        assert entry.name == "Row Program"
        assert entry.metadata.difficulty == Difficulty.ADVANCED
        assert entry.metadata.weekly_frequency == 5
        assert entry.metadata.category == Category.HYROX
        assert entry.metadata.race_category == RaceCategory.SINGLES
        assert entry.metadata.total_weeks == 14

    def test_catalog_entry_passes_through(self) -> None:
        entry = DEFAULT_CATALOG[0]
        assert normalize_program(entry) is entry

    def test_free_text_difficulty_and_category(self) -> None:
        entry = normalize_program(_row(difficulty="Beginner Friendly", category="Running Focus"))
        assert entry.metadata.difficulty == Difficulty.BEGINNER
        assert entry.metadata.category == Category.RUNNING

    def test_legacy_frequency_and_duration_keys(self) -> None:
        row = _row(frequency=3, duration=4)
        del row["weeklyFrequency"], row["totalWeeks"]
        entry = normalize_program(row)
        assert entry.metadata.weekly_frequency == 3
        assert entry.metadata.total_weeks == 4

    def test_missing_total_weeks_uses_main_program_length(self) -> None:
        row = _row()
        del row["totalWeeks"]
        assert normalize_program(row).metadata.total_weeks == 14

    def test_missing_race_category_is_singles(self) -> None:
        row = _row()
        del row["raceCategory"]
        assert normalize_program(row).metadata.race_category == RaceCategory.SINGLES

    def test_name_defaults_to_id(self) -> None:
        row = _row()
        del row["name"]
        assert normalize_program(row).name == "row-1"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"id": None},
            {"id": " "},
            {"difficulty": None},
            {"difficulty": "Expert"},
            {"category": "Yoga"},
            {"weeklyFrequency": None},
            {"weeklyFrequency": "often"},
        ],
    )
    def test_unreadable_fields_raise_entry_error(self, overrides) -> None:
        with pytest.raises(CatalogEntryError):
            normalize_program(_row(**overrides))

    def test_non_mapping_raises_entry_error(self) -> None:
        with pytest.raises(CatalogEntryError):
            normalize_program("AdvancedProgram")  # type: ignore[arg-type]

    def test_zero_weeks_is_configuration_error(self) -> None:
        with pytest.raises(ProgramConfigurationError):
            normalize_program(_row(totalWeeks=0))

    @pytest.mark.parametrize("value", [4.7, "4.7", float("inf"), float("-inf"), float("nan"), "inf"])
    def test_non_whole_frequency_raises_entry_error(self, value) -> None:
        with pytest.raises(CatalogEntryError):
            normalize_program(_row(weeklyFrequency=value))

    def test_non_whole_total_weeks_raises_entry_error(self) -> None:
        with pytest.raises(CatalogEntryError):
            normalize_program(_row(totalWeeks=13.5))

    @pytest.mark.parametrize("value", [4, 4.0, "4", "4.0"])
    def test_whole_frequency_forms_accepted(self, value) -> None:
        assert normalize_program(_row(weeklyFrequency=value)).metadata.weekly_frequency == 4


class TestNormalizeCatalog:
    def test_skips_bad_rows_and_keeps_order(self) -> None:
        rows = [_row(id="a"), _row(difficulty="???"), _row(id="b")]
        assert [e.program_id for e in normalize_catalog(rows)] == ["a", "b"]

    def test_skips_infinite_frequency(self) -> None:
        rows = [_row(id="a", weeklyFrequency=float("inf")), _row(id="b")]
        assert [e.program_id for e in normalize_catalog(rows)] == ["b"]

    def test_configuration_error_propagates(self) -> None:
        with pytest.raises(ProgramConfigurationError):
            normalize_catalog([_row(id="a"), _row(weeklyFrequency=-2)])


class TestParseRaceCategory:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Doubles", RaceCategory.DOUBLES_RELAY),
            ("doubles/relay", RaceCategory.DOUBLES_RELAY),
            ("Relay", RaceCategory.DOUBLES_RELAY),
            ("Singles", RaceCategory.SINGLES),
            (None, RaceCategory.SINGLES),
            (RaceCategory.DOUBLES_RELAY, RaceCategory.DOUBLES_RELAY),
        ],
    )
    def test_values(self, value, expected) -> None:
        assert parse_race_category(value) == expected


class TestDefaults:
    def test_ids_unique(self) -> None:
        assert len(default_catalog_by_id()) == len(DEFAULT_CATALOG)

    def test_fallback_is_intermediate(self) -> None:
        assert fallback_entry().program_id == "IntermediateProgram"

    def test_unknown_configured_fallback(self, monkeypatch) -> None:
        monkeypatch.setattr("program_engine.config.DEFAULT_PROGRAM_ID", "NoSuchProgram")
        assert fallback_entry().program_id == "IntermediateProgram"

    def test_configured_fallback(self, monkeypatch) -> None:
        monkeypatch.setattr("program_engine.config.DEFAULT_PROGRAM_ID", "BeginnerProgram")
        assert fallback_entry().program_id == "BeginnerProgram"
