"""Tests for the nightly phase-check job."""

from datetime import date

import pytest

from program_engine.phase.calculator import calculate_phase_state
from scheduler.json_store import JsonProgramCatalog, JsonProgressStore
from scheduler.nightly import nightly_job


@pytest.fixture
def json_store(tmp_path) -> JsonProgressStore:
    return JsonProgressStore(tmp_path / "progress.json")


@pytest.fixture
def empty_catalog(tmp_path) -> JsonProgramCatalog:
    return JsonProgramCatalog(tmp_path / "programs.json")


class TestNightlyJob:
    def test_counts_and_persists(self, json_store, empty_catalog, today) -> None:
        finished = calculate_phase_state("IntermediateProgram", date(2024, 2, 1), 14, today)
        midway = calculate_phase_state("IntermediateProgram", date(2024, 3, 1), 14, today)
        json_store.write_atomic("finished", finished)
        json_store.write_atomic("midway", midway)

        counts = nightly_job(json_store, empty_catalog, date(2024, 2, 3))

        assert counts == {"checked": 2, "transitioned": 1, "failed": 0}
        assert json_store.read("finished").event_completed is True
        assert json_store.read("midway") == midway

    def test_one_failure_does_not_stop_batch(self, json_store, empty_catalog, today) -> None:
        json_store.write_atomic("a-broken", calculate_phase_state("Retired", date(2024, 2, 1), 14, today))
        json_store.write_atomic(
            "b-ok", calculate_phase_state("IntermediateProgram", date(2024, 2, 1), 14, today)
        )

        counts = nightly_job(json_store, empty_catalog, date(2024, 2, 3))

        assert counts == {"checked": 2, "transitioned": 1, "failed": 1}

    def test_no_users(self, json_store, empty_catalog, today) -> None:
        assert nightly_job(json_store, empty_catalog, today) == {
            "checked": 0,
            "transitioned": 0,
            "failed": 0,
        }
