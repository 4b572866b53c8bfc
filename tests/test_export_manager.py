"""
Tests for export_manager.py: selection, naming and saving.
"""
import json
from datetime import date

import pytest

from errors import EmptyExportError
from export_manager import (
    FORMAT_CSV,
    FORMAT_JSON,
    FORMAT_PDF,
    SELECTION_CUSTOM,
    ExportManager,
    ExportRequest,
    export_filename,
)
from query_engine import Totals


@pytest.fixture
def populated(store, actor, make_input, clock):
    store.add(make_input(tanker_number="A", loaded_quantity=100, ordered_quantity=100), actor)
    store.add(make_input(tanker_number="B", loaded_quantity=200, ordered_quantity=250), actor)
    clock.now = clock.now.replace(day=11)
    store.add(make_input(tanker_number="C", loaded_quantity=300, ordered_quantity=300), actor)
    clock.now = clock.now.replace(day=12)
    return store


@pytest.fixture
def manager(populated, tmp_path, clock):
    return ExportManager(populated, output_dir=tmp_path, prefix="situation_citerne", clock=clock)


def test_export_filename():
    assert export_filename("situation_citerne", date(2024, 1, 10), "pdf", "fr") == "situation_citerne_2024-01-10_fr.pdf"
    assert export_filename("situation_citerne_export", "2024-01-10", "json") == "situation_citerne_export_2024-01-10.json"


class TestBuild:

    def test_pdf_for_a_single_day(self, manager):
        artifact = manager.build(ExportRequest(format=FORMAT_PDF, language="fr",
                                               start_date="2024-01-10", end_date="2024-01-10"))

        assert artifact.filename == "situation_citerne_2024-01-12_fr.pdf"
        assert artifact.mime_type == "application/pdf"
        assert artifact.payload.startswith(b"%PDF")
        assert artifact.record_count == 2
        assert artifact.totals == Totals(300, 350, 2)

    def test_json_is_named_after_export_date(self, manager):
        artifact = manager.build(ExportRequest(format=FORMAT_JSON, language="ar"))

        assert artifact.filename == "situation_citerne_export_2024-01-12.json"
        assert [d["tankerNumber"] for d in json.loads(artifact.payload)] == ["C", "B", "A"]

    def test_csv(self, manager):
        artifact = manager.build(ExportRequest(format=FORMAT_CSV, language="en",
                                               start_date=date(2024, 1, 11)))

        assert artifact.filename == "situation_citerne_2024-01-12_en.csv"
        assert artifact.mime_type == "text/csv"
        assert artifact.record_count == 1

    def test_custom_selection(self, manager, populated):
        wanted = {r.id for r in populated.list() if r.tanker_number in ("A", "C")}
        artifact = manager.build(ExportRequest(format=FORMAT_JSON, selection=SELECTION_CUSTOM,
                                               selected_ids=frozenset(wanted)))

        assert artifact.record_count == 2
        assert {d["id"] for d in json.loads(artifact.payload)} == wanted

    def test_empty_range_is_blocked(self, manager):
        with pytest.raises(EmptyExportError):
            manager.build(ExportRequest(start_date="2023-01-01", end_date="2023-12-31"))

    def test_custom_selection_without_ids_is_blocked(self, manager):
        with pytest.raises(EmptyExportError):
            manager.build(ExportRequest(format=FORMAT_JSON, selection=SELECTION_CUSTOM))

    def test_unknown_format(self, manager):
        with pytest.raises(ValueError):
            manager.build(ExportRequest(format="xlsx"))

    def test_snapshot_is_used_as_given(self, manager, populated):
        snapshot = populated.list()[:1]
        artifact = manager.build(ExportRequest(format=FORMAT_JSON), snapshot=snapshot)
        assert artifact.record_count == 1


class TestSaveAndDayExport:

    def test_save_writes_into_output_dir(self, manager, tmp_path):
        artifact = manager.build(ExportRequest(format=FORMAT_JSON))
        path = manager.save(artifact)

        assert path == tmp_path / "situation_citerne_export_2024-01-12.json"
        assert path.read_bytes() == artifact.payload

    def test_export_day(self, manager):
        artifact = manager.export_day(date(2024, 1, 11))
        assert [d["tankerNumber"] for d in json.loads(artifact.payload)] == ["C"]

    def test_export_day_without_records(self, manager):
        with pytest.raises(EmptyExportError):
            manager.export_day("2024-01-12")
