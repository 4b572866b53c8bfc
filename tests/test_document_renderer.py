"""
Tests for document_renderer.py: PDF, JSON and CSV output and file writes.
"""
import json
import re

import pytest

import document_renderer
from document_renderer import (
    parse_structured,
    render_csv,
    render_structured,
    render_table,
    write_artifact,
)
from errors import ReportRenderError
from models import WIRE_KEYS
from report_formatter import build_report


class TestPdf:

    @pytest.mark.parametrize("language", ["ar", "fr", "en"])
    def test_renders_a_pdf(self, make_record, language):
        report = build_report([make_record(), make_record(exit_time="")], language)
        assert render_table(report).startswith(b"%PDF")

    def test_empty_report_still_renders(self):
        assert render_table(build_report([], "fr")).startswith(b"%PDF")

    def test_long_report_spans_pages(self, make_record):
        report = build_report([make_record() for _ in range(120)], "en")
        pdf = render_table(report)
        assert pdf.startswith(b"%PDF")
        assert max(int(n) for n in re.findall(rb"/Count (\d+)", pdf)) > 1

    def test_backend_failure_is_wrapped(self, make_record, monkeypatch):
        def boom(report):
            raise RuntimeError("canvas exploded")

        monkeypatch.setattr(document_renderer, "_build_pdf", boom)
        with pytest.raises(ReportRenderError):
            render_table(build_report([make_record()], "en"))


class TestStructured:

    def test_keys_in_wire_order(self, make_record):
        payload = render_structured([make_record()])
        (item,) = json.loads(payload.decode("utf-8"))
        assert list(item) == list(WIRE_KEYS.values())

    def test_round_trip(self, make_record):
        records = [make_record(), make_record(destination="وهران", exit_time="")]
        payload = render_structured(records)

        assert "وهران" in payload.decode("utf-8")
        assert parse_structured(payload) == records

    def test_empty_list(self):
        assert json.loads(render_structured([])) == []


class TestCsv:

    def test_csv_uses_localized_headers(self, make_record):
        report = build_report([make_record(tanker_number="TQ-9")], "en")
        lines = render_csv(report).decode("utf-8").splitlines()

        assert lines[0].split(",")[:2] == ["No.", "Tanker No."]
        assert lines[1].startswith("1,TQ-9,")
        assert len(lines) == 2

    def test_rtl_csv_is_mirrored(self, make_record):
        report = build_report([make_record(destination="Oran")], "ar")
        lines = render_csv(report).decode("utf-8").splitlines()

        assert lines[1].startswith("Oran,")
        assert lines[0].endswith("N°")


class TestWriteArtifact:

    def test_writes_file(self, tmp_path):
        target = write_artifact(tmp_path / "out" / "report.pdf", b"%PDF-1.4 data")

        assert target.read_bytes() == b"%PDF-1.4 data"
        assert [p.name for p in target.parent.iterdir()] == ["report.pdf"]

    def test_failure_leaves_nothing_behind(self, tmp_path, monkeypatch):
        def failing_replace(src, dst):
            raise OSError("read-only filesystem")

        monkeypatch.setattr(document_renderer.os, "replace", failing_replace)

        with pytest.raises(ReportRenderError):
            write_artifact(tmp_path / "report.pdf", b"payload")

        assert list(tmp_path.iterdir()) == []
