# export_manager.py
"""
Export orchestration for the tanker loading log.

Selects records (date range, optional hand-picked ids), lays out the report
and renders the requested format. Naming follows
``{prefix}_{YYYY-MM-DD}[_{language}].{ext}``.
"""

from dataclasses import dataclass, field
from datetime import date as dt_date
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional, Sequence, Union

from config import AppConfig
from errors import EmptyExportError
from logger import log_info, log_warning
from models import TankerRecord
from query_engine import Totals, aggregate_totals, filter_by_date_range, filter_by_id_set
from record_store import RecordStore
from report_formatter import ReportOptions, build_report
from document_renderer import render_csv, render_structured, render_table, write_artifact
from timezone_utils import get_local_time, today_iso

FORMAT_PDF = "pdf"
FORMAT_JSON = "json"
FORMAT_CSV = "csv"
EXPORT_FORMATS = (FORMAT_PDF, FORMAT_JSON, FORMAT_CSV)

SELECTION_ALL = "all"
SELECTION_CUSTOM = "custom"

MIME_TYPES = {
    FORMAT_PDF: "application/pdf",
    FORMAT_JSON: "application/json",
    FORMAT_CSV: "text/csv",
}

DateLike = Union[str, dt_date, None]


def export_filename(prefix: str, on_date: DateLike, ext: str, language: Optional[str] = None) -> str:
    """situation_citerne_2024-01-10_fr.pdf"""
    if isinstance(on_date, dt_date):
        on_date = on_date.isoformat()
    parts = [prefix, str(on_date)]
    if language:
        parts.append(language)
    return f"{'_'.join(parts)}.{ext}"


@dataclass
class ExportRequest:
    format: str = FORMAT_PDF
    language: str = AppConfig.DEFAULT_LANGUAGE
    start_date: DateLike = None
    end_date: DateLike = None
    selection: str = SELECTION_ALL
    selected_ids: FrozenSet[str] = field(default_factory=frozenset)
    title: Optional[str] = None


@dataclass
class ExportArtifact:
    filename: str
    payload: bytes
    mime_type: str
    record_count: int
    totals: Totals


class ExportManager:
    """Builds and saves export artifacts from one store snapshot"""

    def __init__(
        self,
        store: RecordStore,
        output_dir: Union[str, Path] = None,
        prefix: str = None,
        clock: Callable = None,
    ):
        self.store = store
        self.output_dir = Path(output_dir or AppConfig.OUTPUT_DIR)
        self.prefix = prefix or AppConfig.EXPORT_PREFIX
        self._clock = clock or get_local_time

    @staticmethod
    def select_records(request: ExportRequest, snapshot: Sequence[TankerRecord]) -> List[TankerRecord]:
        records = filter_by_date_range(snapshot, request.start_date, request.end_date)
        if request.selection == SELECTION_CUSTOM:
            records = filter_by_id_set(records, request.selected_ids)
        return records

    def build(self, request: ExportRequest, snapshot: Sequence[TankerRecord] = None) -> ExportArtifact:
        if request.format not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format: {request.format}")

        if snapshot is None:
            snapshot = self.store.list()
        records = self.select_records(request, snapshot)
        if not records:
            log_warning(
                f"Export blocked: no records for {request.start_date}..{request.end_date} "
                f"({request.selection})"
            )
            raise EmptyExportError("No records selected for export")

        now = self._clock()
        stamp = today_iso(now)
        if request.format == FORMAT_JSON:
            payload = render_structured(records)
            filename = export_filename(f"{self.prefix}_export", stamp, "json")
        else:
            report = build_report(
                records,
                request.language,
                ReportOptions(
                    title=request.title,
                    start_date=_as_text(request.start_date),
                    end_date=_as_text(request.end_date),
                    generated_at=now,
                ),
            )
            if request.format == FORMAT_PDF:
                payload = render_table(report)
            else:
                payload = render_csv(report)
            filename = export_filename(self.prefix, stamp, request.format, request.language)

        log_info(f"Export {filename}: {len(records)} record(s), {len(payload)} bytes")
        return ExportArtifact(
            filename=filename,
            payload=payload,
            mime_type=MIME_TYPES[request.format],
            record_count=len(records),
            totals=aggregate_totals(records),
        )

    def save(self, artifact: ExportArtifact) -> Path:
        return write_artifact(self.output_dir / artifact.filename, artifact.payload)

    def export_day(self, day: DateLike, snapshot: Sequence[TankerRecord] = None) -> ExportArtifact:
        """JSON export of a single date (dashboard export button)"""
        return self.build(
            ExportRequest(format=FORMAT_JSON, start_date=day, end_date=day),
            snapshot=snapshot,
        )


def _as_text(value: DateLike) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, dt_date):
        return value.isoformat()
    return str(value)
