# report_formatter.py
"""
Builds the language-aware tabular report for a set of tanker records.

Layout rules:
- Columns: N°, tanker, entry, exit, BC, ordered, loaded, old index,
  current index, destination. N° is the position in the exported subset,
  not the stored serial number.
- Right-to-left languages mirror the column order (headers and every row
  the same way) and right-align all cells. This is plain column mirroring,
  not bidi shaping.
- Totals are computed on the exported subset only.

The Report value carries no rendering details beyond alignment, so the same
report feeds the PDF and CSV renderers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

from config import AppConfig
from logger import log_debug
from models import TankerRecord
from query_engine import Totals, aggregate_totals
from timezone_utils import format_local_datetime, get_local_time
from translations import is_rtl, resolve


# (value key, header translation key)
COLUMN_SPECS = [
    ("index", "dashboard.serialNum"),
    ("tanker_number", "dashboard.tankerNum"),
    ("entry_time", "dashboard.entry"),
    ("exit_time", "dashboard.exit"),
    ("bc_number", "dashboard.bcNum"),
    ("ordered_quantity", "dashboard.ordered"),
    ("loaded_quantity", "dashboard.loaded"),
    ("old_index", "dashboard.oldIdx"),
    ("current_index", "dashboard.currentIdx"),
    ("destination", "dashboard.destination"),
]

EMPTY_CELL = "-"


@dataclass(frozen=True)
class ReportColumn:
    key: str
    header: str
    align: str  # LEFT / CENTER / RIGHT


@dataclass(frozen=True)
class SummaryItem:
    label: str
    value: str


@dataclass(frozen=True)
class ReportFooter:
    organization: str
    department: str
    responsible_label: str
    responsible_name: str
    version_label: str
    version: str
    generated_at: str

    @property
    def version_line(self) -> str:
        return f"{self.version_label} {self.version} | {self.generated_at}"


@dataclass
class ReportOptions:
    """Explicit context for one report (no ambient language or user)"""
    title: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    generated_at: Optional[datetime] = None
    version: Optional[str] = None


@dataclass
class Report:
    language: str
    rtl: bool
    title: str
    subtitle: str
    date_range: str
    columns: List[ReportColumn]
    rows: List[List[str]]
    totals: Totals
    summary: List[SummaryItem]
    footer: ReportFooter
    record_ids: List[str] = field(default_factory=list)

    @property
    def headers(self) -> List[str]:
        return [c.header for c in self.columns]

    @property
    def is_empty(self) -> bool:
        return not self.rows


def format_quantity(value) -> str:
    """Thousands grouping; integral values without decimals"""
    number = float(value)
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.2f}".rstrip("0").rstrip(".")


def _cell_values(position: int, record: TankerRecord) -> dict:
    return {
        "index": str(position),
        "tanker_number": record.tanker_number,
        "entry_time": record.entry_time,
        "exit_time": record.exit_time or EMPTY_CELL,
        "bc_number": record.bc_number,
        "ordered_quantity": format_quantity(record.ordered_quantity),
        "loaded_quantity": format_quantity(record.loaded_quantity),
        "old_index": format_quantity(record.old_index),
        "current_index": format_quantity(record.current_index),
        "destination": record.destination,
    }


def _column_align(key: str, rtl: bool) -> str:
    if rtl:
        return "RIGHT"
    return "CENTER" if key == "index" else "LEFT"


def build_report(records: Sequence[TankerRecord], language: str, options: ReportOptions = None) -> Report:
    """Lay out ``records`` as a localized report; an empty subset is valid"""
    options = options or ReportOptions()
    rtl = is_rtl(language)

    def t(key: str) -> str:
        return resolve(language, key)

    columns = [ReportColumn(key, t(header_key), _column_align(key, rtl)) for key, header_key in COLUMN_SPECS]
    rows = []
    for position, record in enumerate(records, start=1):
        cells = _cell_values(position, record)
        rows.append([cells[key] for key, _ in COLUMN_SPECS])

    if rtl:
        columns = list(reversed(columns))
        rows = [list(reversed(row)) for row in rows]

    totals = aggregate_totals(records)
    summary = [
        SummaryItem(t("dashboard.totalLoaded"), f"{format_quantity(totals.total_loaded)} L"),
        SummaryItem(t("dashboard.totalOrdered"), f"{format_quantity(totals.total_ordered)} L"),
        SummaryItem(t("dashboard.tankerCount"), str(totals.count)),
    ]

    generated_at = options.generated_at or get_local_time()
    footer = ReportFooter(
        organization=t("footer.organization"),
        department=t("footer.department"),
        responsible_label=t("footer.responsible"),
        responsible_name=t("footer.name"),
        version_label=t("footer.version"),
        version=options.version or AppConfig.APP_VERSION,
        generated_at=format_local_datetime(generated_at),
    )

    date_range = (
        f"{t('export.startDate')}: {options.start_date or EMPTY_CELL} | "
        f"{t('export.endDate')}: {options.end_date or EMPTY_CELL}"
    )

    log_debug(f"Built {language} report with {len(rows)} row(s)")
    return Report(
        language=language,
        rtl=rtl,
        title=options.title or t("export.title"),
        subtitle=f"{footer.organization} | {footer.department}",
        date_range=date_range,
        columns=columns,
        rows=rows,
        totals=totals,
        summary=summary,
        footer=footer,
        record_ids=[r.id for r in records],
    )
