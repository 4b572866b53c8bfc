# document_renderer.py
"""
Turns Report values and record subsets into files.

- PDF: landscape A4, striped table (reportlab platypus)
- JSON: lossless record dump, independent of language
- CSV: the localized report table (pandas)

Backend failures surface as ReportRenderError and never leave a partial
file behind (see write_artifact).
"""

import json
import os
import tempfile
from io import BytesIO
from pathlib import Path
from typing import List, Sequence, Union
from xml.sax.saxutils import escape

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.flowables import HRFlowable

from config import AppConfig
from errors import ReportRenderError
from logger import log_error, log_info, log_warning
from models import TankerRecord
from report_formatter import Report

PRIMARY = colors.HexColor("#1b4d8c")
MUTED = colors.HexColor("#646464")
FAINT = colors.HexColor("#969696")

CUSTOM_FONT_NAME = "SCGReportFont"

# Relative column widths, by column key
COLUMN_WEIGHTS = {
    "index": 0.5,
    "tanker_number": 1.1,
    "entry_time": 0.8,
    "exit_time": 0.8,
    "bc_number": 1.0,
    "ordered_quantity": 1.1,
    "loaded_quantity": 1.1,
    "old_index": 1.0,
    "current_index": 1.0,
    "destination": 1.5,
}

_ALIGN_ENUM = {"LEFT": TA_LEFT, "CENTER": TA_CENTER, "RIGHT": TA_RIGHT}


def _fonts():
    """(regular, bold) font names; the configured TTF replaces Helvetica"""
    font_path = AppConfig.REPORT_FONT_PATH
    if not font_path:
        return "Helvetica", "Helvetica-Bold"
    if CUSTOM_FONT_NAME not in pdfmetrics.getRegisteredFontNames():
        if not Path(font_path).exists():
            log_warning(f"Report font not found at {font_path}, using Helvetica")
            return "Helvetica", "Helvetica-Bold"
        pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, font_path))
    return CUSTOM_FONT_NAME, CUSTOM_FONT_NAME


def _para(text: str, style: ParagraphStyle) -> Paragraph:
    return Paragraph(escape(text), style)


# ---------- PDF ----------
def render_table(report: Report) -> bytes:
    """Paginated PDF for ``report``"""
    try:
        return _build_pdf(report)
    except ReportRenderError:
        raise
    except Exception as exc:
        log_error(f"PDF rendering failed ({report.language}, {len(report.rows)} rows): {exc}", exc_info=True)
        raise ReportRenderError(f"PDF rendering failed: {exc}") from exc


def _build_pdf(report: Report) -> bytes:
    regular, bold = _fonts()
    buffer = BytesIO()

    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=12 * mm,
        bottomMargin=18 * mm,
        title=report.title,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "SCG_TITLE", parent=styles["Heading1"], fontName=bold,
        fontSize=22, leading=26, alignment=TA_CENTER, textColor=PRIMARY,
    )
    sub_style = ParagraphStyle(
        "SCG_SUBTITLE", parent=styles["Normal"], fontName=regular,
        fontSize=12, alignment=TA_CENTER, textColor=MUTED,
    )
    range_style = ParagraphStyle("SCG_RANGE", parent=sub_style, fontSize=10)

    start_align = TA_RIGHT if report.rtl else TA_LEFT
    end_align = TA_LEFT if report.rtl else TA_RIGHT
    summary_style = ParagraphStyle(
        "SCG_SUMMARY", parent=styles["Normal"], fontName=bold,
        fontSize=11, leading=16, alignment=start_align, textColor=colors.black,
    )
    sig_label_style = ParagraphStyle(
        "SCG_SIG_LABEL", parent=styles["Normal"], fontName=regular,
        fontSize=10, leading=16, alignment=end_align, textColor=MUTED,
    )
    sig_name_style = ParagraphStyle(
        "SCG_SIG_NAME", parent=sig_label_style, fontName=bold, textColor=colors.black,
    )

    elements = [
        _para(report.title, title_style),
        _para(report.subtitle, sub_style),
        Spacer(1, 2 * mm),
        _para(report.date_range, range_style),
        Spacer(1, 2 * mm),
        HRFlowable(width="100%", thickness=0.5 * mm, color=PRIMARY, spaceAfter=4 * mm),
    ]

    # ---- Table ----
    weights = [COLUMN_WEIGHTS.get(c.key, 1.0) for c in report.columns]
    scale = doc.width / sum(weights)
    col_widths = [w * scale for w in weights]

    table_data = [report.headers] + report.rows
    table = Table(table_data, colWidths=col_widths, repeatRows=1)
    style_cmds = [
        ("BACKGROUND", (0, 0), (-1, 0), PRIMARY),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("ALIGN", (0, 0), (-1, 0), "CENTER"),
        ("FONTNAME", (0, 0), (-1, 0), bold),
        ("FONTSIZE", (0, 0), (-1, 0), 10),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ]
    if report.rows:
        style_cmds += [
            ("FONTNAME", (0, 1), (-1, -1), regular),
            ("FONTSIZE", (0, 1), (-1, -1), 9),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.whitesmoke, colors.HexColor("#e8eef7")]),
        ]
        for idx, column in enumerate(report.columns):
            style_cmds.append(("ALIGN", (idx, 1), (idx, -1), column.align))
    table.setStyle(TableStyle(style_cmds))
    elements.append(table)
    elements.append(Spacer(1, 10 * mm))

    # ---- Summary (reading-start side) and signature (opposite side) ----
    summary_block = [_para(f"{item.label}: {item.value}", summary_style) for item in report.summary]
    signature_block = [
        _para(report.footer.responsible_label, sig_label_style),
        _para(report.footer.responsible_name, sig_name_style),
    ]
    blocks = [signature_block, summary_block] if report.rtl else [summary_block, signature_block]
    closing = Table([blocks], colWidths=[doc.width / 2, doc.width / 2])
    closing.setStyle(TableStyle([
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
        ("RIGHTPADDING", (0, 0), (-1, -1), 0),
    ]))
    elements.append(closing)

    footer_text = report.footer.version_line

    def _draw_footer(canvas, document):
        canvas.saveState()
        canvas.setFont(regular, 8)
        canvas.setFillColor(FAINT)
        canvas.drawCentredString(document.pagesize[0] / 2, 10 * mm, footer_text)
        canvas.restoreState()

    doc.build(elements, onFirstPage=_draw_footer, onLaterPages=_draw_footer)
    pdf_data = buffer.getvalue()
    buffer.close()
    return pdf_data


# ---------- structured ----------
def render_structured(records: Sequence[TankerRecord]) -> bytes:
    """JSON dump of the records, wire keys in declaration order"""
    try:
        data = [r.to_dict() for r in records]
        return json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
    except (TypeError, ValueError) as exc:
        log_error(f"Structured export failed: {exc}")
        raise ReportRenderError(f"Structured export failed: {exc}") from exc


def parse_structured(payload: Union[bytes, str]) -> List[TankerRecord]:
    """Read back a render_structured payload"""
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")
    return [TankerRecord.from_dict(d) for d in json.loads(payload)]


# ---------- CSV ----------
def render_csv(report: Report) -> bytes:
    """Localized report table as CSV (same column order as the PDF)"""
    try:
        df = pd.DataFrame(report.rows, columns=report.headers)
        return df.to_csv(index=False).encode("utf-8")
    except Exception as exc:
        log_error(f"CSV rendering failed: {exc}")
        raise ReportRenderError(f"CSV rendering failed: {exc}") from exc


# ---------- files ----------
def write_artifact(path: Union[str, Path], payload: bytes) -> Path:
    """Write ``payload`` to ``path`` atomically; nothing is left on failure"""
    target = Path(path)
    tmp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=target.parent, prefix=f".{target.name}.", suffix=".part", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(payload)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as exc:
        log_error(f"Could not write {target}: {exc}")
        raise ReportRenderError(f"Could not write {target}: {exc}") from exc
    finally:
        if tmp_name and os.path.exists(tmp_name):
            os.remove(tmp_name)

    log_info(f"Wrote {target} ({len(payload)} bytes)")
    return target
