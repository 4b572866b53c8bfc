"""
Advanced export page: format, report language, date range, record selection.
"""
from __future__ import annotations
from datetime import date

import streamlit as st

from errors import EmptyExportError, ReportRenderError
from export_manager import EXPORT_FORMATS, SELECTION_ALL, SELECTION_CUSTOM, ExportRequest
from models import record_label
from pages.helpers import get_export_manager, get_store, show_error
from query_engine import aggregate_totals, filter_by_date_range
from report_formatter import format_quantity
from timezone_utils import today_iso
from translations import SUPPORTED_LANGUAGES, LANGUAGE_NAMES, translator
from ui import header


def render(language: str) -> None:
    t = translator(language)
    header(t("export.title"), language)

    c1, c2 = st.columns(2)
    with c1:
        fmt = st.selectbox(t("export.selectFormat"), EXPORT_FORMATS, format_func=str.upper, key="exp_format")
    with c2:
        report_language = st.selectbox(
            t("export.selectLanguage"), SUPPORTED_LANGUAGES,
            index=SUPPORTED_LANGUAGES.index(language) if language in SUPPORTED_LANGUAGES else 0,
            format_func=lambda code: LANGUAGE_NAMES[code], key="exp_language",
        )

    with st.container(border=True):
        st.markdown(f"**{t('export.selectDateRange')}**")
        d1, d2 = st.columns(2)
        with d1:
            start: date = st.date_input(t("export.startDate"), value=date.fromisoformat(today_iso()), key="exp_start")
        with d2:
            end: date = st.date_input(t("export.endDate"), value=date.fromisoformat(today_iso()), key="exp_end")

    snapshot = get_store().list()
    in_range = filter_by_date_range(snapshot, start, end)

    selection = st.radio(
        t("export.selectRecords"), [SELECTION_ALL, SELECTION_CUSTOM],
        format_func=lambda s: t("export.allRecords") if s == SELECTION_ALL else t("export.customRecords"),
        horizontal=True, key="exp_selection",
    )
    selected_ids = frozenset()
    if selection == SELECTION_CUSTOM and in_range:
        labels = {r.id: record_label(r) for r in in_range}
        chosen = st.multiselect(t("export.customRecords"), list(labels), format_func=labels.get, key="exp_ids")
        selected_ids = frozenset(chosen)
        st.caption(f"{len(selected_ids)} / {len(in_range)}")

    totals = aggregate_totals(in_range)
    st.info(
        f"📊 {t('dashboard.tankerCount')}: {totals.count}  \n"
        f"📈 {t('dashboard.totalLoaded')}: {format_quantity(totals.total_loaded)} L  \n"
        f"📋 {t('dashboard.totalOrdered')}: {format_quantity(totals.total_ordered)} L"
    )

    disabled = selection == SELECTION_CUSTOM and not selected_ids
    if not st.button(f"📥 {t('export.exportBtn')}", type="primary", disabled=disabled, key="exp_build"):
        return

    request = ExportRequest(
        format=fmt,
        language=report_language,
        start_date=start,
        end_date=end,
        selection=selection,
        selected_ids=selected_ids,
    )
    try:
        artifact = get_export_manager().build(request, snapshot=snapshot)
    except (EmptyExportError, ReportRenderError) as exc:
        show_error(exc, language)
        return

    st.success(t("export.success"))
    st.download_button(
        f"⬇️ {artifact.filename}",
        data=artifact.payload,
        file_name=artifact.filename,
        mime=artifact.mime_type,
        use_container_width=True,
    )
