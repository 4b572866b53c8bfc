"""
Daily dashboard: totals, hourly charts, record table, delete and JSON export.
"""
from __future__ import annotations
from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from errors import EmptyExportError, PersistenceError, ReportRenderError
from models import record_label
from pages.helpers import get_export_manager, get_store, show_error, st_safe_rerun
from query_engine import aggregate_totals, bucket_by_hour, filter_by_date_exact, filter_by_text
from report_formatter import format_quantity
from timezone_utils import today_iso
from translations import translator
from ui import header

TABLE_COLUMNS = [
    ("serial_number", "dashboard.serialNum"),
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


def render(language: str) -> None:
    t = translator(language)
    header(t("header.title"), language)
    store = get_store()

    # ---- Filters ----
    with st.container(border=True):
        c1, c2 = st.columns([0.6, 0.4])
        with c1:
            search = st.text_input(t("dashboard.search"), key="dash_search")
        with c2:
            day: date = st.date_input(t("dashboard.date"), value=date.fromisoformat(today_iso()), key="dash_date")

    snapshot = store.list()
    records = filter_by_text(filter_by_date_exact(snapshot, day), search)
    totals = aggregate_totals(records)

    m1, m2, m3 = st.columns(3)
    m1.metric(t("dashboard.totalLoaded"), f"{format_quantity(totals.total_loaded)} L")
    m2.metric(t("dashboard.totalOrdered"), f"{format_quantity(totals.total_ordered)} L")
    m3.metric(t("dashboard.tankerCount"), totals.count)

    # ---- Charts ----
    buckets = bucket_by_hour(records)
    if buckets:
        hours = [b.hour for b in buckets]
        ch1, ch2 = st.columns(2)
        with ch1:
            fig = go.Figure()
            fig.add_trace(go.Bar(x=hours, y=[b.loaded for b in buckets],
                                 name=t("dashboard.loaded"), marker_color="#1b4d8c"))
            fig.add_trace(go.Bar(x=hours, y=[b.ordered for b in buckets],
                                 name=t("dashboard.ordered"), marker_color="#f97316"))
            fig.update_layout(title=t("dashboard.hourlyChart"), barmode="group",
                              height=350, template="plotly_white")
            st.plotly_chart(fig, use_container_width=True)
        with ch2:
            fig_trend = go.Figure()
            fig_trend.add_trace(go.Scatter(x=hours, y=[b.loaded for b in buckets], mode="lines+markers",
                                           name=t("dashboard.loaded"),
                                           line=dict(color="#1b4d8c", width=3), marker=dict(size=6)))
            fig_trend.update_layout(title=t("dashboard.trendChart"), height=350,
                                    template="plotly_white", showlegend=False)
            st.plotly_chart(fig_trend, use_container_width=True)

    # ---- Table ----
    if not records:
        st.info(t("dashboard.noRecords"))
        return

    df = pd.DataFrame(
        [{t(label): (getattr(r, attr) or "-") if attr == "exit_time" else getattr(r, attr)
          for attr, label in TABLE_COLUMNS} for r in records]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)

    # ---- Actions ----
    a1, a2 = st.columns([0.7, 0.3])
    with a1:
        labels = {r.id: f"{r.serial_number} · {record_label(r)}" for r in records}
        chosen = st.selectbox(t("dashboard.delete"), list(labels), format_func=labels.get,
                              key="dash_delete_choice")
        if st.button(f"🗑️ {t('dashboard.delete')}", key="dash_delete_btn"):
            try:
                store.delete(chosen)
            except PersistenceError as exc:
                show_error(exc, language)
            else:
                st.success(t("dashboard.deleted"))
                st_safe_rerun()
    with a2:
        try:
            artifact = get_export_manager().export_day(day, snapshot=snapshot)
        except (EmptyExportError, ReportRenderError) as exc:
            show_error(exc, language)
        else:
            st.download_button(
                f"📥 {t('dashboard.exportData')}",
                data=artifact.payload,
                file_name=artifact.filename,
                mime=artifact.mime_type,
                use_container_width=True,
            )
