from __future__ import annotations

import pandas as pd
import streamlit as st

from listings_report.components.quality_checks import (
    build_quality_overview,
    missing_values_summary,
    unknown_room_types,
)
from listings_report.config import PERCENT_DECIMALS, ROOM_TYPES, SHORT_TERM_MAX_NIGHTS
from listings_report.ui.components.kpi import KpiCard, render_kpi_cards
from listings_report.ui.components.tables import render_table
from listings_report.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Data Quality & Definitions")
    raw_df = context.raw_df
    if raw_df.empty:
        st.info("No diagnostics available yet.")
        return

    overview = build_quality_overview(raw_df)
    render_kpi_cards(
        [
            KpiCard(label="Rows Loaded", value=overview["row_count"]),
            KpiCard(label="Duplicate IDs", value=overview["duplicate_count"]),
            KpiCard(label="Distinct Hosts", value=overview["distinct_hosts"]),
            KpiCard(label="Unknown Room Types", value=overview["unknown_room_type_rows"]),
        ],
        columns=4,
    )

    st.markdown("#### Missing Values")
    render_table(
        missing_values_summary(raw_df),
        column_config={"missing_count": {"type": "number"}, "missing_pct": {"type": "percent"}},
        export_file_name="missing_values.csv",
    )

    other_types = unknown_room_types(raw_df)
    if not other_types.empty:
        st.markdown("#### Room Types Outside the Standard Set")
        render_table(other_types, export_file_name="unknown_room_types.csv")

    st.markdown("#### Load Diagnostics")
    diagnostics = raw_df.attrs.get("diagnostics", {})
    if diagnostics:
        for key, value in diagnostics.items():
            st.write(f"- **{key.replace('_', ' ').title()}**: {value}")
    else:
        st.info("No diagnostics metadata available.")

    st.markdown("#### Metric Definitions")
    st.write(
        f"""
        - **Percentages** are listings in the row × 100 / all listings in the current selection,
          rounded to {PERCENT_DECIMALS} decimals.
        - **Room types** reported in breakdowns: {", ".join(ROOM_TYPES)}. Other values count towards totals only.
        - **Short-term rental**: minimum stay below {SHORT_TERM_MAX_NIGHTS} nights; long-term otherwise.
        - **Host portfolio size buckets** count listings, not hosts.
        """
    )
