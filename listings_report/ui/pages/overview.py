from __future__ import annotations

import pandas as pd
import streamlit as st

from listings_report.components.reports import distinct_neighbourhood_groups, rental_term_split
from listings_report.config import SHORT_TERM_MAX_NIGHTS
from listings_report.ui.components.kpi import KpiCard, render_kpi_cards
from listings_report.ui.components.tables import render_table
from listings_report.ui.pages.context import PageContext


def _overview_cards(df: pd.DataFrame, term_split: pd.DataFrame, group_count: int) -> list[KpiCard]:
    short_term_pct = term_split.loc[term_split["term"] == "short_term", "percentage"].iloc[0]
    return [
        KpiCard(label="Listings", value=len(df)),
        KpiCard(label="Hosts", value=df["host_id"].nunique() if "host_id" in df else None),
        KpiCard(label="Neighbourhood Groups", value=group_count),
        KpiCard(
            label="Short-term Share",
            value=short_term_pct,
            value_format="pct",
            decimals=2,
            help_text=f"Minimum stay below {SHORT_TERM_MAX_NIGHTS} nights.",
        ),
    ]


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader(f"{context.settings.city_name} at a Glance")

    groups = distinct_neighbourhood_groups(df)
    term_split = rental_term_split(df)
    render_kpi_cards(_overview_cards(df, term_split, len(groups)), columns=4)

    col_groups, col_terms = st.columns(2)
    with col_groups:
        st.markdown("#### Neighbourhood Groups")
        render_table(
            pd.DataFrame({"neighbourhood_group": groups}),
            export_file_name="neighbourhood_groups.csv",
        )
    with col_terms:
        st.markdown("#### Short-term vs Long-term Rentals")
        render_table(
            term_split,
            column_config={
                "number_of_listings": {"type": "number"},
                "percentage": {"type": "percent"},
            },
            export_file_name="rental_terms.csv",
        )
