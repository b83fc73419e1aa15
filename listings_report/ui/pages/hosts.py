from __future__ import annotations

import pandas as pd
import streamlit as st

from listings_report.components.reports import (
    host_listing_histogram,
    listings_per_host,
    top_hosts,
    top_hosts_by_room_type,
)
from listings_report.config import ROOM_TYPE_COLUMNS
from listings_report.ui.components.tables import render_table
from listings_report.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    count_config = {"type": "number"}
    st.subheader("Hosts")

    col_top, col_breakdown = st.columns([1, 2])
    with col_top:
        st.markdown("#### Top 10 Hosts")
        render_table(
            top_hosts(df),
            column_config={"number_of_listings": count_config},
            export_file_name="top_hosts.csv",
        )
    with col_breakdown:
        st.markdown("#### Top 10 Hosts by Room Type")
        breakdown_config = {col: count_config for col in ["number_of_listings", *ROOM_TYPE_COLUMNS.values()]}
        render_table(
            top_hosts_by_room_type(df),
            column_config=breakdown_config,
            export_file_name="top_hosts_by_room_type.csv",
        )

    st.markdown("#### Listings by Host Portfolio Size")
    st.caption(
        "Each bucket counts the listings (not the hosts) of hosts with that many listings; "
        "a host with 3 listings adds 3 to bucket 3."
    )
    render_table(
        host_listing_histogram(df),
        column_config={"number_of_listings": count_config},
        export_file_name="host_portfolio_sizes.csv",
    )

    st.markdown("#### All Hosts")
    render_table(
        listings_per_host(df),
        column_config={"number_of_listings": count_config},
        height=400,
        export_file_name="listings_per_host.csv",
    )
