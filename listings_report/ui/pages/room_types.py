from __future__ import annotations

import pandas as pd
import streamlit as st

from listings_report.components.reports import price_stats_by_room_type, room_type_breakdown
from listings_report.ui.components.tables import render_table
from listings_report.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    price_config = {"type": "currency", "currency": context.settings.currency}
    st.subheader("Room Types")

    st.markdown("#### Listings per Room Type")
    render_table(
        room_type_breakdown(df),
        column_config={
            "number_of_listings": {"type": "number"},
            "percentage": {"type": "percent"},
        },
        export_file_name="room_types.csv",
    )

    st.markdown("#### Daily Price per Room Type")
    render_table(
        price_stats_by_room_type(df),
        column_config={
            "average_daily_price": price_config,
            "minimum_daily_price": price_config,
            "maximum_daily_price": price_config,
        },
        export_file_name="price_by_room_type.csv",
    )
