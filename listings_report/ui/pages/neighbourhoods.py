from __future__ import annotations

import pandas as pd
import streamlit as st

from listings_report.components.reports import average_price_by_group, entire_home_share_by_group
from listings_report.ui.components.tables import render_table
from listings_report.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    currency = context.settings.currency
    st.subheader("Neighbourhood Groups")

    st.markdown("#### Average Daily Price")
    render_table(
        average_price_by_group(df),
        column_config={"average_daily_price": {"type": "currency", "currency": currency}},
        export_file_name="average_price_by_group.csv",
    )

    st.markdown("#### Entire Homes / Apartments")
    st.caption("Percentage of all listings in the current selection.")
    render_table(
        entire_home_share_by_group(df),
        column_config={
            "number_of_homes_apartments": {"type": "number"},
            "percentage": {"type": "percent"},
        },
        export_file_name="entire_homes_by_group.csv",
    )
