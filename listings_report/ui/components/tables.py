"""
Reusable helpers for rendering report tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from listings_report.ui.components.formatting import format_currency, format_number, format_percent


def format_columns(df: pd.DataFrame, column_config: Optional[Dict[str, Dict[str, str]]] = None) -> pd.DataFrame:
    """Return a display copy of `df` with configured columns turned into strings."""
    formatted_df = df.copy()
    if not column_config:
        return formatted_df
    for column, config in column_config.items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        decimals = int(config.get("decimals", 2 if fmt_type != "number" else 0))
        if fmt_type == "currency":
            currency = config.get("currency", "EUR")
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_currency(v, currency=currency, decimals=decimals)
            )
        elif fmt_type == "percent":
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_percent(v, decimals=decimals)
            )
        elif fmt_type == "number":
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_number(v, decimals=decimals)
            )
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    height: Optional[int] = None,
    export_file_name: str = "export.csv",
) -> None:
    if df.empty:
        st.info("No data to display for the current filters.")
        return

    extra = {"height": height} if height else {}
    st.dataframe(
        format_columns(df, column_config),
        use_container_width=True,
        hide_index=True,
        **extra,
    )

    csv_bytes = df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
        key=f"download_{export_file_name}",
    )
