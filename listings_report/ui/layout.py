"""
Layout helpers for the Streamlit report page (page setup and sidebar filters).
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from listings_report.config import ROOM_TYPES, Settings
from listings_report.data.filters import DEFAULT_FILTERS, ListingFilters


def setup_page(settings: Settings) -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title=f"{settings.city_name} Listings Report",
        layout="wide",
        page_icon=":bar_chart:",
    )


def _multiselect_with_counts(
    label: str,
    key: str,
    options: List[str],
    series: pd.Series,
) -> Optional[List[str]]:
    """Multiselect defaulting to every option; selecting everything means no filter."""
    if not options:
        return None
    counts = series.value_counts(dropna=False).to_dict()
    selected = st.sidebar.multiselect(
        label=label,
        options=options,
        default=options,
        key=key,
        format_func=lambda v: f"{v} ({int(counts.get(v, 0)):,})",
    )
    if len(selected) == len(options):
        return None
    return selected


def _suggest_step(min_val: float, max_val: float) -> float:
    span = max_val - min_val
    if span <= 0:
        return 1.0
    exponent = math.floor(math.log10(span)) - 2
    return float(10 ** max(0, exponent))


def _price_range_input(series: pd.Series, currency: str) -> Optional[Tuple[Optional[float], Optional[float]]]:
    prices = pd.to_numeric(series, errors="coerce").dropna()
    if prices.empty:
        return None
    data_min, data_max = float(prices.min()), float(prices.max())
    if data_min == data_max:
        return None

    step = _suggest_step(data_min, data_max)
    col_min, col_max = st.sidebar.columns(2)
    with col_min:
        min_input = st.number_input(
            f"Min ({currency})",
            min_value=data_min,
            max_value=data_max,
            value=data_min,
            step=step,
            key="lr_price_min",
        )
    with col_max:
        max_input = st.number_input(
            f"Max ({currency})",
            min_value=data_min,
            max_value=data_max,
            value=data_max,
            step=step,
            key="lr_price_max",
        )
    if max_input < min_input:
        st.sidebar.warning("Max price must be greater than or equal to min price.")
        return None
    if min_input == data_min and max_input == data_max:
        return None
    return float(min_input), float(max_input)


def sidebar_filters_ui(
    df: pd.DataFrame,
    settings: Settings,
    defaults: ListingFilters = DEFAULT_FILTERS,
) -> ListingFilters:
    """
    Render the sidebar filter controls and return the selected values.
    """
    st.sidebar.header("Filters")
    if df.empty:
        return defaults

    groups = (
        sorted(df["neighbourhood_group"].dropna().astype(str).unique().tolist())
        if "neighbourhood_group" in df
        else []
    )
    selected_groups = _multiselect_with_counts(
        "Neighbourhood Group",
        key="lr_neighbourhood_group",
        options=groups,
        series=df.get("neighbourhood_group", pd.Series(dtype=str)),
    )

    present = set(df["room_type"].dropna().unique()) if "room_type" in df else set()
    room_types = [rt for rt in ROOM_TYPES if rt in present] + sorted(str(v) for v in present - set(ROOM_TYPES))
    selected_room_types = _multiselect_with_counts(
        "Room Type",
        key="lr_room_type",
        options=room_types,
        series=df.get("room_type", pd.Series(dtype=str)),
    )

    price_range = None
    if "price" in df:
        st.sidebar.subheader("Daily Price")
        price_range = _price_range_input(df["price"], settings.currency)

    st.sidebar.divider()
    st.sidebar.caption(f"Source: {settings.listings_path}")

    return ListingFilters(
        neighbourhood_groups=selected_groups,
        room_types=selected_room_types,
        price_range=price_range,
    )
