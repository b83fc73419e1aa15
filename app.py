import listings_report.bootstrap_env  # must be first to set env/secrets
import logging

import pandas as pd
import streamlit as st

from listings_report.config import TABS, get_settings
from listings_report.data.filters import apply_filters, serialize_filters
from listings_report.data.loader import load_listings
from listings_report.errors import ListingsReportError
from listings_report.ui.components.formatting import format_currency, format_number
from listings_report.ui.layout import setup_page, sidebar_filters_ui
from listings_report.ui.pages import (
    overview,
    neighbourhoods,
    room_types,
    hosts,
    data_quality,
)
from listings_report.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "overview": overview.render,
    "neighbourhoods": neighbourhoods.render,
    "room_types": room_types.render,
    "hosts": hosts.render,
    "data_quality": data_quality.render,
}


@st.cache_data(show_spinner=False, ttl=600)
def load_data(path: str, table: str) -> pd.DataFrame:
    return load_listings(path, table)


def _active_filter_summary(filters, total_rows: int, currency: str) -> None:
    badges = []
    if filters.neighbourhood_groups is not None:
        groups = filters.neighbourhood_groups
        badges.append("Groups: " + ", ".join(groups[:5]) + ("…" if len(groups) > 5 else ""))
    if filters.room_types is not None:
        badges.append("Room Types: " + ", ".join(filters.room_types))
    if filters.price_range:
        min_val, max_val = filters.price_range
        badges.append(
            f"Price: {format_currency(min_val, currency=currency, decimals=0)}"
            f" – {format_currency(max_val, currency=currency, decimals=0)}"
        )

    summary_text = "Active Filters: " + " | ".join(badges) if badges else "Active Filters: All data"
    st.markdown(f"**{summary_text}**")
    st.caption(f"Showing {format_number(total_rows, 0)} listings after filters.")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")
    setup_page(settings)
    st.title(f"{settings.city_name} Short-term Rental Listings")

    if st.sidebar.button("🔄 Reload Data"):
        load_data.clear()  # type: ignore[attr-defined]

    try:
        raw_df = load_data(str(settings.listings_path), settings.listings_table)
    except (FileNotFoundError, ListingsReportError) as exc:
        st.error(f"{exc}. Set LISTINGS_PATH to an Inside Airbnb listings.csv or a SQLite database.")
        return

    if raw_df.empty:
        st.warning("The listings dataset is empty.")
        return

    filters = sidebar_filters_ui(raw_df, settings)
    filtered_df = apply_filters(raw_df, filters)
    st.session_state["lr_active_filters"] = serialize_filters(filters)
    logger.debug("Filters %s keep %d of %d rows", serialize_filters(filters), len(filtered_df), len(raw_df))

    _active_filter_summary(filters, len(filtered_df), settings.currency)

    context = PageContext(raw_df=raw_df, filters=filters, settings=settings)

    streamlit_tabs = st.tabs([tab.label for tab in TABS])
    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered_df, context)


if __name__ == "__main__":
    main()
