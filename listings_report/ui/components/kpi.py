from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from listings_report.ui.components.formatting import format_currency, format_number, format_percent


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    value_format: str = "number"  # number | currency | pct
    currency: str = "EUR"
    decimals: int = 0
    help_text: Optional[str] = None


def format_kpi_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    if card.value_format == "currency":
        return format_currency(card.value, currency=card.currency, decimals=card.decimals)
    if card.value_format == "pct":
        return format_percent(card.value, decimals=card.decimals)
    return format_number(card.value, decimals=card.decimals)


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No KPIs available for the current filters.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=format_kpi_value(card))
                if card.help_text:
                    st.caption(card.help_text)
