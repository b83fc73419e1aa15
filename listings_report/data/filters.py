"""
Filter utilities that narrow the listings table before the reports run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd


@dataclass
class ListingFilters:
    neighbourhood_groups: Optional[List[str]] = None
    room_types: Optional[List[str]] = None
    price_range: Optional[Tuple[Optional[float], Optional[float]]] = None


DEFAULT_FILTERS = ListingFilters()


def apply_filters(df: pd.DataFrame, filters: ListingFilters) -> pd.DataFrame:
    """
    Keep the rows matching every selected filter. `None` leaves a dimension
    unfiltered. The input frame is never modified.
    """
    filtered = df.copy()
    if df.empty:
        return filtered

    if filters.neighbourhood_groups is not None and "neighbourhood_group" in filtered:
        filtered = filtered[filtered["neighbourhood_group"].isin(filters.neighbourhood_groups)]

    if filters.room_types is not None and "room_type" in filtered:
        filtered = filtered[filtered["room_type"].isin(filters.room_types)]

    if filters.price_range and "price" in filtered:
        price_min, price_max = filters.price_range
        price_series = pd.to_numeric(filtered["price"], errors="coerce")
        if price_min is not None or price_max is not None:
            mask = price_series.notna()
            if price_min is not None:
                mask &= price_series >= price_min
            if price_max is not None:
                mask &= price_series <= price_max
            filtered = filtered[mask]

    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def serialize_filters(filters: ListingFilters) -> Dict[str, Any]:
    """
    Convert the ListingFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "neighbourhood_groups": filters.neighbourhood_groups,
        "room_types": filters.room_types,
        "price_range": filters.price_range,
    }
