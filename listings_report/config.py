"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

# Listing schema
LISTING_COLUMNS: List[str] = [
    "id",
    "host_id",
    "host_name",
    "neighbourhood_group",
    "room_type",
    "price",
    "minimum_nights",
]

ENTIRE_HOME = "Entire home/apt"
PRIVATE_ROOM = "Private room"
SHARED_ROOM = "Shared room"
HOTEL_ROOM = "Hotel room"
ROOM_TYPES: List[str] = [ENTIRE_HOME, PRIVATE_ROOM, SHARED_ROOM, HOTEL_ROOM]

# Breakdown column per canonical room type
ROOM_TYPE_COLUMNS: Dict[str, str] = {
    ENTIRE_HOME: "entire_home_apts",
    PRIVATE_ROOM: "private_rooms",
    SHARED_ROOM: "shared_rooms",
    HOTEL_ROOM: "hotel_rooms",
}

SHORT_TERM_MAX_NIGHTS = 30
TOP_HOSTS_LIMIT = 10
HISTOGRAM_MAX_BUCKET = 10
PERCENT_DECIMALS = 2


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


@dataclass(frozen=True)
class ReportConfig:
    key: str
    label: str
    tab: str


# Ordered tab definitions for the report page
TABS: List[TabConfig] = [
    TabConfig("overview", "Overview"),
    TabConfig("neighbourhoods", "Neighbourhoods"),
    TabConfig("room_types", "Room Types"),
    TabConfig("hosts", "Hosts"),
    TabConfig("data_quality", "Data Quality"),
]

# Ordered report battery; keys match listings_report.components.reports.REPORT_FUNCTIONS
REPORTS: List[ReportConfig] = [
    ReportConfig("neighbourhood_groups", "Neighbourhood groups", "overview"),
    ReportConfig("average_price_by_group", "Average daily price per neighbourhood group", "neighbourhoods"),
    ReportConfig("entire_home_share_by_group", "Entire homes/apartments per neighbourhood group", "neighbourhoods"),
    ReportConfig("room_type_breakdown", "Listings per room type", "room_types"),
    ReportConfig("top_hosts", "Top 10 hosts by number of listings", "hosts"),
    ReportConfig("price_stats_by_room_type", "Daily price per room type", "room_types"),
    ReportConfig("listings_per_host", "Listings per host", "hosts"),
    ReportConfig("top_hosts_by_room_type", "Top 10 hosts by room type", "hosts"),
    ReportConfig("host_listing_histogram", "Listings by host portfolio size", "hosts"),
    ReportConfig("rental_term_split", "Short-term vs long-term rentals", "overview"),
]


@dataclass(frozen=True)
class Settings:
    listings_path: Path
    listings_table: str
    city_name: str
    currency: str
    log_level: str


def get_settings() -> Settings:
    """Resolve settings from the environment (call `ensure_env` first to pick up .env and secrets)."""
    return Settings(
        listings_path=Path(os.getenv("LISTINGS_PATH", "data/listings.csv")),
        listings_table=os.getenv("LISTINGS_TABLE", "listings"),
        city_name=os.getenv("CITY_NAME", "Berlin"),
        currency=os.getenv("CURRENCY", "EUR"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
