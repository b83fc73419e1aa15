"""
Aggregate reports over the listings table.

Every function takes the listings DataFrame, never mutates it, and returns a
fresh result. Percentages are `count * 100 / total` rounded to
PERCENT_DECIMALS places; a zero total never reaches the division.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import pandas as pd

from listings_report.config import (
    ENTIRE_HOME,
    HISTOGRAM_MAX_BUCKET,
    PERCENT_DECIMALS,
    REPORTS,
    ROOM_TYPE_COLUMNS,
    SHORT_TERM_MAX_NIGHTS,
    TOP_HOSTS_LIMIT,
)
from listings_report.errors import EmptyInputError, MissingColumnsError

logger = logging.getLogger(__name__)

HOST_KEYS = ["host_id", "host_name"]


def _require_columns(df: pd.DataFrame, columns: List[str], report: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise MissingColumnsError(report, missing)


def require_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Return `df` unchanged, or raise EmptyInputError when it has no rows."""
    if df.empty:
        raise EmptyInputError("The listings table has no rows.")
    return df


def _numeric(series: pd.Series) -> pd.Series:
    return pd.to_numeric(series, errors="coerce").astype("float64")


def _percentage(count, total: int) -> Optional[float]:
    if total == 0:
        return None
    return round(count * 100 / total, PERCENT_DECIMALS)


def _percentage_series(counts: pd.Series, total: int) -> pd.Series:
    # callers return early on an empty table
    return (counts * 100 / total).round(PERCENT_DECIMALS)


def _sort_desc(df: pd.DataFrame, column: str) -> pd.DataFrame:
    # mergesort keeps first-appearance order among ties
    return df.sort_values(column, ascending=False, kind="mergesort", na_position="last").reset_index(drop=True)


# Report 1: Distinct neighbourhood groups

def distinct_neighbourhood_groups(df: pd.DataFrame) -> List[str]:
    _require_columns(df, ["neighbourhood_group"], "distinct_neighbourhood_groups")
    groups = df["neighbourhood_group"].dropna().astype(str).unique()
    return sorted(groups)


# Report 2: Average daily price per neighbourhood group

def average_price_by_group(df: pd.DataFrame) -> pd.DataFrame:
    _require_columns(df, ["neighbourhood_group", "price"], "average_price_by_group")
    columns = ["neighbourhood_group", "average_daily_price"]
    if df.empty:
        return pd.DataFrame(columns=columns)
    working = pd.DataFrame({"neighbourhood_group": df["neighbourhood_group"], "price": _numeric(df["price"])})
    out = (
        working.groupby("neighbourhood_group", dropna=False, sort=False)["price"]
        .mean()
        .round(2)
        .reset_index(name="average_daily_price")
    )
    return _sort_desc(out, "average_daily_price")[columns]


# Report 3: Entire homes/apartments per neighbourhood group, share of ALL listings

def entire_home_share_by_group(df: pd.DataFrame) -> pd.DataFrame:
    _require_columns(df, ["neighbourhood_group", "room_type"], "entire_home_share_by_group")
    columns = ["neighbourhood_group", "number_of_homes_apartments", "percentage"]
    total = len(df)
    if total == 0:
        return pd.DataFrame(columns=columns)
    homes = df.loc[df["room_type"] == ENTIRE_HOME, ["neighbourhood_group"]]
    out = (
        homes.groupby("neighbourhood_group", dropna=False, sort=False)
        .size()
        .reset_index(name="number_of_homes_apartments")
    )
    out["percentage"] = _percentage_series(out["number_of_homes_apartments"], total)
    return _sort_desc(out, "number_of_homes_apartments")[columns]


# Report 4: Listings and share per room type

def room_type_breakdown(df: pd.DataFrame) -> pd.DataFrame:
    _require_columns(df, ["room_type"], "room_type_breakdown")
    columns = ["room_type", "number_of_listings", "percentage"]
    total = len(df)
    if total == 0:
        return pd.DataFrame(columns=columns)
    out = df.groupby("room_type", dropna=False, sort=False).size().reset_index(name="number_of_listings")
    out["percentage"] = _percentage_series(out["number_of_listings"], total)
    return _sort_desc(out, "number_of_listings")[columns]


# Report 7: Listings per host (unlimited)

def listings_per_host(df: pd.DataFrame) -> pd.DataFrame:
    _require_columns(df, HOST_KEYS, "listings_per_host")
    columns = HOST_KEYS + ["number_of_listings"]
    if df.empty:
        return pd.DataFrame(columns=columns)
    out = df.groupby(HOST_KEYS, dropna=False, sort=False).size().reset_index(name="number_of_listings")
    return _sort_desc(out, "number_of_listings")[columns]


# Report 5: Top hosts by number of listings

def top_hosts(df: pd.DataFrame, limit: int = TOP_HOSTS_LIMIT) -> pd.DataFrame:
    """The first `limit` rows of `listings_per_host`, so ties resolve the same way in both."""
    return listings_per_host(df).head(limit).reset_index(drop=True)


# Report 6: Average, minimum and maximum daily price per room type

def price_stats_by_room_type(df: pd.DataFrame) -> pd.DataFrame:
    _require_columns(df, ["room_type", "price"], "price_stats_by_room_type")
    columns = ["room_type", "average_daily_price", "minimum_daily_price", "maximum_daily_price"]
    if df.empty:
        return pd.DataFrame(columns=columns)
    working = pd.DataFrame({"room_type": df["room_type"], "price": _numeric(df["price"])})
    out = (
        working.groupby("room_type", dropna=False, sort=False)["price"]
        .agg(average_daily_price="mean", minimum_daily_price="min", maximum_daily_price="max")
        .reset_index()
    )
    return _sort_desc(out, "average_daily_price")[columns]


# Report 8: Top hosts broken down by room type

def top_hosts_by_room_type(df: pd.DataFrame, limit: int = TOP_HOSTS_LIMIT) -> pd.DataFrame:
    """Per host: total listings plus one count per canonical room type.

    Rows whose room type is outside the canonical set count towards the total
    but land in none of the breakdown columns.
    """
    _require_columns(df, HOST_KEYS + ["room_type"], "top_hosts_by_room_type")
    columns = HOST_KEYS + ["number_of_listings"] + list(ROOM_TYPE_COLUMNS.values())
    if df.empty:
        return pd.DataFrame(columns=columns)
    flags = {
        column: (df["room_type"] == room_type).astype("int64")
        for room_type, column in ROOM_TYPE_COLUMNS.items()
    }
    working = pd.DataFrame(
        {
            "host_id": df["host_id"],
            "host_name": df["host_name"],
            "number_of_listings": 1,
            **flags,
        }
    )
    out = working.groupby(HOST_KEYS, dropna=False, sort=False).sum().reset_index()
    return _sort_desc(out, "number_of_listings")[columns].head(limit).reset_index(drop=True)


# Report 9: Listings by host portfolio size (1..9, 10+)

def host_listing_histogram(df: pd.DataFrame) -> pd.DataFrame:
    """Bucket hosts by how many listings they have.

    The value of each bucket is the number of listing rows owned by hosts in
    that bucket, not the number of hosts: a host with 3 listings adds 3 to
    bucket "3". Rows without a host_id belong to no host and are left out.
    """
    _require_columns(df, ["host_id"], "host_listing_histogram")
    per_host = df.groupby("host_id", sort=False).size()
    bucket = per_host.clip(upper=HISTOGRAM_MAX_BUCKET)
    rows_per_bucket = per_host.groupby(bucket).sum()

    sizes = range(1, HISTOGRAM_MAX_BUCKET + 1)
    labels = [str(n) for n in sizes[:-1]] + [f"{HISTOGRAM_MAX_BUCKET}+"]
    counts = [int(rows_per_bucket.get(n, 0)) for n in sizes]
    return pd.DataFrame({"bucket": labels, "number_of_listings": counts})


# Report 11: Short-term vs long-term rentals

def rental_term_split(df: pd.DataFrame) -> pd.DataFrame:
    """Short-term (minimum_nights below 30) then long-term rows.

    Listings without a usable minimum_nights fall in neither row. On an empty
    table both counts are 0 and the percentages are None.
    """
    _require_columns(df, ["minimum_nights"], "rental_term_split")
    nights = _numeric(df["minimum_nights"])
    short_term = int((nights < SHORT_TERM_MAX_NIGHTS).sum())
    long_term = int((nights >= SHORT_TERM_MAX_NIGHTS).sum())
    total = len(df)
    return pd.DataFrame(
        {
            "term": ["short_term", "long_term"],
            "number_of_listings": [short_term, long_term],
            "percentage": [_percentage(short_term, total), _percentage(long_term, total)],
        }
    )


REPORT_FUNCTIONS: Dict[str, Callable[[pd.DataFrame], object]] = {
    "neighbourhood_groups": distinct_neighbourhood_groups,
    "average_price_by_group": average_price_by_group,
    "entire_home_share_by_group": entire_home_share_by_group,
    "room_type_breakdown": room_type_breakdown,
    "top_hosts": top_hosts,
    "price_stats_by_room_type": price_stats_by_room_type,
    "listings_per_host": listings_per_host,
    "top_hosts_by_room_type": top_hosts_by_room_type,
    "host_listing_histogram": host_listing_histogram,
    "rental_term_split": rental_term_split,
}


def run_all_reports(df: pd.DataFrame) -> Dict[str, object]:
    """Run the whole battery in REPORTS order."""
    results: Dict[str, object] = {}
    for report in REPORTS:
        logger.debug("Running report %s on %d rows", report.key, len(df))
        results[report.key] = REPORT_FUNCTIONS[report.key](df)
    return results
