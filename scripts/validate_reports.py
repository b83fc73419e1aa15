"""Quick validation script for the report battery.

Run with `python scripts/validate_reports.py [path/to/listings.csv]` to check
that every report runs and that the totals agree with each other. Without a
path a small built-in sample is used.
"""

from __future__ import annotations

import logging
import sys

import pandas as pd

from listings_report.components.reports import require_rows, run_all_reports
from listings_report.data.loader import load_listings

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def _sample() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "id": [1, 2, 3, 4, 5],
            "host_id": [10, 10, 11, 12, 12],
            "host_name": ["Anna", "Anna", "Ben", "Cem", "Cem"],
            "neighbourhood_group": ["Mitte", "Mitte", "Pankow", "Neukölln", "Mitte"],
            "room_type": ["Entire home/apt", "Private room", "Entire home/apt", "Shared room", "Hotel room"],
            "price": [100.0, 50.0, 200.0, 30.0, 120.0],
            "minimum_nights": [2, 40, 5, 1, 90],
        }
    )


def main() -> None:
    df = load_listings(sys.argv[1]) if len(sys.argv) > 1 else _sample()
    total = len(require_rows(df))
    results = run_all_reports(df)

    room_total = int(results["room_type_breakdown"]["number_of_listings"].sum())
    if room_total != total:
        raise SystemExit(f"Room type counts sum to {room_total}, expected {total}")

    host_rows = int(df["host_id"].notna().sum())
    histogram_total = int(results["host_listing_histogram"]["number_of_listings"].sum())
    if histogram_total != host_rows:
        raise SystemExit(f"Histogram buckets sum to {histogram_total}, expected {host_rows}")

    top = results["top_hosts"]
    assert len(top) <= 10, "Top hosts must not exceed 10 rows"
    assert top.equals(results["listings_per_host"].head(len(top))), "Top hosts must lead the full host list"

    stats = results["price_stats_by_room_type"].dropna()
    assert (stats["minimum_daily_price"] <= stats["average_daily_price"] + 1e-9).all()
    assert (stats["average_daily_price"] <= stats["maximum_daily_price"] + 1e-9).all()

    for key, result in results.items():
        logging.info("%s:\n%s", key, result)
    print("Report validation passed. Rows:", total)


if __name__ == "__main__":
    main()
