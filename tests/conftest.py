import pandas as pd
import pytest

from listings_report.config import LISTING_COLUMNS, ROOM_TYPES


@pytest.fixture
def scenario_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "id": [1, 2, 3],
            "host_id": [10, 10, 11],
            "host_name": ["Anna", "Anna", "Ben"],
            "neighbourhood_group": ["Mitte", "Mitte", "Pankow"],
            "room_type": ["Entire home/apt", "Private room", "Entire home/apt"],
            "price": [100.0, 50.0, 200.0],
            "minimum_nights": [2, 40, 5],
        }
    )


@pytest.fixture
def berlin_df() -> pd.DataFrame:
    """29 listings, 14 hosts: one with 12 listings, one with 4, one with 2, eleven with 1.

    One row carries a room type outside the canonical set.
    """
    plan = [(100, "Ana", 12), (101, "Bo", 4)] + [(102 + i, f"Solo {i}", 1) for i in range(11)] + [(113, "Dee", 2)]
    groups = ["Mitte", "Pankow", "Neukölln", "Friedrichshain-Kreuzberg"]
    rows = []
    listing_id = 1
    for host_id, host_name, count in plan:
        for _ in range(count):
            rows.append(
                {
                    "id": listing_id,
                    "host_id": host_id,
                    "host_name": host_name,
                    "neighbourhood_group": groups[listing_id % len(groups)],
                    "room_type": ROOM_TYPES[(listing_id // 2) % len(ROOM_TYPES)],
                    "price": float(40 + (listing_id * 17) % 160),
                    "minimum_nights": [1, 3, 30, 90, 2][listing_id % 5],
                }
            )
            listing_id += 1
    rows[5]["room_type"] = "Camper"
    return pd.DataFrame(rows, columns=LISTING_COLUMNS)


@pytest.fixture
def empty_df() -> pd.DataFrame:
    return pd.DataFrame(columns=LISTING_COLUMNS)
