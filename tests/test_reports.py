import pandas as pd
import pytest

from listings_report.components.reports import (
    REPORT_FUNCTIONS,
    average_price_by_group,
    distinct_neighbourhood_groups,
    entire_home_share_by_group,
    host_listing_histogram,
    listings_per_host,
    price_stats_by_room_type,
    rental_term_split,
    require_rows,
    room_type_breakdown,
    run_all_reports,
    top_hosts,
    top_hosts_by_room_type,
)
from listings_report.config import REPORTS, ROOM_TYPE_COLUMNS
from listings_report.errors import EmptyInputError, ListingsReportError, MissingColumnsError

HISTOGRAM_LABELS = ["1", "2", "3", "4", "5", "6", "7", "8", "9", "10+"]


def _histogram(df):
    result = host_listing_histogram(df)
    return dict(zip(result["bucket"], result["number_of_listings"]))


# Scenario: three listings, two hosts, two neighbourhood groups

def test_distinct_neighbourhood_groups_sorted(scenario_df):
    assert distinct_neighbourhood_groups(scenario_df) == ["Mitte", "Pankow"]


def test_average_price_by_group_descending(scenario_df):
    result = average_price_by_group(scenario_df)
    assert list(result.columns) == ["neighbourhood_group", "average_daily_price"]
    assert result.values.tolist() == [["Pankow", 200.0], ["Mitte", 75.0]]


def test_average_price_rounds_to_two_decimals():
    df = pd.DataFrame({"neighbourhood_group": ["Mitte"] * 3, "price": [10.0, 10.0, 11.0]})
    assert average_price_by_group(df)["average_daily_price"].iloc[0] == 10.33


def test_entire_home_share_uses_all_listings_as_denominator(scenario_df):
    result = entire_home_share_by_group(scenario_df)
    assert result["neighbourhood_group"].tolist() == ["Mitte", "Pankow"]
    assert result["number_of_homes_apartments"].tolist() == [1, 1]
    assert result["percentage"].tolist() == pytest.approx([33.33, 33.33])


def test_room_type_breakdown(scenario_df):
    result = room_type_breakdown(scenario_df)
    assert result["room_type"].tolist() == ["Entire home/apt", "Private room"]
    assert result["number_of_listings"].tolist() == [2, 1]
    assert result["percentage"].tolist() == pytest.approx([66.67, 33.33])


def test_rental_term_split(scenario_df):
    result = rental_term_split(scenario_df)
    assert result["term"].tolist() == ["short_term", "long_term"]
    assert result["number_of_listings"].tolist() == [2, 1]
    assert result["percentage"].tolist() == pytest.approx([66.67, 33.33])


def test_thirty_nights_is_long_term():
    df = pd.DataFrame({"minimum_nights": [29, 30, 31]})
    assert rental_term_split(df)["number_of_listings"].tolist() == [1, 2]


def test_histogram_is_weighted_by_listing_rows(scenario_df):
    result = host_listing_histogram(scenario_df)
    assert result["bucket"].tolist() == HISTOGRAM_LABELS
    assert _histogram(scenario_df) == {label: 0 for label in HISTOGRAM_LABELS} | {"1": 1, "2": 2}


def test_listings_per_host(scenario_df):
    result = listings_per_host(scenario_df)
    assert result.to_dict("records") == [
        {"host_id": 10, "host_name": "Anna", "number_of_listings": 2},
        {"host_id": 11, "host_name": "Ben", "number_of_listings": 1},
    ]


def test_top_hosts_by_room_type_breakdown(scenario_df):
    result = top_hosts_by_room_type(scenario_df)
    assert list(result.columns) == ["host_id", "host_name", "number_of_listings", *ROOM_TYPE_COLUMNS.values()]
    assert result.iloc[0].tolist() == [10, "Anna", 2, 1, 1, 0, 0]
    assert result.iloc[1].tolist() == [11, "Ben", 1, 1, 0, 0, 0]


def test_price_stats_by_room_type(scenario_df):
    result = price_stats_by_room_type(scenario_df)
    assert result["room_type"].tolist() == ["Entire home/apt", "Private room"]
    entire = result.iloc[0]
    assert entire["average_daily_price"] == 150.0
    assert entire["minimum_daily_price"] == 100.0
    assert entire["maximum_daily_price"] == 200.0


# Properties over a larger table

def test_room_type_counts_sum_to_total(berlin_df):
    result = room_type_breakdown(berlin_df)
    assert result["number_of_listings"].sum() == len(berlin_df)
    assert "Camper" in result["room_type"].tolist()
    assert result["percentage"].sum() == pytest.approx(100, abs=0.05)


def test_histogram_buckets(berlin_df):
    buckets = _histogram(berlin_df)
    assert sum(buckets.values()) == len(berlin_df)
    assert buckets["1"] == 11
    assert buckets["2"] == 2
    assert buckets["4"] == 4
    assert buckets["10+"] == 12
    assert buckets["3"] == 0


def test_term_split_sums_to_total(berlin_df):
    result = rental_term_split(berlin_df)
    assert result["number_of_listings"].sum() == len(berlin_df)
    assert result["percentage"].sum() == pytest.approx(100, abs=0.02)


def test_top_hosts_limited_and_prefix_of_all_hosts(berlin_df):
    every_host = listings_per_host(berlin_df)
    top = top_hosts(berlin_df)
    assert len(every_host) == 14
    assert len(top) == 10
    pd.testing.assert_frame_equal(top, every_host.head(10))


def test_top_hosts_ties_keep_first_appearance(berlin_df):
    assert top_hosts(berlin_df)["host_id"].tolist() == [100, 101, 113, 102, 103, 104, 105, 106, 107, 108]


def test_top_hosts_by_room_type_matches_top_hosts(berlin_df):
    breakdown = top_hosts_by_room_type(berlin_df)
    top = top_hosts(berlin_df)
    assert len(breakdown) == 10
    assert breakdown["host_id"].tolist() == top["host_id"].tolist()
    assert breakdown["number_of_listings"].tolist() == top["number_of_listings"].tolist()


def test_unknown_room_type_counts_in_total_only(berlin_df):
    ana = top_hosts_by_room_type(berlin_df).iloc[0]
    assert ana["host_id"] == 100
    assert ana["number_of_listings"] == 12
    assert sum(ana[col] for col in ROOM_TYPE_COLUMNS.values()) == 11


def test_fewer_hosts_than_limit_returns_all(scenario_df):
    assert len(top_hosts(scenario_df)) == 2
    assert len(top_hosts_by_room_type(scenario_df)) == 2


def test_price_stats_ordering_holds(berlin_df):
    result = price_stats_by_room_type(berlin_df)
    assert (result["minimum_daily_price"] <= result["average_daily_price"]).all()
    assert (result["average_daily_price"] <= result["maximum_daily_price"]).all()
    averages = result["average_daily_price"].tolist()
    assert averages == sorted(averages, reverse=True)


def test_reports_are_idempotent_and_do_not_mutate_input(berlin_df):
    before = berlin_df.copy()
    first = run_all_reports(berlin_df)
    second = run_all_reports(berlin_df)
    pd.testing.assert_frame_equal(berlin_df, before)
    assert first.keys() == second.keys()
    for key, value in first.items():
        if isinstance(value, pd.DataFrame):
            pd.testing.assert_frame_equal(value, second[key])
        else:
            assert value == second[key]


def test_run_all_reports_follows_registry(berlin_df):
    assert set(REPORT_FUNCTIONS) == {report.key for report in REPORTS}
    assert list(run_all_reports(berlin_df)) == [report.key for report in REPORTS]


# Empty tables and malformed input

def test_empty_table_yields_empty_results(empty_df):
    assert distinct_neighbourhood_groups(empty_df) == []
    for report in (
        average_price_by_group,
        entire_home_share_by_group,
        room_type_breakdown,
        listings_per_host,
        top_hosts,
        price_stats_by_room_type,
        top_hosts_by_room_type,
    ):
        result = report(empty_df)
        assert result.empty
        assert len(result.columns) > 0


def test_empty_table_histogram_is_all_zero(empty_df):
    assert _histogram(empty_df) == {label: 0 for label in HISTOGRAM_LABELS}


def test_empty_table_term_split_has_no_percentage(empty_df):
    result = rental_term_split(empty_df)
    assert result["number_of_listings"].tolist() == [0, 0]
    assert result["percentage"].isna().all()


def test_require_rows(empty_df, scenario_df):
    assert require_rows(scenario_df) is scenario_df
    with pytest.raises(EmptyInputError):
        require_rows(empty_df)


def test_missing_column_raises_typed_error(scenario_df):
    with pytest.raises(MissingColumnsError) as excinfo:
        average_price_by_group(scenario_df.drop(columns=["price"]))
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, ListingsReportError)
    assert excinfo.value.missing == ("price",)
    assert "average_price_by_group" in str(excinfo.value)


def test_null_keys_and_bad_values_are_tolerated():
    df = pd.DataFrame(
        {
            "id": [1, 2, 3, 4],
            "host_id": [10, 10, None, 11],
            "host_name": ["Anna", "Anna", "Ghost", None],
            "neighbourhood_group": ["Mitte", None, "Mitte", "Pankow"],
            "room_type": ["Entire home/apt", "Private room", None, "Entire home/apt"],
            "price": [100, "n/a", 80, 60],
            "minimum_nights": [2, None, 45, 3],
        }
    )
    assert distinct_neighbourhood_groups(df) == ["Mitte", "Pankow"]

    averages = average_price_by_group(df)
    mitte = averages.loc[averages["neighbourhood_group"] == "Mitte", "average_daily_price"]
    assert mitte.tolist() == [90.0]
    assert averages["neighbourhood_group"].isna().sum() == 1

    assert room_type_breakdown(df)["number_of_listings"].sum() == 4
    assert sum(_histogram(df).values()) == 3
    assert rental_term_split(df)["number_of_listings"].tolist() == [2, 1]
    assert listings_per_host(df)["number_of_listings"].sum() == 4


def test_string_prices_are_coerced():
    df = pd.DataFrame({"room_type": ["Private room", "Private room"], "price": ["40", float("nan")]})
    row = price_stats_by_room_type(df).iloc[0]
    assert row["average_daily_price"] == 40.0
    assert row["minimum_daily_price"] == row["maximum_daily_price"] == 40.0
