import pandas as pd

from listings_report.components.quality_checks import (
    build_quality_overview,
    duplicate_count,
    missing_values_summary,
    unknown_room_types,
)


def test_duplicate_count_uses_listing_id(scenario_df):
    assert duplicate_count(scenario_df) == 0
    doubled = pd.concat([scenario_df, scenario_df.iloc[[0]]], ignore_index=True)
    assert duplicate_count(doubled) == 1


def test_unknown_room_types(berlin_df):
    result = unknown_room_types(berlin_df)
    assert result.to_dict("records") == [{"room_type": "Camper", "rows": 1}]


def test_missing_values_summary_counts_blanks():
    df = pd.DataFrame({"host_name": ["Anna", " ", None], "price": [1.0, 2.0, 3.0]})
    summary = missing_values_summary(df).set_index("column")
    assert summary.loc["host_name", "missing_count"] == 2
    assert summary.loc["price", "missing_count"] == 0
    assert round(summary.loc["host_name", "missing_pct"], 2) == 66.67


def test_quality_overview(berlin_df, empty_df):
    overview = build_quality_overview(berlin_df)
    assert overview == {
        "row_count": 29,
        "duplicate_count": 0,
        "distinct_hosts": 14,
        "unknown_room_type_rows": 1,
    }
    assert build_quality_overview(empty_df)["row_count"] == 0


def test_missing_values_summary_counts_blanks_in_string_columns():
    df = pd.DataFrame({"host_name": pd.array(["Anna", "", None], dtype="string")})
    summary = missing_values_summary(df).set_index("column")
    assert summary.loc["host_name", "missing_count"] == 2
