import pandas as pd

from listings_report.data.filters import DEFAULT_FILTERS, ListingFilters, apply_filters, serialize_filters


def test_default_filters_keep_everything(berlin_df):
    filtered = apply_filters(berlin_df, DEFAULT_FILTERS)
    assert filtered is not berlin_df
    pd.testing.assert_frame_equal(filtered, berlin_df)


def test_filter_by_group_and_room_type(berlin_df):
    filters = ListingFilters(neighbourhood_groups=["Mitte"], room_types=["Private room", "Shared room"])
    filtered = apply_filters(berlin_df, filters)
    assert not filtered.empty
    assert set(filtered["neighbourhood_group"]) == {"Mitte"}
    assert set(filtered["room_type"]) <= {"Private room", "Shared room"}
    assert filtered.attrs["applied_filters"] == serialize_filters(filters)


def test_empty_selection_keeps_nothing(berlin_df):
    assert apply_filters(berlin_df, ListingFilters(room_types=[])).empty


def test_price_range_is_inclusive(scenario_df):
    filtered = apply_filters(scenario_df, ListingFilters(price_range=(50.0, 100.0)))
    assert filtered["id"].tolist() == [1, 2]
    open_ended = apply_filters(scenario_df, ListingFilters(price_range=(None, 60.0)))
    assert open_ended["id"].tolist() == [2]


def test_input_is_not_modified(scenario_df):
    before = scenario_df.copy()
    apply_filters(scenario_df, ListingFilters(neighbourhood_groups=["Pankow"]))
    pd.testing.assert_frame_equal(scenario_df, before)


def test_open_price_range_keeps_unpriced_listings(scenario_df):
    df = scenario_df.assign(price=[100.0, None, 200.0])
    assert len(apply_filters(df, ListingFilters(price_range=(None, None)))) == 3
    assert apply_filters(df, ListingFilters(price_range=(None, 150.0)))["id"].tolist() == [1]
