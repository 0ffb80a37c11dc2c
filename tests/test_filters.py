import datetime as dt

import pytest

from retailer_dashboard.data.filters import (
    DEFAULT_FILTERS,
    RetailerFilters,
    apply_filters,
    serialize_filters,
    status_counts,
    sub_filter_options,
    toggle_sub_filter,
)

MARCH = (dt.date(2024, 3, 1), dt.date(2024, 3, 31))


def _names(df):
    return df["name"].tolist()


def test_default_filters_show_recommended_retailers_in_source_order(retailers_df) -> None:
    result = apply_filters(retailers_df, DEFAULT_FILTERS)
    assert _names(result) == [
        "Abhilash Telecom",
        "Ajanta Electronic",
        "Sharma Electronics",
        "Super Electronics",
    ]


def test_not_recommended_category_lists_only_not_recommended_tags(retailers_df) -> None:
    filters = RetailerFilters(category="notRecommended", date_range=MARCH)
    assert _names(apply_filters(retailers_df, filters)) == ["Krishna Enterprises", "Metro Mobiles"]


def test_sub_filter_narrows_to_matching_status(retailers_df) -> None:
    filters = RetailerFilters(category="recommended", sub_filters=["onboarded"], date_range=MARCH)
    result = apply_filters(retailers_df, filters)
    assert _names(result) == ["Ajanta Electronic"]
    assert set(result["recommended_status"]) == {"onboarded"}


def test_multiple_sub_filters_are_ored(retailers_df) -> None:
    filters = RetailerFilters(
        category="recommended",
        sub_filters=["rejected", "notInterested"],
        date_range=MARCH,
    )
    assert _names(apply_filters(retailers_df, filters)) == ["Sharma Electronics", "Super Electronics"]


def test_sub_filter_from_other_category_matches_nothing(retailers_df) -> None:
    filters = RetailerFilters(category="recommended", sub_filters=["eligible"], date_range=MARCH)
    assert apply_filters(retailers_df, filters).empty


def test_search_is_case_insensitive_substring(retailers_df) -> None:
    filters = RetailerFilters(category="recommended", search_query="  ELECTRON ", date_range=MARCH)
    assert _names(apply_filters(retailers_df, filters)) == [
        "Ajanta Electronic",
        "Sharma Electronics",
        "Super Electronics",
    ]


def test_search_treats_regex_characters_literally(retailers_df) -> None:
    filters = RetailerFilters(category="recommended", search_query="(", date_range=MARCH)
    assert apply_filters(retailers_df, filters).empty


def test_date_range_is_inclusive_on_both_ends(retailers_df) -> None:
    filters = RetailerFilters(
        category="recommended",
        date_range=(dt.date(2024, 3, 10), dt.date(2024, 3, 15)),
    )
    assert _names(apply_filters(retailers_df, filters)) == [
        "Abhilash Telecom",
        "Ajanta Electronic",
        "Super Electronics",
    ]


def test_open_ended_date_range(retailers_df) -> None:
    filters = RetailerFilters(category="notRecommended", date_range=(dt.date(2024, 3, 21), None))
    assert _names(apply_filters(retailers_df, filters)) == ["Metro Mobiles"]


def test_range_outside_dataset_is_empty(retailers_df) -> None:
    filters = RetailerFilters(
        category="recommended",
        date_range=(dt.date(2024, 4, 1), dt.date(2024, 4, 30)),
    )
    assert apply_filters(retailers_df, filters).empty


def test_unknown_category_is_rejected(retailers_df) -> None:
    with pytest.raises(ValueError):
        apply_filters(retailers_df, RetailerFilters(category="everyone"))


def test_applied_filters_recorded_on_result(retailers_df) -> None:
    result = apply_filters(retailers_df, DEFAULT_FILTERS)
    assert result.attrs["applied_filters"] == serialize_filters(DEFAULT_FILTERS)
    assert result.attrs["applied_filters"]["date_range"] == ("2024-03-01", "2024-03-31")


def test_apply_filters_leaves_source_untouched(retailers_df) -> None:
    before = len(retailers_df)
    apply_filters(retailers_df, RetailerFilters(category="recommended", sub_filters=["onboarded"]))
    assert len(retailers_df) == before


def test_toggle_sub_filter_adds_then_removes() -> None:
    selected = toggle_sub_filter([], "onboarded")
    selected = toggle_sub_filter(selected, "rejected")
    assert selected == ["onboarded", "rejected"]
    assert toggle_sub_filter(selected, "onboarded") == ["rejected"]


def test_toggle_sub_filter_returns_new_list() -> None:
    original = ["onboarded"]
    toggle_sub_filter(original, "rejected")
    assert original == ["onboarded"]


def test_sub_filter_options_per_category() -> None:
    assert sub_filter_options("recommended") == (
        "onboardingInProgress",
        "onboarded",
        "notInterested",
        "rejected",
    )
    assert sub_filter_options("notRecommended") == ("eligible", "discussionRequired", "notEligible")


def test_status_counts_include_zero_for_unused_statuses(retailers_df) -> None:
    assert status_counts(retailers_df, "notRecommended") == {
        "eligible": 1,
        "discussionRequired": 1,
        "notEligible": 0,
    }
    assert sum(status_counts(retailers_df, "recommended").values()) == 4
