"""
Session-state helpers for the onboarding view.

All keys are prefixed with `rd_` and live for a single browser session; a
reload starts again from the configured defaults.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Optional, Tuple

import streamlit as st

from retailer_dashboard.data.filters import RetailerFilters, toggle_sub_filter
from retailer_dashboard.data.models import CATEGORIES
from retailer_dashboard.logs import get_logger

logger = get_logger(__name__)

KEY_CATEGORY = "rd_category"
KEY_SUB_FILTERS = "rd_sub_filters"
KEY_SEARCH = "rd_search"
KEY_DATE_RANGE = "rd_date_range"
KEY_RECOMMENDATIONS = "rd_recommendations"
KEY_SNACKBAR = "rd_show_snackbar"


def init_state(defaults: RetailerFilters) -> None:
    st.session_state.setdefault(KEY_CATEGORY, defaults.category)
    st.session_state.setdefault(KEY_SUB_FILTERS, list(defaults.sub_filters))
    st.session_state.setdefault(KEY_SEARCH, defaults.search_query)
    st.session_state.setdefault(KEY_DATE_RANGE, tuple(defaults.date_range))
    st.session_state.setdefault(KEY_RECOMMENDATIONS, {})
    st.session_state.setdefault(KEY_SNACKBAR, False)


def current_filters() -> RetailerFilters:
    return RetailerFilters(
        category=st.session_state[KEY_CATEGORY],
        sub_filters=list(st.session_state[KEY_SUB_FILTERS]),
        search_query=st.session_state.get(KEY_SEARCH) or "",
        date_range=st.session_state[KEY_DATE_RANGE],
    )


def select_category(category: str) -> None:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown filter category: {category!r}")
    # Sub-filters belong to one category, so switching starts unfiltered
    st.session_state[KEY_CATEGORY] = category
    st.session_state[KEY_SUB_FILTERS] = []


def toggle_filter(status: str) -> None:
    st.session_state[KEY_SUB_FILTERS] = toggle_sub_filter(st.session_state[KEY_SUB_FILTERS], status)


def clear_filters() -> None:
    st.session_state[KEY_SUB_FILTERS] = []


def set_date_range(start: Optional[dt.date], end: Optional[dt.date]) -> Tuple[Optional[dt.date], Optional[dt.date]]:
    """Store the date range, swapping a reversed pair. Returns the stored range."""
    if start is not None and end is not None and start > end:
        start, end = end, start
    st.session_state[KEY_DATE_RANGE] = (start, end)
    return start, end


def recommend(name: str, on_date: Optional[dt.date] = None) -> None:
    """Acknowledge a recommendation for `name` and raise the snackbar."""
    on_date = on_date or dt.date.today()
    st.session_state[KEY_RECOMMENDATIONS] = {**st.session_state[KEY_RECOMMENDATIONS], name: on_date}
    st.session_state[KEY_SNACKBAR] = True
    logger.info("retailer_recommended", extra={"extra": {"retailer": name, "on": on_date.isoformat()}})


def acknowledgements() -> Dict[str, dt.date]:
    return dict(st.session_state.get(KEY_RECOMMENDATIONS, {}))


def pop_snackbar() -> bool:
    """Return True once per raised snackbar."""
    show = bool(st.session_state.get(KEY_SNACKBAR))
    st.session_state[KEY_SNACKBAR] = False
    return show
