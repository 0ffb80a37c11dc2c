"""
Layout helpers for the Streamlit application (header, filter controls, bottom navigation).
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Optional, Tuple

import streamlit as st

from retailer_dashboard.config import (
    ACTIVE_NAV,
    BRAND_PRIMARY,
    BRAND_SECONDARY,
    CATEGORY_LABELS,
    NAV_ITEMS,
    PAGE_TITLE,
    SEARCH_PLACEHOLDER,
    USER_INITIALS,
)
from retailer_dashboard.data.filters import sub_filter_options
from retailer_dashboard.data.models import CATEGORIES
from retailer_dashboard.ui import state
from retailer_dashboard.ui.components.formatting import format_date, status_text


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="centered",
        page_icon=":busts_in_silhouette:",
    )
    _inject_chip_styles()


def render_header() -> None:
    (primary, primary_color), (secondary, secondary_color) = BRAND_PRIMARY, BRAND_SECONDARY
    col_brand, col_user = st.columns([4, 1])
    with col_brand:
        st.markdown(
            f'<span class="rd-brand" style="color:{primary_color};">{primary}</span>'
            f'<span class="rd-brand" style="color:{secondary_color};margin-left:0.25rem;">{secondary}</span>',
            unsafe_allow_html=True,
        )
    with col_user:
        st.markdown(
            f':material/person: <span class="rd-initials">{USER_INITIALS}</span>',
            unsafe_allow_html=True,
        )
    st.title(PAGE_TITLE)


def search_input() -> str:
    value = st.text_input(
        SEARCH_PLACEHOLDER,
        key=state.KEY_SEARCH,
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
    )
    return value or ""


def date_range_picker() -> Tuple[Optional[dt.date], Optional[dt.date]]:
    """Start/End date inputs behind an expander; the range applies on submit."""
    start, end = st.session_state[state.KEY_DATE_RANGE]
    label = f":material/calendar_today: {format_date(start)} - {format_date(end)}"
    # Inputs are seeded from the applied range and owned by session state afterwards
    st.session_state.setdefault("rd_date_start", start)
    st.session_state.setdefault("rd_date_end", end)
    with st.expander(label, expanded=False):
        with st.form("rd_date_form", border=False):
            col_start, col_end = st.columns(2)
            with col_start:
                st.date_input("Start Date", key="rd_date_start", format="DD/MM/YYYY")
            with col_end:
                st.date_input("End Date", key="rd_date_end", format="DD/MM/YYYY")
            st.form_submit_button("Apply", type="primary", on_click=_apply_date_range)
    if st.session_state.pop("rd_date_swapped", False):
        st.warning("Start date must be before or equal to End date. Adjusting range.")
    return start, end


def _apply_date_range() -> None:
    requested = (st.session_state.get("rd_date_start"), st.session_state.get("rd_date_end"))
    stored = state.set_date_range(*requested)
    st.session_state["rd_date_swapped"] = stored != requested
    # Show the adjusted range in the inputs on the next run
    st.session_state["rd_date_start"], st.session_state["rd_date_end"] = stored


def category_chips() -> str:
    active = st.session_state[state.KEY_CATEGORY]
    cols = st.columns(len(CATEGORIES))
    for col, category in zip(cols, CATEGORIES):
        with col:
            st.button(
                CATEGORY_LABELS[category],
                key=f"rd_category_{category}",
                type="primary" if category == active else "secondary",
                on_click=state.select_category,
                args=(category,),
            )
    return st.session_state[state.KEY_CATEGORY]


def sub_filter_panel(counts: Dict[str, int]) -> None:
    """Collapsible "Filters" section with one toggle chip per status of the active category."""
    category = st.session_state[state.KEY_CATEGORY]
    selected = st.session_state[state.KEY_SUB_FILTERS]
    with st.expander("Filters", expanded=bool(selected)):
        options = sub_filter_options(category)
        cols = st.columns(len(options))
        for col, status in zip(cols, options):
            with col:
                st.button(
                    f"{status_text(status)} ({counts.get(status, 0)})",
                    key=f"rd_filter_{status}",
                    type="primary" if status in selected else "secondary",
                    on_click=state.toggle_filter,
                    args=(status,),
                )
        if selected:
            st.button("Clear Filters", key="rd_clear_filters", on_click=state.clear_filters)


def render_bottom_nav() -> None:
    st.divider()
    cols = st.columns(len(NAV_ITEMS))
    for col, item in zip(cols, NAV_ITEMS):
        with col:
            label = item.label
            if item.key == ACTIVE_NAV:
                st.markdown(f"{item.icon} **:violet[{label}]**")
            else:
                st.markdown(f"{item.icon} :gray[{label}]")


def _inject_chip_styles() -> None:
    """Pill styling for status chips, the "New" badge, and the brand header."""
    st.markdown(
        """
        <style>
        .rd-chip {
            display: inline-block;
            padding: 0.25rem 0.75rem;
            border-radius: 9999px;
            font-size: 0.875rem;
        }
        .rd-badge {
            padding: 0.25rem 0.5rem;
            background-color: #EFF6FF;
            color: #2563EB;
            font-size: 0.75rem;
            font-weight: 500;
            border-radius: 0.25rem;
        }
        .rd-brand { font-weight: 700; font-size: 1.25rem; }
        .rd-initials {
            background-color: #E5E7EB;
            padding: 0.25rem 0.5rem;
            border-radius: 0.25rem;
            font-size: 0.875rem;
            font-weight: 500;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
