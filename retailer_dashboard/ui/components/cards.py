"""
Retailer card rendering: status chip, status-specific detail lines, and the
Recommend action for retailers not yet recommended.
"""

from __future__ import annotations

import datetime as dt
import html
from typing import List, Mapping, Optional, Tuple

import streamlit as st

from retailer_dashboard.data.models import NOT_RECOMMENDED_STATUSES, Retailer
from retailer_dashboard.ui.components.formatting import (
    active_status,
    format_amount,
    format_date,
    status_color,
    status_text,
)

DISCUSSION_NOTE = "Might be eligible for other Progcap offerings"


def card_details(
    retailer: Retailer,
    acknowledgements: Mapping[str, dt.date],
) -> Tuple[List[str], bool]:
    """Return (detail lines, show Recommend button) for one retailer."""
    lines: List[str] = []
    status = retailer.recommended_status
    if status == "onboarded":
        lines.append(f"Sanctioned Limit: {format_amount(retailer.sanctioned_limit)}")
        lines.append(f"Onboarded on: {format_date(retailer.onboarded_date)}")
    elif status == "onboardingInProgress":
        lines.append(f"Proposed Limit: {format_amount(retailer.proposed_limit)}")
        lines.append(f"Tentative Date: {format_date(retailer.tentative_date)}")
    elif status == "notInterested":
        lines.append(f"Eligible for: {format_amount(retailer.proposed_limit)}")
    elif status == "rejected":
        lines.append(f"Rejected on: {format_date(retailer.onboarded_date)}")
        lines.append(f"Reason: {retailer.rejection_reason or '–'}")

    show_recommend = False
    if retailer.not_recommended_status in NOT_RECOMMENDED_STATUSES:
        if retailer.proposed_limit and retailer.not_recommended_status == "eligible":
            lines.append(f"Eligible Limit: {format_amount(retailer.proposed_limit)}")
        if retailer.not_recommended_status == "discussionRequired":
            lines.append(DISCUSSION_NOTE)
        acknowledged_on = acknowledgements.get(retailer.name)
        if acknowledged_on is not None:
            lines.append(f"Recommended on: {format_date(acknowledged_on)}")
        else:
            show_recommend = True
    return lines, show_recommend


def status_chip_html(status: Optional[str]) -> str:
    text_color, background = status_color(status)
    label = html.escape(status_text(status))
    return (
        f'<span class="rd-chip" style="color:{text_color};background-color:{background};">'
        f"{label}</span>"
    )


def render_retailer_card(
    retailer: Retailer,
    category: str,
    acknowledgements: Mapping[str, dt.date],
    on_recommend,
    key: str,
) -> None:
    """Render one bordered retailer card; `key` must be unique per rendered card."""
    details, show_recommend = card_details(retailer, acknowledgements)
    with st.container(border=True):
        title = f"**{html.escape(retailer.name)}**"
        if retailer.is_new:
            title += ' <span class="rd-badge">New</span>'
        st.markdown(title, unsafe_allow_html=True)
        st.markdown(status_chip_html(active_status(retailer, category)), unsafe_allow_html=True)
        for line in details:
            st.caption(line)
        if show_recommend:
            st.button(
                "Recommend",
                key=key,
                type="primary",
                on_click=on_recommend,
                args=(retailer.name,),
            )
