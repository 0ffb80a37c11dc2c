from __future__ import annotations

import pandas as pd
import streamlit as st

from retailer_dashboard.config import CATEGORY_LABELS
from retailer_dashboard.data.models import row_to_retailer
from retailer_dashboard.ui import state
from retailer_dashboard.ui.components.cards import render_retailer_card
from retailer_dashboard.ui.components.formatting import format_date, status_text
from retailer_dashboard.ui.pages.context import PageContext


def _active_filter_summary(context: PageContext, total_rows: int) -> None:
    filters = context.filters
    badges = [CATEGORY_LABELS[filters.category]]
    if filters.sub_filters:
        badges.append("Status: " + ", ".join(status_text(s) for s in filters.sub_filters))
    start, end = filters.date_range
    if start is not None or end is not None:
        badges.append(f"Applied: {format_date(start)} – {format_date(end)}")
    if filters.search_query.strip():
        badges.append(f'Search: "{filters.search_query.strip()}"')

    st.markdown("**Active Filters:** " + " | ".join(badges))
    st.caption(f"Showing {total_rows} of {len(context.retailers_df)} retailers.")


def render(df: pd.DataFrame, context: PageContext) -> None:
    _active_filter_summary(context, len(df))
    if df.empty:
        st.info("No retailers match the current filters.")
        return

    # Row index is unique per loaded record, names need not be
    for index, row in df.iterrows():
        render_retailer_card(
            row_to_retailer(row),
            category=context.filters.category,
            acknowledgements=context.acknowledgements,
            on_recommend=state.recommend,
            key=f"rd_recommend_{index}",
        )
