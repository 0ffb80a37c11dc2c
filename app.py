import retailer_dashboard.bootstrap_env  # must be first to set env/secrets
from dataclasses import replace

import streamlit as st

from retailer_dashboard.config import SNACKBAR_MESSAGE, get_settings
from retailer_dashboard.data.filters import (
    DEFAULT_FILTERS,
    RetailerFilters,
    apply_filters,
    serialize_filters,
    status_counts,
)
from retailer_dashboard.data.loader import load_retailers
from retailer_dashboard.logs import get_logger
from retailer_dashboard.ui import state
from retailer_dashboard.ui.layout import (
    category_chips,
    date_range_picker,
    render_bottom_nav,
    render_header,
    search_input,
    setup_page,
    sub_filter_panel,
)
from retailer_dashboard.ui.pages import onboarding
from retailer_dashboard.ui.pages.context import PageContext

logger = get_logger("retailer_dashboard.app")


def main() -> None:
    setup_page()
    render_header()

    try:
        settings = get_settings()
        df = load_retailers(settings.retailers_csv)
    except (FileNotFoundError, ValueError) as exc:
        logger.error(f"retailers_load_failed: {exc}")
        st.error(f"Could not load retailer data: {exc}")
        return

    state.init_state(
        RetailerFilters(
            category=DEFAULT_FILTERS.category,
            sub_filters=[],
            search_query="",
            date_range=settings.default_date_range,
        )
    )

    if df.empty:
        st.warning("No retailers available. Check the configured retailer data source.")
        return

    search_input()
    date_range_picker()
    category = category_chips()

    filters = state.current_filters()
    # Chip counts reflect search and dates, not the sub-filters themselves
    in_scope = apply_filters(df, replace(filters, sub_filters=[]))
    sub_filter_panel(status_counts(in_scope, category))

    filtered_df = apply_filters(df, filters)
    serialized = serialize_filters(filters)
    if st.session_state.get("rd_active_filters") != serialized:
        logger.info("filters_applied", extra={"extra": {**serialized, "result_count": len(filtered_df)}})
    st.session_state["rd_active_filters"] = serialized

    context = PageContext(
        retailers_df=df,
        filters=filters,
        acknowledgements=state.acknowledgements(),
    )
    onboarding.render(filtered_df, context)

    if state.pop_snackbar():
        st.toast(SNACKBAR_MESSAGE)

    render_bottom_nav()


if __name__ == "__main__":
    main()
