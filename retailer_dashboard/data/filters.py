"""
Filter utilities that apply the dashboard filters to the retailer dataset.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from retailer_dashboard.config import DEFAULT_DATE_END, DEFAULT_DATE_START
from retailer_dashboard.data.models import (
    CATEGORY_STATUS_COLUMN,
    NOT_RECOMMENDED_STATUSES,
    RECOMMENDED_STATUSES,
)


@dataclass
class RetailerFilters:
    category: str = "recommended"
    sub_filters: List[str] = field(default_factory=list)
    search_query: str = ""
    date_range: Tuple[Optional[dt.date], Optional[dt.date]] = (None, None)


DEFAULT_FILTERS = RetailerFilters(
    category="recommended",
    sub_filters=[],
    search_query="",
    date_range=(
        dt.date.fromisoformat(DEFAULT_DATE_START),
        dt.date.fromisoformat(DEFAULT_DATE_END),
    ),
)


def sub_filter_options(category: str) -> Tuple[str, ...]:
    if category == "recommended":
        return RECOMMENDED_STATUSES
    if category == "notRecommended":
        return NOT_RECOMMENDED_STATUSES
    raise ValueError(f"Unknown filter category: {category!r}")


def toggle_sub_filter(sub_filters: Sequence[str], status: str) -> List[str]:
    """Remove `status` if selected, otherwise append it. Returns a new list."""
    if status in sub_filters:
        return [s for s in sub_filters if s != status]
    return [*sub_filters, status]


def apply_filters(df: pd.DataFrame, filters: RetailerFilters) -> pd.DataFrame:
    """
    Narrow the retailer dataset to the rows visible for the current filters.

    A row is kept when its application date is within the (inclusive) date
    range, its name contains the search text (case-insensitive), and it carries
    a status for the active category that is among the selected sub-filters
    (any status when no sub-filter is selected). Source order is preserved.
    """
    status_col = CATEGORY_STATUS_COLUMN.get(filters.category)
    if status_col is None:
        raise ValueError(f"Unknown filter category: {filters.category!r}")
    if df.empty:
        return df

    # Both ends inclusive; an unset end leaves that side open
    start, end = filters.date_range
    dates = pd.to_datetime(df["date"], errors="coerce").dt.normalize()
    in_range = pd.Series(True, index=df.index)
    if start is not None:
        in_range &= dates >= pd.Timestamp(start)
    if end is not None:
        in_range &= dates <= pd.Timestamp(end)
    filtered = df[in_range]

    query = filters.search_query.strip().lower()
    if query:
        filtered = filtered[
            filtered["name"].astype(str).str.lower().str.contains(query, regex=False, na=False)
        ]

    statuses = filtered[status_col]
    mask = statuses.notna()
    if filters.sub_filters:
        mask &= statuses.isin(filters.sub_filters)
    filtered = filtered[mask].copy()

    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def status_counts(df: pd.DataFrame, category: str) -> Dict[str, int]:
    """Rows per selectable status of `category`, zero for statuses with no rows."""
    status_col = CATEGORY_STATUS_COLUMN[category]
    counts = df[status_col].value_counts() if status_col in df else pd.Series(dtype=int)
    return {status: int(counts.get(status, 0)) for status in sub_filter_options(category)}


def serialize_filters(filters: RetailerFilters) -> Dict[str, Any]:
    """
    Convert the RetailerFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "category": filters.category,
        "sub_filters": list(filters.sub_filters),
        "search_query": filters.search_query,
        "date_range": tuple(
            v.isoformat() if hasattr(v, "isoformat") else v for v in filters.date_range
        ),
    }
