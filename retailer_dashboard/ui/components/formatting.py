"""
Utility helpers for formatting dates, rupee amounts, and status chips.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional, Tuple

import pandas as pd

from retailer_dashboard.config import DEFAULT_STATUS_COLOR, STATUS_COLORS, STATUS_LABELS
from retailer_dashboard.data.models import CATEGORY_STATUS_COLUMN, Retailer

PLACEHOLDER = "–"
LAKH = 100_000


def format_date(value) -> str:
    """Render a date as dd/mm/yyyy."""
    if value is None:
        return PLACEHOLDER
    if isinstance(value, (dt.date, pd.Timestamp)) and not pd.isna(value):
        return value.strftime("%d/%m/%Y")
    try:
        parsed = pd.to_datetime(value)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if pd.isna(parsed):
        return PLACEHOLDER
    return parsed.strftime("%d/%m/%Y")


def format_amount(value: Optional[float], decimals: int = 2) -> str:
    """Render a rupee amount in lakhs, e.g. 2500000 -> '₹25.00 Lakhs'."""
    if value is None:
        return PLACEHOLDER
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if pd.isna(numeric):
        return PLACEHOLDER
    return f"₹{numeric / LAKH:.{decimals}f} Lakhs"


def status_text(status: Optional[str]) -> str:
    if not status:
        return ""
    return STATUS_LABELS.get(status, status)


def status_color(status: Optional[str]) -> Tuple[str, str]:
    return STATUS_COLORS.get(status or "", DEFAULT_STATUS_COLOR)


def active_status(retailer: Retailer, category: str) -> Optional[str]:
    return getattr(retailer, CATEGORY_STATUS_COLUMN[category])
