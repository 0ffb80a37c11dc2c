"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

PAGE_TITLE = "Retailer Onboarding Overview"
BRAND_PRIMARY = ("PROG", "#4F46E5")
BRAND_SECONDARY = ("FIN", "#10B981")
USER_INITIALS = "RP"

SEARCH_PLACEHOLDER = "Search by Retailer Name"
SNACKBAR_MESSAGE = "Our sales representative will reach out to you for a discussion"

DEFAULT_DATE_START = "2024-03-01"
DEFAULT_DATE_END = "2024-03-31"

# Settings read from the environment or st.secrets
ENV_KEYS = ("DEFAULT_DATE_START", "DEFAULT_DATE_END", "RETAILERS_CSV", "LOG_LEVEL")


@dataclass(frozen=True)
class NavItem:
    key: str
    label: str
    icon: str


# Ordered bottom navigation; only onboarding has a page in this app
NAV_ITEMS: List[NavItem] = [
    NavItem("credit", "Credit", ":material/credit_card:"),
    NavItem("onboarding", "Onboarding", ":material/group:"),
    NavItem("program", "Program", ":material/dashboard:"),
    NavItem("account", "My Account", ":material/account_circle:"),
]
ACTIVE_NAV = "onboarding"

CATEGORY_LABELS: Dict[str, str] = {
    "recommended": "Recommended by You",
    "notRecommended": "Not Recommended Yet",
}

STATUS_LABELS: Dict[str, str] = {
    "onboardingInProgress": "Onboarding in Progress",
    "onboarded": "Onboarded",
    "notInterested": "Not Interested",
    "rejected": "Rejected by Progcap",
    "eligible": "Eligible",
    "discussionRequired": "Discussion Required",
    "notEligible": "Not Eligible",
}

# (text, background) per status chip
STATUS_COLORS: Dict[str, Tuple[str, str]] = {
    "onboardingInProgress": ("#CA8A04", "#FEFCE8"),
    "onboarded": ("#16A34A", "#F0FDF4"),
    "notInterested": ("#DC2626", "#FEF2F2"),
    "rejected": ("#4B5563", "#F9FAFB"),
    "eligible": ("#2563EB", "#EFF6FF"),
    "discussionRequired": ("#9333EA", "#FAF5FF"),
    "notEligible": ("#DC2626", "#FEF2F2"),
}
DEFAULT_STATUS_COLOR: Tuple[str, str] = ("#4B5563", "#F9FAFB")


@dataclass(frozen=True)
class Settings:
    default_date_range: Tuple[dt.date, dt.date]
    retailers_csv: Optional[str]
    log_level: str


def _parse_date_setting(name: str, default: str) -> dt.date:
    raw = os.getenv(name) or default
    try:
        return dt.date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an ISO date (YYYY-MM-DD), got {raw!r}") from exc


def log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper()


def get_settings() -> Settings:
    """Read settings from the environment (populated by bootstrap_env)."""
    start = _parse_date_setting("DEFAULT_DATE_START", DEFAULT_DATE_START)
    end = _parse_date_setting("DEFAULT_DATE_END", DEFAULT_DATE_END)
    csv_path = (os.getenv("RETAILERS_CSV") or "").strip() or None
    return Settings(
        default_date_range=(start, end),
        retailers_csv=csv_path,
        log_level=log_level(),
    )
