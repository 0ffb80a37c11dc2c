"""
Retailer record type and the status vocabularies used to partition it.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import asdict, dataclass, fields
from typing import Iterable, List, Literal, Optional, Tuple

import pandas as pd

FilterCategory = Literal["recommended", "notRecommended"]
RecommendedStatus = Literal["onboardingInProgress", "onboarded", "notInterested", "rejected"]
NotRecommendedStatus = Literal["eligible", "discussionRequired", "notEligible"]

CATEGORIES: Tuple[str, ...] = ("recommended", "notRecommended")
RECOMMENDED_STATUSES: Tuple[str, ...] = (
    "onboardingInProgress",
    "onboarded",
    "notInterested",
    "rejected",
)
NOT_RECOMMENDED_STATUSES: Tuple[str, ...] = (
    "eligible",
    "discussionRequired",
    "notEligible",
)

# Column holding the status tag that belongs to each category
CATEGORY_STATUS_COLUMN = {
    "recommended": "recommended_status",
    "notRecommended": "not_recommended_status",
}

DATE_COLUMNS = ["date", "tentative_date", "onboarded_date", "recommended_date"]
AMOUNT_COLUMNS = ["proposed_limit", "sanctioned_limit"]


@dataclass(frozen=True)
class Retailer:
    name: str
    date: dt.date
    proposed_limit: Optional[float] = None
    sanctioned_limit: Optional[float] = None
    tentative_date: Optional[dt.date] = None
    onboarded_date: Optional[dt.date] = None
    rejection_reason: Optional[str] = None
    recommended_date: Optional[dt.date] = None
    recommended_status: Optional[RecommendedStatus] = None
    not_recommended_status: Optional[NotRecommendedStatus] = None
    is_new: bool = False


RETAILER_COLUMNS: List[str] = [f.name for f in fields(Retailer)]


def retailers_to_frame(records: Iterable[Retailer]) -> pd.DataFrame:
    """Build the retailer DataFrame with parsed dates and numeric limits."""
    df = pd.DataFrame([asdict(r) for r in records], columns=RETAILER_COLUMNS)
    for col in DATE_COLUMNS:
        df[col] = pd.to_datetime(df[col], errors="coerce")
    for col in AMOUNT_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df["is_new"] = df["is_new"].fillna(False).astype(bool)
    return df


def _clean(value):
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        return value
    if isinstance(value, pd.Timestamp):
        return value.date()
    return value


def row_to_retailer(row: pd.Series) -> Retailer:
    """Convert one DataFrame row back into a Retailer, mapping NaN/NaT to None."""
    values = {col: _clean(row.get(col)) for col in RETAILER_COLUMNS}
    values["is_new"] = bool(values.get("is_new") or False)
    return Retailer(**values)
