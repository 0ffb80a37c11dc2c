from __future__ import annotations

import datetime as dt
from typing import List

from retailer_dashboard.data.models import Retailer

RETAILERS: List[Retailer] = [
    Retailer(
        name="Abhilash Telecom",
        date=dt.date(2024, 3, 15),
        recommended_status="onboardingInProgress",
        is_new=True,
        proposed_limit=2_500_000,
        tentative_date=dt.date(2024, 4, 1),
    ),
    Retailer(
        name="Ajanta Electronic",
        date=dt.date(2024, 3, 10),
        recommended_status="onboarded",
        is_new=True,
        sanctioned_limit=1_500_000,
        onboarded_date=dt.date(2024, 3, 10),
    ),
    Retailer(
        name="Krishna Enterprises",
        date=dt.date(2024, 3, 20),
        not_recommended_status="eligible",
        proposed_limit=3_000_000,
    ),
    Retailer(
        name="Sharma Electronics",
        date=dt.date(2024, 3, 5),
        recommended_status="notInterested",
        proposed_limit=2_000_000,
    ),
    Retailer(
        name="Metro Mobiles",
        date=dt.date(2024, 3, 25),
        not_recommended_status="discussionRequired",
    ),
    Retailer(
        name="Super Electronics",
        date=dt.date(2024, 3, 15),
        recommended_status="rejected",
        rejection_reason="Insufficient business turnover",
        onboarded_date=dt.date(2024, 3, 15),
    ),
]
