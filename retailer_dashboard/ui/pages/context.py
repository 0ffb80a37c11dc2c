from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Dict

import pandas as pd

from retailer_dashboard.data.filters import RetailerFilters


@dataclass
class PageContext:
    retailers_df: pd.DataFrame
    filters: RetailerFilters
    acknowledgements: Dict[str, dt.date] = field(default_factory=dict)
