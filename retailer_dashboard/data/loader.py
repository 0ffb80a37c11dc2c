import os
from typing import Dict, Optional, Set

import pandas as pd
import streamlit as st

from retailer_dashboard.data.mock_data import RETAILERS
from retailer_dashboard.data.models import (
    AMOUNT_COLUMNS,
    DATE_COLUMNS,
    NOT_RECOMMENDED_STATUSES,
    RECOMMENDED_STATUSES,
    RETAILER_COLUMNS,
    retailers_to_frame,
)
from retailer_dashboard.logs import get_logger

logger = get_logger(__name__)

SENTINELS: Set[str] = {"", "None", "none", "N/A", "n/a", "NA", "na", "null", "Null", "-", "—"}
REQUIRED_COLUMNS = ["name", "date"]
TRUTHY = {"true", "yes", "y", "1"}


def _normalize_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """Replace sentinel string tokens with None (in-place) and record counts in df.attrs.

    Adds / updates:
        df.attrs['sentinel_replacements'] = {column: count_replaced, ...}
    """
    replacements = {}
    for col in df.columns:
        if pd.api.types.is_object_dtype(df[col]) or pd.api.types.is_string_dtype(df[col]):
            mask = df[col].apply(lambda v: isinstance(v, str) and v.strip() in SENTINELS)
            count = int(mask.sum())
            if count:
                replacements[col] = count
                df.loc[mask, col] = None
    if replacements:
        existing = df.attrs.get('sentinel_replacements', {})
        existing.update(replacements)
        df.attrs['sentinel_replacements'] = existing
    return df


def _coerce_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return False
    return str(value).strip().lower() in TRUTHY


def _check_statuses(df: pd.DataFrame, column: str, allowed) -> None:
    values = df[column]
    bad = values.notna() & ~values.isin(allowed)
    if bad.any():
        rows = df.loc[bad, "name"].tolist()
        found = sorted(set(values[bad].astype(str)))
        raise ValueError(f"Unknown {column} values {found} for retailers: {rows}")


def parse_retailer_frame(raw: pd.DataFrame) -> pd.DataFrame:
    """Normalise a raw retailer table (e.g. from CSV) to the dashboard schema.

    Rows whose application date cannot be parsed are dropped and counted in
    df.attrs['dropped_rows'].
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in raw.columns]
    if missing:
        raise ValueError(f"Retailer data is missing required columns: {missing}")

    df = _normalize_sentinels(raw.copy())
    replacements = dict(df.attrs.get("sentinel_replacements", {}))
    for col in RETAILER_COLUMNS:
        if col not in df.columns:
            df[col] = None
    df = df[RETAILER_COLUMNS].copy()

    for col in ["name", "rejection_reason", "recommended_status", "not_recommended_status"]:
        df[col] = df[col].map(lambda v: v.strip() if isinstance(v, str) else v)

    _check_statuses(df, "recommended_status", RECOMMENDED_STATUSES)
    _check_statuses(df, "not_recommended_status", NOT_RECOMMENDED_STATUSES)

    for col in DATE_COLUMNS:
        df[col] = pd.to_datetime(df[col], errors="coerce")
    for col in AMOUNT_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df["is_new"] = df["is_new"].map(_coerce_bool).astype(bool)

    invalid = df["date"].isna() | df["name"].isna()
    dropped = int(invalid.sum())
    df = df[~invalid].reset_index(drop=True)
    df.attrs["sentinel_replacements"] = replacements
    df.attrs["dropped_rows"] = dropped
    return df


def load_retailers(csv_path: Optional[str] = None) -> pd.DataFrame:
    """Wrapper that resolves the data source and calls the cached implementation."""
    if csv_path and not os.path.exists(csv_path):
        raise FileNotFoundError(f"Retailer CSV not found: {csv_path}")
    return _load_retailers_impl(csv_path)


@st.cache_data(show_spinner=False)
def _load_retailers_impl(csv_path: Optional[str]) -> pd.DataFrame:
    """Load the retailer dataset, from CSV when a path is given, else the inline records.
    Cached by csv_path.
    """
    if csv_path:
        raw = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
        df = parse_retailer_frame(raw)
        source = csv_path
    else:
        df = retailers_to_frame(RETAILERS)
        df.attrs["dropped_rows"] = 0
        source = "inline"

    diagnostics: Dict[str, object] = {
        "source": source,
        "row_count": int(len(df)),
        "dropped_rows": df.attrs.get("dropped_rows", 0),
        "sentinel_replacements": df.attrs.get("sentinel_replacements", {}),
    }
    df.attrs["diagnostics"] = diagnostics
    logger.info("retailers_loaded", extra={"extra": diagnostics})
    return df
