"""Quick validation script for the retailer dataset.

Run with `python scripts/validate_dataset.py [path/to/retailers.csv]` to make
sure the configured data source loads, carries the dashboard columns, and uses
only known status values. Falls back to RETAILERS_CSV, then the inline records.
"""

from __future__ import annotations

import sys

import retailer_dashboard.bootstrap_env  # noqa: F401  loads .env
from retailer_dashboard.config import get_settings
from retailer_dashboard.data.filters import status_counts
from retailer_dashboard.data.loader import load_retailers
from retailer_dashboard.data.models import CATEGORIES, RETAILER_COLUMNS


def main(argv: list[str]) -> None:
    csv_path = argv[1] if len(argv) > 1 else get_settings().retailers_csv
    try:
        df = load_retailers(csv_path)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"Retailer data invalid: {exc}")

    missing = [col for col in RETAILER_COLUMNS if col not in df.columns]
    if missing:
        raise SystemExit(f"Missing required columns: {missing}")
    if df.empty:
        raise SystemExit("Retailer data has no usable rows")

    both = df["recommended_status"].notna() & df["not_recommended_status"].notna()
    if both.any():
        print("Warning: retailers with both status tags:", df.loc[both, "name"].tolist())

    diagnostics = df.attrs.get("diagnostics", {})
    print("Retailer validation passed. Rows:", len(df), "Dropped:", diagnostics.get("dropped_rows", 0))
    for category in CATEGORIES:
        print(f"  {category}: {status_counts(df, category)}")


if __name__ == "__main__":
    main(sys.argv)
