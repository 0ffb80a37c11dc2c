import textwrap

import pandas as pd
import pytest

from retailer_dashboard.data.loader import load_retailers, parse_retailer_frame
from retailer_dashboard.data.models import RETAILER_COLUMNS


def _write_csv(tmp_path, body: str):
    path = tmp_path / "retailers.csv"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return str(path)


def test_inline_dataset_loads_with_diagnostics() -> None:
    df = load_retailers()
    assert len(df) == 6
    assert df.attrs["diagnostics"]["source"] == "inline"
    assert df.attrs["diagnostics"]["dropped_rows"] == 0


def test_csv_source_is_normalised(tmp_path) -> None:
    path = _write_csv(
        tmp_path,
        """
        name,date,recommended_status,not_recommended_status,proposed_limit,is_new,tentative_date
        Lakshmi Stores,2024-03-12,onboardingInProgress,,1200000,yes,2024-04-05
        Ravi Mobiles,2024-03-18,N/A,eligible,900000,no,-
        """,
    )
    df = load_retailers(path)

    assert list(df.columns) == RETAILER_COLUMNS
    assert df["name"].tolist() == ["Lakshmi Stores", "Ravi Mobiles"]
    assert df["is_new"].tolist() == [True, False]
    assert pd.isna(df.loc[1, "recommended_status"])
    assert df.loc[1, "not_recommended_status"] == "eligible"
    assert df.loc[0, "proposed_limit"] == 1_200_000
    assert pd.isna(df.loc[1, "tentative_date"])
    diagnostics = df.attrs["diagnostics"]
    assert diagnostics["source"] == path
    assert diagnostics["sentinel_replacements"]["recommended_status"] == 1


def test_rows_with_unparseable_dates_are_dropped(tmp_path) -> None:
    path = _write_csv(
        tmp_path,
        """
        name,date,recommended_status
        Good Date Traders,2024-03-02,onboarded
        Bad Date Traders,sometime,onboarded
        """,
    )
    df = load_retailers(path)
    assert df["name"].tolist() == ["Good Date Traders"]
    assert df.attrs["diagnostics"]["dropped_rows"] == 1


def test_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_retailers("/nonexistent/retailers.csv")


def test_missing_required_column_raises() -> None:
    raw = pd.DataFrame({"name": ["Only Names"]})
    with pytest.raises(ValueError, match="date"):
        parse_retailer_frame(raw)


def test_unknown_status_names_offending_rows() -> None:
    raw = pd.DataFrame(
        {
            "name": ["Fine Traders", "Odd Traders"],
            "date": ["2024-03-01", "2024-03-02"],
            "recommended_status": ["onboarded", "pending"],
        }
    )
    with pytest.raises(ValueError, match="Odd Traders"):
        parse_retailer_frame(raw)
