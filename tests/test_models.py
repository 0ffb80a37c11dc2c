import pandas as pd

from retailer_dashboard.data.mock_data import RETAILERS
from retailer_dashboard.data.models import RETAILER_COLUMNS, retailers_to_frame, row_to_retailer


def test_frame_has_one_column_per_field(retailers_df) -> None:
    assert list(retailers_df.columns) == RETAILER_COLUMNS
    assert len(retailers_df) == len(RETAILERS)


def test_frame_parses_dates_and_limits(retailers_df) -> None:
    assert pd.api.types.is_datetime64_any_dtype(retailers_df["date"])
    assert pd.api.types.is_datetime64_any_dtype(retailers_df["tentative_date"])
    assert pd.api.types.is_numeric_dtype(retailers_df["proposed_limit"])
    assert retailers_df["is_new"].tolist() == [True, True, False, False, False, False]


def test_rows_convert_back_to_records(retailers_df) -> None:
    assert [row_to_retailer(row) for _, row in retailers_df.iterrows()] == RETAILERS


def test_empty_frame_keeps_schema() -> None:
    df = retailers_to_frame([])
    assert df.empty
    assert list(df.columns) == RETAILER_COLUMNS
