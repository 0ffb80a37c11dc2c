import pytest

from retailer_dashboard.data.mock_data import RETAILERS
from retailer_dashboard.data.models import retailers_to_frame


@pytest.fixture
def retailers_df():
    return retailers_to_frame(RETAILERS)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ["RETAILERS_CSV", "DEFAULT_DATE_START", "DEFAULT_DATE_END", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
