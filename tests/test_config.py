import datetime as dt

import pytest

from retailer_dashboard.config import get_settings


def test_defaults_cover_march_2024() -> None:
    settings = get_settings()
    assert settings.default_date_range == (dt.date(2024, 3, 1), dt.date(2024, 3, 31))
    assert settings.retailers_csv is None
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_DATE_START", "2024-02-01")
    monkeypatch.setenv("RETAILERS_CSV", " data/retailers.csv ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.default_date_range[0] == dt.date(2024, 2, 1)
    assert settings.retailers_csv == "data/retailers.csv"
    assert settings.log_level == "DEBUG"


def test_malformed_date_names_variable(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_DATE_END", "31/03/2024")
    with pytest.raises(ValueError, match="DEFAULT_DATE_END"):
        get_settings()
