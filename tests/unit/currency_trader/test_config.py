from __future__ import annotations

from decimal import Decimal

import pytest

from currency_trader.config import ENV_DECIMAL_PRECISION, ENV_DIVISION_PRECISION, Settings, get_settings
from currency_trader.utils.decimal_tools import divide


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_default_settings() -> None:
    settings = Settings()
    assert settings.division_precision == 16
    assert settings.decimal_precision == 50


def test_settings_reject_too_small_division_precision() -> None:
    with pytest.raises(ValueError):
        Settings(division_precision=15)


def test_settings_reject_context_smaller_than_division_precision() -> None:
    with pytest.raises(ValueError):
        Settings(division_precision=20, decimal_precision=20)


def test_get_settings_is_cached(monkeypatch) -> None:
    monkeypatch.delenv(ENV_DIVISION_PRECISION, raising=False)
    monkeypatch.delenv(ENV_DECIMAL_PRECISION, raising=False)

    assert get_settings() is get_settings()
    assert get_settings() == Settings()


def test_get_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv(ENV_DIVISION_PRECISION, "20")
    monkeypatch.setenv(ENV_DECIMAL_PRECISION, "60")

    settings = get_settings()
    assert settings.division_precision == 20
    assert settings.decimal_precision == 60

    # Division follows the configured precision
    assert str(divide(Decimal("2"), Decimal("3"))) == "0.66666666666666666667"


def test_get_settings_rejects_non_integer_value(monkeypatch) -> None:
    monkeypatch.setenv(ENV_DIVISION_PRECISION, "sixteen")

    with pytest.raises(ValueError, match=ENV_DIVISION_PRECISION):
        get_settings()
