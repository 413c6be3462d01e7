from __future__ import annotations

import pytest

from currency_trader.domain.monetary.minor_units import decimal_places


@pytest.mark.parametrize("code", ["JPY", "KRW", "VND", "ISK", "CLP", "XAF"])
def test_zero_decimal_currencies(code: str) -> None:
    assert decimal_places(code) == 0


@pytest.mark.parametrize("code", ["BHD", "KWD", "OMR", "JOD", "IQD", "LYD", "TND"])
def test_three_decimal_currencies(code: str) -> None:
    assert decimal_places(code) == 3


def test_clf_has_four_decimal_places() -> None:
    assert decimal_places("CLF") == 4


def test_other_currencies_default_to_two_decimal_places() -> None:
    assert decimal_places("USD") == 2
    assert decimal_places("EUR") == 2
    assert decimal_places("XYZ") == 2


def test_lookup_ignores_case() -> None:
    assert decimal_places("jpy") == 0
    assert decimal_places("bhd") == 3
