from __future__ import annotations

from decimal import Decimal

import pandas as pd
import pytest

from currency_trader.domain.monetary.currencies import Currencies
from currency_trader.domain.monetary.currency import Currency
from currency_trader.domain.monetary.errors import CurrencyNotFoundError, ParseError

USD = Currency("USD", Decimal("1"))
EUR = Currency("EUR", Decimal("0.8"))
GBP = Currency("GBP", Decimal("0.75"))


# region Lookup


def test_find_ignores_case() -> None:
    currencies = Currencies([USD, EUR])
    assert currencies.find("eur") is EUR
    assert currencies.find("USD") is USD


def test_find_returns_first_match() -> None:
    duplicate = Currency("eur", Decimal("0.9"))
    currencies = Currencies([USD, EUR, duplicate])
    assert currencies.find("EUR") is EUR


def test_find_unknown_code_raises() -> None:
    currencies = Currencies([USD, EUR])

    with pytest.raises(CurrencyNotFoundError) as exc_info:
        currencies.find("bad")

    assert exc_info.value.code == "bad"
    assert exc_info.value.available_codes == ["USD", "EUR"]
    assert isinstance(exc_info.value, LookupError)


def test_find_in_empty_registry_raises() -> None:
    with pytest.raises(CurrencyNotFoundError):
        Currencies().find("USD")


def test_decimal_places_does_not_depend_on_registry() -> None:
    assert Currencies.decimal_places("JPY") == 0
    assert Currencies.decimal_places("BHD") == 3
    assert Currencies.decimal_places("CLF") == 4
    assert Currencies.decimal_places("USD") == 2
    assert Currencies([USD]).decimal_places("JPY") == 0


# endregion

# region Equality


def test_equals_same_registry() -> None:
    currencies = Currencies([USD, EUR])
    assert currencies.equals(currencies)


def test_equals_none_is_false() -> None:
    assert not Currencies([USD]).equals(None)


def test_equals_checks_containment_by_identity_in_one_direction() -> None:
    small = Currencies([USD, EUR])
    big = Currencies([GBP, EUR, USD])

    assert small.equals(big)
    assert not big.equals(small)


def test_equals_ignores_equal_values_held_by_other_objects() -> None:
    left = Currencies([USD, EUR])
    right = Currencies([Currency("USD", "1"), Currency("EUR", "0.8")])

    assert not left.equals(right)
    assert left == right


def test_value_equality_is_symmetric_and_order_insensitive() -> None:
    left = Currencies([USD, EUR])
    right = Currencies([Currency("eur", "0.8"), Currency("usd", "1")])

    assert left == right
    assert right == left
    assert hash(left) == hash(right)


def test_value_equality_detects_differences() -> None:
    assert Currencies([USD, EUR]) != Currencies([USD, Currency("EUR", "0.9")])
    assert Currencies([USD, EUR]) != Currencies([USD, EUR, GBP])
    assert Currencies([USD, EUR, GBP]) != Currencies([USD, EUR])
    assert Currencies([USD]) != [USD]


# endregion

# region Factories


def test_from_rates_keeps_order() -> None:
    currencies = Currencies.from_rates({"usd": 1, "eur": "0.8", "gbp": 0.75})

    assert currencies.codes == ["USD", "EUR", "GBP"]
    assert currencies.find("GBP").rate == Decimal("0.75")


def test_from_dataframe() -> None:
    df = pd.DataFrame({"code": ["usd", "eur"], "rate": [1.0, 0.8]})

    currencies = Currencies.from_dataframe(df)

    assert currencies.codes == ["USD", "EUR"]
    assert currencies.find("USD").rate == Decimal("1")
    assert str(currencies.find("EUR").rate) == "0.8"


def test_from_dataframe_with_custom_columns() -> None:
    df = pd.DataFrame({"currency": ["USD", "JPY"], "value": [1, 150]})

    currencies = Currencies.from_dataframe(df, code_column="currency", rate_column="value")

    assert currencies.find("jpy").rate == Decimal("150")


def test_from_dataframe_missing_column_raises() -> None:
    df = pd.DataFrame({"code": ["USD"]})

    with pytest.raises(ValueError, match="rate"):
        Currencies.from_dataframe(df)


def test_from_dataframe_invalid_rate_raises() -> None:
    df = pd.DataFrame({"code": ["USD"], "rate": ["one"]})

    with pytest.raises(ParseError):
        Currencies.from_dataframe(df)


def test_to_dataframe() -> None:
    df = Currencies([USD, EUR]).to_dataframe()

    assert list(df.columns) == ["code", "rate"]
    assert df["code"].tolist() == ["USD", "EUR"]
    assert df["rate"].tolist() == [Decimal("1"), Decimal("0.8")]


# endregion

# region Sequence protocol


def test_sequence_protocol() -> None:
    currencies = Currencies([USD, EUR, GBP])

    assert len(currencies) == 3
    assert currencies[0] is USD
    assert currencies[-1] is GBP
    assert list(currencies) == [USD, EUR, GBP]
    assert EUR in currencies
    assert isinstance(currencies[1:], Currencies)
    assert currencies[1:].codes == ["EUR", "GBP"]


def test_registry_is_a_copy_of_input() -> None:
    items = [USD]
    currencies = Currencies(items)
    items.append(EUR)

    assert len(currencies) == 1


def test_non_currency_items_are_rejected() -> None:
    with pytest.raises(TypeError):
        Currencies([USD, "EUR"])


def test_repr_lists_codes() -> None:
    assert repr(Currencies([USD, EUR])) == "Currencies(['USD', 'EUR'])"


# endregion
