from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from currency_trader.domain.monetary.currencies import Currencies
from currency_trader.domain.monetary.currency import Currency
from currency_trader.domain.monetary.errors import ParseError
from currency_trader.utils.decimal_tools import DecimalLike, as_decimal

if TYPE_CHECKING:
    from currency_trader.domain.monetary.amount import Amount

logger = logging.getLogger(__name__)


class Trader:
    """Binds a registry of currencies to one base currency.

    Every Amount is created by a Trader and keeps a reference to it, so later
    conversions and arithmetic use the same rates. A Trader never changes
    after construction and can be shared freely.

    Examples:
        >>> trader = Trader(Currencies.from_rates({"USD": 1, "EUR": "0.8"}), "usd")
        >>> trader.new_amount_from_string("1", "eur").base_currency_value()
        Decimal('1.2500000000000000')
    """

    __slots__ = ("_currencies", "_base_currency")

    def __init__(self, currencies: Currencies | Iterable[Currency], base_code: str):
        """Initialize a Trader.

        Args:
            currencies: Registry of currencies (any iterable of Currency is wrapped into Currencies).
            base_code: Code of the base currency; case-insensitive.

        Raises:
            CurrencyNotFoundError: If $base_code is not in $currencies.
        """
        if not isinstance(currencies, Currencies):
            currencies = Currencies(currencies)

        self._currencies = currencies
        self._base_currency = currencies.find(base_code)
        logger.debug(f"Created {self!r}")

    @property
    def currencies(self) -> Currencies:
        """Get the registry of currencies."""
        return self._currencies

    @property
    def base_currency(self) -> Currency:
        """Get the base currency (the unit of account of all arithmetic)."""
        return self._base_currency

    # region Amount factories

    def new_amount(self, value: Decimal, code: str) -> Amount:
        """Create an Amount of $value in the currency $code.

        Args:
            value: Decimal value; other Decimal-like scalars are converted.
            code: Currency code; case-insensitive.

        Returns:
            Amount: New amount bound to this Trader.

        Raises:
            CurrencyNotFoundError: If $code is not in the registry.
            ParseError: If $value cannot be converted to Decimal.
        """
        from currency_trader.domain.monetary.amount import Amount

        currency = self._currencies.find(code)
        return Amount(self._to_decimal(value), currency, self)

    def new_amount_from_float(self, value: float, code: str) -> Amount:
        """Create an Amount from a float, converted through its shortest string form (0.8 -> "0.8").

        Raises:
            ParseError: If $value is NaN or infinite.
            CurrencyNotFoundError: If $code is not in the registry.
        """
        return self.new_amount(self._to_decimal(value), code)

    def new_amount_from_string(self, value: str, code: str) -> Amount:
        """Create an Amount by parsing $value (e.g. "4.2").

        Raises:
            ParseError: If $value is not a decimal number.
            CurrencyNotFoundError: If $code is not in the registry.
        """
        return self.new_amount(self._to_decimal(value), code)

    @staticmethod
    def _to_decimal(value: DecimalLike) -> Decimal:
        try:
            return as_decimal(value)
        except InvalidOperation as e:
            raise ParseError(value, "not a decimal number") from e
        except (ValueError, TypeError) as e:
            raise ParseError(value, str(e)) from e

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base={self._base_currency.code}, currencies={self._currencies.codes})"
