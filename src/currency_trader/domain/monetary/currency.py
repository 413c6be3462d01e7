from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from currency_trader.domain.monetary.errors import ParseError
from currency_trader.utils.decimal_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)


class Currency:
    """Represents a currency with its exchange rate relative to a base currency.

    Attributes:
        code (str): ISO 4217 code (e.g., "USD", "EUR"), always upper case.
        rate (Decimal): Value of the currency relative to the base currency, i.e. how
            many units of this currency 1 unit of the base currency buys (EUR with
            rate 0.8 means 1 USD = 0.8 EUR). The base currency conventionally has rate 1.
    """

    __slots__ = ("_code", "_rate")

    def __init__(self, code: str, rate: DecimalLike):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code; case-insensitive, stored upper case.
            rate: Value of 1 unit of the base currency expressed in this currency,
                as a Decimal-like scalar. Should be positive; this is not enforced.

        Raises:
            ValueError: If $code is empty.
            ParseError: If $rate cannot be converted to Decimal.
        """
        # Raise: $code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        try:
            decimal_rate = as_decimal(rate)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ParseError(rate, f"invalid rate of currency '{code}'") from e

        self._code = code.upper().strip()
        self._rate = decimal_rate

        if self._rate <= 0:
            logger.warning(f"Currency '{self._code}' has non-positive $rate ({self._rate})")

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def rate(self) -> Decimal:
        """Get the exchange rate relative to the base currency."""
        return self._rate

    def is_code(self, code: str) -> bool:
        """Check whether $code (case-insensitive) is the code of this Currency."""
        return self._code == code.upper().strip()

    def __eq__(self, other) -> bool:
        """Check equality (same code and rate) with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self._code == other._code and self._rate == other._rate

    def __hash__(self) -> int:
        """Hash based on code and rate."""
        return hash((self._code, self._rate))

    def __str__(self) -> str:
        """Return string representation."""
        return self._code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self._code}', {self._rate})"
