from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal

from currency_trader.domain.monetary import minor_units
from currency_trader.domain.monetary.currency import Currency
from currency_trader.domain.monetary.errors import BaseCurrencyMismatchError, ConversionOverflowError
from currency_trader.domain.monetary.trader import Trader
from currency_trader.utils import decimal_tools

logger = logging.getLogger(__name__)

# Range of a signed 64-bit integer
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Amount:
    """Represents an amount of money in a currency of a Trader.

    Arithmetic between two amounts converts both operands to the base currency
    of their Trader, combines them there and converts the result back to the
    currency of the left operand (the receiver). With base USD and EUR at 0.8:

        usd = trader.new_amount_from_string("2.3", "usd")
        eur = trader.new_amount_from_string("2.56", "eur")  # 3.2 USD
        usd.add(eur)  # 5.5 USD
        eur.add(usd)  # 4.4 EUR

    Both operands must come from Traders with the same base currency code,
    otherwise `BaseCurrencyMismatchError` is raised.

    Amounts are value objects. The only mutating operation is `round`, which
    replaces $value in place.
    """

    __slots__ = ("_value", "_currency", "_trader")

    # Amounts are mutable through `round`, so they cannot be hashed
    __hash__ = None

    def __init__(self, value: Decimal, currency: Currency, trader: Trader):
        """Initialize an Amount.

        Prefer `Trader.new_amount` and friends, which resolve the currency code
        against the Trader's registry.

        Args:
            value (Decimal): Amount value.
            currency (Currency): Currency of the amount; expected to belong to $trader's registry.
            trader (Trader): Trader that issued the amount.

        Raises:
            TypeError: If an argument has a wrong type.
        """
        # Raise: $value must already be Decimal; conversion happens in Trader factories
        if not isinstance(value, Decimal):
            raise TypeError(f"Cannot call `Amount.__init__` because $value is not Decimal (got type '{type(value).__name__}'). Use `Trader.new_amount_from_string` or `Trader.new_amount_from_float`")

        # Raise: $currency must be a Currency instance
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `Amount.__init__` because $currency is not Currency (got type '{type(currency).__name__}')")

        # Raise: $trader must be a Trader instance
        if not isinstance(trader, Trader):
            raise TypeError(f"Cannot call `Amount.__init__` because $trader is not Trader (got type '{type(trader).__name__}')")

        self._value = value
        self._currency = currency
        self._trader = trader

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def trader(self) -> Trader:
        """Get the Trader that issued this amount."""
        return self._trader

    # region Conversion

    def _is_in_base_currency(self) -> bool:
        return self._currency.is_code(self._trader.base_currency.code)

    def base_currency_value(self) -> Decimal:
        """Return the value converted to the base currency of the Trader.

        If the amount already is in the base currency, $value itself is
        returned (the same object), otherwise `value / currency.rate`.
        """
        if self._is_in_base_currency():
            return self._value

        return decimal_tools.divide(self._value, self._currency.rate)

    def base_currency_amount(self) -> Amount:
        """Return a new Amount holding this amount converted to the base currency.

        If the amount already is in the base currency, the new Amount carries
        the same $value object.
        """
        if self._is_in_base_currency():
            return Amount(self._value, self._currency, self._trader)

        return self._trader.new_amount(decimal_tools.divide(self._value, self._currency.rate), self._trader.base_currency.code)

    def to_currency(self, code: str) -> Amount:
        """Convert the amount to the currency $code.

        The conversion always goes through the base currency:
        `value / rate(own currency) * rate(target currency)`.

        Args:
            code (str): Target currency code; case-insensitive.

        Returns:
            Amount: New amount in the target currency. If the amount already is
            in $code, the new Amount carries the same $value object.

        Raises:
            CurrencyNotFoundError: If $code is not in the Trader's registry.
        """
        if self._currency.is_code(code):
            return Amount(self._value, self._currency, self._trader)

        base_amount = self.base_currency_amount()
        if base_amount.currency.is_code(code):
            return base_amount

        target = self._trader.currencies.find(code)
        target_value = decimal_tools.multiply(base_amount.value, target.rate)

        logger.debug(f"Converted {self} to {target_value} {target.code}")
        return self._trader.new_amount(target_value, target.code)

    # endregion

    # region Arithmetic

    def _check_same_base_currency(self, other: Amount, operation: str) -> None:
        """Check that $other comes from a Trader with the same base currency code.

        Raises:
            TypeError: If $other is not an Amount.
            BaseCurrencyMismatchError: If base currency codes differ.
        """
        # Raise: arithmetic is defined only between amounts
        if not isinstance(other, Amount):
            raise TypeError(f"Cannot call `{operation}` because $other is not Amount (got type '{type(other).__name__}')")

        # Raise: amounts from different base currencies have no common exchange path
        left_code = self._trader.base_currency.code
        right_code = other._trader.base_currency.code
        if left_code != right_code:
            raise BaseCurrencyMismatchError(operation, left_code, right_code)

    def _combine(self, other: Amount, operation: str, combine: Callable[[Decimal, Decimal], Decimal]) -> Amount:
        self._check_same_base_currency(other, operation)

        left = self.base_currency_value()
        right = other.base_currency_value()
        result = combine(left, right)

        base_amount = self._trader.new_amount(result, self._trader.base_currency.code)
        return base_amount.to_currency(self._currency.code)

    def add(self, other: Amount) -> Amount:
        """Return the sum of this amount and $other, in the currency of this amount.

        Raises:
            BaseCurrencyMismatchError: If the base currencies of the Traders differ.
        """
        return self._combine(other, "add", decimal_tools.add)

    def subtract(self, other: Amount) -> Amount:
        """Return this amount minus $other, in the currency of this amount.

        Raises:
            BaseCurrencyMismatchError: If the base currencies of the Traders differ.
        """
        return self._combine(other, "subtract", decimal_tools.subtract)

    def multiply(self, other: Amount) -> Amount:
        """Return the product of both base currency values, in the currency of this amount.

        Raises:
            BaseCurrencyMismatchError: If the base currencies of the Traders differ.
        """
        return self._combine(other, "multiply", decimal_tools.multiply)

    def divide(self, other: Amount) -> Amount:
        """Return the quotient of both base currency values, in the currency of this amount.

        The quotient keeps a bounded number of fractional digits (16 by
        default, see `Settings.division_precision`), so it is not exact for
        non-terminating decimals.

        Raises:
            BaseCurrencyMismatchError: If the base currencies of the Traders differ.
            ZeroDivisionError: If $other is zero.
        """
        return self._combine(other, "divide", decimal_tools.divide)

    def compare(self, other: Amount) -> int:
        """Compare base currency values of this amount and $other.

        Returns:
            int: -1 if this amount is smaller, 0 if equal, 1 if greater.

        Raises:
            BaseCurrencyMismatchError: If the base currencies of the Traders differ.
        """
        self._check_same_base_currency(other, "compare")

        left = self.base_currency_value()
        right = other.base_currency_value()
        return (left > right) - (left < right)

    # endregion

    # region Rounding and output

    def round(self, places: int) -> None:
        """Round $value in place to $places fractional digits, half away from zero.

        Currency and Trader stay untouched. Negative $places round the integer
        part (e.g. `-1` rounds to tens).
        """
        self._value = decimal_tools.round_places(self._value, places)

    def to_minor_units(self) -> int:
        """Return the amount as an integer count of minor units of its currency.

        The value is multiplied by `10 ** decimal_places` of the currency code
        (cents for USD, fils for BHD, nothing for JPY) and rounded half away
        from zero.

        Examples:
            2.3 USD -> 230, 2.3 BHD -> 2300, 2.3 JPY -> 2

        Raises:
            ConversionOverflowError: If the result does not fit into a signed 64-bit integer.
        """
        places = minor_units.decimal_places(self._currency.code)
        scaled = decimal_tools.multiply(self._value, Decimal(10) ** places)
        minor = int(decimal_tools.round_places(scaled, 0))

        # Raise: result must be representable as a signed 64-bit integer
        if not INT64_MIN <= minor <= INT64_MAX:
            raise ConversionOverflowError(minor, self._currency.code)

        return minor

    def to_display_string(self, decimals: int) -> str:
        """Return $value with exactly $decimals fractional digits, e.g. '4.200'."""
        return decimal_tools.to_fixed_string(self._value, decimals)

    # endregion

    # region Operators

    def __add__(self, other):
        """Add two Amounts (see `add`)."""
        if not isinstance(other, Amount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Amounts (see `subtract`)."""
        if not isinstance(other, Amount):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply two Amounts (see `multiply`)."""
        if not isinstance(other, Amount):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        """Divide two Amounts (see `divide`)."""
        if not isinstance(other, Amount):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Amount:
        return Amount(-self._value, self._currency, self._trader)

    def __abs__(self) -> Amount:
        return Amount(abs(self._value), self._currency, self._trader)

    def __eq__(self, other) -> bool:
        """Check that both amounts are worth the same in the base currency.

        Amounts of Traders with different base currencies are never equal.
        """
        if not isinstance(other, Amount):
            return False
        if self._trader.base_currency.code != other._trader.base_currency.code:
            return False
        return self.compare(other) == 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.compare(other) >= 0

    # endregion

    def __str__(self) -> str:
        """Return string like '4.2 USD'."""
        return f"{self._value} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Amount(4.2, USD)'."""
        return f"{self.__class__.__name__}({self._value}, {self._currency.code})"
