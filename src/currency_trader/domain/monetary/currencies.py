from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence

import pandas as pd

from currency_trader.domain.monetary import minor_units
from currency_trader.domain.monetary.currency import Currency
from currency_trader.domain.monetary.errors import CurrencyNotFoundError
from currency_trader.utils.decimal_tools import DecimalLike


class Currencies(Sequence[Currency]):
    """Ordered, read-only registry of currencies.

    Codes are expected to be unique, but this is not enforced: `find` returns
    the first match.

    Examples:
        >>> currencies = Currencies([Currency("USD", 1), Currency("EUR", "0.8")])
        >>> currencies.find("eur").rate
        Decimal('0.8')
    """

    __slots__ = ("_items",)

    def __init__(self, currencies: Iterable[Currency] = ()):
        """Initialize the registry.

        Args:
            currencies: Currencies in lookup order. The iterable is copied.

        Raises:
            TypeError: If an item is not a Currency instance.
        """
        items = tuple(currencies)

        # Raise: only Currency instances can be registered
        for item in items:
            if not isinstance(item, Currency):
                raise TypeError(f"Cannot call `Currencies.__init__` because an item is not Currency (got type '{type(item).__name__}')")

        self._items: tuple[Currency, ...] = items

    # region Factories

    @classmethod
    def from_rates(cls, rates: Mapping[str, DecimalLike]) -> Currencies:
        """Create a registry from a `{code: rate}` mapping, keeping its order.

        Examples:
            >>> Currencies.from_rates({"USD": 1, "EUR": "0.8"}).codes
            ['USD', 'EUR']
        """
        return cls(Currency(code, rate) for code, rate in rates.items())

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, code_column: str = "code", rate_column: str = "rate") -> Currencies:
        """Create a registry from a DataFrame with one row per currency.

        Float rates are converted through their shortest string form, so
        `0.8` in the DataFrame becomes `Decimal("0.8")`.

        Args:
            df: DataFrame with code and rate columns.
            code_column: Name of the column with currency codes.
            rate_column: Name of the column with rates.

        Returns:
            Currencies: Registry with rows in DataFrame order.

        Raises:
            ValueError: If a column is missing.
            ParseError: If a rate cannot be converted to Decimal.
        """
        # Raise: both columns must exist
        missing_columns = [c for c in (code_column, rate_column) if c not in df.columns]
        if missing_columns:
            raise ValueError(f"Cannot call `Currencies.from_dataframe` because $df is missing columns {missing_columns}")

        # `tolist` turns numpy scalars into builtin Python types
        codes = df[code_column].tolist()
        rates = df[rate_column].tolist()
        return cls(Currency(code, rate) for code, rate in zip(codes, rates))

    def to_dataframe(self) -> pd.DataFrame:
        """Return the registry as a DataFrame with columns `code` and `rate` (Decimal values)."""
        return pd.DataFrame(
            {
                "code": [c.code for c in self._items],
                "rate": [c.rate for c in self._items],
            }
        )

    # endregion

    # region Lookup

    def find(self, code: str) -> Currency:
        """Find the first Currency with code $code (case-insensitive).

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The first matching currency.

        Raises:
            CurrencyNotFoundError: If no currency has code $code.
        """
        for currency in self._items:
            if currency.is_code(code):
                return currency

        raise CurrencyNotFoundError(code, self.codes)

    @property
    def codes(self) -> list[str]:
        """Get currency codes in registry order."""
        return [c.code for c in self._items]

    @staticmethod
    def decimal_places(code: str) -> int:
        """Return the number of minor-unit decimal places of $code (see `minor_units.decimal_places`)."""
        return minor_units.decimal_places(code)

    # endregion

    # region Equality

    def equals(self, other: Currencies | None) -> bool:
        """Check whether every currency of this registry is contained in $other.

        Containment is checked by identity (the same Currency objects), and
        only in one direction: a registry equals any superset built from the
        same Currency objects, but not the other way around. Use `==` for a
        symmetric comparison by value.

        Args:
            other: Registry to compare with.

        Returns:
            bool: True if $other is this registry or holds all of its Currency objects.
        """
        if self is other:
            return True
        if other is None:
            return False

        for currency in self._items:
            if not any(currency is candidate for candidate in other):
                return False

        return True

    def __eq__(self, other) -> bool:
        """Check that both registries hold the same currencies (code and rate), in any order."""
        if not isinstance(other, Currencies):
            return NotImplemented
        return Counter(self._items) == Counter(other._items)

    def __hash__(self) -> int:
        return hash(frozenset(Counter(self._items).items()))

    # endregion

    # region Sequence protocol

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Currencies(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.codes})"

    # endregion
