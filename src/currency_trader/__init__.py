__version__ = "0.1.0"

from currency_trader.domain.monetary.amount import Amount
from currency_trader.domain.monetary.currencies import Currencies
from currency_trader.domain.monetary.currency import Currency
from currency_trader.domain.monetary.errors import (
    BaseCurrencyMismatchError,
    ConversionOverflowError,
    CurrencyNotFoundError,
    CurrencyTraderError,
    ParseError,
)
from currency_trader.domain.monetary.minor_units import decimal_places
from currency_trader.domain.monetary.trader import Trader

__all__ = [
    "Amount",
    "BaseCurrencyMismatchError",
    "ConversionOverflowError",
    "Currencies",
    "Currency",
    "CurrencyNotFoundError",
    "CurrencyTraderError",
    "ParseError",
    "Trader",
    "decimal_places",
]
