"""Exceptions raised by the monetary domain.

All of them derive from `CurrencyTraderError`, so callers can catch the whole
family at once, and from the closest builtin exception, so code that already
catches `LookupError`, `ValueError` or `OverflowError` keeps working.
"""

from __future__ import annotations


class CurrencyTraderError(Exception):
    """Base class of all monetary domain errors."""


class CurrencyNotFoundError(CurrencyTraderError, LookupError):
    """Raised when a currency code does not exist in a `Currencies` registry."""

    def __init__(self, code: str, available_codes: list[str] | None = None):
        self.code = code
        self.available_codes = available_codes or []
        message = f"The currency code '{code}' could not be found"
        if self.available_codes:
            message += f". Available currencies: {self.available_codes}"
        super().__init__(message)


class ParseError(CurrencyTraderError, ValueError):
    """Raised when a value cannot be converted to `Decimal`."""

    def __init__(self, value: object, reason: str = ""):
        self.value = value
        message = f"Cannot convert $value ({value!r}) to Decimal"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class BaseCurrencyMismatchError(CurrencyTraderError, ValueError):
    """Raised when amounts of traders with different base currencies are combined."""

    def __init__(self, operation: str, left_code: str, right_code: str):
        self.operation = operation
        self.left_code = left_code
        self.right_code = right_code
        super().__init__(f"Cannot call `{operation}` because the base currencies of the amounts differ: {left_code} & {right_code}")


class ConversionOverflowError(CurrencyTraderError, OverflowError):
    """Raised when an amount in minor units does not fit into a signed 64-bit integer."""

    def __init__(self, minor_units: int, code: str):
        self.minor_units = minor_units
        self.code = code
        super().__init__(f"Cannot call `to_minor_units` because {minor_units} {code} minor units do not fit into a signed 64-bit integer")
