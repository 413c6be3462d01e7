from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_DIVISION_PRECISION = "CURRENCY_TRADER_DIVISION_PRECISION"
ENV_DECIMAL_PRECISION = "CURRENCY_TRADER_DECIMAL_PRECISION"

# Minimal count of fractional digits kept by monetary division
MIN_DIVISION_PRECISION = 16

DEFAULT_DIVISION_PRECISION = 16
DEFAULT_DECIMAL_PRECISION = 50


@dataclass(frozen=True)
class Settings:
    """Numeric settings of the monetary engine.

    Attributes:
        division_precision (int): Fractional digits kept after monetary division.
        decimal_precision (int): Minimal significant digits of the `decimal.Context` used for arithmetic;
            contexts grow beyond it when the operands need more digits.
    """

    division_precision: int = DEFAULT_DIVISION_PRECISION
    decimal_precision: int = DEFAULT_DECIMAL_PRECISION

    def __post_init__(self) -> None:
        # Raise: division must keep at least the minimal number of fractional digits
        if self.division_precision < MIN_DIVISION_PRECISION:
            raise ValueError(f"$division_precision must be >= {MIN_DIVISION_PRECISION}, but provided value is: {self.division_precision}")

        # Raise: the arithmetic context must be able to hold all fractional digits of a quotient
        if self.decimal_precision <= self.division_precision:
            raise ValueError(f"$decimal_precision ({self.decimal_precision}) must be greater than $division_precision ({self.division_precision})")


def _read_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable ${name} must be an integer, but provided value is: '{raw}'") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables (and a `.env` file when present).

    The result is cached; call `get_settings.cache_clear()` to reload.

    Returns:
        Settings: Validated settings.

    Raises:
        ValueError: If a variable is not an integer or the values are inconsistent.
    """
    load_dotenv()
    settings = Settings(
        division_precision=_read_int(ENV_DIVISION_PRECISION, DEFAULT_DIVISION_PRECISION),
        decimal_precision=_read_int(ENV_DECIMAL_PRECISION, DEFAULT_DECIMAL_PRECISION),
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
