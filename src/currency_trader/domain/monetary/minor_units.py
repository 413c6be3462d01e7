"""Number of minor-unit decimal places per ISO 4217 currency code.

The table is a real-world convention and does not depend on exchange rates,
so it is kept apart from `Currency`. Only codes that differ from the default
of 2 decimal places are listed.
"""

from __future__ import annotations

DEFAULT_DECIMAL_PLACES = 2

# Currencies without a minor unit (e.g. 5412 JPY)
ZERO_DECIMAL_CODES = frozenset(
    {
        "BIF",
        "BYR",
        "CLP",
        "DJF",
        "GNF",
        "ISK",
        "JPY",
        "KMF",
        "KRW",
        "PYG",
        "RWF",
        "UGX",
        "UYI",
        "VND",
        "VUV",
        "XAF",
        "XOF",
        "XPF",
    }
)

# Currencies divided into 1000 minor units (fils, baisa, dirham)
THREE_DECIMAL_CODES = frozenset({"BHD", "IQD", "JOD", "KWD", "LYD", "OMR", "TND"})

# Unidad de Fomento
FOUR_DECIMAL_CODES = frozenset({"CLF"})


def decimal_places(code: str) -> int:
    """Return the number of minor-unit decimal places of the currency $code.

    Args:
        code (str): Currency code, case-insensitive.

    Returns:
        int: 0, 3 or 4 for the listed currencies, otherwise 2.

    Examples:
        >>> decimal_places("usd")
        2
        >>> decimal_places("JPY")
        0
    """
    code = code.upper().strip()
    if code in ZERO_DECIMAL_CODES:
        return 0
    if code in THREE_DECIMAL_CODES:
        return 3
    if code in FOUR_DECIMAL_CODES:
        return 4
    return DEFAULT_DECIMAL_PLACES
