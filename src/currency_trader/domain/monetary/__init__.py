"""Monetary domain package.

This package contains classes for handling monetary amounts in several
currencies: Currency definitions with exchange rates, the Currencies registry,
the Trader binding a registry to a base currency, and Amount calculations with
proper precision arithmetic.
"""
