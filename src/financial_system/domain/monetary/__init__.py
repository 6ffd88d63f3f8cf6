"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies
in the financial system, including ISO-4217 Currency definitions, currency
catalogs and Money calculations with floor-rounded precision arithmetic.
"""
