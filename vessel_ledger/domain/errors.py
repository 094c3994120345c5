"""Project-native typed exceptions for P&L domain failures."""

from __future__ import annotations


class UnknownProductError(ValueError):
    """Product identity missing from the conversion or contract-size tables.

    Attributes:
        product: Offending product value as supplied by the caller.
    """

    def __init__(self, product: object):
        super().__init__(f"unknown product={product!r}")
        self.product = product


__all__ = ["UnknownProductError"]
