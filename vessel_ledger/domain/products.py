"""Enumerated identities for products, deal types, and commercial terms."""

from __future__ import annotations

from enum import Enum

from .errors import UnknownProductError


class Product(str, Enum):
    """Traded product identity.

    The product alone determines the price-unit conversion factor and the
    standardized futures contract size.
    """

    CORN = "corn"
    SOYBEAN_MEAL = "soybean_meal"
    WHEAT = "wheat"
    BARLEY = "barley"
    DDGS = "ddgs"
    SCRAP = "scrap"


class DealType(str, Enum):
    """Sale pricing basis."""

    PREMIUM = "premium"
    FLAT = "flat"


class Incoterm(str, Enum):
    """Purchase delivery term; FOB purchases carry freight on top of the price."""

    CFR = "CFR"
    FOB = "FOB"


def domain_parse_product(value: object) -> Product:
    """Resolve one product identity from a stored or caller-supplied value.

    Args:
        value: Product enum member or its text value.

    Returns:
        Product: Resolved product identity.

    Raises:
        UnknownProductError: Raised when the value is not a recognized product.
    """

    if isinstance(value, Product):
        return value
    if isinstance(value, str):
        try:
            return Product(value.strip().lower())
        except ValueError:
            pass
    raise UnknownProductError(value)


def domain_parse_deal_type(value: str) -> DealType:
    """Resolve a sale deal type from its text value.

    Args:
        value: Deal type text (`premium` or `flat`).

    Returns:
        DealType: Resolved deal type.

    Raises:
        ValueError: Raised when the value is not a supported deal type.
    """

    normalized_value = str(value).strip().lower()
    try:
        return DealType(normalized_value)
    except ValueError as error:
        raise ValueError(f"unsupported deal_type={value}") from error


def domain_parse_incoterm(value: str | None) -> Incoterm:
    """Resolve a purchase incoterm, defaulting to CFR when absent."""

    if value is None or not str(value).strip():
        return Incoterm.CFR
    normalized_value = str(value).strip().upper()
    try:
        return Incoterm(normalized_value)
    except ValueError as error:
        raise ValueError(f"unsupported incoterm={value}") from error


__all__ = [
    "DealType",
    "Incoterm",
    "Product",
    "domain_parse_deal_type",
    "domain_parse_incoterm",
    "domain_parse_product",
]
