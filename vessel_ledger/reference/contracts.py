"""Product conversion factors and standardized futures contract sizes."""

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal

from vessel_ledger.domain import Product, domain_parse_product

# Exchange quote unit -> $/tonne. Products quoted in $/tonne use 1.
_CONVERSION_FACTORS: dict[Product, Decimal] = {
    Product.CORN: Decimal("0.3937"),
    Product.SOYBEAN_MEAL: Decimal("0.9072"),
    Product.WHEAT: Decimal("1"),
    Product.BARLEY: Decimal("1"),
    Product.DDGS: Decimal("1"),
    Product.SCRAP: Decimal("1"),
}

# Tonnes per exchange contract; 0 means no standardized contract.
_CONTRACT_SIZES: dict[Product, Decimal] = {
    Product.CORN: Decimal("127"),
    Product.SOYBEAN_MEAL: Decimal("90.10"),
    Product.WHEAT: Decimal("0"),
    Product.BARLEY: Decimal("0"),
    Product.DDGS: Decimal("0"),
    Product.SCRAP: Decimal("0"),
}

_NATIVE_PRICE_UNITS: dict[Product, str] = {
    Product.CORN: "Cts/Bu",
    Product.SOYBEAN_MEAL: "USD/Short Ton",
}

_PRICE_TYPES = {"premium", "flat", "futures", "market"}


def reference_conversion_factor(product: Product | str) -> Decimal:
    """Return the factor converting native exchange quotes into $/tonne.

    Args:
        product: Product identity or its text value.

    Returns:
        Decimal: Multiplicative conversion factor.

    Raises:
        UnknownProductError: Raised when the product is not in the reference table.
    """

    return _CONVERSION_FACTORS[domain_parse_product(product)]


def reference_contract_size(product: Product | str) -> Decimal:
    """Return the standardized futures contract size in tonnes.

    Args:
        product: Product identity or its text value.

    Returns:
        Decimal: Contract size, or 0 when the product has no standardized contract.

    Raises:
        UnknownProductError: Raised when the product is not in the reference table.
    """

    return _CONTRACT_SIZES[domain_parse_product(product)]


def reference_supports_contracts(product: Product | str) -> bool:
    """Return whether volume/contract conversions are offered for the product."""

    return reference_contract_size(product) > Decimal("0")


def reference_volume_to_contracts(volume: Decimal, product: Product | str) -> int:
    """Convert a volume into the number of contracts needed to cover it.

    Rounds up so the hedge is never smaller than the volume.

    Args:
        volume: Volume in tonnes.
        product: Product identity or its text value.

    Returns:
        int: Contract count, 0 when the product has no standardized contract.

    Raises:
        UnknownProductError: Raised when the product is not in the reference table.
    """

    contract_size = reference_contract_size(product)
    if contract_size == Decimal("0"):
        return 0
    return int((Decimal(volume) / contract_size).to_integral_value(rounding=ROUND_CEILING))


def reference_contracts_to_volume(contracts: int, product: Product | str) -> Decimal:
    """Convert a contract count into covered tonnes.

    Args:
        contracts: Number of contracts.
        product: Product identity or its text value.

    Returns:
        Decimal: Covered volume in tonnes.

    Raises:
        UnknownProductError: Raised when the product is not in the reference table.
    """

    return Decimal(contracts) * reference_contract_size(product)


def reference_overcoverage(original_volume: Decimal, contracts: int, product: Product | str) -> Decimal:
    """Return the excess volume created by rounding a hedge up to whole contracts.

    Args:
        original_volume: Volume the hedge was meant to cover.
        contracts: Contract count actually hedged.
        product: Product identity or its text value.

    Returns:
        Decimal: Non-negative excess volume in tonnes.

    Raises:
        UnknownProductError: Raised when the product is not in the reference table.
    """

    contract_volume = reference_contracts_to_volume(contracts, product)
    return max(Decimal("0"), contract_volume - Decimal(original_volume))


def reference_price_unit(product: Product | str, price_type: str) -> str:
    """Return the display unit for one price type of a product.

    Flat and market prices are always $/tonne. Premiums and futures follow the
    exchange quote of the product.

    Args:
        product: Product identity or its text value.
        price_type: One of `premium`, `flat`, `futures`, `market`.

    Returns:
        str: Price unit label.

    Raises:
        UnknownProductError: Raised when the product is not in the reference table.
        ValueError: Raised when price_type is unsupported.
    """

    resolved_product = domain_parse_product(product)
    normalized_price_type = price_type.strip().lower()
    if normalized_price_type not in _PRICE_TYPES:
        raise ValueError(f"unsupported price_type={price_type}")
    if normalized_price_type in {"premium", "futures"}:
        return _NATIVE_PRICE_UNITS.get(resolved_product, "USD/MT")
    return "USD/MT"


__all__ = [
    "reference_contract_size",
    "reference_contracts_to_volume",
    "reference_conversion_factor",
    "reference_overcoverage",
    "reference_price_unit",
    "reference_supports_contracts",
    "reference_volume_to_contracts",
]
