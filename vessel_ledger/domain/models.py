"""Typed domain records shared across runtime layers.

Vessel, sale, and hedge records are read-only snapshots supplied by the
vessel book. The P&L engine consumes them and never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from .products import DealType, Incoterm, Product


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class HedgeLeg:
    """One futures hedge attached to a vessel purchase or to a sale.

    Attributes:
        covered_volume: Hedged volume in tonnes.
        futures_price: Futures price in the product's native quote unit.
        contract_count: Number of exchange contracts backing the hedge.
    """

    covered_volume: Decimal
    futures_price: Decimal
    contract_count: int = 0

    def __post_init__(self) -> None:
        if self.covered_volume < 0:
            raise ValueError("hedge.covered_volume must not be negative")
        if self.contract_count < 0:
            raise ValueError("hedge.contract_count must not be negative")


@dataclass(frozen=True)
class PremiumPurchasePrice:
    """Vessel bought on a premium basis over futures, in native quote units."""

    premium: Decimal


@dataclass(frozen=True)
class FlatPurchasePrice:
    """Vessel bought at an all-in flat price in $/tonne."""

    flat_price: Decimal


PurchasePricing = Union[PremiumPurchasePrice, FlatPurchasePrice, None]


def domain_resolve_purchase_pricing(
    premium: Decimal | None,
    flat_price: Decimal | None,
) -> PurchasePricing:
    """Resolve nullable purchase price columns into one pricing variant.

    A stored premium takes precedence over a stored flat price.

    Args:
        premium: Optional purchase premium in native quote units.
        flat_price: Optional purchase flat price in $/tonne.

    Returns:
        PurchasePricing: Premium variant, flat variant, or None when unpriced.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if premium is not None:
        return PremiumPurchasePrice(premium=premium)
    if flat_price is not None:
        return FlatPurchasePrice(flat_price=flat_price)
    return None


@dataclass(frozen=True)
class Sale:
    """Allocation of part of a vessel's volume to one counterparty.

    Attributes:
        sale_id: Sale identifier.
        counterparty_id: Buying counterparty identifier.
        counterparty_name: Buying counterparty display name.
        deal_type: Pricing basis of the sale.
        volume: Sold volume in tonnes.
        premium: Optional sale premium in native quote units.
        flat_price: Optional sale flat price in $/tonne.
        price_reference: Optional futures month reference (e.g. `ZCH26`).
        hedges: Futures hedges attached to this sale.
    """

    sale_id: str
    counterparty_id: str
    deal_type: DealType
    volume: Decimal
    premium: Decimal | None = None
    flat_price: Decimal | None = None
    counterparty_name: str | None = None
    price_reference: str | None = None
    hedges: tuple[HedgeLeg, ...] = ()

    def __post_init__(self) -> None:
        if self.volume < 0:
            raise ValueError("sale.volume must not be negative")


@dataclass(frozen=True)
class VesselPosition:
    """One purchased cargo lot with its purchase hedges and sales.

    Attributes:
        vessel_id: Vessel identifier.
        name: Vessel display name.
        product: Product identity.
        total_volume: Purchased volume in tonnes.
        pricing: Purchase pricing variant, None when not yet priced.
        supplier: Optional supplier reference.
        incoterm: Purchase delivery term.
        freight_rate: Optional freight in $/tonne, applied to FOB purchases.
        purchase_hedges: Futures hedges on the purchase side.
        sales: Sales allocated from this vessel.
    """

    vessel_id: str
    name: str
    product: Product
    total_volume: Decimal
    pricing: PurchasePricing = None
    supplier: str | None = None
    incoterm: Incoterm = Incoterm.CFR
    freight_rate: Decimal | None = None
    purchase_hedges: tuple[HedgeLeg, ...] = ()
    sales: tuple[Sale, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.total_volume < 0:
            raise ValueError("vessel.total_volume must not be negative")

    @property
    def purchase_premium(self) -> Decimal | None:
        """Purchase premium when the vessel is premium-priced."""

        if isinstance(self.pricing, PremiumPurchasePrice):
            return self.pricing.premium
        return None

    @property
    def purchase_flat_price(self) -> Decimal | None:
        """Purchase flat price when the vessel is flat-priced."""

        if isinstance(self.pricing, FlatPurchasePrice):
            return self.pricing.flat_price
        return None


__all__ = [
    "FlatPurchasePrice",
    "HealthStatus",
    "HedgeLeg",
    "PremiumPurchasePrice",
    "PurchasePricing",
    "Sale",
    "VesselPosition",
    "domain_resolve_purchase_pricing",
]
