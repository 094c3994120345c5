"""Per-vessel premium, flat, and futures P&L computation primitives."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from vessel_ledger.domain import DealType, Incoterm, VesselPosition, domain_parse_product
from vessel_ledger.reference import reference_conversion_factor

from .interfaces import VesselPnL
from .weighting import pnl_safe_ratio, pnl_weighted_average

_LOGGER = logging.getLogger("vessel_ledger.pnl")
_ZERO = Decimal("0")


@dataclass(frozen=True)
class PremiumLegResult:
    """Premium-leg intermediate values for one vessel.

    Attributes:
        sale_premium_average: Weighted sale premium in native quote units.
        sale_premium_average_converted: Weighted sale premium in $/tonne.
        purchase_premium_converted: Landed purchase premium in $/tonne.
        volume: Volume sold on a premium basis.
        pnl: Premium spread P&L.
    """

    sale_premium_average: Decimal
    sale_premium_average_converted: Decimal
    purchase_premium_converted: Decimal
    volume: Decimal
    pnl: Decimal


@dataclass(frozen=True)
class FlatLegResult:
    """Flat-leg intermediate values for one vessel.

    Attributes:
        sale_flat_price_average: Weighted sale flat price in $/tonne.
        purchase_flat_price: Landed purchase flat price in $/tonne.
        volume: Volume sold on a flat basis.
        pnl: Flat spread P&L.
    """

    sale_flat_price_average: Decimal
    purchase_flat_price: Decimal
    volume: Decimal
    pnl: Decimal


@dataclass(frozen=True)
class FuturesLegResult:
    """Futures-leg intermediate values for one vessel.

    Attributes:
        purchase_price_average: Weighted purchase-hedge price in native quote units.
        sale_price_average: Weighted sale-hedge price in native quote units.
        purchase_volume: Total purchase-hedge covered volume.
        sale_volume: Total sale-hedge covered volume.
        attributable_volume: Volume hedged on both legs.
        pnl: Futures P&L on the attributable volume.
    """

    purchase_price_average: Decimal
    sale_price_average: Decimal
    purchase_volume: Decimal
    sale_volume: Decimal
    attributable_volume: Decimal
    pnl: Decimal


def pnl_landed_purchase_premium(vessel: VesselPosition, conversion_factor: Decimal) -> Decimal:
    """Return the purchase premium in native units including FOB freight.

    Args:
        vessel: Vessel snapshot.
        conversion_factor: Product conversion factor.

    Returns:
        Decimal: Purchase premium, 0 when the vessel is not premium-priced.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    purchase_premium = vessel.purchase_premium or _ZERO
    if vessel.incoterm == Incoterm.FOB and vessel.freight_rate:
        # freight is $/tonne, premium is in native quote units
        purchase_premium += pnl_safe_ratio(vessel.freight_rate, conversion_factor)
    return purchase_premium


def pnl_landed_purchase_flat_price(vessel: VesselPosition) -> Decimal:
    """Return the purchase flat price in $/tonne including FOB freight."""

    purchase_flat_price = vessel.purchase_flat_price or _ZERO
    if vessel.incoterm == Incoterm.FOB and vessel.freight_rate:
        purchase_flat_price += vessel.freight_rate
    return purchase_flat_price


def pnl_compute_premium(vessel: VesselPosition) -> PremiumLegResult:
    """Compute premium spread P&L over the vessel's premium-basis sales.

    Args:
        vessel: Vessel snapshot.

    Returns:
        PremiumLegResult: Weighted premium values and premium P&L.

    Raises:
        UnknownProductError: Raised when the vessel product is not recognized.
    """

    conversion_factor = reference_conversion_factor(vessel.product)
    premium_sales = [sale for sale in vessel.sales if sale.deal_type == DealType.PREMIUM]
    purchase_premium_converted = pnl_landed_purchase_premium(vessel, conversion_factor) * conversion_factor
    if not premium_sales:
        return PremiumLegResult(
            sale_premium_average=_ZERO,
            sale_premium_average_converted=_ZERO,
            purchase_premium_converted=purchase_premium_converted,
            volume=_ZERO,
            pnl=_ZERO,
        )

    weighted_premium = pnl_weighted_average((sale.premium, sale.volume) for sale in premium_sales)
    sale_premium_converted = weighted_premium.average * conversion_factor
    return PremiumLegResult(
        sale_premium_average=weighted_premium.average,
        sale_premium_average_converted=sale_premium_converted,
        purchase_premium_converted=purchase_premium_converted,
        volume=weighted_premium.total_weight,
        pnl=(sale_premium_converted - purchase_premium_converted) * weighted_premium.total_weight,
    )


def pnl_compute_flat(vessel: VesselPosition) -> FlatLegResult:
    """Compute flat-price spread P&L over the vessel's flat-basis sales.

    Args:
        vessel: Vessel snapshot.

    Returns:
        FlatLegResult: Weighted flat price and flat P&L.

    Raises:
        UnknownProductError: Raised when the vessel product is not recognized.
    """

    domain_parse_product(vessel.product)
    flat_sales = [sale for sale in vessel.sales if sale.deal_type == DealType.FLAT]
    purchase_flat_price = pnl_landed_purchase_flat_price(vessel)
    if not flat_sales:
        return FlatLegResult(
            sale_flat_price_average=_ZERO,
            purchase_flat_price=purchase_flat_price,
            volume=_ZERO,
            pnl=_ZERO,
        )

    weighted_flat_price = pnl_weighted_average((sale.flat_price, sale.volume) for sale in flat_sales)
    return FlatLegResult(
        sale_flat_price_average=weighted_flat_price.average,
        purchase_flat_price=purchase_flat_price,
        volume=weighted_flat_price.total_weight,
        pnl=(weighted_flat_price.average - purchase_flat_price) * weighted_flat_price.total_weight,
    )


def pnl_compute_futures(vessel: VesselPosition) -> FuturesLegResult:
    """Compute futures P&L netted on the volume hedged on both legs.

    Sale hedges are flattened across all of the vessel's sales. P&L is 0 until
    both legs carry covered volume; excess hedge on either leg is not counted.

    Args:
        vessel: Vessel snapshot.

    Returns:
        FuturesLegResult: Weighted futures prices, hedge volumes, and futures P&L.

    Raises:
        UnknownProductError: Raised when the vessel product is not recognized.
    """

    conversion_factor = reference_conversion_factor(vessel.product)
    purchase_hedges = pnl_weighted_average(
        (hedge.futures_price, hedge.covered_volume) for hedge in vessel.purchase_hedges
    )
    sale_hedges = pnl_weighted_average(
        (hedge.futures_price, hedge.covered_volume) for sale in vessel.sales for hedge in sale.hedges
    )

    if purchase_hedges.total_weight == _ZERO or sale_hedges.total_weight == _ZERO:
        attributable_volume = _ZERO
        futures_pnl = _ZERO
    else:
        attributable_volume = min(purchase_hedges.total_weight, sale_hedges.total_weight)
        purchase_converted = purchase_hedges.average * conversion_factor
        sale_converted = sale_hedges.average * conversion_factor
        futures_pnl = (sale_converted - purchase_converted) * attributable_volume

    return FuturesLegResult(
        purchase_price_average=purchase_hedges.average,
        sale_price_average=sale_hedges.average,
        purchase_volume=purchase_hedges.total_weight,
        sale_volume=sale_hedges.total_weight,
        attributable_volume=attributable_volume,
        pnl=futures_pnl,
    )


def pnl_compute_vessel(vessel: VesselPosition) -> VesselPnL:
    """Compute premium, flat, futures, and total P&L for one vessel.

    Args:
        vessel: Vessel snapshot with purchase hedges and sales with hedges.

    Returns:
        VesselPnL: Deterministic per-vessel P&L output.

    Raises:
        ValueError: Raised when vessel is None.
        UnknownProductError: Raised when the vessel product is not recognized.
    """

    if vessel is None:
        raise ValueError("vessel must not be None")

    conversion_factor = reference_conversion_factor(vessel.product)
    premium_leg = pnl_compute_premium(vessel)
    flat_leg = pnl_compute_flat(vessel)
    futures_leg = pnl_compute_futures(vessel)

    volume_sold = premium_leg.volume + flat_leg.volume
    sale_price_average = pnl_safe_ratio(
        premium_leg.sale_premium_average_converted * premium_leg.volume
        + flat_leg.sale_flat_price_average * flat_leg.volume,
        volume_sold,
    )

    _LOGGER.debug(
        "vessel pnl computed vessel_id=%s premium=%s flat=%s futures=%s",
        vessel.vessel_id,
        premium_leg.pnl,
        flat_leg.pnl,
        futures_leg.pnl,
    )

    return VesselPnL(
        vessel_id=vessel.vessel_id,
        vessel_name=vessel.name,
        product=domain_parse_product(vessel.product),
        purchase_premium=(vessel.purchase_premium or _ZERO) * conversion_factor,
        purchase_flat_price=vessel.purchase_flat_price,
        sale_premium_average=premium_leg.sale_premium_average_converted,
        sale_flat_price_average=flat_leg.sale_flat_price_average,
        sale_price_average=sale_price_average,
        pnl_premium=premium_leg.pnl,
        pnl_flat=flat_leg.pnl,
        futures_purchase_price_average=futures_leg.purchase_price_average,
        futures_sale_price_average=futures_leg.sale_price_average,
        pnl_futures=futures_leg.pnl,
        pnl_total=premium_leg.pnl + futures_leg.pnl,
        volume_purchased=vessel.total_volume,
        volume_sold=volume_sold,
        volume_hedged_purchase=futures_leg.purchase_volume,
        volume_hedged_sale=futures_leg.sale_volume,
    )


__all__ = [
    "FlatLegResult",
    "FuturesLegResult",
    "PremiumLegResult",
    "pnl_compute_flat",
    "pnl_compute_futures",
    "pnl_compute_premium",
    "pnl_compute_vessel",
    "pnl_landed_purchase_flat_price",
    "pnl_landed_purchase_premium",
]
