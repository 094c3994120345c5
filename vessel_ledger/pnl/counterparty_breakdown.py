"""Per-counterparty P&L attribution for vessel sales."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from vessel_ledger.domain import DealType, VesselPosition, domain_parse_product
from vessel_ledger.reference import reference_conversion_factor

from .interfaces import CounterpartyPnL, VesselCounterpartyBreakdown
from .vessel_engine import pnl_landed_purchase_flat_price, pnl_landed_purchase_premium
from .weighting import pnl_safe_ratio, pnl_weighted_average

_ZERO = Decimal("0")
_ONE = Decimal("1")


@dataclass
class _CounterpartyAccumulator:
    """Mutable per-counterparty totals used while walking a vessel's sales."""

    counterparty_id: str
    counterparty_name: str | None
    pnl_premium: Decimal = _ZERO
    pnl_flat: Decimal = _ZERO
    pnl_futures: Decimal = _ZERO
    volume_total: Decimal = _ZERO
    volume_hedged: Decimal = _ZERO


def pnl_compute_vessel_by_counterparty(vessel: VesselPosition) -> VesselCounterpartyBreakdown | None:
    """Split one vessel's P&L across the counterparties it was sold to.

    Futures attribution is scaled so the counterparties together never claim
    more hedge volume than the purchase side covers; the counterparty premium
    and futures figures therefore sum to the vessel-level figures.

    Args:
        vessel: Vessel snapshot.

    Returns:
        VesselCounterpartyBreakdown | None: Breakdown, or None when the vessel has no sales.

    Raises:
        UnknownProductError: Raised when the vessel product is not recognized.
    """

    conversion_factor = reference_conversion_factor(vessel.product)
    if not vessel.sales:
        return None

    purchase_premium = pnl_landed_purchase_premium(vessel, conversion_factor)
    purchase_flat_price = pnl_landed_purchase_flat_price(vessel)
    purchase_hedges = pnl_weighted_average(
        (hedge.futures_price, hedge.covered_volume) for hedge in vessel.purchase_hedges
    )
    sale_hedge_volume = sum(
        (hedge.covered_volume for sale in vessel.sales for hedge in sale.hedges),
        _ZERO,
    )
    if purchase_hedges.total_weight == _ZERO:
        attribution_ratio = _ZERO
    else:
        attribution_ratio = min(_ONE, pnl_safe_ratio(purchase_hedges.total_weight, sale_hedge_volume))

    accumulators: dict[str, _CounterpartyAccumulator] = {}
    for sale in vessel.sales:
        accumulator = accumulators.setdefault(
            sale.counterparty_id,
            _CounterpartyAccumulator(
                counterparty_id=sale.counterparty_id,
                counterparty_name=sale.counterparty_name,
            ),
        )
        accumulator.volume_total += sale.volume

        if sale.deal_type == DealType.PREMIUM:
            accumulator.pnl_premium += ((sale.premium or _ZERO) - purchase_premium) * conversion_factor * sale.volume
        elif sale.deal_type == DealType.FLAT:
            accumulator.pnl_flat += ((sale.flat_price or _ZERO) - purchase_flat_price) * sale.volume

        if sale.hedges:
            sale_hedges = pnl_weighted_average((hedge.futures_price, hedge.covered_volume) for hedge in sale.hedges)
            accumulator.volume_hedged += sale_hedges.total_weight
            if attribution_ratio > _ZERO and sale_hedges.total_weight > _ZERO:
                accumulator.pnl_futures += (
                    (sale_hedges.average - purchase_hedges.average)
                    * conversion_factor
                    * sale_hedges.total_weight
                    * attribution_ratio
                )

    counterparties = tuple(
        CounterpartyPnL(
            counterparty_id=accumulator.counterparty_id,
            counterparty_name=accumulator.counterparty_name,
            pnl_premium=accumulator.pnl_premium,
            pnl_flat=accumulator.pnl_flat,
            pnl_futures=accumulator.pnl_futures,
            pnl_total=accumulator.pnl_premium + accumulator.pnl_futures,
            volume_total=accumulator.volume_total,
            volume_hedged=accumulator.volume_hedged,
        )
        for accumulator in accumulators.values()
    )
    return VesselCounterpartyBreakdown(
        vessel_id=vessel.vessel_id,
        vessel_name=vessel.name,
        product=domain_parse_product(vessel.product),
        counterparties=counterparties,
        total_pnl=sum((counterparty.pnl_total for counterparty in counterparties), _ZERO),
        total_volume=sum((counterparty.volume_total for counterparty in counterparties), _ZERO),
    )


def pnl_compute_counterparty_breakdown(
    vessels: Iterable[VesselPosition],
) -> tuple[VesselCounterpartyBreakdown, ...]:
    """Build counterparty breakdowns for every vessel that has sales.

    Args:
        vessels: Vessel snapshots.

    Returns:
        tuple[VesselCounterpartyBreakdown, ...]: Breakdowns in input order, unsold vessels skipped.

    Raises:
        UnknownProductError: Raised when any vessel product is not recognized.
    """

    breakdowns = (pnl_compute_vessel_by_counterparty(vessel) for vessel in vessels)
    return tuple(breakdown for breakdown in breakdowns if breakdown is not None)


__all__ = ["pnl_compute_counterparty_breakdown", "pnl_compute_vessel_by_counterparty"]
