"""Portfolio aggregation over per-vessel P&L results."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

from vessel_ledger.domain import VesselPosition

from .interfaces import PortfolioPnL
from .vessel_engine import pnl_compute_vessel

_LOGGER = logging.getLogger("vessel_ledger.pnl")


def pnl_scope_vessel_sales(vessel: VesselPosition, counterparty_id: str | None) -> VesselPosition:
    """Restrict a vessel's visible sales to one counterparty.

    Purchase-side data is left untouched, so a vessel without matching sales
    keeps its purchase terms and purchase hedges.

    Args:
        vessel: Vessel snapshot.
        counterparty_id: Counterparty scope; None leaves every sale visible.

    Returns:
        VesselPosition: Scoped vessel snapshot.

    Raises:
        ValueError: Raised when counterparty_id is blank.
    """

    if counterparty_id is None:
        return vessel
    normalized_counterparty_id = counterparty_id.strip()
    if not normalized_counterparty_id:
        raise ValueError("counterparty_id must not be blank")
    return replace(
        vessel,
        sales=tuple(sale for sale in vessel.sales if sale.counterparty_id == normalized_counterparty_id),
    )


def pnl_compute_portfolio(
    vessels: Iterable[VesselPosition],
    counterparty_id: str | None = None,
) -> PortfolioPnL:
    """Compute and aggregate P&L across a vessel collection.

    Args:
        vessels: Vessel snapshots, in the order results should be reported.
        counterparty_id: Optional counterparty scope applied to every vessel's sales.

    Returns:
        PortfolioPnL: Fleet-wide totals and per-vessel results in input order.

    Raises:
        ValueError: Raised when counterparty_id is blank.
        UnknownProductError: Raised when any vessel product is not recognized.
    """

    vessel_results = tuple(
        pnl_compute_vessel(pnl_scope_vessel_sales(vessel, counterparty_id)) for vessel in vessels
    )

    portfolio = PortfolioPnL(
        vessel_count=len(vessel_results),
        pnl_premium_total=sum((result.pnl_premium for result in vessel_results), Decimal("0")),
        pnl_flat_total=sum((result.pnl_flat for result in vessel_results), Decimal("0")),
        pnl_futures_total=sum((result.pnl_futures for result in vessel_results), Decimal("0")),
        pnl_total=sum((result.pnl_total for result in vessel_results), Decimal("0")),
        volume_total=sum((result.volume_purchased for result in vessel_results), Decimal("0")),
        vessels=vessel_results,
    )
    _LOGGER.debug(
        "portfolio pnl computed vessel_count=%s scoped=%s pnl_total=%s",
        portfolio.vessel_count,
        counterparty_id is not None,
        portfolio.pnl_total,
    )
    return portfolio


__all__ = ["pnl_compute_portfolio", "pnl_scope_vessel_sales"]
