"""Typed result contracts and ports for P&L computations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, Protocol, TypeVar

from vessel_ledger.domain import Product

EntryT = TypeVar("EntryT")


@dataclass(frozen=True)
class VesselPnL:
    """P&L computation output for one vessel.

    Attributes:
        vessel_id: Vessel identifier.
        vessel_name: Vessel display name.
        product: Product identity.
        purchase_premium: Purchase premium converted to $/tonne, CFR basis.
        purchase_flat_price: Purchase flat price in $/tonne when flat-priced.
        sale_premium_average: Volume-weighted sale premium converted to $/tonne.
        sale_flat_price_average: Volume-weighted sale flat price in $/tonne.
        sale_price_average: Blend of converted premium and flat sale averages in $/tonne.
        pnl_premium: Premium spread P&L.
        pnl_flat: Flat-price spread P&L, reported outside `pnl_total`.
        futures_purchase_price_average: Weighted purchase-hedge price in native units.
        futures_sale_price_average: Weighted sale-hedge price in native units.
        pnl_futures: Futures P&L on the volume hedged on both legs.
        pnl_total: Premium plus futures P&L.
        volume_purchased: Purchased volume.
        volume_sold: Volume sold across premium and flat sales.
        volume_hedged_purchase: Purchase-hedge covered volume.
        volume_hedged_sale: Sale-hedge covered volume.
    """

    vessel_id: str
    vessel_name: str
    product: Product
    purchase_premium: Decimal
    purchase_flat_price: Decimal | None
    sale_premium_average: Decimal
    sale_flat_price_average: Decimal
    sale_price_average: Decimal
    pnl_premium: Decimal
    pnl_flat: Decimal
    futures_purchase_price_average: Decimal
    futures_sale_price_average: Decimal
    pnl_futures: Decimal
    pnl_total: Decimal
    volume_purchased: Decimal
    volume_sold: Decimal
    volume_hedged_purchase: Decimal
    volume_hedged_sale: Decimal


@dataclass(frozen=True)
class PortfolioPnL:
    """Fleet-wide P&L aggregate.

    Attributes:
        vessel_count: Number of vessels aggregated.
        pnl_premium_total: Summed premium P&L.
        pnl_flat_total: Summed flat-price P&L.
        pnl_futures_total: Summed futures P&L.
        pnl_total: Summed total P&L.
        volume_total: Summed purchased volume.
        vessels: Per-vessel results in input order.
    """

    vessel_count: int
    pnl_premium_total: Decimal
    pnl_flat_total: Decimal
    pnl_futures_total: Decimal
    pnl_total: Decimal
    volume_total: Decimal
    vessels: tuple[VesselPnL, ...]


@dataclass(frozen=True)
class CounterpartyPnL:
    """P&L attributed to one counterparty on one vessel.

    Attributes:
        counterparty_id: Counterparty identifier.
        counterparty_name: Counterparty display name.
        pnl_premium: Premium P&L on this counterparty's premium sales.
        pnl_flat: Flat-price P&L on this counterparty's flat sales.
        pnl_futures: Futures P&L on this counterparty's attributable hedge volume.
        pnl_total: Premium plus futures P&L.
        volume_total: Volume sold to this counterparty.
        volume_hedged: Sale-hedge volume on this counterparty's sales.
    """

    counterparty_id: str
    counterparty_name: str | None
    pnl_premium: Decimal
    pnl_flat: Decimal
    pnl_futures: Decimal
    pnl_total: Decimal
    volume_total: Decimal
    volume_hedged: Decimal


@dataclass(frozen=True)
class VesselCounterpartyBreakdown:
    """Per-counterparty P&L split for one vessel.

    Attributes:
        vessel_id: Vessel identifier.
        vessel_name: Vessel display name.
        product: Product identity.
        counterparties: Counterparty rows in first-sale order.
        total_pnl: Sum of counterparty `pnl_total` values.
        total_volume: Sum of counterparty volumes.
    """

    vessel_id: str
    vessel_name: str
    product: Product
    counterparties: tuple[CounterpartyPnL, ...]
    total_pnl: Decimal
    total_volume: Decimal


@dataclass(frozen=True)
class ShareEntry(Generic[EntryT]):
    """One entry annotated with its share of a grand total.

    Attributes:
        entry: Original entry.
        value: Value selected from the entry.
        percentage: `100 * value / total`, 0 when the total is 0.
    """

    entry: EntryT
    value: Decimal
    percentage: Decimal


class PortfolioPnLPort(Protocol):
    """Port definition for P&L read services consumed by API surfaces."""

    def pnl_portfolio(self, counterparty_id: str | None = None) -> PortfolioPnL:
        """Compute portfolio P&L, optionally scoped to one counterparty.

        Args:
            counterparty_id: Optional counterparty scope.

        Returns:
            PortfolioPnL: Fleet-wide aggregate.

        Raises:
            UnknownProductError: Raised when a vessel carries an unrecognized product.
            RuntimeError: Raised when the vessel book cannot be read.
        """

    def pnl_vessel(self, vessel_id: str, counterparty_id: str | None = None) -> VesselPnL | None:
        """Compute P&L for one vessel.

        Args:
            vessel_id: Vessel identifier.
            counterparty_id: Optional counterparty scope.

        Returns:
            VesselPnL | None: Vessel result, None when the vessel is unknown.

        Raises:
            UnknownProductError: Raised when the vessel carries an unrecognized product.
            RuntimeError: Raised when the vessel book cannot be read.
        """

    def pnl_counterparty_breakdown(
        self,
        counterparty_id: str | None = None,
    ) -> tuple[VesselCounterpartyBreakdown, ...]:
        """Compute per-counterparty P&L splits for every sold vessel.

        Args:
            counterparty_id: Optional counterparty scope.

        Returns:
            tuple[VesselCounterpartyBreakdown, ...]: Breakdowns for vessels with sales.

        Raises:
            UnknownProductError: Raised when a vessel carries an unrecognized product.
            RuntimeError: Raised when the vessel book cannot be read.
        """


__all__ = [
    "CounterpartyPnL",
    "PortfolioPnL",
    "PortfolioPnLPort",
    "ShareEntry",
    "VesselCounterpartyBreakdown",
    "VesselPnL",
]
