"""P&L read service assembling vessel book snapshots and engine computations."""
# pylint: disable=too-few-public-methods

from __future__ import annotations

import logging
from uuid import UUID

from vessel_ledger.db import VesselBookRepositoryPort

from .counterparty_breakdown import pnl_compute_counterparty_breakdown
from .interfaces import PortfolioPnL, PortfolioPnLPort, VesselCounterpartyBreakdown, VesselPnL
from .portfolio import pnl_compute_portfolio, pnl_scope_vessel_sales
from .vessel_engine import pnl_compute_vessel

_LOGGER = logging.getLogger("vessel_ledger.pnl")


class PortfolioPnLService(PortfolioPnLPort):
    """Compute P&L views from read-only vessel book snapshots."""

    def __init__(self, repository: VesselBookRepositoryPort, include_rolled_vessels: bool = False):
        """Initialize service dependencies.

        Args:
            repository: DB-layer vessel book repository.
            include_rolled_vessels: Include vessels rolled from a parent vessel in list views.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when repository is invalid.
        """

        if repository is None:
            raise ValueError("repository must not be None")
        self._repository = repository
        self._include_rolled_vessels = include_rolled_vessels

    def pnl_portfolio(self, counterparty_id: str | None = None) -> PortfolioPnL:
        """Compute portfolio P&L over the current vessel book.

        Args:
            counterparty_id: Optional counterparty scope; None is the administrator view.

        Returns:
            PortfolioPnL: Fleet-wide aggregate.

        Raises:
            ValueError: Raised when counterparty_id is blank or not a UUID.
            UnknownProductError: Raised when a vessel carries an unrecognized product.
            RuntimeError: Raised when the vessel book cannot be read.
        """

        counterparty_id = self._pnl_normalize_counterparty_id(counterparty_id)
        vessels = self._repository.db_vessel_list(include_rolled=self._include_rolled_vessels)
        portfolio = pnl_compute_portfolio(vessels, counterparty_id=counterparty_id)
        _LOGGER.info(
            "portfolio pnl served vessel_count=%s scoped=%s",
            portfolio.vessel_count,
            counterparty_id is not None,
        )
        return portfolio

    def pnl_vessel(self, vessel_id: str, counterparty_id: str | None = None) -> VesselPnL | None:
        """Compute P&L for one vessel.

        Args:
            vessel_id: Vessel identifier.
            counterparty_id: Optional counterparty scope.

        Returns:
            VesselPnL | None: Vessel result, None when the vessel is unknown.

        Raises:
            ValueError: Raised when identifiers are invalid.
            UnknownProductError: Raised when the vessel carries an unrecognized product.
            RuntimeError: Raised when the vessel book cannot be read.
        """

        counterparty_id = self._pnl_normalize_counterparty_id(counterparty_id)
        vessel = self._repository.db_vessel_get(vessel_id)
        if vessel is None:
            return None
        return pnl_compute_vessel(pnl_scope_vessel_sales(vessel, counterparty_id))

    def pnl_counterparty_breakdown(
        self,
        counterparty_id: str | None = None,
    ) -> tuple[VesselCounterpartyBreakdown, ...]:
        """Compute per-counterparty P&L splits for every sold vessel.

        Args:
            counterparty_id: Optional counterparty scope.

        Returns:
            tuple[VesselCounterpartyBreakdown, ...]: Breakdowns for vessels with visible sales.

        Raises:
            ValueError: Raised when counterparty_id is blank or not a UUID.
            UnknownProductError: Raised when a vessel carries an unrecognized product.
            RuntimeError: Raised when the vessel book cannot be read.
        """

        counterparty_id = self._pnl_normalize_counterparty_id(counterparty_id)
        vessels = self._repository.db_vessel_list(include_rolled=self._include_rolled_vessels)
        return pnl_compute_counterparty_breakdown(
            pnl_scope_vessel_sales(vessel, counterparty_id) for vessel in vessels
        )

    def _pnl_normalize_counterparty_id(self, counterparty_id: str | None) -> str | None:
        """Normalize a counterparty scope to the vessel book's canonical UUID text.

        Args:
            counterparty_id: Optional counterparty scope.

        Returns:
            str | None: Lowercase hyphenated UUID text, or None for the unscoped view.

        Raises:
            ValueError: Raised when counterparty_id is blank or not a UUID.
        """

        if counterparty_id is None:
            return None
        if not counterparty_id.strip():
            raise ValueError("counterparty_id must not be blank")
        try:
            return str(UUID(counterparty_id.strip()))
        except ValueError as error:
            raise ValueError("counterparty_id must be a valid UUID") from error


__all__ = ["PortfolioPnLService"]
