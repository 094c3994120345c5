"""P&L layer package for vessel, portfolio, and breakdown computations."""

from .counterparty_breakdown import pnl_compute_counterparty_breakdown, pnl_compute_vessel_by_counterparty
from .interfaces import (
	CounterpartyPnL,
	PortfolioPnL,
	PortfolioPnLPort,
	ShareEntry,
	VesselCounterpartyBreakdown,
	VesselPnL,
)
from .portfolio import pnl_compute_portfolio, pnl_scope_vessel_sales
from .service import PortfolioPnLService
from .shares import pnl_counterparty_pnl_shares, pnl_counterparty_volume_shares, pnl_with_shares
from .vessel_engine import (
	FlatLegResult,
	FuturesLegResult,
	PremiumLegResult,
	pnl_compute_flat,
	pnl_compute_futures,
	pnl_compute_premium,
	pnl_compute_vessel,
)
from .weighting import WeightedAverage, pnl_safe_ratio, pnl_weighted_average

__all__ = [
	"CounterpartyPnL",
	"PortfolioPnL",
	"PortfolioPnLPort",
	"ShareEntry",
	"VesselCounterpartyBreakdown",
	"VesselPnL",
	"FlatLegResult",
	"FuturesLegResult",
	"PremiumLegResult",
	"WeightedAverage",
	"PortfolioPnLService",
	"pnl_compute_counterparty_breakdown",
	"pnl_compute_flat",
	"pnl_compute_futures",
	"pnl_compute_portfolio",
	"pnl_compute_premium",
	"pnl_compute_vessel",
	"pnl_compute_vessel_by_counterparty",
	"pnl_counterparty_pnl_shares",
	"pnl_counterparty_volume_shares",
	"pnl_safe_ratio",
	"pnl_scope_vessel_sales",
	"pnl_weighted_average",
	"pnl_with_shares",
]
