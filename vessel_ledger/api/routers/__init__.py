"""API router package for endpoint composition."""

from .health import api_create_health_router
from .pnl import (
	api_create_pnl_router,
	api_pnl_error_response,
	api_serialize_counterparty_breakdown,
	api_serialize_portfolio_pnl,
	api_serialize_vessel_pnl,
)
from .reference import api_create_reference_router

__all__ = [
	"api_create_health_router",
	"api_create_pnl_router",
	"api_create_reference_router",
	"api_pnl_error_response",
	"api_serialize_counterparty_breakdown",
	"api_serialize_portfolio_pnl",
	"api_serialize_vessel_pnl",
]
