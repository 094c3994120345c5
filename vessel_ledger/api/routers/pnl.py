"""P&L API router composition for portfolio, vessel, and breakdown reads."""

from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from vessel_ledger.domain import UnknownProductError
from vessel_ledger.pnl import (
    CounterpartyPnL,
    PortfolioPnL,
    PortfolioPnLPort,
    ShareEntry,
    VesselCounterpartyBreakdown,
    VesselPnL,
    pnl_counterparty_pnl_shares,
    pnl_counterparty_volume_shares,
)

_LOGGER = logging.getLogger("vessel_ledger.api")
_HTTP_UNPROCESSABLE = 422


def api_create_pnl_router(pnl_service: PortfolioPnLPort) -> APIRouter:
    """Create P&L router exposing portfolio, vessel, and breakdown endpoints.

    Args:
        pnl_service: P&L read service.

    Returns:
        APIRouter: Router exposing `/pnl` endpoints.

    Raises:
        ValueError: Raised when pnl_service is invalid.
    """

    if pnl_service is None:
        raise ValueError("pnl_service must not be None")

    router = APIRouter(prefix="/pnl", tags=["pnl"])

    @router.get("/portfolio")
    def api_pnl_portfolio(counterparty_id: str | None = Query(default=None)) -> JSONResponse:
        """Return portfolio P&L, optionally scoped to one counterparty's sales.

        Args:
            counterparty_id: Optional counterparty scope.

        Returns:
            JSONResponse: Serialized portfolio P&L or error envelope.

        Raises:
            RuntimeError: This handler maps service failures to error responses.
        """

        try:
            portfolio = pnl_service.pnl_portfolio(counterparty_id=counterparty_id)
        except (ValueError, RuntimeError) as error:
            return api_pnl_error_response(error)
        return JSONResponse(content=api_serialize_portfolio_pnl(portfolio), status_code=status.HTTP_200_OK)

    @router.get("/vessels/{vessel_id}")
    def api_pnl_vessel(vessel_id: str, counterparty_id: str | None = Query(default=None)) -> JSONResponse:
        """Return P&L for one vessel.

        Args:
            vessel_id: Vessel identifier.
            counterparty_id: Optional counterparty scope.

        Returns:
            JSONResponse: Serialized vessel P&L, 404 when the vessel is unknown.

        Raises:
            RuntimeError: This handler maps service failures to error responses.
        """

        try:
            vessel_pnl = pnl_service.pnl_vessel(vessel_id=vessel_id, counterparty_id=counterparty_id)
        except (ValueError, RuntimeError) as error:
            return api_pnl_error_response(error)
        if vessel_pnl is None:
            payload = {
                "status": "error",
                "code": "VESSEL_NOT_FOUND",
                "message": f"vessel not found: {vessel_id}",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(content=api_serialize_vessel_pnl(vessel_pnl), status_code=status.HTTP_200_OK)

    @router.get("/breakdown")
    def api_pnl_breakdown(counterparty_id: str | None = Query(default=None)) -> JSONResponse:
        """Return per-vessel counterparty P&L and volume shares.

        Args:
            counterparty_id: Optional counterparty scope.

        Returns:
            JSONResponse: Breakdown list envelope.

        Raises:
            RuntimeError: This handler maps service failures to error responses.
        """

        try:
            breakdowns = pnl_service.pnl_counterparty_breakdown(counterparty_id=counterparty_id)
        except (ValueError, RuntimeError) as error:
            return api_pnl_error_response(error)
        payload = {
            "items": [api_serialize_counterparty_breakdown(breakdown) for breakdown in breakdowns],
            "returned": len(breakdowns),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router


def api_pnl_error_response(error: Exception) -> JSONResponse:
    """Map a P&L service failure to a deterministic error envelope.

    Args:
        error: Raised service error.

    Returns:
        JSONResponse: Error payload with status code per error class.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(error, UnknownProductError):
        _LOGGER.warning("pnl request rejected unknown product=%r", error.product)
        payload = {"status": "error", "code": "UNKNOWN_PRODUCT", "message": str(error)}
        return JSONResponse(content=payload, status_code=_HTTP_UNPROCESSABLE)
    if isinstance(error, ValueError):
        payload = {"status": "error", "code": "INVALID_REQUEST", "message": str(error)}
        return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)
    _LOGGER.warning("pnl request failed: %s", error)
    payload = {"status": "error", "code": "VESSEL_BOOK_UNAVAILABLE", "message": str(error)}
    return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


def _api_decimal(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


def api_serialize_vessel_pnl(vessel_pnl: VesselPnL) -> dict[str, object]:
    """Serialize one vessel P&L result to JSON payload.

    Args:
        vessel_pnl: Vessel P&L result.

    Returns:
        dict[str, object]: JSON-serializable payload with decimals as strings.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "vessel_id": vessel_pnl.vessel_id,
        "vessel_name": vessel_pnl.vessel_name,
        "product": vessel_pnl.product.value,
        "purchase_premium": _api_decimal(vessel_pnl.purchase_premium),
        "purchase_flat_price": _api_decimal(vessel_pnl.purchase_flat_price),
        "sale_premium_average": _api_decimal(vessel_pnl.sale_premium_average),
        "sale_flat_price_average": _api_decimal(vessel_pnl.sale_flat_price_average),
        "sale_price_average": _api_decimal(vessel_pnl.sale_price_average),
        "pnl_premium": _api_decimal(vessel_pnl.pnl_premium),
        "pnl_flat": _api_decimal(vessel_pnl.pnl_flat),
        "futures_purchase_price_average": _api_decimal(vessel_pnl.futures_purchase_price_average),
        "futures_sale_price_average": _api_decimal(vessel_pnl.futures_sale_price_average),
        "pnl_futures": _api_decimal(vessel_pnl.pnl_futures),
        "pnl_total": _api_decimal(vessel_pnl.pnl_total),
        "volume_purchased": _api_decimal(vessel_pnl.volume_purchased),
        "volume_sold": _api_decimal(vessel_pnl.volume_sold),
        "volume_hedged_purchase": _api_decimal(vessel_pnl.volume_hedged_purchase),
        "volume_hedged_sale": _api_decimal(vessel_pnl.volume_hedged_sale),
    }


def api_serialize_portfolio_pnl(portfolio: PortfolioPnL) -> dict[str, object]:
    """Serialize portfolio P&L aggregate to JSON payload."""

    return {
        "vessel_count": portfolio.vessel_count,
        "pnl_premium_total": _api_decimal(portfolio.pnl_premium_total),
        "pnl_flat_total": _api_decimal(portfolio.pnl_flat_total),
        "pnl_futures_total": _api_decimal(portfolio.pnl_futures_total),
        "pnl_total": _api_decimal(portfolio.pnl_total),
        "volume_total": _api_decimal(portfolio.volume_total),
        "vessels": [api_serialize_vessel_pnl(vessel_pnl) for vessel_pnl in portfolio.vessels],
    }


def _api_serialize_share(share: ShareEntry[CounterpartyPnL]) -> dict[str, object]:
    return {
        "counterparty_id": share.entry.counterparty_id,
        "counterparty_name": share.entry.counterparty_name,
        "value": _api_decimal(share.value),
        "percentage": _api_decimal(share.percentage),
    }


def api_serialize_counterparty_breakdown(breakdown: VesselCounterpartyBreakdown) -> dict[str, object]:
    """Serialize one vessel counterparty breakdown with P&L and volume shares.

    Args:
        breakdown: Vessel counterparty breakdown.

    Returns:
        dict[str, object]: JSON-serializable breakdown payload.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "vessel_id": breakdown.vessel_id,
        "vessel_name": breakdown.vessel_name,
        "product": breakdown.product.value,
        "total_pnl": _api_decimal(breakdown.total_pnl),
        "total_volume": _api_decimal(breakdown.total_volume),
        "counterparties": [
            {
                "counterparty_id": counterparty.counterparty_id,
                "counterparty_name": counterparty.counterparty_name,
                "pnl_premium": _api_decimal(counterparty.pnl_premium),
                "pnl_flat": _api_decimal(counterparty.pnl_flat),
                "pnl_futures": _api_decimal(counterparty.pnl_futures),
                "pnl_total": _api_decimal(counterparty.pnl_total),
                "volume_total": _api_decimal(counterparty.volume_total),
                "volume_hedged": _api_decimal(counterparty.volume_hedged),
            }
            for counterparty in breakdown.counterparties
        ],
        "pnl_shares": [_api_serialize_share(share) for share in pnl_counterparty_pnl_shares(breakdown)],
        "volume_shares": [_api_serialize_share(share) for share in pnl_counterparty_volume_shares(breakdown)],
    }


__all__ = [
    "api_create_pnl_router",
    "api_pnl_error_response",
    "api_serialize_counterparty_breakdown",
    "api_serialize_portfolio_pnl",
    "api_serialize_vessel_pnl",
]
