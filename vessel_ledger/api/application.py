"""FastAPI application factory for the vessel P&L service."""

from fastapi import FastAPI

from vessel_ledger.config import AppSettings
from vessel_ledger.db import DatabaseHealthPort
from vessel_ledger.pnl import PortfolioPnLPort

from .routers import api_create_health_router, api_create_pnl_router, api_create_reference_router


def create_api_application(
    settings: AppSettings,
    db_health_service: DatabaseHealthPort,
    pnl_service: PortfolioPnLPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        db_health_service: Database health service used by health endpoints.
        pnl_service: P&L read service used by `/pnl` endpoints.

    Returns:
        FastAPI: Framework application with health, P&L, and reference routers.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """
    application = FastAPI(title="Vessel P&L Ledger")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return a minimal service identity response."""

        return {
            "service": "vessel-pnl-ledger",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(api_create_pnl_router(pnl_service=pnl_service))
    application.include_router(api_create_reference_router())

    return application
