"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from vessel_ledger.api import create_api_application
from vessel_ledger.config import AppSettings, config_load_settings
from vessel_ledger.db import SQLAlchemyDatabaseHealthService, SQLAlchemyVesselBookService, db_create_engine
from vessel_ledger.observability import observability_configure_logging
from vessel_ledger.pnl import PortfolioPnLService


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional preloaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    observability_configure_logging(resolved_settings.log_level)
    engine = db_create_engine(
        database_url=resolved_settings.database_url,
        echo_sql=resolved_settings.database_echo_sql,
    )
    db_health_service = SQLAlchemyDatabaseHealthService(engine=engine)
    pnl_service = PortfolioPnLService(
        repository=SQLAlchemyVesselBookService(engine=engine),
        include_rolled_vessels=resolved_settings.include_rolled_vessels,
    )
    return create_api_application(
        settings=resolved_settings,
        db_health_service=db_health_service,
        pnl_service=pnl_service,
    )


def bootstrap_create_pnl_service(settings: AppSettings | None = None) -> PortfolioPnLService:
    """Build the P&L service for non-HTTP surfaces.

    Args:
        settings: Optional preloaded settings; loaded from the environment when omitted.

    Returns:
        PortfolioPnLService: P&L service wired to the configured vessel book.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    engine = db_create_engine(
        database_url=resolved_settings.database_url,
        echo_sql=resolved_settings.database_echo_sql,
    )
    return PortfolioPnLService(
        repository=SQLAlchemyVesselBookService(engine=engine),
        include_rolled_vessels=resolved_settings.include_rolled_vessels,
    )
