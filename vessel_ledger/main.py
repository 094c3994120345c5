"""Main module entrypoint for local runtime execution.

`api` validates startup configuration and launches the FastAPI service;
`portfolio-report` prints one portfolio P&L snapshot as JSON.
"""

import argparse
import json
import logging

import uvicorn

from vessel_ledger.api.routers import api_serialize_portfolio_pnl
from vessel_ledger.bootstrap import bootstrap_create_application, bootstrap_create_pnl_service
from vessel_ledger.config import config_load_settings
from vessel_ledger.observability import observability_configure_logging

_LOGGER = logging.getLogger("vessel_ledger.main")


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when the portfolio report cannot be produced.
    """

    argument_parser = argparse.ArgumentParser(description="Vessel P&L ledger runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "portfolio-report"),
        help="Runtime command: `api` starts server, `portfolio-report` prints portfolio P&L as JSON",
        type=str,
    )
    argument_parser.add_argument(
        "--counterparty-id",
        dest="counterparty_id",
        type=str,
        help="Optional counterparty scope for `portfolio-report`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    observability_configure_logging(settings.log_level)

    if parsed_arguments.command == "portfolio-report":
        pnl_service = bootstrap_create_pnl_service(settings=settings)
        try:
            portfolio = pnl_service.pnl_portfolio(counterparty_id=parsed_arguments.counterparty_id)
        except (ValueError, RuntimeError) as error:
            _LOGGER.error("portfolio report failed: %s", error)
            raise SystemExit(1) from error
        print(json.dumps(api_serialize_portfolio_pnl(portfolio), indent=2))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
