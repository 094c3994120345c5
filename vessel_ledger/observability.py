"""Process-wide logging configuration for runtime entrypoints."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def observability_configure_logging(log_level: str) -> logging.Logger:
    """Configure root logging once and return the application logger.

    Args:
        log_level: Standard level name applied to the `vessel_ledger` logger hierarchy.

    Returns:
        logging.Logger: The `vessel_ledger` logger.

    Raises:
        ValueError: Raised when log_level is not a standard level name.
    """

    resolved_level = logging.getLevelName(log_level.strip().upper())
    if not isinstance(resolved_level, int):
        raise ValueError(f"unsupported log_level={log_level}")

    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
    application_logger = logging.getLogger("vessel_ledger")
    application_logger.setLevel(resolved_level)
    return application_logger


__all__ = ["observability_configure_logging"]
