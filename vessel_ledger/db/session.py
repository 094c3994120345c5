"""Database engine utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine


def db_create_engine(database_url: str, echo_sql: bool = False) -> Engine:
    """Create the SQLAlchemy engine for vessel book reads.

    Args:
        database_url: SQLAlchemy database URL.
        echo_sql: Log emitted SQL through the `sqlalchemy.engine` logger.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")

    return create_engine(database_url, pool_pre_ping=True, echo=echo_sql)
