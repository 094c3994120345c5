"""Database health service for vessel book connectivity checks."""

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from vessel_ledger.domain import HealthStatus

from .interfaces import DatabaseHealthPort


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Health service verifying the vessel book tables are reachable."""

    def __init__(self, engine: Engine):
        """Initialize database health service.

        Args:
            engine: SQLAlchemy engine used for connectivity checks.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_connection_label(self) -> str:
        """Return the target database URL with the password masked."""

        return self._engine.url.render_as_string(hide_password=True)

    def db_check_health(self) -> HealthStatus:
        """Count vessel rows as a lightweight readiness probe.

        Returns:
            HealthStatus: Health payload with the visible vessel count as detail.

        Raises:
            ConnectionError: Raised when the vessel book cannot be queried.
        """

        try:
            with self._engine.connect() as connection:
                vessel_count = connection.execute(text("SELECT count(*) FROM vessel")).scalar_one()
        except SQLAlchemyError as error:
            raise ConnectionError("vessel book connectivity check failed") from error
        return HealthStatus(status="ok", detail=f"vessel book reachable ({vessel_count} vessels)")
