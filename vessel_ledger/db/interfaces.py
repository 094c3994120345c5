"""Typed interfaces for database-layer services.

All SQL access must remain in the db package and its submodules. The vessel
book is read-only from this service's point of view.
"""

from typing import Protocol

from vessel_ledger.domain import HealthStatus, VesselPosition


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


class VesselBookRepositoryPort(Protocol):
    """Port definition for read-only vessel book snapshots."""

    def db_vessel_list(self, include_rolled: bool = False) -> list[VesselPosition]:
        """List vessels with purchase hedges and sales with hedges embedded.

        Args:
            include_rolled: Include vessels rolled from a parent vessel.

        Returns:
            list[VesselPosition]: Vessel snapshots in deterministic order.

        Raises:
            UnknownProductError: Raised when a stored product is not recognized.
            RuntimeError: Raised when database read fails.
        """

    def db_vessel_get(self, vessel_id: str) -> VesselPosition | None:
        """Load one vessel snapshot by identifier.

        Args:
            vessel_id: Vessel identifier.

        Returns:
            VesselPosition | None: Vessel snapshot, None when missing.

        Raises:
            ValueError: Raised when vessel_id is blank.
            UnknownProductError: Raised when the stored product is not recognized.
            RuntimeError: Raised when database read fails.
        """
