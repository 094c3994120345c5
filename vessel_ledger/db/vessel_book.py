"""Database service for read-only vessel book snapshots."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from vessel_ledger.db.interfaces import VesselBookRepositoryPort
from vessel_ledger.domain import (
    HedgeLeg,
    Sale,
    VesselPosition,
    domain_parse_deal_type,
    domain_parse_incoterm,
    domain_parse_product,
    domain_resolve_purchase_pricing,
)

_LOGGER = logging.getLogger("vessel_ledger.db")

_VESSEL_SCOPE_PREDICATES = {
    "roots": "v.parent_vessel_id IS NULL",
    "all": "TRUE",
    "one": "v.vessel_id = CAST(:vessel_id AS uuid)",
}


def _db_build_scope_queries(predicate: str) -> dict[str, str]:
    """Build the fixed SQL templates for one vessel scope predicate."""

    return {
        "vessel": (
            "SELECT "
            "v.vessel_id, v.name, v.product, v.total_volume, v.purchase_premium, v.purchase_flat_price, "
            "v.supplier, v.incoterm, v.freight_rate "
            "FROM vessel v "
            f"WHERE {predicate} "
            "ORDER BY v.created_at_utc asc, v.vessel_id asc"
        ),
        "purchase_hedge": (
            "SELECT "
            "h.vessel_id, h.covered_volume, h.futures_price, h.contract_count "
            "FROM purchase_hedge h "
            "JOIN vessel v ON v.vessel_id = h.vessel_id "
            f"WHERE {predicate} "
            "ORDER BY h.hedged_at_utc asc, h.purchase_hedge_id asc"
        ),
        "sale": (
            "SELECT "
            "s.sale_id, s.vessel_id, s.counterparty_id, c.name AS counterparty_name, s.deal_type, s.volume, "
            "s.premium, s.flat_price, s.price_reference "
            "FROM sale s "
            "JOIN vessel v ON v.vessel_id = s.vessel_id "
            "LEFT JOIN counterparty c ON c.counterparty_id = s.counterparty_id "
            f"WHERE {predicate} "
            "ORDER BY s.deal_date asc, s.sale_id asc"
        ),
        "sale_hedge": (
            "SELECT "
            "sh.sale_id, sh.covered_volume, sh.futures_price, sh.contract_count "
            "FROM sale_hedge sh "
            "JOIN sale s ON s.sale_id = sh.sale_id "
            "JOIN vessel v ON v.vessel_id = s.vessel_id "
            f"WHERE {predicate} "
            "ORDER BY sh.hedged_at_utc asc, sh.sale_hedge_id asc"
        ),
    }


class SQLAlchemyVesselBookService(VesselBookRepositoryPort):
    """SQLAlchemy implementation of read-only vessel book snapshot queries."""

    _QUERIES_BY_SCOPE = {
        scope_name: _db_build_scope_queries(predicate) for scope_name, predicate in _VESSEL_SCOPE_PREDICATES.items()
    }

    def __init__(self, engine: Engine):
        """Initialize vessel book database service.

        Args:
            engine: SQLAlchemy engine used for snapshot reads.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when engine is invalid.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_vessel_list(self, include_rolled: bool = False) -> list[VesselPosition]:
        """List vessel snapshots with nested hedges and sales.

        Args:
            include_rolled: Include vessels rolled from a parent vessel.

        Returns:
            list[VesselPosition]: Vessel snapshots ordered by creation time.

        Raises:
            UnknownProductError: Raised when a stored product is not recognized.
            RuntimeError: Raised when database read fails.
        """

        scope_name = "all" if include_rolled else "roots"
        vessels = self._db_vessel_book_read(scope_name=scope_name, parameters={})
        _LOGGER.info("vessel book read scope=%s vessel_count=%s", scope_name, len(vessels))
        return vessels

    def db_vessel_get(self, vessel_id: str) -> VesselPosition | None:
        """Load one vessel snapshot by identifier.

        Args:
            vessel_id: Vessel UUID text.

        Returns:
            VesselPosition | None: Vessel snapshot, None when missing.

        Raises:
            ValueError: Raised when vessel_id is blank or not a UUID.
            UnknownProductError: Raised when the stored product is not recognized.
            RuntimeError: Raised when database read fails.
        """

        normalized_vessel_id = self._db_vessel_validate_uuid_text(vessel_id, "vessel_id")
        vessels = self._db_vessel_book_read(scope_name="one", parameters={"vessel_id": normalized_vessel_id})
        return vessels[0] if vessels else None

    def _db_vessel_book_read(self, scope_name: str, parameters: dict[str, Any]) -> list[VesselPosition]:
        """Run the four snapshot queries for one scope and assemble vessels.

        Args:
            scope_name: Query scope key.
            parameters: Bound query parameters.

        Returns:
            list[VesselPosition]: Assembled vessel snapshots.

        Raises:
            UnknownProductError: Raised when a stored product is not recognized.
            RuntimeError: Raised when database read fails.
        """

        queries = self._QUERIES_BY_SCOPE[scope_name]
        try:
            with self._engine.connect() as connection:
                vessel_rows = connection.execute(text(queries["vessel"]), parameters).mappings().all()
                purchase_hedge_rows = connection.execute(text(queries["purchase_hedge"]), parameters).mappings().all()
                sale_rows = connection.execute(text(queries["sale"]), parameters).mappings().all()
                sale_hedge_rows = connection.execute(text(queries["sale_hedge"]), parameters).mappings().all()
        except SQLAlchemyError as error:
            raise RuntimeError("vessel book read failed") from error

        purchase_hedges_by_vessel: dict[str, list[HedgeLeg]] = {}
        for row in purchase_hedge_rows:
            purchase_hedges_by_vessel.setdefault(str(row["vessel_id"]), []).append(self._db_vessel_map_hedge_row(row))

        sale_hedges_by_sale: dict[str, list[HedgeLeg]] = {}
        for row in sale_hedge_rows:
            sale_hedges_by_sale.setdefault(str(row["sale_id"]), []).append(self._db_vessel_map_hedge_row(row))

        sales_by_vessel: dict[str, list[Sale]] = {}
        for row in sale_rows:
            sale_id = str(row["sale_id"])
            sales_by_vessel.setdefault(str(row["vessel_id"]), []).append(
                Sale(
                    sale_id=sale_id,
                    counterparty_id=str(row["counterparty_id"]),
                    counterparty_name=row["counterparty_name"],
                    deal_type=domain_parse_deal_type(row["deal_type"]),
                    volume=self._db_vessel_decimal(row["volume"]) or Decimal("0"),
                    premium=self._db_vessel_decimal(row["premium"]),
                    flat_price=self._db_vessel_decimal(row["flat_price"]),
                    price_reference=row["price_reference"],
                    hedges=tuple(sale_hedges_by_sale.get(sale_id, [])),
                )
            )

        return [self._db_vessel_map_vessel_row(row, purchase_hedges_by_vessel, sales_by_vessel) for row in vessel_rows]

    def _db_vessel_map_vessel_row(
        self,
        row: Any,
        purchase_hedges_by_vessel: dict[str, list[HedgeLeg]],
        sales_by_vessel: dict[str, list[Sale]],
    ) -> VesselPosition:
        """Map one vessel row and its grouped children to a vessel snapshot.

        Args:
            row: SQLAlchemy row mapping.
            purchase_hedges_by_vessel: Purchase hedges keyed by vessel id.
            sales_by_vessel: Sales keyed by vessel id.

        Returns:
            VesselPosition: Vessel snapshot.

        Raises:
            UnknownProductError: Raised when the stored product is not recognized.
        """

        vessel_id = str(row["vessel_id"])
        return VesselPosition(
            vessel_id=vessel_id,
            name=row["name"],
            product=domain_parse_product(row["product"]),
            total_volume=self._db_vessel_decimal(row["total_volume"]) or Decimal("0"),
            pricing=domain_resolve_purchase_pricing(
                premium=self._db_vessel_decimal(row["purchase_premium"]),
                flat_price=self._db_vessel_decimal(row["purchase_flat_price"]),
            ),
            supplier=row["supplier"],
            incoterm=domain_parse_incoterm(row["incoterm"]),
            freight_rate=self._db_vessel_decimal(row["freight_rate"]),
            purchase_hedges=tuple(purchase_hedges_by_vessel.get(vessel_id, [])),
            sales=tuple(sales_by_vessel.get(vessel_id, [])),
        )

    def _db_vessel_map_hedge_row(self, row: Any) -> HedgeLeg:
        """Map one purchase-hedge or sale-hedge row to a hedge leg."""

        return HedgeLeg(
            covered_volume=self._db_vessel_decimal(row["covered_volume"]) or Decimal("0"),
            futures_price=self._db_vessel_decimal(row["futures_price"]) or Decimal("0"),
            contract_count=int(row["contract_count"] or 0),
        )

    def _db_vessel_decimal(self, value: Any) -> Decimal | None:
        """Convert a numeric column value to Decimal, preserving NULL."""

        if value is None:
            return None
        return Decimal(str(value))

    def _db_vessel_validate_uuid_text(self, value: str, field_name: str) -> str:
        """Validate UUID text input.

        Args:
            value: Candidate UUID text.
            field_name: Field name used in error messages.

        Returns:
            str: Normalized UUID text.

        Raises:
            ValueError: Raised when value is blank or not a UUID.
        """

        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{field_name} must not be blank")
        try:
            return str(UUID(value.strip()))
        except ValueError as error:
            raise ValueError(f"{field_name} must be a valid UUID") from error


__all__ = ["SQLAlchemyVesselBookService"]
