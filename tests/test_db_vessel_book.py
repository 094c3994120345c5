"""Tests for vessel book snapshot queries and row mapping."""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from vessel_ledger.db import SQLAlchemyDatabaseHealthService, SQLAlchemyVesselBookService
from vessel_ledger.domain import DealType, Incoterm, Product, UnknownProductError

_VESSEL_ID = "6f1c1f7e-3d4b-4a8e-9a51-0d7f4c2b9e11"


class _MappingResultStub:
    """Stub mapping result wrapper for SQLAlchemy-like query responses."""

    def __init__(self, rows: list[dict]):
        self._rows = rows

    def mappings(self) -> _MappingResultStub:
        """Return self to emulate the SQLAlchemy mappings chain."""

        return self

    def all(self) -> list[dict]:
        """Return all row mappings."""

        return self._rows

    def scalar_one(self) -> object:
        """Return the first column of the single row."""

        return next(iter(self._rows[0].values()))


class _ConnectionStub:
    """Connection stub routing queries to rows by source table."""

    def __init__(self, rows_by_table: dict[str, list[dict]], error: Exception | None = None):
        """Initialize connection capture state.

        Args:
            rows_by_table: Rows keyed by the FROM-clause prefix of each query.
            error: Optional error raised from execute().

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: This stub does not raise value errors.
        """

        self._rows_by_table = rows_by_table
        self._error = error
        self.executed_queries: list[str] = []
        self.executed_parameters: list[dict] = []

    def __enter__(self) -> _ConnectionStub:
        return self

    def __exit__(self, exc_type, exc, traceback) -> bool:
        _ = (exc_type, exc, traceback)
        return False

    def execute(self, statement, parameters: dict | None = None):
        """Capture execute input and return rows for the queried table.

        Args:
            statement: SQLAlchemy text clause.
            parameters: Bound query parameters.

        Returns:
            _MappingResultStub: Query result stub.

        Raises:
            OperationalError: Raised when the stub is configured to fail.
        """

        statement_text = getattr(statement, "text", str(statement))
        self.executed_queries.append(statement_text)
        self.executed_parameters.append(parameters or {})
        if self._error is not None:
            raise self._error
        for table_prefix, rows in self._rows_by_table.items():
            if table_prefix in statement_text:
                return _MappingResultStub(rows=rows)
        return _MappingResultStub(rows=[])


class _EngineStub:
    """Engine stub that returns a predefined connection object."""

    def __init__(self, connection: _ConnectionStub):
        self._connection = connection

    def connect(self) -> _ConnectionStub:
        """Return the predefined connection stub."""

        return self._connection


def _build_rows(product: str = "corn") -> dict[str, list[dict]]:
    """Build one vessel with a purchase hedge, two sales, and one sale hedge.

    Args:
        product: Stored product text.

    Returns:
        dict[str, list[dict]]: Rows keyed by query FROM-clause prefix.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "FROM vessel v": [
            {
                "vessel_id": _VESSEL_ID,
                "name": "MV Pampa",
                "product": product,
                "total_volume": Decimal("5000"),
                "purchase_premium": Decimal("10.5"),
                "purchase_flat_price": None,
                "supplier": "Delta Grain",
                "incoterm": "fob",
                "freight_rate": Decimal("25"),
            }
        ],
        "FROM purchase_hedge h": [
            {"vessel_id": _VESSEL_ID, "covered_volume": Decimal("4953"), "futures_price": Decimal("412.25"), "contract_count": 39}
        ],
        "FROM sale s": [
            {
                "sale_id": "sale-1",
                "vessel_id": _VESSEL_ID,
                "counterparty_id": "cp-1",
                "counterparty_name": "Alpha Feeds",
                "deal_type": "premium",
                "volume": Decimal("3000"),
                "premium": Decimal("14"),
                "flat_price": None,
                "price_reference": "ZCH26",
            },
            {
                "sale_id": "sale-2",
                "vessel_id": _VESSEL_ID,
                "counterparty_id": "cp-2",
                "counterparty_name": None,
                "deal_type": "flat",
                "volume": 2000,
                "premium": None,
                "flat_price": 231.5,
                "price_reference": None,
            },
        ],
        "FROM sale_hedge sh": [
            {"sale_id": "sale-1", "covered_volume": Decimal("3048"), "futures_price": Decimal("418"), "contract_count": None}
        ],
    }


def test_db_vessel_list_assembles_nested_snapshots() -> None:
    """Map vessel, hedge, and sale rows into nested domain snapshots.

    Returns:
        None: Assertions validate row mapping.

    Raises:
        AssertionError: Raised when mapping output is wrong.
    """

    connection = _ConnectionStub(_build_rows())
    service = SQLAlchemyVesselBookService(engine=_EngineStub(connection))

    vessels = service.db_vessel_list()

    assert len(vessels) == 1
    vessel = vessels[0]
    assert vessel.product is Product.CORN
    assert vessel.incoterm is Incoterm.FOB
    assert vessel.purchase_premium == Decimal("10.5")
    assert vessel.purchase_flat_price is None
    assert vessel.purchase_hedges[0].contract_count == 39
    assert [sale.sale_id for sale in vessel.sales] == ["sale-1", "sale-2"]
    assert vessel.sales[0].hedges[0].covered_volume == Decimal("3048")
    assert vessel.sales[0].hedges[0].contract_count == 0
    assert vessel.sales[1].deal_type is DealType.FLAT
    assert vessel.sales[1].flat_price == Decimal("231.5")
    assert vessel.sales[1].volume == Decimal("2000")
    assert vessel.sales[1].hedges == ()


def test_db_vessel_list_excludes_rolled_vessels_unless_requested() -> None:
    """Select root vessels by default and all vessels when asked.

    Returns:
        None: Assertions validate scope predicates.

    Raises:
        AssertionError: Raised when the wrong predicate is used.
    """

    connection = _ConnectionStub({})
    service = SQLAlchemyVesselBookService(engine=_EngineStub(connection))

    service.db_vessel_list()
    assert len(connection.executed_queries) == 4
    assert all("v.parent_vessel_id IS NULL" in query for query in connection.executed_queries)

    connection.executed_queries.clear()
    service.db_vessel_list(include_rolled=True)
    assert all("parent_vessel_id" not in query for query in connection.executed_queries)


def test_db_vessel_get_binds_normalized_uuid() -> None:
    """Bind a validated vessel id and return None when no row matches.

    Returns:
        None: Assertions validate single-vessel reads.

    Raises:
        AssertionError: Raised when binding or validation is wrong.
    """

    connection = _ConnectionStub({})
    service = SQLAlchemyVesselBookService(engine=_EngineStub(connection))

    assert service.db_vessel_get(f"  {_VESSEL_ID.upper()} ") is None
    assert connection.executed_parameters[0] == {"vessel_id": _VESSEL_ID}
    assert "CAST(:vessel_id AS uuid)" in connection.executed_queries[0]

    with pytest.raises(ValueError, match="must not be blank"):
        service.db_vessel_get(" ")
    with pytest.raises(ValueError, match="valid UUID"):
        service.db_vessel_get("not-a-uuid")


def test_db_vessel_book_wraps_database_errors() -> None:
    """Raise RuntimeError when the vessel book cannot be read.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when SQLAlchemy errors escape unwrapped.
    """

    connection = _ConnectionStub({}, error=OperationalError("SELECT", {}, Exception("connection refused")))
    service = SQLAlchemyVesselBookService(engine=_EngineStub(connection))

    with pytest.raises(RuntimeError, match="vessel book read failed"):
        service.db_vessel_list()


def test_db_vessel_book_rejects_unknown_stored_product() -> None:
    """Surface unknown stored products instead of defaulting them.

    Returns:
        None: Assertions validate product validation at the read boundary.

    Raises:
        AssertionError: Raised when an unknown product is accepted.
    """

    service = SQLAlchemyVesselBookService(engine=_EngineStub(_ConnectionStub(_build_rows(product="sorghum"))))

    with pytest.raises(UnknownProductError):
        service.db_vessel_list()


def test_db_health_reports_vessel_count_and_wraps_errors() -> None:
    """Report vessel count when reachable and ConnectionError otherwise.

    Returns:
        None: Assertions validate health probe behavior.

    Raises:
        AssertionError: Raised when health output is wrong.
    """

    healthy = SQLAlchemyDatabaseHealthService(engine=_EngineStub(_ConnectionStub({"FROM vessel": [{"count": 3}]})))
    assert healthy.db_check_health().detail == "vessel book reachable (3 vessels)"

    failing = SQLAlchemyDatabaseHealthService(
        engine=_EngineStub(_ConnectionStub({}, error=OperationalError("SELECT", {}, Exception("down"))))
    )
    with pytest.raises(ConnectionError):
        failing.db_check_health()
