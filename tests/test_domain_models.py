"""Tests for domain record construction and identity parsing."""

from __future__ import annotations

from decimal import Decimal

import pytest

from vessel_ledger.domain import (
    DealType,
    FlatPurchasePrice,
    HedgeLeg,
    Incoterm,
    PremiumPurchasePrice,
    Product,
    Sale,
    UnknownProductError,
    VesselPosition,
    domain_parse_deal_type,
    domain_parse_incoterm,
    domain_parse_product,
    domain_resolve_purchase_pricing,
)


def test_domain_resolve_purchase_pricing_prefers_premium() -> None:
    """Resolve pricing columns into a single variant with premium precedence.

    Returns:
        None: Assertions validate variant resolution.

    Raises:
        AssertionError: Raised when the wrong variant is returned.
    """

    assert domain_resolve_purchase_pricing(Decimal("10"), Decimal("250")) == PremiumPurchasePrice(Decimal("10"))
    assert domain_resolve_purchase_pricing(None, Decimal("250")) == FlatPurchasePrice(Decimal("250"))
    assert domain_resolve_purchase_pricing(None, None) is None


def test_domain_vessel_position_exposes_pricing_by_variant() -> None:
    """Expose premium or flat purchase price depending on the pricing variant.

    Returns:
        None: Assertions validate property behavior.

    Raises:
        AssertionError: Raised when properties leak the other variant.
    """

    premium_vessel = VesselPosition(
        vessel_id="v-1",
        name="Premium",
        product=Product.CORN,
        total_volume=Decimal("1000"),
        pricing=PremiumPurchasePrice(Decimal("12")),
    )
    flat_vessel = VesselPosition(
        vessel_id="v-2",
        name="Flat",
        product=Product.WHEAT,
        total_volume=Decimal("1000"),
        pricing=FlatPurchasePrice(Decimal("240")),
    )

    assert premium_vessel.purchase_premium == Decimal("12")
    assert premium_vessel.purchase_flat_price is None
    assert flat_vessel.purchase_premium is None
    assert flat_vessel.purchase_flat_price == Decimal("240")
    assert flat_vessel.incoterm == Incoterm.CFR


def test_domain_records_reject_negative_volumes() -> None:
    """Reject negative volumes while allowing zero-volume records.

    Returns:
        None: Assertions validate construction checks.

    Raises:
        AssertionError: Raised when invalid records are accepted.
    """

    assert HedgeLeg(covered_volume=Decimal("0"), futures_price=Decimal("400")).covered_volume == Decimal("0")

    with pytest.raises(ValueError):
        HedgeLeg(covered_volume=Decimal("-1"), futures_price=Decimal("400"))
    with pytest.raises(ValueError):
        Sale(sale_id="s-1", counterparty_id="c-1", deal_type=DealType.PREMIUM, volume=Decimal("-5"))
    with pytest.raises(ValueError):
        VesselPosition(vessel_id="v-1", name="Bad", product=Product.CORN, total_volume=Decimal("-1"))


def test_domain_parse_identities_normalize_text() -> None:
    """Normalize case and whitespace for stored identity values.

    Returns:
        None: Assertions validate parsing.

    Raises:
        AssertionError: Raised when parsing results differ.
    """

    assert domain_parse_product(" Soybean_Meal ") is Product.SOYBEAN_MEAL
    assert domain_parse_product(Product.CORN) is Product.CORN
    assert domain_parse_deal_type("FLAT") is DealType.FLAT
    assert domain_parse_incoterm("fob") is Incoterm.FOB
    assert domain_parse_incoterm(None) is Incoterm.CFR
    assert domain_parse_incoterm("  ") is Incoterm.CFR


def test_domain_parse_identities_reject_unknown_values() -> None:
    """Raise typed errors for unknown identity values.

    Returns:
        None: Assertions validate error types.

    Raises:
        AssertionError: Raised when unknown values are accepted.
    """

    with pytest.raises(UnknownProductError):
        domain_parse_product("sorghum")
    with pytest.raises(ValueError):
        domain_parse_deal_type("swap")
    with pytest.raises(ValueError):
        domain_parse_incoterm("DAP")
