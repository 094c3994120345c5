"""Domain models used across application layer boundaries."""

from .errors import UnknownProductError
from .models import (
    FlatPurchasePrice,
    HealthStatus,
    HedgeLeg,
    PremiumPurchasePrice,
    PurchasePricing,
    Sale,
    VesselPosition,
    domain_resolve_purchase_pricing,
)
from .products import (
    DealType,
    Incoterm,
    Product,
    domain_parse_deal_type,
    domain_parse_incoterm,
    domain_parse_product,
)

__all__ = [
    "DealType",
    "FlatPurchasePrice",
    "HealthStatus",
    "HedgeLeg",
    "Incoterm",
    "PremiumPurchasePrice",
    "Product",
    "PurchasePricing",
    "Sale",
    "UnknownProductError",
    "VesselPosition",
    "domain_parse_deal_type",
    "domain_parse_incoterm",
    "domain_parse_product",
    "domain_resolve_purchase_pricing",
]
