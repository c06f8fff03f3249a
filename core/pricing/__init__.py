"""
Checkout Pricing — Catalog, Checkout and Errors.

Provides the basket pricing core:
- PricingCatalog: Immutable rule lookup shared by checkouts
- Checkout: Scan accumulator with bundle-aware totals
"""
from core.pricing.catalog import PricingCatalog
from core.pricing.checkout import Checkout
from core.pricing.errors import (
    CheckoutError,
    InvalidArgument,
    UnknownItem,
)
from patterns.rules_engine import (
    LinePrice,
    PricingRule,
    RuleKind,
    price_line,
)

__all__ = [
    # Core
    "Checkout",
    "PricingCatalog",
    # Rules
    "LinePrice",
    "PricingRule",
    "RuleKind",
    "price_line",
    # Errors
    "CheckoutError",
    "InvalidArgument",
    "UnknownItem",
]
