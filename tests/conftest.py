"""Shared fixtures: the standard A-D rule table."""
import pytest
from core.pricing import Checkout, PricingCatalog, PricingRule


@pytest.fixture
def rules():
    return [
        PricingRule("A", 50, bundle_quantity=3, bundle_price=130),
        PricingRule("B", 30, bundle_quantity=2, bundle_price=45),
        PricingRule("C", 20),
        PricingRule("D", 15),
    ]


@pytest.fixture
def catalog(rules):
    return PricingCatalog(rules)


@pytest.fixture
def checkout(catalog):
    return Checkout(catalog)
