"""Supermarket vertical configuration.

Builds the CheckoutConfig from the environment, falling back to the
default A-D rule table, and the shared catalog priced against it.
"""

from core.pricing import PricingCatalog
from patterns.domain_config import CheckoutConfig

# Configuration instance for this process
config = CheckoutConfig.from_env()

# Shared, read-only; every basket gets its own Checkout over it
catalog = PricingCatalog(config.pricing.rules)
