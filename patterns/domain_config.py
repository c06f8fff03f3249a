"""Dataclass-based domain configuration pattern.

Each vertical defines its pricing table, limits and settings as a frozen
dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values (sensible out-of-the-box)
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides (from env vars or JSON rule tables)

Example domain: a supermarket checkout with bundle offers.
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from core.pricing.errors import InvalidArgument
from patterns.rules_engine import PricingRule


# ---------------------------------------------------------------------------
# Default rule table
# ---------------------------------------------------------------------------

DEFAULT_RULES: tuple[PricingRule, ...] = (
    PricingRule("A", 50, bundle_quantity=3, bundle_price=130),
    PricingRule("B", 30, bundle_quantity=2, bundle_price=45),
    PricingRule("C", 20),
    PricingRule("D", 15),
)


class PricingRuleSpec(BaseModel):
    """Externally supplied rule (env JSON, HTTP body). Amounts are non-negative."""

    item: str = Field(..., min_length=1)
    unit_price: int = Field(..., ge=0)
    bundle_quantity: int = Field(0, ge=0)
    bundle_price: int = Field(0, ge=0)

    def to_rule(self) -> PricingRule:
        return PricingRule(
            item=self.item,
            unit_price=self.unit_price,
            bundle_quantity=self.bundle_quantity,
            bundle_price=self.bundle_price,
        )


_RULE_LIST = TypeAdapter(list[PricingRuleSpec])


def parse_rules_json(raw: str) -> tuple[PricingRule, ...]:
    """Parse a JSON list of rule objects into PricingRules.

    Raises InvalidArgument on malformed JSON or out-of-range values.
    """
    try:
        parsed = _RULE_LIST.validate_json(raw)
    except ValidationError as e:
        raise InvalidArgument(f"Invalid pricing rules: {e}") from e
    return tuple(r.to_rule() for r in parsed)


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PricingConfig:
    """Pricing table and the unit its amounts are expressed in."""

    rules: tuple[PricingRule, ...] = DEFAULT_RULES
    currency_unit: str = "pence"


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CheckoutConfig:
    """Complete configuration for the supermarket checkout.

    Usage::

        config = CheckoutConfig.default()
        catalog = PricingCatalog(config.pricing.rules)
    """

    pricing: PricingConfig = field(default_factory=PricingConfig)

    max_items_per_basket: int = 10_000
    log_level: str = "INFO"

    @classmethod
    def default(cls) -> "CheckoutConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "CHECKOUT_") -> "CheckoutConfig":
        """Create config from environment variables.

        Example: CHECKOUT_MAX_ITEMS_PER_BASKET=500
                 CHECKOUT_PRICING_RULES='[{"item": "A", "unit_price": 50}]'
        """
        import os

        overrides = {}
        max_items = os.getenv(f"{prefix}MAX_ITEMS_PER_BASKET")
        if max_items:
            try:
                overrides["max_items_per_basket"] = int(max_items)
            except ValueError as e:
                raise InvalidArgument(f"{prefix}MAX_ITEMS_PER_BASKET must be an integer") from e

        log_level = os.getenv(f"{prefix}LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        pricing_overrides = {}
        rules_json = os.getenv(f"{prefix}PRICING_RULES")
        if rules_json:
            pricing_overrides["rules"] = parse_rules_json(rules_json)

        currency_unit = os.getenv(f"{prefix}CURRENCY_UNIT")
        if currency_unit:
            pricing_overrides["currency_unit"] = currency_unit

        return cls(pricing=PricingConfig(**pricing_overrides), **overrides)
