"""Pydantic schemas for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from patterns.domain_config import PricingRuleSpec
from patterns.rules_engine import PricingRule, RuleKind


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class BasketRequest(BaseModel):
    items: list[str] = Field(default_factory=list)
    rules: Optional[list[PricingRuleSpec]] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class PricingRuleResponse(PricingRuleSpec):
    kind: RuleKind

    @classmethod
    def from_rule(cls, rule: PricingRule) -> "PricingRuleResponse":
        return cls(
            item=rule.item,
            unit_price=rule.unit_price,
            bundle_quantity=rule.bundle_quantity,
            bundle_price=rule.bundle_price,
            kind=rule.kind,
        )


class BasketTotalResponse(BaseModel):
    total: int
    item_count: int
    currency_unit: str


class ErrorResponse(BaseModel):
    detail: str
    item: Optional[str] = None
