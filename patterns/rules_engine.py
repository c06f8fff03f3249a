"""Pure-function pricing rules engine.

Pricing a basket line is a stateless function: (rule, count) -> LinePrice.
No catalog lookups, no side effects. This makes the bundle arithmetic:
- Trivially testable (pure input/output)
- Composable (sum any number of lines)
- Auditable (every line records how its amount was reached)

Example domain: a supermarket where some items are cheaper in bundles,
e.g. "A costs 50, or 3 for 130".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


# ---------------------------------------------------------------------------
# Rule types
# ---------------------------------------------------------------------------

class RuleKind(str, Enum):
    """How a rule prices its item."""

    UNIT = "unit"
    BUNDLE = "bundle"


@dataclass(frozen=True)
class PricingRule:
    """Price of one item, with an optional single-tier bundle offer.

    All amounts are integers in the smallest currency unit (e.g. pence).
    ``bundle_quantity == 0`` means there is no offer, and ``bundle_price``
    is then never read.
    """

    item: str
    unit_price: int
    bundle_quantity: int = 0
    bundle_price: int = 0

    @property
    def kind(self) -> RuleKind:
        return RuleKind.BUNDLE if self.bundle_quantity > 0 else RuleKind.UNIT


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class LinePrice:
    """Outcome of pricing every scanned unit of one item."""

    item: str
    count: int
    kind: RuleKind
    amount: int
    bundles: int = 0
    remainder: int = 0


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def price_line(rule: PricingRule, count: int) -> LinePrice:
    """Price ``count`` units of ``rule.item``.

    Full bundles are charged at the bundle price and the leftover units at
    the unit price. Below the bundle threshold every unit is charged at the
    unit price.
    """
    if rule.kind is RuleKind.BUNDLE and count >= rule.bundle_quantity:
        bundles, remainder = divmod(count, rule.bundle_quantity)
        return LinePrice(
            item=rule.item,
            count=count,
            kind=RuleKind.BUNDLE,
            amount=bundles * rule.bundle_price + remainder * rule.unit_price,
            bundles=bundles,
            remainder=remainder,
        )

    return LinePrice(
        item=rule.item,
        count=count,
        kind=rule.kind,
        amount=count * rule.unit_price,
        remainder=count,
    )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def total_of(lines: Iterable[LinePrice]) -> int:
    """Sum priced lines into a basket total.

    Example::

        total = total_of([
            price_line(rule_a, 4),
            price_line(rule_b, 2),
        ])
    """
    return sum(line.amount for line in lines)
