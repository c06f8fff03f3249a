"""Pricing catalog — immutable lookup of pricing rules by item.

Built once from a collection of rules and shared read-only by any number
of Checkout instances.
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Iterable, Iterator, Optional
import logging

from core.pricing.errors import InvalidArgument, UnknownItem
from patterns.rules_engine import PricingRule

logger = logging.getLogger(__name__)


class PricingCatalog(Mapping):
    """Read-only mapping of item identifier -> PricingRule.

    When several rules name the same item the first one wins and the rest
    are ignored with a warning.

    Usage::

        catalog = PricingCatalog([
            PricingRule("A", 50, bundle_quantity=3, bundle_price=130),
            PricingRule("C", 20),
        ])
        catalog.get("A")   # PricingRule(...)
        catalog.get("Z")   # None
    """

    def __init__(self, rules: Iterable[PricingRule]):
        if rules is None:
            raise InvalidArgument("Pricing rules are required")

        self._rules: dict[str, PricingRule] = {}
        for rule in rules:
            if not isinstance(rule, PricingRule):
                raise InvalidArgument(f"Expected PricingRule, got {type(rule).__name__}")
            if rule.item in self._rules:
                logger.warning(
                    "Duplicate pricing rule for item %r ignored; keeping %r",
                    rule.item,
                    self._rules[rule.item],
                )
                continue
            self._rules[rule.item] = rule

        logger.debug("Built pricing catalog with %d rules", len(self._rules))

    def __getitem__(self, item: str) -> PricingRule:
        try:
            return self._rules[item]
        except KeyError:
            raise UnknownItem(item) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, item: object) -> bool:
        return item in self._rules

    def get(self, item: str, default: Optional[PricingRule] = None) -> Optional[PricingRule]:
        """Return the rule for ``item``, or ``default`` when unknown."""
        return self._rules.get(item, default)

    def rules(self) -> list[PricingRule]:
        """All rules in the order they were first supplied."""
        return list(self._rules.values())

    def __repr__(self) -> str:
        return f"PricingCatalog({list(self._rules)!r})"
