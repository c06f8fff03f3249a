"""
Checkout — scan items, then price the basket.

Scanning only counts identifiers. Nothing is checked against the catalog
until the total is requested, so an unknown item surfaces as UnknownItem
from calculate_total_price(), never from scan().
"""
from __future__ import annotations
import logging

from core.pricing.catalog import PricingCatalog
from core.pricing.errors import InvalidArgument, UnknownItem
from patterns.rules_engine import LinePrice, price_line, total_of

logger = logging.getLogger(__name__)


class Checkout:
    """Accumulates scanned items for one basket.

    Usage::

        checkout = Checkout(catalog)
        for item in "AABA":
            checkout.scan(item)
        checkout.calculate_total_price()  # 175

    The catalog is shared, not copied. Not thread-safe; callers sharing an
    instance across threads must lock around scan and
    calculate_total_price.
    """

    def __init__(self, catalog: PricingCatalog):
        if catalog is None:
            raise InvalidArgument("A pricing catalog is required")
        if not isinstance(catalog, PricingCatalog):
            raise InvalidArgument(f"Expected PricingCatalog, got {type(catalog).__name__}")
        self._catalog = catalog
        self._counts: dict[str, int] = {}

    @property
    def catalog(self) -> PricingCatalog:
        return self._catalog

    @property
    def counts(self) -> dict[str, int]:
        """Copy of the scanned count per item."""
        return dict(self._counts)

    @property
    def item_count(self) -> int:
        """Total number of scans so far."""
        return sum(self._counts.values())

    def scan(self, item: str) -> None:
        """Record one unit of ``item``."""
        self._counts[item] = self._counts.get(item, 0) + 1
        logger.debug("Scanned %r (count=%d)", item, self._counts[item])

    def calculate_total_price(self) -> int:
        """Total price of everything scanned so far.

        Raises UnknownItem for the first scanned item with no rule; no
        partial total is returned in that case.
        """
        total = total_of(self._price_lines())
        logger.debug("Priced %d scans across %d items: %d", self.item_count, len(self._counts), total)
        return total

    def _price_lines(self) -> list[LinePrice]:
        lines = []
        for item, count in self._counts.items():
            rule = self._catalog.get(item)
            if rule is None:
                raise UnknownItem(item)
            lines.append(price_line(rule, count))
        return lines
