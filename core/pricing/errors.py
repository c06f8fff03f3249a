"""Checkout pricing errors.

Both errors derive from ValueError so callers that only care about "bad
input" can catch one type.
"""


class CheckoutError(Exception):
    """Base class for checkout pricing failures."""


class InvalidArgument(CheckoutError, ValueError):
    """A catalog or rule set was missing or malformed at construction."""


class UnknownItem(CheckoutError, ValueError):
    """A scanned item has no pricing rule in the catalog."""

    def __init__(self, item: str):
        self.item = item
        super().__init__(f"Item '{item}' is not valid.")
