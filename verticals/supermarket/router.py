"""Supermarket API router — rule table + basket pricing.

Demonstrates the standard router pattern:
- Read-only view of the configured pricing rules
- Stateless basket pricing (fresh Checkout per request)
- Per-request rule overrides validated by pydantic
- Domain errors mapped to HTTP 422
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.pricing import Checkout, PricingCatalog, UnknownItem
from verticals.supermarket.config import catalog, config
from verticals.supermarket.models.schemas import (
    BasketRequest,
    BasketTotalResponse,
    ErrorResponse,
    PricingRuleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Rule Endpoints
# ============================================================================

@router.get("/rules", response_model=list[PricingRuleResponse])
async def list_rules():
    """List the configured pricing rules in catalog order."""
    return [PricingRuleResponse.from_rule(rule) for rule in catalog.rules()]


# ============================================================================
# Checkout Endpoint
# ============================================================================

@router.post(
    "/checkout",
    response_model=BasketTotalResponse,
    responses={422: {"model": ErrorResponse}},
)
async def price_basket(request: BasketRequest):
    """Scan every item in the basket and return the total.

    Items are scanned in the order given. If ``rules`` is supplied it
    replaces the configured table for this request only.
    """
    if len(request.items) > config.max_items_per_basket:
        return _error(f"Basket exceeds {config.max_items_per_basket} items")

    basket_catalog = catalog
    if request.rules is not None:
        basket_catalog = PricingCatalog(r.to_rule() for r in request.rules)

    checkout = Checkout(basket_catalog)
    for item in request.items:
        checkout.scan(item)

    try:
        total = checkout.calculate_total_price()
    except UnknownItem as e:
        logger.info("Rejected basket with unknown item %r", e.item)
        return _error(str(e), item=e.item)

    return BasketTotalResponse(
        total=total,
        item_count=checkout.item_count,
        currency_unit=config.pricing.currency_unit,
    )


def _error(detail: str, item: str | None = None) -> JSONResponse:
    body = ErrorResponse(detail=detail, item=item)
    return JSONResponse(status_code=422, content=body.model_dump())
