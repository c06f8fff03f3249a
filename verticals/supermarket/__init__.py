"""Supermarket vertical — checkout pricing with bundle offers.

Demonstrates the pricing patterns working together in one domain:
- Pure-function rules engine (unit and bundle pricing)
- Immutable catalog shared by per-basket checkouts
- Dataclass configuration with env overrides
- Pydantic request/response schemas
- FastAPI router
- Command-line demo (python -m verticals.supermarket)
"""
