"""Checkout API — FastAPI entry point.

Registers routers and lifecycle hooks. Each vertical adds its own router
under /api/{vertical}/.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.observability.logging_setup import configure_logging
from verticals.supermarket.config import catalog, config

VERSION = "0.1.0"

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000"
).split(",")

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    configure_logging(config.log_level)
    logger.info("Checkout API started with %d pricing rules", len(catalog))
    yield
    logger.info("Checkout API shutting down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Supermarket Checkout",
    description="Basket pricing with per-item unit prices and bundle offers",
    version=VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers — verticals register here
# ---------------------------------------------------------------------------

from verticals.supermarket.router import router as supermarket_router  # noqa: E402

app.include_router(supermarket_router, prefix="/api/supermarket", tags=["Supermarket"])


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "healthy", "version": VERSION}


@app.get("/")
async def root():
    return {
        "name": "Supermarket Checkout",
        "version": VERSION,
        "docs": "/docs",
        "verticals": ["supermarket"],
    }
