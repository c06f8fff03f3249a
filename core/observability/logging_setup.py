"""
Checkout Logging Setup

Process-wide logging for the API and the demo driver:
- One basicConfig call at entry points, never at import time
- Modules log through logging.getLogger(__name__)
"""
from __future__ import annotations
import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Initialise root logging at ``level`` ("DEBUG", "INFO", ... or a number)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
