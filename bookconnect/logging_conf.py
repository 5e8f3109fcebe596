"""Logging configuration for the catalog service."""

from __future__ import annotations

import logging
import sys
from logging import Logger


def setup_logging(level: str = "INFO") -> Logger:
    """Configure root logging for the application."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    return logging.getLogger("bookconnect")
