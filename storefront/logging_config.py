"""
Logging setup for the storefront.

The app owns the terminal, so records go to a debug file instead of the
console.

Log Format:
    2026-10-16 10:15:30 [INFO    ] storefront.cart - order_submit items=2 total=24.00

Usage:
    from storefront.logging_config import setup_logging

    setup_logging(enable_debug=True)

    # In modules
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging
from pathlib import Path

from storefront.config import DEBUG_LOG_PATH

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_path: str | Path | None = None, enable_debug: bool = False) -> Path:
    """Attach a file handler to the ``storefront`` logger and return the log path."""
    log_file = Path(log_path or DEBUG_LOG_PATH)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    package_logger = logging.getLogger("storefront")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if enable_debug else logging.INFO)
    package_logger.propagate = False

    package_logger.info("logging_configured path=%s debug=%s", log_file, enable_debug)
    return log_file
