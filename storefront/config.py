"""Runtime configuration defaults for checkout, catalog loading and logging."""

from __future__ import annotations

import math
import os

from storefront.errors import InvalidArgument


def _env_str(name: str, default: str | None) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or default


def _env_float(name: str, default: float) -> float:
    """Read a positive number from the environment, failing fast on junk."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be a number", {name: raw}) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgument(f"{name} must be a positive number", {name: raw})
    return value


ORDER_ENDPOINT_URL = _env_str("STOREFRONT_ORDER_URL", "https://httpbin.org/post")
ORDER_TIMEOUT_SECONDS = _env_float("STOREFRONT_ORDER_TIMEOUT", 10.0)

# None means the bundled catalog in storefront.constant.
CATALOG_PATH = _env_str("STOREFRONT_CATALOG_PATH", None)

DEBUG_LOG_PATH = _env_str("STOREFRONT_DEBUG_LOG", "/tmp/storefront-debug.log")

SLIDER_STEPS = 5
SLIDER_INITIAL_VALUE = 3

CURRENCY_SYMBOL = "€"
