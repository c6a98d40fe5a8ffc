"""HTTP client for the order-intake endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

import httpx

from storefront.config import ORDER_ENDPOINT_URL, ORDER_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostResult:
    """Outcome of one order POST."""

    ok: bool
    status_code: int | None = None
    reason: str = ""


class OrderClient:
    """Posts checkout forms, form-encoded, one request per attempt."""

    def __init__(
        self,
        endpoint_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint_url = endpoint_url or ORDER_ENDPOINT_URL
        self.timeout = timeout if timeout is not None else ORDER_TIMEOUT_SECONDS
        self._transport = transport

    async def post_order(self, form_fields: Mapping[str, str]) -> PostResult:
        logger.info("order_post url=%s fields=%s", self.endpoint_url, sorted(form_fields))
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.endpoint_url, data=dict(form_fields))
        except httpx.HTTPError as exc:
            logger.warning("order_post_failed url=%s error=%r", self.endpoint_url, exc)
            return PostResult(ok=False, reason=f"transport error: {exc.__class__.__name__}")
        except (httpx.InvalidURL, ValueError) as exc:
            # Raised by the URL parser before any request is sent.
            logger.error("order_post_bad_url url=%r error=%s", self.endpoint_url, exc)
            return PostResult(ok=False, reason="invalid endpoint URL")

        logger.info("order_post_response status=%s", response.status_code)
        if response.is_success:
            return PostResult(ok=True, status_code=response.status_code)
        return PostResult(ok=False, status_code=response.status_code, reason=f"HTTP {response.status_code}")
