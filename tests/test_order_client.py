"""Tests for the order-intake HTTP client."""

import httpx

from storefront.order_client import OrderClient


def _client(handler):
    return OrderClient(endpoint_url="https://orders.test/post", timeout=1.0, transport=httpx.MockTransport(handler))


class TestOrderClient:
    """Status mapping for the order POST."""

    async def test_any_2xx_is_success(self):
        client = _client(lambda request: httpx.Response(201))

        result = await client.post_order({"name": "A"})

        assert result.ok
        assert result.status_code == 201

    async def test_non_2xx_is_failure(self):
        client = _client(lambda request: httpx.Response(503))

        result = await client.post_order({"name": "A"})

        assert not result.ok
        assert result.status_code == 503
        assert result.reason == "HTTP 503"

    async def test_transport_error_is_failure(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        result = await _client(handler).post_order({"name": "A"})

        assert not result.ok
        assert result.status_code is None
        assert "ConnectError" in result.reason

    async def test_fields_are_form_encoded(self):
        seen = {}

        def handler(request):
            seen["body"] = request.content.decode()
            return httpx.Response(200)

        await _client(handler).post_order({"name": "Santa Claus", "tel": "+1234567"})

        assert seen["body"] == "name=Santa+Claus&tel=%2B1234567"

    async def test_malformed_endpoint_is_failure(self):
        client = OrderClient(endpoint_url="http://[::1", timeout=1.0)

        result = await client.post_order({"name": "A"})

        assert not result.ok
        assert result.status_code is None
        assert result.reason == "invalid endpoint URL"
