"""Precise unit tests for HTTPClient.

Tests focus on session management, context handling and error mapping.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from dbxquery.client import HTTPClient
from dbxquery.core import QueryCancelledError, QueryContext, RemoteAPIError


def _mock_session(status: int = 200, text: str = "{}", error: Exception | None = None):
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.text = AsyncMock(return_value=text)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.closed = False  # session property checks this
    if error is not None:
        mock_session.request = MagicMock(side_effect=error)
    else:
        mock_session.request = MagicMock(return_value=mock_response)
    return mock_session


def _client(session) -> HTTPClient:
    client = HTTPClient("https://example.cloud.databricks.com/", timeout=10.0)
    client._session = session
    return client


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient("https://example.cloud.databricks.com/", timeout=10.0)

        assert client.base_url == "https://example.cloud.databricks.com"
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_url(self):
        client = HTTPClient("https://example.cloud.databricks.com")

        assert client.url("/api/2.0/pipelines") == (
            "https://example.cloud.databricks.com/api/2.0/pipelines"
        )
        assert client.url("https://other.example.com/x") == "https://other.example.com/x"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient("https://example.cloud.databricks.com")

        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient("https://example.cloud.databricks.com")
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient("https://example.cloud.databricks.com") as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestRequestJson:
    """Test request_json behavior."""

    @pytest.mark.asyncio
    async def test_returns_decoded_object(self, ctx):
        session = _mock_session(text='{"statuses": []}')
        client = _client(session)

        payload = await client.request_json(
            ctx, "GET", "/api/2.0/pipelines", params={"max_results": 100}
        )

        assert payload == {"statuses": []}
        args, kwargs = session.request.call_args
        assert args == ("GET", "https://example.cloud.databricks.com/api/2.0/pipelines")
        assert kwargs["params"] == {"max_results": 100}

    @pytest.mark.asyncio
    async def test_empty_body_is_empty_object(self, ctx):
        client = _client(_mock_session(text=""))

        assert await client.request_json(ctx, "GET", "/x") == {}

    @pytest.mark.asyncio
    async def test_cancelled_context_sends_nothing(self):
        session = _mock_session()
        client = _client(session)
        ctx = QueryContext()
        ctx.cancel()

        with pytest.raises(QueryCancelledError):
            await client.request_json(ctx, "GET", "/x")

        session.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_deadline_caps_timeout(self):
        session = _mock_session()
        client = _client(session)
        ctx = QueryContext(timeout=2.0)

        await client.request_json(ctx, "GET", "/x")

        timeout = session.request.call_args.kwargs["timeout"]
        assert 0 < timeout.total <= 2.0

    @pytest.mark.asyncio
    async def test_api_error_body_parsed(self, ctx):
        body = '{"error_code": "RESOURCE_DOES_NOT_EXIST", "message": "Pipeline p1 not found"}'
        client = _client(_mock_session(status=404, text=body))

        with pytest.raises(RemoteAPIError) as exc_info:
            await client.request_json(ctx, "GET", "/api/2.0/pipelines/p1/updates")

        error = exc_info.value
        assert error.status_code == 404
        assert error.error_code == "RESOURCE_DOES_NOT_EXIST"
        assert str(error) == (
            "GET /api/2.0/pipelines/p1/updates: HTTP 404: "
            "RESOURCE_DOES_NOT_EXIST: Pipeline p1 not found"
        )

    @pytest.mark.asyncio
    async def test_oauth_error_body_parsed(self, ctx):
        body = '{"error": "invalid_client", "error_description": "Client authentication failed"}'
        client = _client(_mock_session(status=401, text=body))

        with pytest.raises(RemoteAPIError, match="invalid_client: Client authentication failed"):
            await client.request_json(ctx, "POST", "/oidc/v1/token")

    @pytest.mark.asyncio
    async def test_plain_text_error(self, ctx):
        client = _client(_mock_session(status=502, text="Bad Gateway"))

        with pytest.raises(RemoteAPIError, match="HTTP 502: Bad Gateway") as exc_info:
            await client.request_json(ctx, "GET", "/x")

        assert exc_info.value.error_code is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["not json", "[1, 2]"])
    async def test_invalid_success_body(self, ctx, text):
        client = _client(_mock_session(text=text))

        with pytest.raises(RemoteAPIError, match="GET /x"):
            await client.request_json(ctx, "GET", "/x")

    @pytest.mark.asyncio
    async def test_transport_error(self, ctx):
        error = aiohttp.ClientConnectionError("connection refused")
        client = _client(_mock_session(error=error))

        with pytest.raises(RemoteAPIError, match="connection refused"):
            await client.request_json(ctx, "GET", "/x")

    @pytest.mark.asyncio
    async def test_timeout_is_remote_error(self, ctx):
        client = _client(_mock_session(error=TimeoutError()))

        with pytest.raises(RemoteAPIError, match="request timed out") as exc_info:
            await client.request_json(ctx, "GET", "/x")

        assert not isinstance(exc_info.value, QueryCancelledError)

    @pytest.mark.asyncio
    async def test_timeout_past_deadline_is_cancellation(self):
        ctx = QueryContext(timeout=5.0)
        client = _client(_mock_session(error=TimeoutError()))

        with patch.object(QueryContext, "expired", new=True), patch.object(
            QueryContext, "check"
        ):
            with pytest.raises(QueryCancelledError, match="deadline exceeded"):
                await client.request_json(ctx, "GET", "/x")
