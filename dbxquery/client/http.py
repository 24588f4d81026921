"""HTTP client helper."""

from __future__ import annotations

import json
from typing import Any

import aiohttp

from ..core.context import QueryContext
from ..core.exceptions import QueryCancelledError, RemoteAPIError
from .constants import DEFAULT_TIMEOUT


class HTTPClient:
    """Async JSON HTTP client bound to one workspace host.

    Every request observes the QueryContext: a cancelled context fails before
    the request is sent, and the context deadline caps the request timeout.
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def url(self, path: str) -> str:
        if path.startswith("http"):
            return path
        return f"{self.base_url}{path}"

    async def request_json(
        self,
        ctx: QueryContext,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        auth: aiohttp.BasicAuth | None = None,
    ) -> dict[str, Any]:
        """Send a request and decode the JSON object response.

        Raises:
            QueryCancelledError: If the context is cancelled or its deadline passes
            RemoteAPIError: On transport failures, non-2xx statuses or invalid JSON
        """
        ctx.check()
        url = self.url(path)
        try:
            async with self.session.request(
                method,
                url,
                params=params,
                data=data,
                headers=headers,
                auth=auth,
                timeout=self._timeout_for(ctx),
            ) as response:
                text = await response.text()
                status = response.status
        except TimeoutError as e:
            if ctx.expired:
                raise QueryCancelledError("query deadline exceeded") from e
            raise RemoteAPIError(f"{method} {path}: request timed out") from e
        except aiohttp.ClientError as e:
            raise RemoteAPIError(f"{method} {path}: {e}") from e

        if status >= 400:
            raise _api_error(method, path, status, text)
        if not text:
            return {}
        try:
            payload = json.loads(text)
        except ValueError as e:
            raise RemoteAPIError(
                f"{method} {path}: invalid JSON response", status_code=status
            ) from e
        if not isinstance(payload, dict):
            raise RemoteAPIError(
                f"{method} {path}: expected a JSON object response", status_code=status
            )
        return payload

    def _timeout_for(self, ctx: QueryContext) -> aiohttp.ClientTimeout:
        remaining = ctx.remaining()
        if remaining is None:
            return self.timeout
        total = remaining if self.timeout.total is None else min(remaining, self.timeout.total)
        return aiohttp.ClientTimeout(total=total)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _api_error(method: str, path: str, status: int, text: str) -> RemoteAPIError:
    # Databricks error bodies look like {"error_code": "...", "message": "..."}
    error_code = None
    message = text.strip()
    try:
        body = json.loads(text) if text else None
    except ValueError:
        body = None
    if isinstance(body, dict):
        error_code = body.get("error_code") or body.get("error")
        message = body.get("message") or body.get("error_description") or message
    detail = f"{error_code}: {message}" if error_code else message
    return RemoteAPIError(
        f"{method} {path}: HTTP {status}: {detail}".rstrip(": "),
        status_code=status,
        error_code=error_code,
    )
