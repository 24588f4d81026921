"""OAuth machine-to-machine authentication for a service principal.

Tokens are minted with the client-credentials grant against the workspace
OIDC endpoint and cached until shortly before they expire.
"""

from __future__ import annotations

import logging
from time import monotonic
from typing import Protocol

import aiohttp

from ..core.context import QueryContext
from ..core.exceptions import RemoteAPIError
from .constants import DEFAULT_TOKEN_LIFETIME, OAUTH_SCOPE, OIDC_TOKEN_PATH, TOKEN_EXPIRY_LEEWAY
from .http import HTTPClient

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    """Supplies bearer tokens for API requests."""

    async def token(self, ctx: QueryContext) -> str: ...


class StaticTokenSource:
    """Token source returning a fixed, pre-minted token."""

    def __init__(self, token: str) -> None:
        self._token = token

    async def token(self, ctx: QueryContext) -> str:
        return self._token


class OAuthTokenSource:
    """Client-credentials token source with expiry-aware caching."""

    def __init__(
        self,
        http: HTTPClient,
        *,
        client_id: str,
        client_secret: str,
        scope: str = OAUTH_SCOPE,
    ) -> None:
        self._http = http
        self._client_id = client_id
        self._client_secret = client_secret
        self._scope = scope
        self._token: str | None = None
        self._expires_at = 0.0

    @property
    def valid(self) -> bool:
        return self._token is not None and monotonic() < self._expires_at

    def invalidate(self) -> None:
        self._token = None
        self._expires_at = 0.0

    async def token(self, ctx: QueryContext) -> str:
        """Return a cached token, minting a new one when needed.

        Raises:
            RemoteAPIError: If the token endpoint fails or returns no token
        """
        if self.valid:
            return self._token  # type: ignore[return-value]

        payload = await self._http.request_json(
            ctx,
            "POST",
            OIDC_TOKEN_PATH,
            data={"grant_type": "client_credentials", "scope": self._scope},
            auth=aiohttp.BasicAuth(self._client_id, self._client_secret),
        )
        token = payload.get("access_token")
        if not token:
            raise RemoteAPIError("OIDC token endpoint did not return access_token")

        lifetime = int(payload.get("expires_in") or DEFAULT_TOKEN_LIFETIME)
        self._token = token
        self._expires_at = monotonic() + max(0, lifetime - TOKEN_EXPIRY_LEEWAY)
        logger.debug("OAuth token minted", extra={"expires_in": lifetime})
        return token
