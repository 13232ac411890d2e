"""High-level client composing the request pipeline and resource wrappers."""

from __future__ import annotations

from typing import Optional

import httpx

from .config import ClientConfig
from .http_client import HttpClient
from .models import RateLimit
from .resources import (
    AddressesResource,
    ApiKeyResource,
    HealthResource,
    ItemsResource,
    PlayersResource,
    ReportsResource,
    ShopsResource,
    StorageResource,
)


class KrawletClient:
    """Entry point for the Krawlet API.

    >>> async with KrawletClient(ClientConfig(api_key="kraw_...")) as client:
    ...     shops = await client.shops.get_all()
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = HttpClient(config or ClientConfig(), transport=transport)
        self.health = HealthResource(self._http)
        self.players = PlayersResource(self._http)
        self.shops = ShopsResource(self._http)
        self.items = ItemsResource(self._http)
        self.addresses = AddressesResource(self._http)
        self.storage = StorageResource(self._http)
        self.reports = ReportsResource(self._http)
        self.api_key = ApiKeyResource(self._http)

    @property
    def http(self) -> HttpClient:
        return self._http

    async def __aenter__(self) -> "KrawletClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def get_rate_limit(self) -> Optional[RateLimit]:
        """Last known rate limit, or ``None`` if no response has carried one yet."""
        return self._http.get_rate_limit()

    async def close(self) -> None:
        await self._http.close()


__all__ = ["KrawletClient"]
