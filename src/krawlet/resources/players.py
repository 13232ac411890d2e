"""Player lookups."""

from __future__ import annotations

from typing import Iterable, List

from pydantic import TypeAdapter

from ..http_client import RequestOptions
from ..models import Player
from .base import Resource

_PLAYERS = TypeAdapter(List[Player])


class PlayersResource(Resource):
    async def get_all(self) -> List[Player]:
        return await self._fetch(_PLAYERS, "/v1/players")

    async def get_by_addresses(self, addresses: Iterable[str]) -> List[Player]:
        return await self._lookup("addresses", addresses)

    async def get_by_names(self, names: Iterable[str]) -> List[Player]:
        """Names are matched case-insensitively by the API."""
        return await self._lookup("names", names)

    async def get_by_uuids(self, uuids: Iterable[str]) -> List[Player]:
        return await self._lookup("uuids", uuids)

    async def _lookup(self, param: str, values: Iterable[str]) -> List[Player]:
        options = RequestOptions(params={param: ",".join(values)})
        return await self._fetch(_PLAYERS, "/v1/players", options)


__all__ = ["PlayersResource"]
