"""Shop listings and ShopSync updates."""

from __future__ import annotations

from typing import Dict, List, Union

from pydantic import TypeAdapter

from ..http_client import RequestOptions
from ..models import Item, Shop, ShopSyncData
from .base import Resource

_SHOPS = TypeAdapter(List[Shop])
_SHOP = TypeAdapter(Shop)
_ITEMS = TypeAdapter(List[Item])
_MESSAGE = TypeAdapter(Dict[str, str])


class ShopsResource(Resource):
    async def get_all(self) -> List[Shop]:
        return await self._fetch(_SHOPS, "/v1/shops")

    async def get(self, shop_id: str) -> Shop:
        """Raises KrawletError with ``SHOP_NOT_FOUND`` for unknown ids."""
        return await self._fetch(_SHOP, f"/v1/shops/{shop_id}")

    async def get_items(self, shop_id: str) -> List[Item]:
        return await self._fetch(_ITEMS, f"/v1/shops/{shop_id}/items")

    async def update(self, data: Union[ShopSyncData, dict], token: str) -> Dict[str, str]:
        """Create or update a shop. Requires a ShopSync token."""
        body = data.to_wire() if isinstance(data, ShopSyncData) else data
        options = RequestOptions(method="POST", body=body, api_key=token)
        return await self._fetch(_MESSAGE, "/v1/shops", options)


__all__ = ["ShopsResource"]
