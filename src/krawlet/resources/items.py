"""Item listings across all shops."""

from __future__ import annotations

from typing import List

from pydantic import TypeAdapter

from ..models import Item
from .base import Resource

_ITEMS = TypeAdapter(List[Item])


class ItemsResource(Resource):
    async def get_all(self) -> List[Item]:
        return await self._fetch(_ITEMS, "/v1/items")


__all__ = ["ItemsResource"]
