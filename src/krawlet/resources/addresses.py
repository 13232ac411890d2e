"""Known Kromer addresses."""

from __future__ import annotations

from typing import List

from pydantic import TypeAdapter

from ..models import KnownAddress
from .base import Resource

_ADDRESSES = TypeAdapter(List[KnownAddress])


class AddressesResource(Resource):
    async def get_all(self) -> List[KnownAddress]:
        return await self._fetch(_ADDRESSES, "/v1/addresses")


__all__ = ["AddressesResource"]
