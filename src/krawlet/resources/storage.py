"""Ender storage snapshots."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import TypeAdapter

from ..http_client import RequestOptions
from ..models import StorageData
from .base import Resource

_STORAGE = TypeAdapter(StorageData)
_STORED = TypeAdapter(Dict[str, str])


class StorageResource(Resource):
    async def get(self) -> StorageData:
        return await self._fetch(_STORAGE, "/v1/storage")

    async def set(self, data: Any, token: str) -> Dict[str, str]:
        options = RequestOptions(method="POST", body=data, api_key=token)
        return await self._fetch(_STORED, "/v1/storage", options)


__all__ = ["StorageResource"]
