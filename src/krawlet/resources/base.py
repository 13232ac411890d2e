"""Shared plumbing for resource wrappers."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from pydantic import TypeAdapter

from ..http_client import HttpClient, RequestOptions

T = TypeVar("T")


class Resource:
    def __init__(self, client: HttpClient) -> None:
        self._client = client

    async def _fetch(self, adapter: TypeAdapter[T], path: str, options: Optional[RequestOptions] = None) -> T:
        response = await self._client.request(path, options)
        return adapter.validate_python(response.data)

    async def _fetch_raw(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        response = await self._client.request(path, options)
        return response.data


__all__ = ["Resource"]
