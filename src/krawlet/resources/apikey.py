"""Introspection of the authenticated API key. Every call needs a key."""

from __future__ import annotations

from typing import Optional

from pydantic import TypeAdapter

from ..http_client import RequestOptions
from ..models import ApiKeyInfo, ApiKeyUsage, RequestLogsResponse
from .base import Resource

_INFO = TypeAdapter(ApiKeyInfo)
_USAGE = TypeAdapter(ApiKeyUsage)
_LOGS = TypeAdapter(RequestLogsResponse)


class ApiKeyResource(Resource):
    async def get_info(self, usage: Optional[bool] = None) -> ApiKeyInfo:
        """Key metadata; the API includes usage statistics unless ``usage=False``."""
        return await self._fetch(_INFO, "/v1/apikey", RequestOptions(params={"usage": usage}))

    async def get_usage(self) -> ApiKeyUsage:
        return await self._fetch(_USAGE, "/v1/apikey/usage")

    async def get_logs(self, limit: Optional[int] = None) -> RequestLogsResponse:
        return await self._fetch(_LOGS, "/v1/apikey/logs", RequestOptions(params={"limit": limit}))


__all__ = ["ApiKeyResource"]
