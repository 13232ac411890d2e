"""Health check endpoints."""

from __future__ import annotations

from typing import Dict, Literal

from pydantic import TypeAdapter

from ..models import DetailedHealthResponse, HealthResponse, ServiceInfo, ServiceStatus
from .base import Resource

ServiceName = Literal["kromer_ws", "chatbox", "discord"]
SERVICE_NAMES: tuple[ServiceName, ...] = ("kromer_ws", "chatbox", "discord")

_HEALTH = TypeAdapter(HealthResponse)
_DETAILED = TypeAdapter(DetailedHealthResponse)


class HealthResource(Resource):
    async def check(self) -> HealthResponse:
        return await self._fetch(_HEALTH, "/v1/health")

    async def detailed(self) -> DetailedHealthResponse:
        return await self._fetch(_DETAILED, "/v1/health/detailed")

    async def get_service_status(self, service: ServiceName, detailed: bool = False) -> ServiceInfo:
        """Status of one service; ``detailed=True`` returns the richer per-service model."""
        if service not in SERVICE_NAMES:
            raise ValueError(f"Unknown service {service!r}, expected one of {SERVICE_NAMES}")
        health = await (self.detailed() if detailed else self.check())
        return getattr(health.services, service)

    async def are_all_services_connected(self) -> bool:
        services = (await self.check()).services
        return all(getattr(services, name).status == "connected" for name in SERVICE_NAMES)

    async def get_services_status(self) -> Dict[ServiceName, ServiceStatus]:
        services = (await self.check()).services
        return {name: getattr(services, name).status for name in SERVICE_NAMES}


__all__ = ["HealthResource", "ServiceName", "SERVICE_NAMES"]
