"""Pydantic models for Krawlet API envelopes and entities."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"

_INTEGER = re.compile(r"-?[0-9]+")


class KrawletModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Envelopes


class RateLimit(KrawletModel):
    limit: int
    remaining: int
    reset: int

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional["RateLimit"]:
        """Parse the ``X-RateLimit-*`` headers, or ``None`` if any is absent or not an integer."""
        raw_limit = headers.get(RATE_LIMIT_LIMIT_HEADER)
        raw_remaining = headers.get(RATE_LIMIT_REMAINING_HEADER)
        raw_reset = headers.get(RATE_LIMIT_RESET_HEADER)
        if not all(_INTEGER.fullmatch(raw or "") for raw in (raw_limit, raw_remaining, raw_reset)):
            return None
        return cls(limit=int(raw_limit), remaining=int(raw_remaining), reset=int(raw_reset))


class ApiResponseMeta(KrawletModel):
    timestamp: Optional[str] = None
    elapsed: Optional[float] = None
    version: Optional[str] = None
    request_id: Optional[str] = None
    rate_limit: Optional[RateLimit] = None


class ApiResponse(KrawletModel):
    success: Literal[True]
    data: Any = None
    meta: ApiResponseMeta


class ApiErrorBody(KrawletModel):
    code: str
    message: str
    details: Any = None


class ErrorResponse(KrawletModel):
    success: Literal[False]
    error: ApiErrorBody
    meta: Optional[ApiResponseMeta] = None


# ---------------------------------------------------------------------------
# Shops, items and prices

KnownAddressType = Literal["official", "shop", "gamble", "service", "company"]
PlayerNotifications = Literal["none", "self", "all"]
ItemChangeType = Literal["added", "removed"]
ShopSourceType = Literal["modem", "radio_tower"]
ApiKeyTier = Literal["free", "premium", "shopsync", "enderstorage", "internal"]
ServiceStatus = Literal["connected", "disconnected", "connecting", "error"]


class Price(KrawletModel):
    id: str
    value: float
    currency: str
    address: Optional[str] = None
    required_meta: Optional[str] = None


class Item(KrawletModel):
    id: str
    shop_id: str
    item_name: str
    item_nbt: Optional[str] = None
    item_display_name: Optional[str] = None
    item_description: Optional[str] = None
    shop_buys_item: Optional[bool] = None
    no_limit: Optional[bool] = None
    dynamic_price: bool = False
    made_on_demand: bool = False
    requires_interaction: bool = False
    stock: int = 0
    prices: List[Price] = Field(default_factory=list)
    addresses: List[str] = Field(default_factory=list)
    created_date: Optional[str] = None
    updated_date: Optional[str] = None


class Shop(KrawletModel):
    id: str
    name: str
    description: Optional[str] = None
    owner: Optional[str] = None
    computer_id: int
    software_name: Optional[str] = None
    software_version: Optional[str] = None
    source_type: ShopSourceType = "modem"
    location_coordinates: Optional[str] = None
    location_description: Optional[str] = None
    location_dimension: Optional[str] = None
    items: List[Item] = Field(default_factory=list)
    addresses: List[str] = Field(default_factory=list)
    created_date: Optional[str] = None
    updated_date: Optional[str] = None


class Player(KrawletModel):
    minecraft_uuid: str = Field(alias="minecraftUUID")
    minecraft_name: str
    kromer_address: str
    notifications: PlayerNotifications = "none"
    created_date: Optional[str] = None
    updated_date: Optional[str] = None
    online: bool = False


class KnownAddress(KrawletModel):
    id: str
    type: KnownAddressType
    address: str
    image_src: Optional[str] = None
    name: str
    description: str = ""
    created_date: Optional[str] = None
    updated_date: Optional[str] = None


# ---------------------------------------------------------------------------
# Change logs


class ShopChangeLog(KrawletModel):
    id: int
    shop_id: str
    shop_name: str
    field: str
    previous_value: Optional[str] = None
    new_value: Optional[str] = None
    is_new_shop: bool = False
    created_at: str
    updated_at: str


class ItemChangeLog(KrawletModel):
    id: int
    shop_id: str
    shop_name: str
    change_type: ItemChangeType
    item_name: str
    item_display_name: str
    item_hash: str
    created_at: str
    updated_at: str


class PriceChangeLog(KrawletModel):
    id: int
    shop_id: str
    shop_name: str
    item_name: str
    item_display_name: str
    item_hash: str
    field: str
    previous_value: Optional[str] = None
    new_value: Optional[str] = None
    created_at: str
    updated_at: str


class ChangeLogOptions(KrawletModel):
    limit: Optional[int] = None
    offset: Optional[int] = None
    shop_id: Optional[str] = None
    since: Optional[str] = None
    until: Optional[str] = None


class ChangeLogResult(KrawletModel):
    count: int
    total: int
    logs: List[Any] = Field(default_factory=list)


class ReportRecords(KrawletModel):
    count: int
    records: List[Any] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# ShopSync payloads


class ShopSyncSoftware(KrawletModel):
    name: str
    version: str


class ShopSyncLocation(KrawletModel):
    coordinates: Tuple[int, int, int]
    description: Optional[str] = None
    dimension: Optional[str] = None


class ShopSyncInfo(KrawletModel):
    name: str
    description: Optional[str] = None
    owner: Optional[str] = None
    computer_id: int = Field(alias="computerID")
    software: Optional[ShopSyncSoftware] = None
    location: Optional[ShopSyncLocation] = None


class ShopSyncItemInfo(KrawletModel):
    name: str
    nbt: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None


class ShopSyncPrice(KrawletModel):
    value: float
    currency: str
    address: Optional[str] = None
    required_meta: Optional[str] = None


class ShopSyncListing(KrawletModel):
    item: ShopSyncItemInfo
    shop_buys_item: Optional[bool] = None
    no_limit: Optional[bool] = None
    dynamic_price: Optional[bool] = None
    made_on_demand: Optional[bool] = None
    requires_interaction: Optional[bool] = None
    stock: Optional[int] = None
    prices: List[ShopSyncPrice]


class ShopSyncData(KrawletModel):
    source_type: Optional[ShopSourceType] = None
    info: ShopSyncInfo
    items: List[ShopSyncListing] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# API keys


class EndpointCount(KrawletModel):
    path: str
    count: int


class ApiKeyUsage(KrawletModel):
    total_requests: int
    last24h: int
    last7d: int
    last30d: int
    blocked_requests: int
    avg_response_time_ms: Optional[float] = None
    top_endpoints: List[EndpointCount] = Field(default_factory=list)


class ApiKeyInfo(KrawletModel):
    id: str
    name: str
    email: Optional[str] = None
    tier: ApiKeyTier
    rate_limit: int
    is_active: bool
    request_count: int
    last_used_at: Optional[str] = None
    created_at: str
    usage: Optional[ApiKeyUsage] = None


class RequestLog(KrawletModel):
    request_id: str
    timestamp: str
    method: str
    path: str
    response_status: Optional[int] = None
    response_time_ms: Optional[float] = None
    was_blocked: bool = False
    block_reason: Optional[str] = None


class RequestLogsResponse(KrawletModel):
    count: int
    logs: List[RequestLog] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Health and storage


class ServiceInfo(KrawletModel):
    status: ServiceStatus
    last_error: Optional[str] = None


class KromerServiceInfo(ServiceInfo):
    last_connected_at: Optional[str] = None
    last_transaction_id: Optional[int] = None


class ChatboxServiceInfo(ServiceInfo):
    owner: Optional[str] = None
    player_count: Optional[int] = None


class DiscordServiceInfo(ServiceInfo):
    username: Optional[str] = None
    command_count: Optional[int] = None


class HealthServices(KrawletModel):
    kromer_ws: ServiceInfo
    chatbox: ServiceInfo
    discord: ServiceInfo


class HealthServicesDetailed(KrawletModel):
    kromer_ws: KromerServiceInfo
    chatbox: ChatboxServiceInfo
    discord: DiscordServiceInfo


class HealthResponse(KrawletModel):
    status: str
    timestamp: str
    uptime: float
    version: str
    name: str
    services: HealthServices


class HealthChecks(KrawletModel):
    database: bool
    memory: bool
    kromer_ws: bool
    chatbox: bool
    discord: bool


class DetailedHealthResponse(KrawletModel):
    status: Literal["healthy", "degraded"]
    checks: HealthChecks
    details: Dict[str, Any] = Field(default_factory=dict)
    services: HealthServicesDetailed


class StorageData(KrawletModel):
    data: Any = None
    retrieved_at: str


__all__ = [
    "ApiErrorBody",
    "ApiKeyInfo",
    "ApiKeyUsage",
    "ApiResponse",
    "ApiResponseMeta",
    "ChangeLogOptions",
    "ChangeLogResult",
    "ChatboxServiceInfo",
    "DetailedHealthResponse",
    "DiscordServiceInfo",
    "ErrorResponse",
    "HealthResponse",
    "HealthServices",
    "Item",
    "ItemChangeLog",
    "KnownAddress",
    "KromerServiceInfo",
    "Player",
    "Price",
    "PriceChangeLog",
    "RateLimit",
    "ReportRecords",
    "RequestLog",
    "RequestLogsResponse",
    "ServiceInfo",
    "Shop",
    "ShopChangeLog",
    "ShopSyncData",
    "ShopSyncInfo",
    "ShopSyncListing",
    "StorageData",
]
