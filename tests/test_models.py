from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from krawlet.models import ApiResponse, Player, RateLimit, Shop, ShopSyncData


def test_rate_limit_from_headers() -> None:
    headers = httpx.Headers(
        {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "4999", "X-RateLimit-Reset": "1737331200"}
    )
    assert RateLimit.from_headers(headers) == RateLimit(limit=5000, remaining=4999, reset=1737331200)


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "4999"},
        {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "", "X-RateLimit-Reset": "1"},
        {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "4999", "X-RateLimit-Reset": "soon"},
        {"X-RateLimit-Limit": "1_000", "X-RateLimit-Remaining": "4999", "X-RateLimit-Reset": "1"},
        {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "\u0661\u0662", "X-RateLimit-Reset": "1"},
        {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "4999", "X-RateLimit-Reset": "+1"},
    ],
)
def test_rate_limit_from_incomplete_headers(headers: dict) -> None:
    assert RateLimit.from_headers(headers) is None


def test_envelope_parses_meta_rate_limit() -> None:
    envelope = ApiResponse.model_validate(
        {
            "success": True,
            "data": {"anything": 1},
            "meta": {
                "timestamp": "2026-01-20T00:00:00Z",
                "elapsed": 12,
                "version": "1.0.0",
                "requestId": "req-1",
                "rateLimit": {"limit": 10, "remaining": 9, "reset": 1737331200},
            },
        }
    )
    assert envelope.meta.request_id == "req-1"
    assert envelope.meta.rate_limit == RateLimit(limit=10, remaining=9, reset=1737331200)


def test_envelope_rejects_error_discriminant() -> None:
    with pytest.raises(ValidationError):
        ApiResponse.model_validate({"success": False, "data": None, "meta": {}})


def test_player_uses_wire_aliases() -> None:
    player = Player.model_validate(
        {
            "minecraftUUID": "d98440d6-5117-4ac8-bd50-70b086101e3e",
            "minecraftName": "Twijn",
            "kromerAddress": "ks0d5iqb6p",
            "notifications": "self",
            "createdDate": None,
            "updatedDate": None,
            "online": False,
        }
    )
    assert player.minecraft_uuid == "d98440d6-5117-4ac8-bd50-70b086101e3e"
    assert player.kromer_address == "ks0d5iqb6p"


def test_shop_keeps_unknown_fields_and_nested_items() -> None:
    shop = Shop.model_validate(
        {
            "id": "42",
            "name": "Diamond Depot",
            "computerId": 42,
            "sourceType": "radio_tower",
            "items": [
                {
                    "id": "item-1",
                    "shopId": "42",
                    "itemName": "minecraft:diamond",
                    "stock": 64,
                    "prices": [{"id": "p-1", "value": 1.5, "currency": "KST", "address": "ks0d5iqb6p"}],
                }
            ],
            "featured": True,
        }
    )
    assert shop.source_type == "radio_tower"
    assert shop.items[0].prices[0].value == 1.5
    assert shop.model_extra == {"featured": True}


def test_shop_sync_data_serialises_wire_names() -> None:
    data = ShopSyncData.model_validate(
        {
            "info": {"name": "Test Shop", "computerID": 123, "location": {"coordinates": [1, 64, -2]}},
            "items": [{"item": {"name": "minecraft:dirt", "displayName": "Dirt"}, "prices": [{"value": 1, "currency": "KST"}]}],
        }
    )

    wire = data.to_wire()

    assert wire["info"]["computerID"] == 123
    assert wire["info"]["location"]["coordinates"] == [1, 64, -2]
    assert wire["items"][0]["item"]["displayName"] == "Dirt"
    assert "sourceType" not in wire
