"""Resource wrappers over the request pipeline."""

from .addresses import AddressesResource
from .apikey import ApiKeyResource
from .health import HealthResource
from .items import ItemsResource
from .players import PlayersResource
from .reports import ReportsResource
from .shops import ShopsResource
from .storage import StorageResource

__all__ = [
    "AddressesResource",
    "ApiKeyResource",
    "HealthResource",
    "ItemsResource",
    "PlayersResource",
    "ReportsResource",
    "ShopsResource",
    "StorageResource",
]
