"""ShopSync reports, statistics and change logs."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import TypeAdapter

from ..http_client import RequestOptions
from ..models import ChangeLogOptions, ChangeLogResult, ReportRecords
from .base import Resource

DEFAULT_REPORT_LIMIT = 50

_RECORDS = TypeAdapter(ReportRecords)
_CHANGE_LOGS = TypeAdapter(ChangeLogResult)


class ReportsResource(Resource):
    async def get_stats(self) -> Any:
        return await self._fetch_raw("/v1/reports/stats")

    async def get_validation_failures(self, limit: int = DEFAULT_REPORT_LIMIT) -> ReportRecords:
        return await self._records("/v1/reports/validation-failures", limit)

    async def get_successful_posts(self, limit: int = DEFAULT_REPORT_LIMIT) -> ReportRecords:
        return await self._records("/v1/reports/successful-posts", limit)

    async def get_shop_changes(
        self, limit: int = DEFAULT_REPORT_LIMIT, shop_id: Optional[str] = None
    ) -> ReportRecords:
        return await self._records("/v1/reports/shop-changes", limit, shop_id)

    async def get_item_changes(
        self, limit: int = DEFAULT_REPORT_LIMIT, shop_id: Optional[str] = None
    ) -> ReportRecords:
        return await self._records("/v1/reports/item-changes", limit, shop_id)

    async def get_shop_change_logs(self, options: Optional[ChangeLogOptions] = None) -> ChangeLogResult:
        return await self._change_logs("/v1/reports/shop-change-logs", options)

    async def get_item_change_logs(self, options: Optional[ChangeLogOptions] = None) -> ChangeLogResult:
        return await self._change_logs("/v1/reports/item-change-logs", options)

    async def get_price_change_logs(self, options: Optional[ChangeLogOptions] = None) -> ChangeLogResult:
        return await self._change_logs("/v1/reports/price-change-logs", options)

    async def get(self, report_id: str) -> Any:
        return await self._fetch_raw(f"/v1/reports/{report_id}")

    async def _records(self, path: str, limit: int, shop_id: Optional[str] = None) -> ReportRecords:
        options = RequestOptions(params={"limit": limit or DEFAULT_REPORT_LIMIT, "shopId": shop_id})
        return await self._fetch(_RECORDS, path, options)

    async def _change_logs(self, path: str, options: Optional[ChangeLogOptions]) -> ChangeLogResult:
        filters = options or ChangeLogOptions()
        params = {
            "limit": filters.limit,
            "offset": filters.offset,
            "shopId": filters.shop_id,
            "since": filters.since,
            "until": filters.until,
        }
        return await self._fetch(_CHANGE_LOGS, path, RequestOptions(params=params))


__all__ = ["ReportsResource", "DEFAULT_REPORT_LIMIT"]
