"""Request pipeline for the Krawlet REST API."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional, Union
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

import httpx
from pydantic import ValidationError

from .config import ClientConfig
from .errors import RETRYABLE_TRANSPORT_ERRORS, ErrorCode, KrawletError
from .models import ApiResponse, ErrorResponse, RateLimit

logger = logging.getLogger("krawlet.http")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
ParamValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class RequestOptions:
    method: HttpMethod = "GET"
    params: Optional[Mapping[str, ParamValue]] = None
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    api_key: Optional[str] = None


def _stringify(value: ParamValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class HttpClient:
    """Issues one logical API call at a time with auth, retry and error translation.

    The rate-limit snapshot is owned by this instance and overwritten by every
    response carrying the ``X-RateLimit-*`` headers. Concurrent calls on the
    same client are not synchronised: whichever response lands last wins.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=config.timeout_seconds, transport=transport)
        self._client = client
        self._last_rate_limit: Optional[RateLimit] = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def get_rate_limit(self) -> Optional[RateLimit]:
        """Most recently observed rate-limit snapshot, ``None`` before the first one."""
        return self._last_rate_limit

    def _build_url(self, path: str, params: Optional[Mapping[str, ParamValue]] = None) -> str:
        url = urljoin(self._config.base_url, path)
        if not params:
            return url
        pairs = [(key, _stringify(value)) for key, value in params.items() if value is not None]
        if not pairs:
            return url
        scheme, netloc, url_path, query, fragment = urlsplit(url)
        encoded = urlencode(pairs)
        query = f"{query}&{encoded}" if query else encoded
        return urlunsplit((scheme, netloc, url_path, query, fragment))

    def _build_headers(
        self,
        custom_headers: Optional[Mapping[str, str]] = None,
        api_key: Optional[str] = None,
    ) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": "application/json"})
        headers.update(self._config.headers)
        if custom_headers:
            headers.update(custom_headers)
        key = api_key or self._config.api_key
        if key:
            headers["Authorization"] = f"Bearer {key}"
        return headers

    def _record_rate_limit(self, response: httpx.Response) -> None:
        rate_limit = RateLimit.from_headers(response.headers)
        if rate_limit is None:
            return
        self._last_rate_limit = rate_limit
        logger.debug(
            "Rate limit updated limit=%s remaining=%s reset=%s",
            rate_limit.limit,
            rate_limit.remaining,
            rate_limit.reset,
        )

    @staticmethod
    def _error_from_response(response: httpx.Response) -> KrawletError:
        try:
            envelope = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            return KrawletError.unknown(response.status_code, response.reason_phrase)
        return KrawletError.from_envelope(envelope, response.status_code)

    async def _send(self, method: str, url: str, headers: httpx.Headers, body: Any) -> ApiResponse:
        content = json.dumps(body, separators=(",", ":")) if body is not None else None
        request = self._client.build_request(
            method, url, content=content, headers=headers, timeout=self._config.timeout_seconds
        )
        # httpx times each phase separately; the deadline covers the whole exchange.
        try:
            response = await asyncio.wait_for(self._client.send(request), self._config.timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise httpx.TimeoutException(
                f"Request did not complete within {self._config.timeout_ms}ms", request=request
            ) from exc
        self._record_rate_limit(response)

        if not response.is_success:
            raise self._error_from_response(response)

        try:
            return ApiResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise KrawletError(
                f"Malformed response body (HTTP {response.status_code})",
                ErrorCode.UNKNOWN_ERROR,
                response.status_code,
            ) from exc

    @staticmethod
    def _should_retry(error: Exception) -> bool:
        if isinstance(error, KrawletError):
            return error.is_server_error() or error.is_rate_limit_error()
        return isinstance(error, RETRYABLE_TRANSPORT_ERRORS)

    def _retry_delay_ms(self, attempt: int) -> int:
        return self._config.retry_delay_ms * (2**attempt)

    async def _sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)

    async def request(self, path: str, options: Optional[RequestOptions] = None) -> ApiResponse:
        """Call ``path`` and return the success envelope.

        Raises :class:`KrawletError` for API errors and lets httpx transport
        errors through once the retry budget is spent.
        """
        options = options or RequestOptions()
        max_attempts = self._config.max_retries + 1 if self._config.enable_retry else 1
        attempt = 0
        while True:
            url = self._build_url(path, options.params)
            headers = self._build_headers(options.headers, options.api_key)
            logger.debug("Request %s %s attempt=%d/%d", options.method, url, attempt + 1, max_attempts)
            try:
                return await self._send(options.method, url, headers, options.body)
            except (KrawletError, httpx.TransportError) as exc:
                if attempt >= max_attempts - 1 or not self._should_retry(exc):
                    raise
                delay_ms = self._retry_delay_ms(attempt)
                logger.warning(
                    "Retrying %s %s in %dms (attempt %d/%d): %r",
                    options.method,
                    url,
                    delay_ms,
                    attempt + 2,
                    max_attempts,
                    exc,
                )
                await self._sleep(delay_ms / 1000)
                attempt += 1

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpClient", "RequestOptions"]
