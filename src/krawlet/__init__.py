"""Krawlet Python SDK."""

from .client import KrawletClient
from .config import ClientConfig
from .errors import ErrorCode, KrawletError
from .http_client import HttpClient, RequestOptions
from .models import ApiResponse, ErrorResponse, RateLimit

__all__ = [
    "ApiResponse",
    "ClientConfig",
    "ErrorCode",
    "ErrorResponse",
    "HttpClient",
    "KrawletClient",
    "KrawletError",
    "RateLimit",
    "RequestOptions",
]
