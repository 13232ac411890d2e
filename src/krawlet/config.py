"""Configuration objects for the Krawlet Python SDK."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

DEFAULT_BASE_URL = "https://api.krawlet.cc"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    timeout_ms: int = 30_000
    headers: Dict[str, str] = field(default_factory=dict)
    enable_retry: bool = True
    max_retries: int = 3
    retry_delay_ms: int = 1_000

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.retry_delay_ms < 0:
            raise ValueError(f"retry_delay_ms must be >= 0, got {self.retry_delay_ms}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        env = os.environ if environ is None else environ

        enable_retry = True
        raw_retry = env.get("KRAWLET_ENABLE_RETRY")
        if raw_retry is not None:
            lowered = raw_retry.strip().lower()
            if lowered in _TRUE_VALUES:
                enable_retry = True
            elif lowered in _FALSE_VALUES:
                enable_retry = False
            else:
                raise ValueError(f"KRAWLET_ENABLE_RETRY must be a boolean, got {raw_retry!r}")

        return cls(
            base_url=env.get("KRAWLET_BASE_URL", DEFAULT_BASE_URL),
            api_key=env.get("KRAWLET_API_KEY") or None,
            timeout_ms=_int_from_env(env, "KRAWLET_TIMEOUT_MS", 30_000),
            enable_retry=enable_retry,
            max_retries=_int_from_env(env, "KRAWLET_MAX_RETRIES", 3),
            retry_delay_ms=_int_from_env(env, "KRAWLET_RETRY_DELAY_MS", 1_000),
        )


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


__all__ = ["ClientConfig", "DEFAULT_BASE_URL"]
