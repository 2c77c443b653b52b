"""Config models and loader.

This module defines Pydantic models for file- and environment-based cache
configuration. JSON parsing prefers `orjson` when it is installed and falls
back to the standard library's `json` module otherwise.
"""

from __future__ import annotations

import json as _json
from pathlib import Path
from typing import Any, Callable, Optional

try:
    import orjson as _orjson_mod  # type: ignore[assignment]
except ImportError:  # pragma: no cover - optional dependency
    _orjson_mod = None  # type: ignore[assignment]
    _loads_orjson: Optional[Callable[[bytes], Any]] = None
else:

    def _loads_orjson(buf: bytes) -> Any:
        loader = getattr(_orjson_mod, "loads")  # type: ignore[assignment]
        return loader(buf)


from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.cache import LRUCache


class CacheConfig(BaseModel):
    """Configuration for a single cache.

    Attributes
    ----------
    capacity: int
        Maximum number of live entries. Zero disables retention entirely.
    """

    capacity: int = Field(128, ge=0, description="Maximum number of entries")

    @staticmethod
    def load(path: Path) -> "CacheConfig":
        """Load cache config from a JSON file."""
        raw = path.read_bytes()
        if _loads_orjson is not None:
            data = _loads_orjson(raw)
        else:
            data = _json.loads(raw.decode("utf-8"))
        return CacheConfig.model_validate(data)

    def build(self) -> LRUCache:
        """Return an empty cache with this configuration."""
        return LRUCache.from_config(self)


class EnvSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Attributes
    ----------
    log_level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    default_capacity: int
        Capacity used when no explicit config is given. Defaults to 128.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LRUCACHE_")

    log_level: str = Field("INFO")
    default_capacity: int = Field(
        128,
        ge=0,
        description="Capacity used when no explicit config is given",
    )

    def cache_config(self) -> CacheConfig:
        """Return a :class:`CacheConfig` using `default_capacity`."""
        return CacheConfig(capacity=self.default_capacity)
