"""Runtime settings for anukit.

Settings are read from ``ANUKIT_``-prefixed environment variables and an
optional ``.env`` file. The toolkit itself is configuration-light: settings
cover the logging setup and the size of the shared executor used by
``run_async`` / ``try_wrap_async`` when no executor is passed.

Examples:
    >>> from anukit.core.settings import get_settings
    >>> get_settings().async_max_workers
    4

    ``ANUKIT_ASYNC_MAX_WORKERS=8`` in the environment raises it to 8.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnuKitSettings(BaseSettings):
    """Settings shared by every anukit module.

    Fields
    ──────
    log_level          : structlog log level
    json_logs          : JSON renderer (True), console (False), auto (None)
    service_name       : ``service.name`` attached to every log event
    async_max_workers  : worker count of the shared async executor
    """

    model_config = SettingsConfigDict(
        env_prefix="ANUKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None
    service_name: str = "anukit"

    # ── Async helpers ────────────────────────────────────────────
    async_max_workers: int = Field(
        default=4,
        ge=1,
        description="Worker count of the shared ThreadPoolExecutor",
    )


@lru_cache(maxsize=1)
def get_settings() -> AnuKitSettings:
    """Return the process-wide settings, loading them on first use."""
    return AnuKitSettings()


def reset_settings() -> None:
    """Drop cached settings so the next ``get_settings()`` re-reads the environment."""
    get_settings.cache_clear()


__all__ = ["AnuKitSettings", "get_settings", "reset_settings"]
