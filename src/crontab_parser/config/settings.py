"""Pydantic-based settings loaded from environment variables.

Everything can also come from a ``.env`` file in the working directory.
CLI flags override these values per invocation.

Usage::

    from crontab_parser.config import get_settings
    settings = get_settings()
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# ---------------------------------------------------------------------------
# Type alias: env var string "A=1,B=2" → {"A": "1", "B": "2"}
# ---------------------------------------------------------------------------
EnvPairs = Annotated[dict[str, str], NoDecode]


class Settings(BaseSettings):
    """Central configuration — every field maps to an UPPER_SNAKE env var."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    # -- General ------------------------------------------------------------
    log_level: str = "WARNING"
    output_format: Literal["text", "json"] = "text"

    # -- Job parsing --------------------------------------------------------
    # System crontabs (/etc/crontab, /etc/cron.d) carry a user column.
    crontab_has_user: bool = False
    crontab_env: EnvPairs = Field(default_factory=dict)

    @field_validator("crontab_env", mode="before")
    @classmethod
    def split_env_pairs(cls, value: object) -> dict[str, str]:
        """Convert comma-separated ``KEY=value`` pairs to a dict."""
        if isinstance(value, dict):
            return value
        if not isinstance(value, str):
            return {}
        pairs: dict[str, str] = {}
        for item in value.split(","):
            key, sep, val = item.partition("=")
            if sep and key.strip():
                pairs[key.strip()] = val.strip()
        return pairs


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return Settings()
