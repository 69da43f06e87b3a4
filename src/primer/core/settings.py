"""
Centralized settings for primer.

All fields can be set through ``PRIMER_*`` environment variables (for
example ``PRIMER_LOG_LEVEL=DEBUG``) or a ``.env`` file in the working
directory. Unknown variables are ignored.

Tags:
    primer, configuration, settings, pydantic, caching
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class PrimerSettings(BaseSettings):
    """Primer configuration.

    Fields
    ──────
    log_level    : structlog log level
    json_logs    : force JSON (True) or console (False) logs; None auto-detects
    workdir      : parent directory for lesson scratch files; None uses a temp dir
    seed         : seed handed to lessons that use ``random``
    service_name : service name stamped on every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="PRIMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool | None = None
    service_name: str = "primer"

    # ── Lessons ──────────────────────────────────────────────────
    workdir: Path | None = Field(
        default=None,
        description="Parent directory for lesson scratch files",
    )
    seed: int = Field(default=42, description="Seed for lessons that use random")

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, PrimerSettings] = {}


def get_settings(*, _force_reload: bool = False) -> PrimerSettings:
    """Load, validate, and cache a :class:`PrimerSettings` instance.

    Raises:
        ConfigError: when an environment value fails validation.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    from pydantic import ValidationError as PydanticValidationError

    from primer.core.errors import ConfigError

    try:
        settings = PrimerSettings()
    except PydanticValidationError as exc:
        raise ConfigError(f"Invalid primer settings: {exc}", cause=exc) from exc

    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop cached settings (for testing)."""
    _settings_cache.clear()


__all__ = ["PrimerSettings", "get_settings", "clear_settings_cache"]
