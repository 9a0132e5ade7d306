"""Server settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float | None) -> float | None:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip()
    return normalized or default


def parse_env_pairs(raw: str | None) -> dict[str, str]:
    """Parse ``KEY=VALUE;KEY2=VALUE2`` into a dict, skipping malformed entries."""
    pairs: dict[str, str] = {}
    if not raw:
        return pairs
    for chunk in raw.split(";"):
        key, sep, value = chunk.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        pairs[key] = value
    return pairs


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the clasp MCP server."""

    clasp_binary: str = "clasp"
    strict_parameters: bool = False
    command_timeout_seconds: float | None = None
    extra_env: Mapping[str, str] = field(default_factory=dict)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        # zero or negative disables the per-command timeout
        if self.command_timeout_seconds is not None and self.command_timeout_seconds <= 0:
            object.__setattr__(self, "command_timeout_seconds", None)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            clasp_binary=_env_str("CLASP_BINARY", "clasp") or "clasp",
            strict_parameters=_env_bool("CLASP_MCP_STRICT_PARAMETERS", False),
            command_timeout_seconds=_env_float("CLASP_MCP_COMMAND_TIMEOUT_SECONDS", None),
            extra_env=parse_env_pairs(os.getenv("CLASP_MCP_EXTRA_ENV")),
            log_level=(_env_str("CLASP_MCP_LOG_LEVEL", "INFO") or "INFO").upper(),
        )

    def with_overrides(self, **changes: object) -> "Settings":
        """Return a copy with the non-None overrides applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied) if applied else self


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return a cached Settings instance built from the current environment."""

    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def configure_settings(settings: Settings) -> None:
    global _SETTINGS
    _SETTINGS = settings


def reset_settings() -> None:
    global _SETTINGS
    _SETTINGS = None


__all__ = [
    "Settings",
    "configure_settings",
    "get_settings",
    "parse_env_pairs",
    "reset_settings",
]
