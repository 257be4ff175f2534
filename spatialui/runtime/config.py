"""Centralized configuration ownership for spatialui hosts."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

DEFAULT_STYLE_ID = "spatialui-vision-os-styles"


@dataclass(frozen=True, slots=True)
class ProbeConfig:
    strict_vision: bool


@dataclass(frozen=True, slots=True)
class PresetOverrideConfig:
    name: str | None
    style_id: str


@dataclass(frozen=True, slots=True)
class SessionConfig:
    coalesce_pointer_events: bool


@dataclass(frozen=True, slots=True)
class LogConfig:
    level_name: str
    console_format: str
    file_path: str | None


@dataclass(frozen=True, slots=True)
class SpatialConfig:
    probe: ProbeConfig
    preset: PresetOverrideConfig
    session: SessionConfig
    logging: LogConfig


_CONFIG: ContextVar[SpatialConfig | None] = ContextVar("spatialui_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _optional_text(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = _text(name, "", env=env)
    return value or None


def _normalize_log_format(raw: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"text", "json"}:
        return "text"
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("SPATIALUI_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_config(*, env: Mapping[str, str] | None = None) -> SpatialConfig:
    return SpatialConfig(
        probe=ProbeConfig(
            strict_vision=_flag("SPATIALUI_PROBE_STRICT_VISION", False, env=env),
        ),
        preset=PresetOverrideConfig(
            name=_optional_text("SPATIALUI_PRESET", env=env),
            style_id=_text("SPATIALUI_STYLE_ID", DEFAULT_STYLE_ID, env=env),
        ),
        session=SessionConfig(
            coalesce_pointer_events=_flag("SPATIALUI_COALESCE_POINTER_EVENTS", False, env=env),
        ),
        logging=LogConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_normalize_log_format(_text("SPATIALUI_LOG_FORMAT", "text", env=env)),
            file_path=_optional_text("SPATIALUI_LOG_FILE", env=env),
        ),
    )


def initialize_config(*, env: Mapping[str, str] | None = None) -> SpatialConfig:
    config = load_config(env=env)
    _CONFIG.set(config)
    return config


def set_config(config: SpatialConfig) -> SpatialConfig:
    _CONFIG.set(config)
    return config


def get_config() -> SpatialConfig:
    config = _CONFIG.get()
    if config is not None:
        return config
    return initialize_config()


__all__ = [
    "DEFAULT_STYLE_ID",
    "LogConfig",
    "PresetOverrideConfig",
    "ProbeConfig",
    "SessionConfig",
    "SpatialConfig",
    "get_config",
    "initialize_config",
    "load_config",
    "resolve_log_level_name",
    "set_config",
]
