"""Load and merge configuration from .issuebridge.toml, CLI flags, and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from issuebridge.config.schema import (
    SEVERITY_NAMES,
    ConvertConfig,
    IssueBridgeConfig,
    LoggingConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".issuebridge.toml"

_TRUTHY = ("1", "true", "yes", "on")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(work_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = work_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: IssueBridgeConfig) -> None:
    if cfg.output.format not in ("terminal", "json"):
        raise ConfigError(f"Invalid output format: {cfg.output.format}")
    if cfg.output.min_severity not in SEVERITY_NAMES:
        raise ConfigError(f"Invalid min_severity: {cfg.output.min_severity}")
    if cfg.logging.level not in ("debug", "info", "warning", "error"):
        raise ConfigError(f"Invalid log level: {cfg.logging.level}")
    if not isinstance(cfg.convert.include_ignores, bool):
        raise ConfigError("include_ignores must be true or false")


def _merge_env_overrides(cfg: IssueBridgeConfig) -> None:
    """Apply ISSUEBRIDGE_* environment variable overrides."""
    if val := os.environ.get("ISSUEBRIDGE_INCLUDE_IGNORES"):
        cfg.convert.include_ignores = val.strip().lower() in _TRUTHY
    if val := os.environ.get("ISSUEBRIDGE_FORMAT"):
        if val in ("terminal", "json"):
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("ISSUEBRIDGE_LOG_LEVEL"):
        if val.lower() in ("debug", "info", "warning", "error"):
            cfg.logging.level = val.lower()  # type: ignore[assignment]


def load_config(
    work_dir: Path,
    config_override: Optional[str] = None,
) -> IssueBridgeConfig:
    """Load, validate, and return an IssueBridgeConfig."""
    config_path = find_config_file(work_dir, config_override)

    if config_path is None:
        cfg = IssueBridgeConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = IssueBridgeConfig(
                version=str(raw.get("version", "1.0")),
                convert=_build_section(raw, ConvertConfig, "convert"),
                output=_build_section(raw, OutputConfig, "output"),
                logging=_build_section(raw, LoggingConfig, "logging"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
