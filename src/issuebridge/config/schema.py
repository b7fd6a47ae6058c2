"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]
LogLevel = Literal["debug", "info", "warning", "error"]

SEVERITY_NAMES = ("low", "medium", "high", "critical")


@dataclass
class ConvertConfig:
    include_ignores: bool = False  # keep findings whose suppression is accepted
    base_path: str = ""  # empty = current working directory


@dataclass
class OutputConfig:
    format: OutputFormat = "json"
    min_severity: str = "low"  # terminal table hides issues below this level
    show_summary: bool = True
    indent: int = 2


@dataclass
class LoggingConfig:
    level: LogLevel = "warning"


@dataclass
class IssueBridgeConfig:
    version: str = "1.0"
    convert: ConvertConfig = field(default_factory=ConvertConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
