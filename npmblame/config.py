"""Configuration loading for npm-blame (.npmblame.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".npmblame.yml"
REPORT_FORMATS: tuple[str, ...] = ("table", "json", "markdown")
DEFAULT_MAX_COL_WIDTH = 50


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReportConfig:
    """How scan results are rendered."""

    format: str = "table"
    max_col_width: int = DEFAULT_MAX_COL_WIDTH


@dataclass
class BlameConfig:
    """Represents the settings defined in .npmblame.yml."""

    root: Path
    extended: bool = False
    exclude_paths: List[str] = field(default_factory=list)
    report: ReportConfig = field(default_factory=ReportConfig)


def load_config(config_path: Path) -> BlameConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return BlameConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    report = ReportConfig()
    report_data = _as_dict(data.get("report"))
    if report_data:
        fmt = _as_str(report_data.get("format"))
        if fmt is not None:
            fmt = fmt.strip().lower()
            if fmt not in REPORT_FORMATS:
                choices = ", ".join(REPORT_FORMATS)
                raise ConfigError(f"Unknown report format '{fmt}' (expected one of: {choices})")
            report.format = fmt
        if "max_col_width" in report_data:
            width = _as_int(report_data.get("max_col_width"))
            if width is None or width <= 0:
                raise ConfigError("report.max_col_width must be a positive integer")
            report.max_col_width = width

    return BlameConfig(
        root=root,
        extended=_as_bool(data.get("extended")) or False,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        report=report,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "BlameConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_MAX_COL_WIDTH",
    "REPORT_FORMATS",
    "ReportConfig",
    "load_config",
]
