"""Persistent render settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from monogram_renderer import AvatarOptions, get_palette, parse_hex

CONFIG_VERSION = 1

_LOGGER = logging.getLogger("monogram")


@dataclass
class RenderConfig:
    size: int = 250
    font_path: str | None = None
    font_size: float = 0.0
    n_initials: int = 2
    text_color: str = "#FFFFFF"
    bg_color: str = "#808080"
    palette: str | None = None
    shape: str = "square"


@dataclass
class LoggingConfig:
    keep_log_files: int = 7
    level: str = "INFO"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Monogram"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Monogram"
    return Path.home() / ".config" / "monogram"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _blank_to_none(value: Any) -> str | None:
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _normalize_render(cfg: AppConfig) -> None:
    r = cfg.render
    r.size = max(1, int(r.size))
    r.font_size = float(max(0.0, float(r.font_size)))
    r.n_initials = max(0, int(r.n_initials))
    r.font_path = _blank_to_none(r.font_path)
    r.palette = _blank_to_none(r.palette)
    if r.shape not in ("square", "circle"):
        r.shape = "square"


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        _LOGGER.warning("unreadable config, using defaults", extra={"event": "config_unreadable", "path": str(path)})
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    try:
        cfg = AppConfig(
            config_version=int(raw.get("config_version", CONFIG_VERSION)),
            render=_merge(RenderConfig, raw.get("render", {})),
            logging=_merge(LoggingConfig, raw.get("logging", {})),
        )
        _normalize_render(cfg)
        _normalize_logging(cfg)
    except (TypeError, ValueError):
        _LOGGER.warning("invalid config values, using defaults", extra={"event": "config_invalid", "path": str(path)})
        return AppConfig()
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def to_avatar_options(render: RenderConfig) -> AvatarOptions:
    """Build AvatarOptions from config values.

    Raises InvalidColorHexError for bad colors and ValueError for unknown palettes.
    """
    return AvatarOptions(
        bg_color=parse_hex(render.bg_color),
        size=render.size,
        font_path=render.font_path,
        font_size=render.font_size,
        text_color=parse_hex(render.text_color),
        n_initials=render.n_initials,
        gradient=get_palette(render.palette),
    )
