"""Core app services for settings and logging."""

from .config import AppConfig, LoggingConfig, RenderConfig, load_config, save_config, to_avatar_options
from .logging_setup import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "RenderConfig",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
    "to_avatar_options",
]
