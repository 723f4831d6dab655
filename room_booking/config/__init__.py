"""Конфигурация: настройки и логирование."""

from .logging import configure_logging, get_logger
from .settings import LoggingSettings, Settings, StorageSettings, settings

__all__ = [
    "settings",
    "Settings",
    "LoggingSettings",
    "StorageSettings",
    "configure_logging",
    "get_logger",
]
