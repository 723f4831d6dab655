"""Настройки приложения."""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Настройки логирования."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class StorageSettings(BaseSettings):
    """Настройки хранилища бронирований номеров."""

    backend: Literal["memory", "json"] = "memory"
    path: Path = Path("data/room_bookings.json")  # Используется только для json

    model_config = SettingsConfigDict(env_prefix="STORAGE_")


class Settings(BaseSettings):
    """Основные настройки приложения."""

    environment: Literal["dev", "staging", "prod"] = "dev"

    logging: LoggingSettings = LoggingSettings()
    storage: StorageSettings = StorageSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Глобальный экземпляр настроек
settings = Settings()
