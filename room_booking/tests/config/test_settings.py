import logging

import pytest
import structlog

from room_booking.bootstrap import bootstrap_app
from room_booking.config import (
    LoggingSettings,
    Settings,
    StorageSettings,
    configure_logging,
    get_logger,
)
from room_booking.infrastructure import (
    InMemoryRoomBookingRepository,
    JsonFileRoomBookingRepository,
)


@pytest.fixture
def restore_logging():
    """Сбрасывает настройки логирования после теста."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("STORAGE__BACKEND", raising=False)
    monkeypatch.delenv("LOGGING__LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.environment == "dev"
    assert settings.storage.backend == "memory"


def test_nested_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("STORAGE__BACKEND", "json")

    settings = Settings(_env_file=None)

    assert settings.logging.level == "DEBUG"
    assert settings.storage.backend == "json"


def test_configure_logging_console(capsys, restore_logging):
    configure_logging(LoggingSettings(level="INFO", format="console"))

    get_logger("room_booking.test").info("проверка", room="101")

    assert "проверка" in capsys.readouterr().out


def test_configure_logging_filters_by_level(capsys, restore_logging):
    configure_logging(LoggingSettings(level="ERROR", format="json"))

    get_logger("room_booking.test").info("не попадет в вывод")

    assert "не попадет" not in capsys.readouterr().out


def test_bootstrap_with_json_storage(tmp_path, restore_logging):
    settings = Settings(
        _env_file=None,
        storage=StorageSettings(backend="json", path=tmp_path / "room_bookings.json"),
    )

    app = bootstrap_app(settings)

    assert isinstance(app["uow"].room_bookings, JsonFileRoomBookingRepository)
    assert app["room_booking_service"] is not None


def test_bootstrap_with_memory_storage(restore_logging):
    app = bootstrap_app(Settings(_env_file=None, storage=StorageSettings()))

    assert type(app["uow"].room_bookings) is InMemoryRoomBookingRepository
