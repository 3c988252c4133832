from __future__ import annotations

import logging
from dataclasses import dataclass

import structlog

from water_switch.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "water_switch.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)
    assert all(
        isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        for handler in root.handlers
    )

    logger = get_logger(__name__)
    logger.info("structured log test", device_id="dev-1")


def test_httpx_logger_is_kept_quiet() -> None:
    configure_logging(level="DEBUG")

    assert logging.getLogger("httpx").level == logging.WARNING


def test_production_renders_json(tmp_path) -> None:
    log_file = tmp_path / "json.log"
    configure_logging(level="INFO", file_path=str(log_file), environment="production")

    logging.getLogger("water_switch.test").info("plain stdlib record")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert line.startswith("{") and '"event": "plain stdlib record"' in line


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR


def test_every_logging_setting_reaches_configuration(monkeypatch, tmp_path) -> None:
    from water_switch.main.config import AppSettings, LoggingSettings

    log_file = tmp_path / "settings.log"
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FILE_PATH", str(log_file))

    update_logging_from_settings(AppSettings())

    root_logger = logging.getLogger()
    assert set(LoggingSettings.model_fields) == {"level", "file_path"}
    assert root_logger.level == logging.WARNING
    assert any(
        isinstance(handler, logging.FileHandler)
        and handler.baseFilename == str(log_file)
        for handler in root_logger.handlers
    )
