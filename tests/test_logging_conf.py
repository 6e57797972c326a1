import json
import logging
from logging.handlers import RotatingFileHandler

from pythonjsonlogger.json import JsonFormatter

from perfmetrics.config import Settings
from perfmetrics.logging_conf import TEXT_FORMAT, setup_logging
from perfmetrics.utils.logging import get_logger


def test_get_logger_uses_module_name():
    assert get_logger("perfmetrics.growth").name == "perfmetrics.growth"
    assert get_logger().name == "perfmetrics"
    assert get_logger("scripts.report").name == "perfmetrics.scripts.report"
    assert get_logger("perfmetricsx").name == "perfmetrics.perfmetricsx"


def test_setup_logging_console_only(restore_root_logger):
    handlers = setup_logging(Settings(log_level="debug"))
    assert len(handlers) == 1
    assert restore_root_logger.level == logging.DEBUG
    assert handlers[0].formatter._fmt == TEXT_FORMAT


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging(Settings())
    handlers = setup_logging(Settings())
    assert restore_root_logger.handlers == handlers


def test_setup_logging_file_and_json(tmp_path, restore_root_logger):
    log_file = tmp_path / "perfmetrics.log"
    handlers = setup_logging(
        Settings(log_file=str(log_file), log_json=True, log_backup_count=2)
    )
    file_handler = handlers[-1]
    assert isinstance(file_handler, RotatingFileHandler)
    assert file_handler.backupCount == 2
    assert all(isinstance(h.formatter, JsonFormatter) for h in handlers)

    get_logger("perfmetrics.test").info("windows split")
    file_handler.flush()
    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["message"] == "windows split"
    assert record["name"] == "perfmetrics.test"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PERFMETRICS_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("PERFMETRICS_LOG_JSON", "true")
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_json is True
    assert settings.log_file is None
