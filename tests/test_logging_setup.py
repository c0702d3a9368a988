import logging
from pathlib import Path
from unittest.mock import patch

from starlette.config import Config

from cred_core.config import CredentialSettings, load_settings
from cred_core.logger.logging_setup import resolve_log_dir, setup_logging

_CONFIG = """
version: 1
disable_existing_loggers: false
handlers:
  file:
    class: logging.FileHandler
    filename: somewhere/else/cred_core.log
  audit:
    class: logging.FileHandler
    filename: audit.log
loggers:
  cred_core_test_logger:
    level: INFO
    handlers: [file, audit]
"""


def test_resolve_log_dir_uses_setting(tmp_path):
    settings = CredentialSettings(log_dir=str(tmp_path / "a"))
    assert resolve_log_dir(settings) == (tmp_path / "a").resolve()


def test_resolve_log_dir_falls_back():
    assert resolve_log_dir(CredentialSettings()) == Path("logs").resolve()


def test_setup_logging_redirects_file_handlers(tmp_path):
    cfg = tmp_path / "logging.yaml"
    cfg.write_text(_CONFIG, encoding="utf-8")
    settings = load_settings(
        Config(
            environ={
                "CRED_LOG_CONFIG": str(cfg),
                "CRED_LOG_DIR": str(tmp_path / "logs"),
            }
        )
    )

    assert setup_logging(settings) is True
    logger = logging.getLogger("cred_core_test_logger")
    try:
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        for name in ("cred_core.log", "audit.log"):
            log_file = tmp_path / "logs" / name
            assert log_file.exists()
            assert "hello" in log_file.read_text(encoding="utf-8")
        assert not (tmp_path / "somewhere").exists()
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_setup_logging_without_file_uses_basic_config(tmp_path):
    settings = CredentialSettings(
        log_config=str(tmp_path / "missing.yaml"), log_level="DEBUG"
    )
    with patch("cred_core.logger.logging_setup.logging.basicConfig") as basic:
        assert setup_logging(settings) is False
    basic.assert_called_once_with(level="DEBUG")


def test_setup_logging_loads_settings_when_none_given(monkeypatch, tmp_path):
    monkeypatch.setenv("CRED_LOG_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("CRED_LOG_LEVEL", "warning")
    with patch("cred_core.logger.logging_setup.logging.basicConfig") as basic:
        setup_logging()
    basic.assert_called_once_with(level="WARNING")
