# tests/test_config_logging.py

from __future__ import annotations

import logging
from pathlib import Path

from keyvalues_parser import config
from keyvalues_parser.logging import get_logger, log_info
from keyvalues_parser.logging import logger as logger_module
from keyvalues_parser.utils import project_root


def test_config_path_honours_environment(monkeypatch, tmp_path: Path) -> None:
    custom = tmp_path / "custom.yml"
    custom.write_text("debug: true\nparser:\n  utf8_errors: strict\n", encoding="utf-8")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(custom))

    cfg = config.load_config()
    assert config.config_path() == custom
    assert cfg.debug is True
    assert cfg.parser == {"utf8_errors": "strict"}
    assert cfg.logging == {}


def test_missing_config_falls_back_to_defaults(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))
    cfg = config.load_config()
    assert cfg.debug is False
    assert cfg.parser == {}
    assert cfg.logging == {"to_file": False}


def test_default_config_writes_no_log_files(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))
    monkeypatch.setattr(config, "_config_cache", None)
    monkeypatch.setattr(logger_module, "PROJECT_ROOT", tmp_path)
    monkeypatch.setattr(logger_module, "BASE_LOGGER_NAME", "kv_defaults_check")
    for name in ("_base_configured", "_effective_level", "_master_log_name", "_rotate_logs", "_to_file"):
        monkeypatch.setattr(logger_module, name, getattr(logger_module, name))
    monkeypatch.setattr(logger_module, "_base_configured", False)

    log = get_logger("kv_defaults_check.encoding")
    base = logging.getLogger("kv_defaults_check")
    try:
        assert not (tmp_path / "logs").exists()
        assert not any(isinstance(h, logging.FileHandler) for h in base.handlers + log.handlers)
        assert any(isinstance(h, logging.StreamHandler) for h in base.handlers)
    finally:
        base.handlers.clear()


def test_project_config_file_is_shipped() -> None:
    assert (project_root() / "config" / "keyvalues_parser.yml").is_file()


def test_get_logger_registers_module_logger() -> None:
    log = get_logger("keyvalues_parser.tests")
    assert isinstance(log, logging.Logger)
    assert log.propagate is True


def test_base_logger_owns_console_handler() -> None:
    base = get_logger("keyvalues_parser")
    assert base.propagate is False
    assert any(isinstance(h, logging.StreamHandler) for h in base.handlers)


def test_log_helpers_write_through_base_logger(caplog) -> None:
    base = logging.getLogger("keyvalues_parser")
    base.addHandler(caplog.handler)
    try:
        log_info("parsed %d files", 3)
    finally:
        base.removeHandler(caplog.handler)
    assert "parsed 3 files" in caplog.text
