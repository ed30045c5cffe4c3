# -*- coding: utf-8 -*-
# tests/test_logger.py

import logging
import os
import time
from logging.handlers import TimedRotatingFileHandler

import pytest

from apps.utils.logger import resolve_level, setup_logger


def test_setup_logger_is_idempotent(tmp_path):
    logger = setup_logger("ubiregi.test.idempotent", level="DEBUG", log_dir=tmp_path)
    setup_logger("ubiregi.test.idempotent", level="DEBUG", log_dir=tmp_path)
    assert logger.level == logging.DEBUG
    assert sum(isinstance(h, TimedRotatingFileHandler) for h in logger.handlers) == 1
    assert len(logger.handlers) == 2


def test_setup_logger_writes_file(tmp_path):
    logger = setup_logger("ubiregi.test.file", log_dir=tmp_path, log_name="client")
    logger.info("Sending GET request to https://x/api/3/checkouts ...")
    for handler in logger.handlers:
        handler.flush()
    assert "Sending GET request" in (tmp_path / "client.log").read_text(encoding="utf-8")


def test_console_only_without_log_dir():
    logger = setup_logger("ubiregi.test.console")
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_loggers_share_one_file_handler(tmp_path):
    loggers = [setup_logger(f"ubiregi.test.shared.{n}", log_dir=tmp_path) for n in ("a", "b", "c")]
    handlers = [
        [h for h in logger.handlers if isinstance(h, TimedRotatingFileHandler)][0]
        for logger in loggers
    ]
    assert handlers[0] is handlers[1] is handlers[2]


def test_rollover_keeps_previous_day_log(tmp_path):
    log_file = tmp_path / "ubiregi.log"
    log_file.write_text("YESTERDAY-LINE\n", encoding="utf-8")
    two_days_ago = time.time() - 2 * 24 * 3600
    os.utime(log_file, (two_days_ago, two_days_ago))

    loggers = [setup_logger(f"ubiregi.test.rollover.{n}", log_dir=tmp_path) for n in ("a", "b", "c")]
    loggers[0].info("first")
    loggers[1].info("second")
    for handler in loggers[0].handlers:
        handler.flush()

    contents = [p.read_text(encoding="utf-8") for p in tmp_path.iterdir() if p.is_file()]
    assert any("YESTERDAY-LINE" in text for text in contents)
    assert "second" in log_file.read_text(encoding="utf-8")


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    with pytest.raises(ValueError):
        resolve_level("verbose")
