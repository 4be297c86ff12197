import io
import json
import logging

import pytest
from pythonjsonlogger import jsonlogger

from tab_browser.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_format_by_default(restore_root_logger, monkeypatch):
    monkeypatch.delenv("TAB_BROWSER_LOG_FORMAT", raising=False)

    configure_logging()

    (handler,) = restore_root_logger.handlers
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)
    assert restore_root_logger.level == logging.INFO


def test_env_selects_plain_format(restore_root_logger, monkeypatch):
    monkeypatch.setenv("TAB_BROWSER_LOG_FORMAT", "PLAIN")

    configure_logging(level=logging.DEBUG)

    (handler,) = restore_root_logger.handlers
    assert not isinstance(handler.formatter, jsonlogger.JsonFormatter)
    assert restore_root_logger.level == logging.DEBUG


def test_force_format_wins_over_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("TAB_BROWSER_LOG_FORMAT", "plain")

    configure_logging(force_format="json")

    (handler,) = restore_root_logger.handlers
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)


def test_unknown_format_rejected(monkeypatch):
    monkeypatch.setenv("TAB_BROWSER_LOG_FORMAT", "xml")

    with pytest.raises(ValueError):
        configure_logging()


def test_json_lines_carry_extra_fields(restore_root_logger):
    stream = io.StringIO()
    configure_logging(force_format="json", stream=stream)

    logging.getLogger("tab_browser.test").info("Dataset replaced", extra={"n_rows": 3})

    record = json.loads(stream.getvalue().splitlines()[-1])
    assert record["message"] == "Dataset replaced"
    assert record["n_rows"] == 3
