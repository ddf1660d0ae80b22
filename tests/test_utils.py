import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from declargs.utils import get_program_invocation, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli(restore_root_logger):
    setup_logging(mode="cli")
    assert any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)


def test_setup_logging_json(restore_root_logger):
    setup_logging(mode="json")
    (handler,) = restore_root_logger.handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_mode_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("DECLARGS_LOG_MODE", "json")
    setup_logging()
    assert not any(isinstance(h, RichHandler) for h in restore_root_logger.handlers)


def test_setup_logging_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "declargs.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("declargs").debug("hello")
    file_handlers = [
        h for h in restore_root_logger.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert '"message": "hello"' in log_file.read_text(encoding="UTF-8")


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_get_program_invocation():
    assert get_program_invocation()
