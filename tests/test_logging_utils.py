from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from logging_utils import configure_logging, get_logger

if TYPE_CHECKING:
    from pathlib import Path


def _file_handlers(logger: logging.Logger) -> list[logging.FileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_get_logger_is_namespaced() -> None:
    assert get_logger("graph.algos").name == "archmap.graph.algos"
    assert get_logger().name == "archmap"


def test_quiet_and_verbose_levels() -> None:
    logger = configure_logging(quiet=True)
    assert logger.level == logging.WARNING

    logger = configure_logging(verbose=True)
    assert logger.level == logging.DEBUG

    logger = configure_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_log_file_captures_debug_even_when_console_is_quiet(tmp_path: Path) -> None:
    log_path = tmp_path / "run.log"
    logger = configure_logging(quiet=True, log_file=log_path)

    get_logger("test").debug("detail %d", 42)

    assert "DEBUG archmap.test: detail 42" in log_path.read_text(encoding="utf-8")
    configure_logging()


def test_reconfiguring_closes_previous_file_handler(tmp_path: Path) -> None:
    first = configure_logging(log_file=tmp_path / "first.log")
    (first_handler,) = _file_handlers(first)

    second = configure_logging(log_file=tmp_path / "second.log")

    assert first_handler.stream is None
    assert first_handler not in second.handlers
    assert len(_file_handlers(second)) == 1
    configure_logging()
