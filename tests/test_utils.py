import logging

from cpfcheck.utils import LOG_FORMAT, get_logger


def test_get_logger_sets_info_level() -> None:
    log = get_logger("cpfcheck.test_level")
    assert log.level == logging.INFO


def test_get_logger_accepts_level() -> None:
    log = get_logger("cpfcheck.test_custom_level", level=logging.DEBUG)
    assert log.level == logging.DEBUG

    get_logger("cpfcheck.test_custom_level", level=logging.WARNING)
    assert log.level == logging.WARNING


def test_get_logger_does_not_duplicate_handlers() -> None:
    first = get_logger("cpfcheck.test_handlers")
    second = get_logger("cpfcheck.test_handlers")

    assert first is second
    assert len(second.handlers) == 1
    assert second.handlers[0].formatter._fmt == LOG_FORMAT


def test_get_logger_adds_own_handler_next_to_foreign_one() -> None:
    log = logging.getLogger("cpfcheck.test_foreign")
    log.addHandler(logging.NullHandler())

    get_logger("cpfcheck.test_foreign")
    get_logger("cpfcheck.test_foreign")

    assert len(log.handlers) == 2
    assert sum(isinstance(h, logging.NullHandler) for h in log.handlers) == 1
