# stringart_pattern/tests/test_log_capture.py

import logging

from stringart_pattern.log_capture import create_capture_logger, resolve_logger


def test_capture_logger_collects_per_run():
    run_logs: dict[str, list[str]] = {}
    a = create_capture_logger("a", run_logs)
    b = create_capture_logger("b", run_logs, fmt="%(levelname)s %(message)s")

    a.debug("first")
    b.info("second")
    a.error("third")

    assert run_logs == {"a": ["first", "third"], "b": ["INFO second"]}


def test_capture_logger_does_not_stack_handlers():
    run_logs: dict[str, list[str]] = {}
    create_capture_logger("again", run_logs)
    logger = create_capture_logger("again", run_logs, level=logging.INFO)

    logger.debug("hidden")
    logger.info("shown")

    assert run_logs == {"again": ["shown"]}


def test_resolve_logger_prefers_explicit_logger():
    explicit = logging.getLogger("stringart_pattern.tests.explicit")
    run_logs: dict[str, list[str]] = {}

    assert resolve_logger(explicit, "ignored", run_logs, "x") is explicit
    assert run_logs == {}


def test_resolve_logger_builds_capture_logger():
    run_logs: dict[str, list[str]] = {}

    logger = resolve_logger(None, None, run_logs, "x")
    logger.debug("kept")

    assert logger.name == "stringart_pattern.run.default"
    assert run_logs == {"default": ["kept"]}


def test_resolve_logger_falls_back_to_module_logger():
    assert resolve_logger(None, "unused", None, "stringart_pattern.pattern") is logging.getLogger("stringart_pattern.pattern")
