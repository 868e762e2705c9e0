# stringart_pattern/log_capture.py

import logging
from typing import Optional

# Prefix of every per-run logger; they sit below the package logger.
RUN_LOGGER_PREFIX = "stringart_pattern.run"


class PatternRunHandler(logging.Handler):
    """
    Appends each formatted record of one pattern run to run_logs[run_id].
    Records below `min_level` are dropped.
    """
    def __init__(self, run_id: str, run_logs: dict[str, list[str]], min_level: int = logging.DEBUG):
        super().__init__(level=min_level)
        self.run_id = run_id
        self.run_logs = run_logs

    def emit(self, record: logging.LogRecord) -> None:
        self.run_logs.setdefault(self.run_id, []).append(self.format(record))


def create_capture_logger(run_id: str,
                          run_logs: dict[str, list[str]],
                          level: int = logging.DEBUG,
                          fmt: str = "%(message)s") -> logging.Logger:
    """
    Logger for a single pattern run whose records end up in run_logs[run_id]
    instead of the package's normal handlers.
    """
    logger = logging.getLogger(f"{RUN_LOGGER_PREFIX}.{run_id}")
    logger.setLevel(level)
    logger.propagate = False
    for old in [h for h in logger.handlers if isinstance(h, PatternRunHandler)]:
        logger.removeHandler(old)
    handler = PatternRunHandler(run_id, run_logs, min_level=level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    return logger


def resolve_logger(
    logger: Optional[logging.Logger],
    run_id: Optional[str],
    run_logs: Optional[dict[str, list[str]]],
    name: str
) -> logging.Logger:
    """
    Pick the logger a pipeline entry point should use: an explicit `logger`
    wins, then a capture logger when `run_logs` is given (under `run_id`,
    or "default"), and finally the module logger `name`.
    """
    if logger is not None:
        return logger
    if run_logs is not None:
        return create_capture_logger(run_id or "default", run_logs)
    return logging.getLogger(name)
