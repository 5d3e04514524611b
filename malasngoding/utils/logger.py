from __future__ import annotations

import copy
import logging
import os
import sys
import time
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "malasngoding"

REQUEST_ID: ContextVar[str] = ContextVar("request_id", default="-")
USER_ID: ContextVar[str] = ContextVar("user_id", default="-")

LOG_FORMAT = (
    "%(asctime)s %(levelname)-8s %(name)s "
    "request_id=%(request_id)s user_id=%(user_id)s src=%(filename)s:%(lineno)d "
    "%(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RequestContextFilter(logging.Filter):
    """Stamps every record with the current request id and authenticated user id."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = REQUEST_ID.get()
        record.user_id = USER_ID.get()
        return True


class ColorFormatter(logging.Formatter):
    """Console formatter: blue timestamp, one color per level, dim logger name."""

    RESET = "\x1b[0m"
    DIM = "\x1b[2m"
    BLUE = "\x1b[34m"
    LEVEL_COLORS: dict[int, str] = {
        logging.DEBUG: "\x1b[36m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }

    def __init__(self, *args, enable_color: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.enable_color = enable_color

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{self.RESET}"

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        stamp = super().formatTime(record, datefmt)
        return self._paint(self.BLUE, stamp) if self.enable_color else stamp

    def format(self, record: logging.LogRecord) -> str:
        if not self.enable_color:
            return super().format(record)
        # Copy so the file handler still sees the plain record.
        r = copy.copy(record)
        r.levelname = self._paint(self.LEVEL_COLORS.get(r.levelno, ""), r.levelname)
        r.name = self._paint(self.DIM, r.name)
        return super().format(r)


def color_enabled(stream) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty()) if callable(isatty) else False


def get_logger(name: str) -> logging.Logger:
    """Logger under the package root so configure_logging's handlers apply."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=10, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColorFormatter(LOG_FORMAT, DATE_FORMAT, enable_color=color_enabled(sys.stdout)))
    return handler


def configure_logging(
    *,
    log_dir: str | Path = "logs",
    log_file: str = "backend.log",
    level: str = "INFO",
    console: bool = True,
) -> logging.Logger:
    """
    Attach a rotating file handler (log_dir/log_file) and optionally a console
    handler to the package root logger. Only the first call has an effect.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if getattr(logger, "_configured", False):
        return logger

    numeric_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    logger.propagate = False

    Path(log_dir).mkdir(parents=True, exist_ok=True)
    handlers = [_file_handler(Path(log_dir) / log_file, numeric_level)]
    if console:
        handlers.append(_console_handler(numeric_level))

    context = RequestContextFilter()
    for handler in handlers:
        handler.addFilter(context)
        logger.addHandler(handler)

    logger._configured = True  # type: ignore[attr-defined]
    logger.debug("logging configured dir=%s file=%s level=%s", log_dir, log_file, level)
    return logger


def set_request_id(request_id: Optional[str] = None) -> str:
    rid = request_id or uuid.uuid4().hex
    REQUEST_ID.set(rid)
    return rid


def set_user_id(user_id: int | str) -> None:
    USER_ID.set(str(user_id))


def clear_request_context() -> None:
    REQUEST_ID.set("-")
    USER_ID.set("-")


class log_request:
    """
    Logs how long a block took, and the traceback if it raised:

        with log_request(logger, "seed reference data"):
            ...
    """

    def __init__(self, logger: logging.Logger, name: str):
        self.logger = logger
        self.name = name
        self.started = 0.0

    def __enter__(self):
        self.started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        elapsed_ms = round((time.perf_counter() - self.started) * 1000)
        if exc is None:
            self.logger.info("%s done duration_ms=%s", self.name, elapsed_ms)
        else:
            self.logger.exception("%s failed duration_ms=%s", self.name, elapsed_ms)
        return False
