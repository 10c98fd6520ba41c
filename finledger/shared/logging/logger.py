# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""loguru setup for finledger.

Every record gets ``extra["correlation_id"]`` from a ``ContextVar`` that the
request middleware sets, and every sink runs the message through the
sensitive-data filter before it is written.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _root_logger

from .sensitive_filter import sanitize_record

_NO_CORRELATION = "-"

_LINE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_correlation_id: ContextVar[str] = ContextVar("finledger_correlation_id", default=_NO_CORRELATION)

# Third-party loggers that are too chatty at INFO.
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "werkzeug": logging.INFO,
}


def _attach_correlation_id(record: dict[str, Any]) -> None:
    record["extra"]["correlation_id"] = _correlation_id.get()


logger = _root_logger.patch(_attach_correlation_id)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or _NO_CORRELATION)


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(_NO_CORRELATION)


def log_file_path() -> Path:
    configured = os.getenv("LOG_FILE")
    if configured:
        return Path(configured)
    return Path.cwd() / "instance" / "finledger.log"


class _StdlibToLoguru(logging.Handler):
    """Routes ``logging`` records (werkzeug, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _root_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _resolve_level(level: str | None, debug_mode: bool) -> str:
    if level:
        return level.upper()
    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        return env_level.upper()
    return "DEBUG" if debug_mode else "INFO"


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    resolved = _resolve_level(level, debug_mode)
    target = log_file_path()
    target.parent.mkdir(parents=True, exist_ok=True)

    common: dict[str, Any] = {
        "level": resolved,
        "format": _LINE_FORMAT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }

    _root_logger.remove()
    _root_logger.add(sys.stderr, colorize=True, **common)
    _root_logger.add(target, colorize=False, enqueue=True, encoding="utf-8", **common)

    logging.basicConfig(handlers=[_StdlibToLoguru()], level=0, force=True)
    for name, lvl in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(lvl)

    logger.debug(f"logging: level={resolved} file={target}")


__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "log_file_path",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
