"""Loguru setup shared by the web app and the CLI entry point.

Every record carries the request correlation id and passes through the
sensitive-data patcher before it reaches a sink.
"""

from __future__ import annotations

import inspect
import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>req={extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_NO_CORRELATION = "-"
_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default=_NO_CORRELATION)

# stdlib loggers that are chatty at DEBUG
_STDLIB_LEVELS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}


class _InterceptHandler(logging.Handler):
    """Route stdlib records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        _logger.opt(depth=depth, exception=record.exc_info).bind(
            correlation_id=_CORRELATION_ID.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Proxy for loguru that injects correlation ids via ContextVar."""

    def __getattr__(self, name: str) -> Any:  # pragma: no cover
        return getattr(_logger.bind(correlation_id=_CORRELATION_ID.get()), name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or _NO_CORRELATION)


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set(_NO_CORRELATION)


def _resolve_level(level: str | None, debug_mode: bool) -> str:
    if debug_mode:
        return "DEBUG"
    return (level or os.getenv("LOG_LEVEL") or "INFO").upper()


def setup_logging(
    level: str | None = None,
    *,
    log_file: str | Path | None = None,
    debug_mode: bool = False,
) -> None:
    level = _resolve_level(level, debug_mode)
    sink_options: dict[str, Any] = {
        "level": level,
        "format": _FMT,
        "backtrace": False,
        "diagnose": False,
    }

    _logger.remove()
    _logger.configure(extra={"correlation_id": _NO_CORRELATION}, patcher=sanitize_record)
    _logger.add(sys.stderr, colorize=True, **sink_options)

    if log_file:
        path = Path(log_file).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(str(path), colorize=False, enqueue=True, encoding="utf-8", **sink_options)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, stdlib_level in _STDLIB_LEVELS.items():
        logging.getLogger(name).setLevel(stdlib_level)


logger = ContextualLogger()

__all__ = [
    "logger",
    "setup_logging",
    "set_correlation_id",
    "clear_correlation_id",
    "get_correlation_id",
]
