from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

APP_LOGGER_PREFIX = "docsum"

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
COLOR_FORMAT = (
    "%(level_color)s%(asctime)s | %(levelname)s%(reset)s | "
    "%(name_color)s%(name)s%(reset)s | "
    "%(source_color)s%(filename)s:%(lineno)d%(reset)s | "
    "%(level_color)s%(message)s%(reset)s"
)

# Attributes every LogRecord carries; anything else on a record is extra context.
_RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {
    "message",
    "asctime",
    "taskName",
    "level_color",
    "name_color",
    "source_color",
    "reset",
    "color_message",
}

_LOG_CONTEXT: ContextVar[dict[str, Any] | None] = ContextVar("docsum_log_context", default=None)

# Libraries that get chatty at INFO. Never let them below WARNING, except uvicorn's
# startup lines.
_THIRD_PARTY_LEVELS: dict[str, int] = {
    "uvicorn": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "openai": logging.WARNING,
    "pypdf": logging.ERROR,
    "PIL": logging.WARNING,
    "pytesseract": logging.WARNING,
}


def _is_app_logger(name: str) -> bool:
    return name in ("__main__", APP_LOGGER_PREFIX) or name.startswith(f"{APP_LOGGER_PREFIX}.")


def _third_party_level(name: str) -> int:
    """Most specific configured level for a library logger, WARNING otherwise."""

    best: tuple[int, int] | None = None
    for prefix, level in _THIRD_PARTY_LEVELS.items():
        if name == prefix or name.startswith(prefix + "."):
            if best is None or len(prefix) > best[0]:
                best = (len(prefix), level)
    return best[1] if best else logging.WARNING


class ContextInjectionFilter(logging.Filter):
    """Copies the active ``log_context`` fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in (_LOG_CONTEXT.get() or {}).items():
            if key not in _RESERVED_RECORD_ATTRS:
                setattr(record, key, value)
        return True


class ThirdPartyFilter(logging.Filter):
    """Drops library records below their configured threshold."""

    def filter(self, record: logging.LogRecord) -> bool:
        if _is_app_logger(record.name):
            return True
        return record.levelno >= _third_party_level(record.name)


class ContextFormatter(logging.Formatter):
    """Appends extra record fields as ``[key=value ...]``."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED_RECORD_ATTRS}
        if not extras:
            return message
        return message + " [" + " ".join(f"{k}={v}" for k, v in extras.items()) + "]"


class ColorFormatter(ContextFormatter):
    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[1;31m",
    }

    def format(self, record: logging.LogRecord) -> str:
        record.level_color = self._LEVEL_COLORS.get(record.levelname, "")  # type: ignore[attr-defined]
        record.name_color = "\x1b[34m"  # type: ignore[attr-defined]
        record.source_color = "\x1b[94m"  # type: ignore[attr-defined]
        record.reset = self._RESET  # type: ignore[attr-defined]
        return super().format(record)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Attach fields to every log line emitted in this scope (task-local)."""

    token = _LOG_CONTEXT.set({**(_LOG_CONTEXT.get() or {}), **kwargs})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def get_log_context() -> Mapping[str, Any]:
    return _LOG_CONTEXT.get() or {}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_level(explicit: str | None) -> int:
    raw = (explicit or os.getenv("LOG_LEVEL", "INFO")).upper().strip()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(*, log_level: str | None = None) -> None:
    """
    Configure process-wide logging.

    Environment variables:
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    - LOG_COLOR: enable ANSI colors (default: auto when stdout is a TTY)
    """
    root_level = _resolve_level(log_level)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "_docsum", False):
            root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler._docsum = True  # type: ignore[attr-defined]
    if _env_flag("LOG_COLOR", sys.stdout.isatty()):
        handler.setFormatter(ColorFormatter(COLOR_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    else:
        handler.setFormatter(ContextFormatter(PLAIN_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    handler.addFilter(ContextInjectionFilter())
    handler.addFilter(ThirdPartyFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(root_level)
    logging.getLogger(APP_LOGGER_PREFIX).setLevel(root_level)
    logging.captureWarnings(True)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"log_level": logging.getLevelName(root_level)},
    )
