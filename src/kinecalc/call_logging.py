"""Calculation call logging for kinecalc."""

from __future__ import annotations

import functools
import logging
import threading
import time
from typing import Any, Callable, TypeVar

from kinecalc.config import get_settings

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "kinecalc"
LOG_FILE_NAME = "calculations.log"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the package logger, attaching its handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        settings = get_settings()
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(settings.log_level)
        logger.propagate = False

        if not logger.handlers:
            if settings.log_dir is None:
                logger.addHandler(logging.NullHandler())
            else:
                settings.log_dir.mkdir(parents=True, exist_ok=True)
                handler = logging.FileHandler(
                    settings.log_dir / LOG_FILE_NAME, encoding="utf-8"
                )
                handler.setFormatter(
                    logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
                )
                logger.addHandler(handler)
        _logger = logger

    return _logger


def log_calculation(fn: F) -> F:
    """Decorator that logs a calculation's arguments, result and duration."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_parts = [repr(a) for a in args]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info(
            "OK: %s(%s) -> %r (%.3fs)",
            fn.__qualname__, arg_str, result, elapsed,
        )
        return result

    return wrapper  # type: ignore[return-value]
