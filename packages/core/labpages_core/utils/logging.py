"""Logging utilities."""

import logging
import os
import sys
import time
from functools import wraps
from typing import Any, Callable, TypeVar

from labpages_core.errors import LabpagesError

_LOG_LEVEL = os.environ.get("LABPAGES_LOG_LEVEL", "INFO").upper()
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))

    return logger


def log_duration(logger: logging.Logger) -> Callable[[F], F]:
    """Decorator that logs how long an engine call took, at debug level.

    Library errors (LabpagesError) are expected outcomes the caller handles,
    so they are logged at debug level. Anything else is logged with its
    traceback. Either way the exception is re-raised unchanged.

    Args:
        logger: Logger to report on

    Returns:
        Decorator for synchronous functions
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except LabpagesError as exc:
                elapsed_ms = (time.perf_counter() - started) * 1000
                logger.debug(f"{func.__name__} raised {exc!r} after {elapsed_ms:.2f}ms")
                raise
            except Exception:
                elapsed_ms = (time.perf_counter() - started) * 1000
                logger.exception(f"{func.__name__} failed after {elapsed_ms:.2f}ms")
                raise
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug(f"{func.__name__} finished in {elapsed_ms:.2f}ms")
            return result

        return wrapper  # type: ignore

    return decorator
