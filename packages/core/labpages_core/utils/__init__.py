"""Utility functions."""

from labpages_core.utils.hashing import fingerprint
from labpages_core.utils.logging import get_logger, log_duration

__all__ = [
    "fingerprint",
    "get_logger",
    "log_duration",
]
