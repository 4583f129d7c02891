"""Hashing utilities for versioned content data."""

import hashlib
import json
from typing import Any


def fingerprint(data: Any) -> str:
    """Return a stable SHA-256 fingerprint of JSON-compatible data.

    Keys are sorted so that two payloads differing only in key order hash
    the same.
    """
    canonical = json.dumps(data, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
