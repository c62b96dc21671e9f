# verification_service/domain/services.py
from __future__ import annotations

import hmac
import time


def secure_compare(a: str, b: str) -> bool:
    """
    Constant-time comparison for secrets.
    Accepts strings; falls back to bytes if needed.
    """
    try:
        # hmac.compare_digest supports str if types match
        return hmac.compare_digest(a, b)
    except TypeError:
        return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def epoch_seconds() -> int:
    """Current time as whole seconds since the epoch."""
    return int(time.time())
