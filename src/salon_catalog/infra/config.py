from __future__ import annotations

import os

DEFAULT_TIMEOUT_SECONDS = 10.0


def listing_url() -> str:
    url = os.getenv("SERVICE_LISTING_URL")

    if not url:
        raise RuntimeError("SERVICE_LISTING_URL environment variable is not set")

    return url


def request_timeout() -> float:
    raw = os.getenv("SERVICE_LISTING_TIMEOUT")

    if not raw:
        return DEFAULT_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"SERVICE_LISTING_TIMEOUT must be a number of seconds, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("SERVICE_LISTING_TIMEOUT must be > 0")

    return timeout


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
