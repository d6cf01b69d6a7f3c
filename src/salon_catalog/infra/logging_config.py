from __future__ import annotations

import logging

# Context keys passed through ``extra={...}`` that are worth printing
CONTEXT_KEYS = (
    "url",
    "next_url",
    "status_code",
    "error_code",
    "error",
    "records",
    "pages",
    "matching",
    "path",
    "method",
)


class ContextFormatter(logging.Formatter):
    """Appends known ``extra`` context to the formatted line."""

    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once. Repeated calls are no-ops."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        ContextFormatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
