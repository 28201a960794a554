from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "partial_datetime"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> str | int:
    if level is not None:
        return level
    raw = os.getenv("PARTIAL_DATETIME_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "WARNING"
    return raw.strip().upper()


def configure_logging(level: str | int | None = None) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    logging.basicConfig(level=_resolve_level(level), format=_DEFAULT_FORMAT)
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``partial_datetime`` hierarchy."""
    configure_logging()
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
