"""Logging initialization helpers for the contact form service."""

from __future__ import annotations

import logging
from typing import Optional

from contactform.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once per process."""

    global _LOGGING_INITIALIZED
    if _LOGGING_INITIALIZED:
        return

    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    _LOGGING_INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(logging.root.level))
