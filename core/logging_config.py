"""
Logging setup for the script runner.

Installs a single stream handler on the root logger. Safe to call more than
once (uvicorn reloads, tests).
"""

import logging

from core.config import settings

_configured = False


def setup_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    _configured = True
