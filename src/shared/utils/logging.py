"""Shared logging configuration.

Used by the service handler, the local server and the command-line script so
that every entry point logs in the same format to stdout.
"""

from __future__ import annotations
import logging
import os
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "openai")


def setup_logging(level: Optional[str] = None, format_string: Optional[str] = None) -> None:
    """Configure the root logger with a stdout handler.

    Args:
        level: Logging level name. Falls back to ``LOG_LEVEL`` and then INFO.
        format_string: Custom format string; defaults to ``DEFAULT_FORMAT``.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=format_string or DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # HTTP client chatter drowns out the request summaries
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
