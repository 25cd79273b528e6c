"""Logging setup. Diagnostics go to stderr through rich."""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "TERMCHAT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the ``termchat`` logger and return it.

    *level* falls back to ``$TERMCHAT_LOG_LEVEL`` and then to WARNING.
    Calling this more than once only updates the level.
    """
    logger = logging.getLogger("termchat")
    level_name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
