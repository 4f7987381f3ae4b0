"""Console logging shared by the services and the CLI.

The level comes from ``GEODELTA_LOG_LEVEL`` (see ``geodelta.config``); an
unknown level name falls back to INFO.
"""

import logging
from typing import Optional

from ..config import LOG_LEVEL


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a geodelta logger, attaching one stream handler on first use."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt='[%(asctime)s] [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        )
        logger.addHandler(handler)
        resolved = logging.getLevelName((level or LOG_LEVEL).upper())
        logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return logger
