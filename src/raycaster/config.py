# config.py
import logging
from typing import Optional

# Tolerance for tuple, colour and matrix equality, the plane-parallel test
# and the over-point nudge along the surface normal.
EPSILON = 1e-5

# Number of contiguous pixel chunks handed out by a parallel render.
RENDER_CHUNKS = 16

# Collected pixels between two progress lines during a parallel render.
PROGRESS_INTERVAL = 1000

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again only updates the level; a second handler is never added.
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger("raycaster")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(logger.level)
    return logger
