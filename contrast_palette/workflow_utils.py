"""
Workflow utilities: structured logging and logging setup for scripts.
"""
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s: %(message)s"


def log_structured(level: str, **kwargs: Any) -> None:
    """Emit one JSON object per line so palette events can be grepped or piped."""
    record = {"level": level, **kwargs}
    line = json.dumps(record, default=str)
    if level == "error":
        logger.error("%s", line)
    elif level == "warning":
        logger.warning("%s", line)
    elif level == "debug":
        logger.debug("%s", line)
    else:
        logger.info("%s", line)


def setup_logging(level: str | int = "INFO") -> None:
    """basicConfig for CLI entry points. Unknown level names fall back to INFO."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            logger.warning("Unknown log level %r — using INFO", level)
            resolved = logging.INFO
    else:
        resolved = level
    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
