"""
Logging configuration - one stdout handler, module loggers under the `backend.` namespace.
"""
import logging
import sys

from backend.app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "urllib3", "httpx")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure application logging. Returns the `backend` logger."""
    level_val = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_val, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger("backend")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name, e.g. get_logger("api.posts")."""
    return logging.getLogger(f"backend.{name}")
