"""
Logging configuration for the application.

``setup_logging`` attaches a console handler (and, when ``LOG_FILE``
is set, a file handler) to the ``catalog_api`` logger.  Every module
logs through ``logging.getLogger(__name__)`` and therefore ends up
there.  Uvicorn keeps its own loggers for access and server messages.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings

APP_LOGGER = "catalog_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_handler(logger: logging.Logger, kind: type, filename: Optional[str] = None) -> bool:
    for handler in logger.handlers:
        if type(handler) is not kind:
            continue
        if filename is None or getattr(handler, "baseFilename", None) == filename:
            return True
    return False


def setup_logging(settings: Settings, logger_name: str = APP_LOGGER) -> logging.Logger:
    """Configure the application logger from ``settings``.

    The level comes from ``settings.log_level`` (case insensitive,
    ``INFO`` when unknown).  Handlers are added only once, so building
    several applications in one process (as the tests do) does not
    duplicate output; the level is updated every time.

    Parameters
    ----------
    settings : Settings
        Application settings; ``log_level`` and ``log_file`` are used.
    logger_name : str
        Logger to configure.  Defaults to the package logger.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    # Records are handled here; the root logger would print them twice.
    logger.propagate = False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(logger, logging.StreamHandler):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        if not _has_handler(logger, logging.FileHandler, str(log_path)):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
