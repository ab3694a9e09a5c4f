"""
Logging setup for the service.

``setup_logging`` reads everything it needs from ``Settings``: the
level (forced to ``DEBUG`` when ``settings.debug`` is on) and an
optional ``log_file`` that receives the same records as the console.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_for(config: Settings) -> int:
    if config.debug:
        return logging.DEBUG
    return getattr(logging, config.log_level.upper(), logging.INFO)


def setup_logging(config: Settings, logger: Optional[logging.Logger] = None) -> logging.Logger:
    """Attach the service's handlers to ``logger`` (the root logger by default).

    A logger that already has handlers is returned untouched, so calling
    ``create_app`` more than once does not duplicate output.
    """
    logger = logger or logging.getLogger()
    if logger.handlers:
        return logger

    logger.setLevel(_level_for(config))
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        log_path = Path(config.log_file).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging configured at %s", logging.getLevelName(logger.level))
    return logger
