import logging
from typing import Optional

from .config import Settings

LOGGER_NAME = 'trademe'


def configure_logging(level: Optional[str] = None):
    level = level or Settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(f'{LOGGER_NAME}.{name}' if name else LOGGER_NAME)


logger = get_logger()
