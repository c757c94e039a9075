"""
Настройка логирования приложения.
Стандартный logging: один stream-хендлер на корневом логгере.
"""

import logging
import sys

from food_delivery.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logging(level: str | None = None) -> None:
    """
    Настраивает корневой логгер. Повторный вызов ничего не делает.
    """
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel((level or settings.LOG_LEVEL).upper())

    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
