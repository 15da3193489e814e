"""Logger пакета collectkit: один именованный logger, DEBUG на фатальных путях."""

import logging
from typing import Final

__all__ = ["DEFAULT_LOG_LEVEL", "logger", "resolve_level", "setup_logger"]

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str | int | None) -> int:
    """
    Числовой уровень логирования.

    Неизвестное имя уровня (например "trace") → DEFAULT_LOG_LEVEL.
    """
    if level is None:
        return DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    return DEFAULT_LOG_LEVEL


def setup_logger(name: str = "collectkit", level: str | int | None = None) -> logging.Logger:
    """
    Настройка logger с одним stream handler.

    Повторный вызов для того же name возвращает уже настроенный logger
    без изменений.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level))

    return logger


logger = setup_logger()
