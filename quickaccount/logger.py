"""Logging setup for quickaccount.

Library modules log through ``get_logger`` and never touch levels or handlers;
``configure_logger`` is for applications such as the command line wrapper.
"""

from typing import NotRequired, TypedDict
import logging
from quickaccount.utils import resolve_config

ROOT_LOGGER_NAME = "quickaccount"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": ROOT_LOGGER_NAME,
    "is_enabled": True,
    "level": logging.WARNING,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logger(config: LoggerConfig | None = None) -> logging.Logger:
    """Attach a stderr handler to the configured logger, once per logger."""
    resolved = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
    logger = logging.getLogger(resolved["name"])
    if not resolved["is_enabled"]:
        return logger

    logger.setLevel(resolved["level"])
    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(resolved["format"]))
        logger.addHandler(handler)
    return logger


__all__ = ["LoggerConfig", "configure_logger", "get_logger"]
