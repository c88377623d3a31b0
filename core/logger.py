"""
Logger setup for applications embedding the wallet SDK

The SDK modules only create module loggers; handlers are attached here so the
host application decides when logging is configured.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from core.config import LoggingConfig

CONSOLE_HANDLER_NAME = "wallet_sdk.console"
FILE_HANDLER_NAME = "wallet_sdk.file"


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON line"""

    def __init__(self, service_name: str, environment: str):
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "environment": self.environment,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.enable_structured:
        return StructuredFormatter(config.service_name, config.environment)
    return logging.Formatter(config.log_format)


def _replace_handler(logger: logging.Logger, name: str, handler: Optional[logging.Handler]):
    for existing in list(logger.handlers):
        if existing.get_name() == name:
            logger.removeHandler(existing)
            existing.close()
    if handler is not None:
        handler.set_name(name)
        logger.addHandler(handler)


def setup_sdk_logger(
    name: str = "wallet_sdk",
    config: Optional[LoggingConfig] = None
) -> logging.Logger:
    """
    Configure the named logger from LoggingConfig

    Safe to call repeatedly: handlers installed by a previous call are replaced,
    never duplicated.

    Args:
        name: Logger name, usually a top-level package ("wallet_sdk", "wallet_hook")
        config: Logging settings, defaults to LoggingConfig.from_env()

    Returns:
        The configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    formatter = _build_formatter(config)

    console = None
    if config.enable_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
    _replace_handler(logger, CONSOLE_HANDLER_NAME, console)

    file_handler = None
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
    _replace_handler(logger, FILE_HANDLER_NAME, file_handler)

    logger.debug(
        f"Logger {name} configured (level={config.log_level}, "
        f"structured={'enabled' if config.enable_structured else 'disabled'})"
    )
    return logger


__all__ = ["setup_sdk_logger", "StructuredFormatter"]
