#!/usr/bin/env python3
"""
Service logger setup

Every microservice calls ``setup_service_logger`` once in its main module;
everything else uses ``logging.getLogger(__name__)``.
"""
import logging
import sys
from typing import Optional

from .config import LoggingConfig

_configured = set()


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None
) -> logging.Logger:
    """
    Configure and return the logger for a service

    Args:
        service_name: Logger name, usually the service package name
        level: Overrides the configured log level
        config: Logging configuration (defaults to environment)

    Returns:
        Configured service logger
    """
    config = config or LoggingConfig.from_env()
    log_level = getattr(logging, (level or config.log_level).upper(), logging.INFO)

    logger = logging.getLogger(service_name)
    logger.setLevel(log_level)

    if service_name in _configured:
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Module loggers under microservices.* share the service handlers
    package_logger = logging.getLogger("microservices")
    package_logger.setLevel(log_level)
    for handler in logger.handlers:
        if handler not in package_logger.handlers:
            package_logger.addHandler(handler)

    logger.propagate = False
    _configured.add(service_name)
    return logger
