#!/usr/bin/env python3
"""
Core Module for Microservices Architecture

Shared components for the microservices in this repository.

COMPONENTS:
    - config/: Modular dataclass configuration loaded from the environment
    - config_manager.py: Centralized configuration access and validation
    - logger.py: Service logger setup
    - service_client_base.py: Base class for outbound HTTP API clients

USAGE:
    from core.config_manager import ConfigManager
    from core.logger import setup_service_logger

    config = ConfigManager("service_name")
    logger = setup_service_logger("service_name")
"""

from .config_manager import ConfigManager
from .logger import setup_service_logger
from .service_client_base import BaseServiceClient

# Export public API
__all__ = [
    "ConfigManager",
    "setup_service_logger",
    "BaseServiceClient",
]

__version__ = "2.0.0"
