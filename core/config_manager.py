#!/usr/bin/env python3
"""
Centralized Configuration Manager

Loads the per-service configuration sections from the environment and
exposes them to a microservice's main module.

Usage:
    from core.config_manager import ConfigManager

    config_manager = ConfigManager("order_tracking_service")
    config = config_manager.get_service_config()
"""
import logging
from typing import List, Optional

from .config import LoggingConfig, ServiceConfig, TrackingConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Per-service configuration access"""

    def __init__(self, service_name: str):
        self.service_name = service_name
        self._service_config: Optional[ServiceConfig] = None
        self._tracking_config: Optional[TrackingConfig] = None
        self._logging_config: Optional[LoggingConfig] = None

    def get_service_config(self) -> ServiceConfig:
        """Get process settings for this service"""
        if self._service_config is None:
            self._service_config = ServiceConfig.from_env(self.service_name)
        return self._service_config

    def get_tracking_config(self) -> TrackingConfig:
        """Get upstream and throttling settings"""
        if self._tracking_config is None:
            self._tracking_config = TrackingConfig.from_env()
        return self._tracking_config

    def get_logging_config(self) -> LoggingConfig:
        """Get logging settings"""
        if self._logging_config is None:
            self._logging_config = LoggingConfig.from_env()
        return self._logging_config

    def validate(self) -> List[str]:
        """
        Check required settings

        Returns:
            List of problems found, empty when the configuration is usable
        """
        problems = []
        tracking = self.get_tracking_config()
        if not tracking.shopify_shop:
            problems.append("SHOPIFY_SHOP is not set")
        if not tracking.shopify_access_token:
            problems.append("SHOPIFY_ACCESS_TOKEN is not set")
        if tracking.rate_limit_max_requests < 1:
            problems.append("RATE_LIMIT_MAX_REQUESTS must be at least 1")
        if tracking.rate_limit_window_seconds < 1:
            problems.append("RATE_LIMIT_WINDOW_SECONDS must be at least 1")
        return problems

    def print_config_summary(self):
        """Print configuration summary for debugging"""
        service = self.get_service_config()
        tracking = self.get_tracking_config()
        token = tracking.shopify_access_token
        masked = f"{token[:4]}***" if token else "<not set>"

        print(f"=== {self.service_name} configuration ===")
        print(f"  environment:        {service.environment}")
        print(f"  host:port:          {service.service_host}:{service.service_port}")
        print(f"  debug:              {service.debug}")
        print(f"  log level:          {service.log_level}")
        print(f"  shopify shop:       {tracking.shopify_shop or '<not set>'}")
        print(f"  shopify token:      {masked}")
        print(f"  shopify api:        {tracking.shopify_api_version}")
        print(f"  upstream timeout:   {tracking.upstream_timeout_seconds}s")
        print(f"  rate limit:         {tracking.rate_limit_max_requests} / {tracking.rate_limit_window_seconds}s")
        print(f"  allowed origins:    {', '.join(tracking.allowed_origins)}")
        print(f"  debug endpoints:    {tracking.debug_endpoints_enabled}")
        for problem in self.validate():
            print(f"  ! {problem}")
