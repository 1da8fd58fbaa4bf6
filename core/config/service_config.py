#!/usr/bin/env python3
"""Service runtime configuration

Host, port and runtime flags for a single microservice process.
"""
import os
from dataclasses import dataclass

def _bool(val: str) -> bool:
    return val.lower() == "true"

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class ServiceConfig:
    """Service process settings"""
    service_name: str = "order_tracking_service"
    service_host: str = "0.0.0.0"
    service_port: int = 8260
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"

    @classmethod
    def from_env(cls, service_name: str = "order_tracking_service") -> 'ServiceConfig':
        """Load service configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            service_name=service_name,
            service_host=os.getenv("HOST", "0.0.0.0"),
            service_port=_int(os.getenv("PORT", ""), 8260),
            version=os.getenv("SERVICE_VERSION", "1.0.0"),
            debug=_bool(os.getenv("DEBUG", "false")),
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env == "development" else "INFO"),
            environment=env,
        )
