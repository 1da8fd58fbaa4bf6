#!/usr/bin/env python3
"""Modular configuration system

Configuration hierarchy:
- service_config: Process settings (host, port, debug, log level)
- tracking_config: Upstream order store, throttling and HTTP surface
- logging_config: Logging configuration

Environment files are read relative to the project root: the per-environment
file under deployment/environments/ first, then a root .env. Variables
already set in the process always win.
"""
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .service_config import ServiceConfig
from .tracking_config import TrackingConfig

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

ENV_FILES = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}


def load_environment(env: Optional[str] = None, root: Path = PROJECT_ROOT) -> List[Path]:
    """
    Load environment files for an environment name

    Returns:
        The files that existed and were loaded, in load order
    """
    env = env or os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
    candidates = [
        root / ENV_FILES.get(env, ENV_FILES["development"]),
        root / ".env",
    ]
    loaded = []
    for path in candidates:
        if path.is_file():
            load_dotenv(path, override=False)
            loaded.append(path)
    return loaded


load_environment()

__all__ = [
    'LoggingConfig',
    'ServiceConfig',
    'TrackingConfig',
    'load_environment',
]
