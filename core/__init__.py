#!/usr/bin/env python3
"""
Core Module for the Wallet SDK

Shared infrastructure used by the wallet_sdk and wallet_hook packages.

COMPONENTS:
    - config/: Environment-driven configuration (client endpoint, credential, logging)
    - logger.py: Logger setup for host applications
    - service_client_base.py: Base class owning the httpx.AsyncClient

USAGE:
    from core.config import get_settings
    from core.logger import setup_sdk_logger

    settings = get_settings()
    setup_sdk_logger("wallet_sdk", settings.logging)
"""

from .config import ClientConfig, LoggingConfig, SdkConfig, get_settings, reload_settings
from .service_client_base import BaseServiceClient

__all__ = [
    "ClientConfig",
    "LoggingConfig",
    "SdkConfig",
    "get_settings",
    "reload_settings",
    "BaseServiceClient",
]

__version__ = "0.1.0"
