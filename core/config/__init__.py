#!/usr/bin/env python3
"""Modular configuration system for the wallet SDK

Configuration hierarchy:
- client_config: Remote wallet API endpoint, version and credential
- logging_config: Logging configuration
- sdk_config: Aggregate of the above
"""
import os
from dotenv import load_dotenv
from .client_config import ClientConfig, DEFAULT_API_VERSION, DEFAULT_ENDPOINT_URL
from .logging_config import LoggingConfig
from .sdk_config import SdkConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": ".env",
    "dev": ".env",
    "testing": ".env.test",
    "test": ".env.test",
    "production": ".env.production",
}
env_file = os.getenv("WALLET_SDK_ENV_FILE") or env_files.get(env, ".env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = SdkConfig.from_env()

def get_settings() -> SdkConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> SdkConfig:
    """Reload settings from environment"""
    global settings
    settings = SdkConfig.from_env()
    return settings

__all__ = [
    # Main config
    'SdkConfig',
    'get_settings',
    'reload_settings',
    'settings',
    # Sub-configs
    'ClientConfig',
    'LoggingConfig',
    'DEFAULT_ENDPOINT_URL',
    'DEFAULT_API_VERSION',
]
