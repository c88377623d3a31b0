#!/usr/bin/env python3
"""SDK main configuration

Combines the client and logging sub-configs.
"""
from dataclasses import dataclass, field

from .client_config import ClientConfig
from .logging_config import LoggingConfig


@dataclass
class SdkConfig:
    """Top-level wallet SDK settings"""
    client: ClientConfig = field(default_factory=ClientConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'SdkConfig':
        """Load every sub-config from environment variables"""
        return cls(
            client=ClientConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )
