#!/usr/bin/env python3
"""Wallet service client configuration

Connection settings for the remote custodial-wallet API. The access key is the
only field expected to change after a client is built (credential rotation).
"""
import os
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

DEFAULT_ENDPOINT_URL = "https://wallets.djuno.cloud"
DEFAULT_API_VERSION = "v1"


@dataclass(frozen=True)
class ClientConfig:
    """
    Wallet API connection settings

    Frozen: a client copies its config at construction, and rotating the
    access key swaps in a new instance via WalletClient.set_access_key.
    """
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    api_version: str = DEFAULT_API_VERSION
    access_key: Optional[str] = None
    extra_headers: Dict[str, str] = field(default_factory=dict)

    @property
    def base_url(self) -> str:
        """Versioned API root, e.g. https://wallets.djuno.cloud/v1"""
        return f"{self.endpoint_url.rstrip('/')}/{self.api_version.strip('/')}"

    def merged(self, **overrides) -> 'ClientConfig':
        """Return a copy with every non-None override applied"""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "extra_headers" in changes:
            changes["extra_headers"] = {**self.extra_headers, **changes["extra_headers"]}
        else:
            changes["extra_headers"] = dict(self.extra_headers)
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Load client config from environment variables"""
        return cls(
            endpoint_url=os.getenv("WALLET_API_ENDPOINT", DEFAULT_ENDPOINT_URL),
            api_version=os.getenv("WALLET_API_VERSION", DEFAULT_API_VERSION),
            # WalletApiAccess is the name the hosted test suites export
            access_key=os.getenv("WALLET_API_ACCESS_KEY") or os.getenv("WalletApiAccess"),
        )
