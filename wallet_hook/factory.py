"""
Wallet Hook Factory

Factory functions for creating clients and stores with real dependencies.

Usage:
    from wallet_hook.factory import create_wallet_store
    store = create_wallet_store(ClientConfig(access_key="..."))
"""
from typing import Optional

import httpx

from core.config import ClientConfig, get_settings
from wallet_sdk.client import WalletClient
from wallet_sdk.protocols import WalletClientProtocol

from .store import WalletStateStore


def create_wallet_client(
    config: Optional[ClientConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> WalletClient:
    """
    Create WalletClient.

    Args:
        config: Connection settings, defaults to the environment settings
        transport: Custom httpx transport

    Returns:
        Configured WalletClient instance

    Raises:
        MissingAccessKeyError: the resolved config has no access key
    """
    if config is None:
        config = get_settings().client
    return WalletClient(config, transport=transport)


def create_wallet_store(
    config: Optional[ClientConfig] = None,
    client: Optional[WalletClientProtocol] = None,
) -> WalletStateStore:
    """
    Create WalletStateStore.

    Args:
        config: Connection settings used when no client is injected
        client: Pre-built client (tests inject mocks here)

    Returns:
        Configured WalletStateStore instance
    """
    if client is None:
        client = create_wallet_client(config)
    return WalletStateStore(client=client)


__all__ = [
    "create_wallet_client",
    "create_wallet_store",
]
