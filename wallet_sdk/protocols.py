"""
Wallet SDK Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import List, Protocol, Union, Dict, Any, runtime_checkable

# Import only models (no I/O dependencies)
from .models import (
    GeneralResult,
    Network,
    Wallet,
    CreateWalletBody,
    UpdateWalletBody,
)


# ============================================================================
# Custom Exceptions
# ============================================================================

class WalletSdkError(Exception):
    """Base class for wallet SDK errors"""
    pass


class MissingAccessKeyError(WalletSdkError, ValueError):
    """No API access key was supplied; nothing can be authenticated"""
    pass


class MalformedResponseError(WalletSdkError):
    """The service answered 2xx with a body that does not match the contract"""
    pass


class WalletContextError(WalletSdkError, RuntimeError):
    """Wallet context was requested outside a WalletProvider"""
    pass


# ============================================================================
# Client Protocols
# ============================================================================

@runtime_checkable
class WalletClientProtocol(Protocol):
    """
    Interface for the remote wallet API client.

    Every coroutine returns a GeneralResult and never raises for network or
    service failures. Used for dependency injection to enable testing.
    """

    async def list_networks(self) -> GeneralResult[List[Network]]:
        """List supported blockchain networks"""
        ...

    async def create_wallet(
        self, body: Union[CreateWalletBody, Dict[str, Any]]
    ) -> GeneralResult[Wallet]:
        """Create a wallet"""
        ...

    async def update_wallet(
        self, wallet_id: str, body: Union[UpdateWalletBody, Dict[str, Any]]
    ) -> GeneralResult[Wallet]:
        """Update a wallet's name/owner"""
        ...

    async def get_wallet(self, wallet_id: str) -> GeneralResult[Wallet]:
        """Fetch a wallet by ID"""
        ...

    async def delete_wallet(self, wallet_id: str) -> GeneralResult[None]:
        """Delete a wallet by ID"""
        ...

    def set_access_key(self, new_access_key: str) -> None:
        """Rotate the API credential for subsequent requests"""
        ...

    async def close(self) -> None:
        """Release the underlying transport"""
        ...


__all__ = [
    "WalletSdkError",
    "MissingAccessKeyError",
    "MalformedResponseError",
    "WalletContextError",
    "WalletClientProtocol",
]
