"""
Wallet Provider

Scopes one WalletStateStore to a block of code so consumers can reach it with
use_wallet() instead of threading it through every call.

Usage:
    async with WalletProvider(ClientConfig(access_key="...")) as wallet:
        await wallet.get_networks()
        ...
        # anywhere below, in the same task
        store = use_wallet()
"""
import logging
from contextvars import ContextVar, Token
from typing import Optional

from core.config import ClientConfig
from wallet_sdk.protocols import WalletClientProtocol, WalletContextError

from .factory import create_wallet_store
from .store import WalletStateStore

logger = logging.getLogger(__name__)

_current_store: ContextVar[Optional[WalletStateStore]] = ContextVar(
    "wallet_store", default=None
)


class WalletProvider:
    """Async context manager publishing a WalletStateStore as the current wallet context"""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        client: Optional[WalletClientProtocol] = None,
    ):
        """
        Build the store immediately so a missing credential fails here

        Args:
            config: Connection settings, defaults to the environment settings
            client: Pre-built client; the provider will not close it

        Raises:
            MissingAccessKeyError: no access key could be resolved
        """
        self._owns_client = client is None
        self.store = create_wallet_store(config=config, client=client)
        self._token: Optional[Token] = None

    async def __aenter__(self) -> WalletStateStore:
        if self._token is not None:
            raise WalletContextError("WalletProvider is already active")
        self._token = _current_store.set(self.store)
        return self.store

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        _current_store.reset(self._token)
        self._token = None
        if self._owns_client:
            await self.store.client.close()
            logger.debug("Closed wallet client owned by provider")


def use_wallet() -> WalletStateStore:
    """
    Return the store of the innermost active WalletProvider

    Raises:
        WalletContextError: called outside any WalletProvider
    """
    store = _current_store.get()
    if store is None:
        raise WalletContextError("use_wallet must be used within a WalletProvider")
    return store


__all__ = ["WalletProvider", "use_wallet"]
