"""
Wallet State Store

Client-side cache of wallets and networks kept in step with successful wallet
API calls, plus per-operation loading state for UI consumption.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar, Union

from wallet_sdk.models import CreateWalletBody, Network, UpdateWalletBody, Wallet
from wallet_sdk.protocols import WalletClientProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")
Listener = Callable[["WalletStateStore"], None]

# Loading map keys
NETWORKS = "networks"
CREATE_WALLET = "createWallet"
UPDATE_WALLET = "updateWallet"
GET_WALLET = "getWallet"
DELETE_WALLET = "deleteWallet"


class WalletStateStore:
    """
    Stateful wrapper around a wallet API client.

    The cache only changes as a side effect of a successful remote call.
    Failed calls never raise here: item operations return None, delete
    returns False and network refresh returns an empty list.

    Loading is tracked with an in-flight counter per key, so overlapping
    calls under the same key keep the flag set until the last one finishes.
    """

    def __init__(self, client: WalletClientProtocol):
        self.client = client
        self._in_flight: Dict[str, int] = {}
        self._networks: List[Network] = []
        self._wallets: List[Wallet] = []
        self._listeners: List[Listener] = []

    # =============================================================================
    # Read surface
    # =============================================================================

    @property
    def loading(self) -> Dict[str, bool]:
        return {key: count > 0 for key, count in self._in_flight.items()}

    def is_loading(self, key: str) -> bool:
        return self._in_flight.get(key, 0) > 0

    @property
    def networks(self) -> List[Network]:
        return list(self._networks)

    @property
    def wallets(self) -> List[Wallet]:
        return list(self._wallets)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every loading or cache change

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"Wallet store listener {listener!r} failed: {e}", exc_info=True)

    # =============================================================================
    # Execution envelope
    # =============================================================================

    async def with_loading(
        self,
        key: str,
        operation: Callable[[], Awaitable[T]]
    ) -> Optional[T]:
        """
        Run operation with the loading flag for key raised

        The flag is always released, and an exception escaping operation is
        logged and turned into None.
        """
        self._in_flight[key] = self._in_flight.get(key, 0) + 1
        self._notify()
        try:
            return await operation()
        except Exception as e:
            logger.error(f"Error in {key}: {e}", exc_info=True)
            return None
        finally:
            self._in_flight[key] -= 1
            self._notify()

    # =============================================================================
    # Operations
    # =============================================================================

    async def refresh_networks(self) -> List[Network]:
        """
        Reload supported networks

        On failure the previously cached networks are kept and [] is returned.
        """
        async def load() -> List[Network]:
            result = await self.client.list_networks()
            if not result.succeeded:
                logger.warning(f"Could not load networks: {result.message}")
                return []
            self._networks = list(result.data)
            return list(result.data)

        networks = await self.with_loading(NETWORKS, load)
        return networks if networks is not None else []

    get_networks = refresh_networks

    async def create_wallet(
        self,
        body: Union[CreateWalletBody, Dict[str, Any]]
    ) -> Optional[Wallet]:
        """Create a wallet and append it to the cache"""
        async def create() -> Optional[Wallet]:
            result = await self.client.create_wallet(body)
            if not result.succeeded or result.data is None:
                logger.warning(f"Could not create wallet: {result.message}")
                return None
            self._wallets = [*self._wallets, result.data]
            return result.data

        return await self.with_loading(CREATE_WALLET, create)

    async def update_wallet(
        self,
        wallet_id: str,
        body: Union[UpdateWalletBody, Dict[str, Any]]
    ) -> Optional[Wallet]:
        """Update a wallet and replace its cache entry with the returned record"""
        async def update() -> Optional[Wallet]:
            result = await self.client.update_wallet(wallet_id, body)
            if not result.succeeded or result.data is None:
                logger.warning(f"Could not update wallet {wallet_id}: {result.message}")
                return None
            wallet = result.data
            self._wallets = [wallet if w.id == wallet_id else w for w in self._wallets]
            return wallet

        return await self.with_loading(UPDATE_WALLET, update)

    async def get_wallet(self, wallet_id: str) -> Optional[Wallet]:
        """Fetch a wallet without caching it"""
        async def fetch() -> Optional[Wallet]:
            result = await self.client.get_wallet(wallet_id)
            if not result.succeeded:
                logger.warning(f"Could not get wallet {wallet_id}: {result.message}")
            return result.data

        return await self.with_loading(GET_WALLET, fetch)

    async def delete_wallet(self, wallet_id: str) -> bool:
        """Delete a wallet and drop it from the cache"""
        async def remove() -> bool:
            result = await self.client.delete_wallet(wallet_id)
            if not result.succeeded:
                logger.warning(f"Could not delete wallet {wallet_id}: {result.message}")
                return False
            self._wallets = [w for w in self._wallets if w.id != wallet_id]
            return True

        return bool(await self.with_loading(DELETE_WALLET, remove))

    def set_access_key(self, new_access_key: str):
        """Rotate the client's API credential"""
        self.client.set_access_key(new_access_key)


__all__ = [
    "WalletStateStore",
    "NETWORKS",
    "CREATE_WALLET",
    "UPDATE_WALLET",
    "GET_WALLET",
    "DELETE_WALLET",
]
