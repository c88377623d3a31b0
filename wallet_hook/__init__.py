"""
Wallet Hook

Stateful binding layer over the wallet SDK: a session-scoped cache of wallets
and networks with per-operation loading flags.

COMPONENTS:
    - store.py: WalletStateStore (cache + loading map)
    - provider.py: WalletProvider / use_wallet (scoped access)
    - factory.py: create_wallet_client / create_wallet_store
"""

from .store import (
    WalletStateStore,
    NETWORKS,
    CREATE_WALLET,
    UPDATE_WALLET,
    GET_WALLET,
    DELETE_WALLET,
)
from .factory import create_wallet_client, create_wallet_store
from .provider import WalletProvider, use_wallet

__all__ = [
    "WalletStateStore",
    "WalletProvider",
    "use_wallet",
    "create_wallet_client",
    "create_wallet_store",
    "NETWORKS",
    "CREATE_WALLET",
    "UPDATE_WALLET",
    "GET_WALLET",
    "DELETE_WALLET",
]
