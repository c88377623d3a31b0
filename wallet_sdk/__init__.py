"""
Wallet SDK

Async client for the remote custodial-wallet API.

USAGE:
    from wallet_sdk import WalletClient, CreateWalletBody

    async with WalletClient(access_key="...") as client:
        result = await client.create_wallet(
            CreateWalletBody(network_id=1, name="My Wallet", user_id="user-123")
        )
        if result.succeeded:
            print(result.data.address)
"""

from .models import (
    WalletStatus,
    Network,
    SigningKey,
    Wallet,
    CreateWalletBody,
    UpdateWalletBody,
    GeneralResult,
)
from .protocols import (
    WalletSdkError,
    MissingAccessKeyError,
    MalformedResponseError,
    WalletContextError,
    WalletClientProtocol,
)
from .client import WalletClient, ACCESS_KEY_HEADER, UNKNOWN_ERROR_MESSAGE

__all__ = [
    "WalletClient",
    "WalletClientProtocol",
    "ACCESS_KEY_HEADER",
    "UNKNOWN_ERROR_MESSAGE",
    # Models
    "WalletStatus",
    "Network",
    "SigningKey",
    "Wallet",
    "CreateWalletBody",
    "UpdateWalletBody",
    "GeneralResult",
    # Errors
    "WalletSdkError",
    "MissingAccessKeyError",
    "MalformedResponseError",
    "WalletContextError",
]

__version__ = "0.1.0"
