"""
Wallet SDK Client Example

Walks through the wallet lifecycle against the hosted wallet API.

Usage:
    WALLET_API_ACCESS_KEY=... python examples/wallet_client_example.py
"""

import asyncio
import logging

from core.config import get_settings
from core.logger import setup_sdk_logger
from wallet_sdk import CreateWalletBody, UpdateWalletBody
from wallet_hook import WalletProvider, use_wallet

logger = logging.getLogger(__name__)


def print_loading(store):
    busy = [key for key, active in store.loading.items() if active]
    if busy:
        print(f"  ... loading: {', '.join(busy)}")


async def show_wallets():
    """Reads the store through the ambient provider scope"""
    wallet = use_wallet()
    print(f"✓ Cached wallets: {len(wallet.wallets)}")
    for w in wallet.wallets:
        print(f"  • {w.name} [{w.network}] {w.address}")


async def main():
    settings = get_settings()

    print("=" * 70)
    print("Wallet SDK Client Examples")
    print("=" * 70)

    async with WalletProvider(settings.client) as wallet:
        wallet.subscribe(print_loading)

        # Example 1: Networks
        print("\n1. Listing Networks")
        print("-" * 70)
        networks = await wallet.get_networks()
        for network in networks:
            print(f"  {network.id}: {network.name} ({network.code})")
        if not networks:
            print("✗ No networks available, stopping")
            return

        # Example 2: Create Wallet
        print("\n2. Creating Wallet")
        print("-" * 70)
        created = await wallet.create_wallet(
            CreateWalletBody(network_id=networks[0].id, name="Example Wallet", user_id="example-user")
        )
        if created is None:
            print("✗ Wallet creation failed")
            return
        print(f"✓ Created wallet {created.id} at {created.address}")

        # Example 3: Update Wallet
        print("\n3. Renaming Wallet")
        print("-" * 70)
        updated = await wallet.update_wallet(
            created.id, UpdateWalletBody(name="Renamed Wallet", user_id="example-user")
        )
        print(f"✓ Name is now {updated.name}" if updated else "✗ Update failed")

        # Example 4: Get Wallet
        print("\n4. Fetching Wallet")
        print("-" * 70)
        fetched = await wallet.get_wallet(created.id)
        print(f"✓ Status: {fetched.status}" if fetched else "✗ Fetch failed")

        await show_wallets()

        # Example 5: Delete Wallet
        print("\n5. Deleting Wallet")
        print("-" * 70)
        deleted = await wallet.delete_wallet(created.id)
        print("✓ Deleted" if deleted else "✗ Delete failed")

        await show_wallets()

    print("\n" + "=" * 70)
    print("All examples completed")
    print("=" * 70)


if __name__ == "__main__":
    settings = get_settings()
    setup_sdk_logger("wallet_sdk", settings.logging)
    setup_sdk_logger("wallet_hook", settings.logging)
    asyncio.run(main())
