"""
API Test Layer Configuration

Live contract tests against the hosted wallet service
- No mocking, validates the actual HTTP contract
- Opt-in: skipped unless WALLET_API_ACCESS_KEY (or WalletApiAccess) is set
- Creates real wallets, so point WALLET_API_ENDPOINT at a sandbox

Usage:
    WALLET_API_ACCESS_KEY=... pytest tests/api -v
"""

import os
import sys
from typing import AsyncGenerator

import pytest
import pytest_asyncio

# Add project root
sys.path.insert(
    0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
)

from core.config import ClientConfig
from wallet_sdk.client import WalletClient


# =============================================================================
# Configuration
# =============================================================================


class APITestConfig:
    """API test configuration"""

    # Owner stamped on wallets created by the live run
    TEST_USER_ID = os.getenv("WALLET_API_TEST_USER", "user-123")
    TEST_NETWORK_ID = int(os.getenv("WALLET_API_TEST_NETWORK", "1"))

    # Service message on success
    SUCCESS_MESSAGE = "SUCCESS"


@pytest.fixture(scope="session")
def api_config() -> APITestConfig:
    return APITestConfig()


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line("markers", "api: marks tests as live API tests")


# =============================================================================
# Client
# =============================================================================


@pytest_asyncio.fixture
async def live_client() -> AsyncGenerator[WalletClient, None]:
    """WalletClient configured from the environment"""
    client = WalletClient(ClientConfig.from_env())
    yield client
    await client.close()
