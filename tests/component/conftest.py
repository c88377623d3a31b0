"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── test_*.py    Component tests
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys
from typing import AsyncGenerator

import pytest
import pytest_asyncio

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from core.config import ClientConfig
from wallet_sdk.client import WalletClient
from wallet_hook.store import WalletStateStore

from tests.component.mocks import MockWalletApi, MockWalletClient

ENDPOINT_URL = "https://wallets.test"


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# HTTP Mocks
# =============================================================================

@pytest.fixture
def mock_api() -> MockWalletApi:
    """Fake wallet service"""
    return MockWalletApi()


@pytest.fixture
def client_config(access_key) -> ClientConfig:
    """Client settings pointing at the fake service"""
    return ClientConfig(endpoint_url=ENDPOINT_URL, access_key=access_key)


@pytest_asyncio.fixture
async def wallet_client(client_config, mock_api) -> AsyncGenerator[WalletClient, None]:
    """Real WalletClient wired to the fake service"""
    client = WalletClient(client_config, transport=mock_api.transport)
    yield client
    await client.close()


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def mock_client() -> MockWalletClient:
    """AsyncMock-backed wallet client"""
    return MockWalletClient()


@pytest.fixture
def store(mock_client) -> WalletStateStore:
    """Store over the mocked client"""
    return WalletStateStore(mock_client)
