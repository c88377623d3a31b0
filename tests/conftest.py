"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - api/        : Live tests against the hosted wallet API (opt-in)
    - component/  : Component tests (mocked transport / mocked client)
    - unit/       : Unit tests (pure models and config, no I/O)
"""
import os
import sys
from typing import Any, Dict

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Keep a developer's .env out of the test run
os.environ.setdefault("WALLET_SDK_ENV_FILE", os.path.join(PROJECT_ROOT, "tests", ".env.test"))

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    make_access_key,
    make_network_payload,
    make_wallet_payload,
    make_create_wallet_body,
)


# =============================================================================
# Test Configuration
# =============================================================================

class TestConfig:
    """Centralized test configuration"""

    # Never contacted: component tests run on httpx.MockTransport
    ENDPOINT_URL = "https://wallets.test"
    API_VERSION = "v1"

    # Live API (tests/api) only runs with a real key
    LIVE_ACCESS_KEY = os.getenv("WALLET_API_ACCESS_KEY") or os.getenv("WalletApiAccess")

    @classmethod
    def base_path(cls) -> str:
        return f"/{cls.API_VERSION}"


@pytest.fixture(scope="session")
def test_config() -> TestConfig:
    """Provide test configuration"""
    return TestConfig()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def access_key() -> str:
    """Fresh API access key"""
    return make_access_key()


@pytest.fixture
def sample_network() -> Dict[str, Any]:
    """Network wire payload"""
    return make_network_payload()


@pytest.fixture
def sample_wallet() -> Dict[str, Any]:
    """Wallet wire payload"""
    return make_wallet_payload()


@pytest.fixture
def sample_create_body() -> Dict[str, Any]:
    """Wallet creation request"""
    return make_create_wallet_body()


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "api: Live wallet API tests")
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")


def pytest_collection_modifyitems(config, items):
    """Skip live API tests when no access key is configured"""
    skip_live = pytest.mark.skip(reason="WALLET_API_ACCESS_KEY not configured")

    for item in items:
        if item.get_closest_marker("api") and not TestConfig.LIVE_ACCESS_KEY:
            item.add_marker(skip_live)
