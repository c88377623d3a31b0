"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (HTTP transport, remote client).
"""

from .http_mock import MockHttpResponse, MockWalletApi
from .wallet_client_mock import MockWalletClient

__all__ = [
    'MockHttpResponse',
    'MockWalletApi',
    'MockWalletClient',
]
