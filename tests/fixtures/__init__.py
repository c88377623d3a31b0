"""
Shared Test Fixtures

Centralized factories and generators used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - wallet_fixtures.py: Wallet API payload and request factories
"""

# Common utilities
from .common import (
    make_user_id,
    make_wallet_id,
    make_access_key,
    make_timestamp,
)

# Wallet fixtures
from .wallet_fixtures import (
    make_network_payload,
    make_wallet_payload,
    make_envelope,
    make_create_wallet_body,
    make_update_wallet_body,
)

__all__ = [
    "make_user_id",
    "make_wallet_id",
    "make_access_key",
    "make_timestamp",
    "make_network_payload",
    "make_wallet_payload",
    "make_envelope",
    "make_create_wallet_body",
    "make_update_wallet_body",
]
