"""
Common/Shared Fixtures

Base factories and generators used across multiple test layers.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional


def make_user_id() -> str:
    """Generate a unique user ID"""
    return f"usr_test_{uuid.uuid4().hex[:12]}"


def make_wallet_id() -> str:
    """Generate a unique service-style wallet ID"""
    return f"w-{uuid.uuid4().hex[:12]}"


def make_access_key(prefix: Optional[str] = None) -> str:
    """Generate an API access key"""
    return f"{prefix or 'key'}_{uuid.uuid4().hex}"


def make_timestamp() -> str:
    """Generate current UTC timestamp"""
    return datetime.now(timezone.utc).isoformat()
