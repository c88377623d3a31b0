"""
Wallet SDK Models

Defines data models for the remote custodial-wallet API. Field aliases match
the service's PascalCase wire format; Python code uses the snake_case names.
"""

from typing import Optional, List, Union, Generic, TypeVar
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, model_validator
from enum import Enum

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for models exchanged with the wallet service"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Serialize with wire aliases, dropping absent optional fields"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class WalletStatus(str, Enum):
    """Wallet lifecycle status reported by the service"""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Network(WireModel):
    """Blockchain network supported by the service"""
    id: int = Field(alias="Id")
    name: str = Field(alias="NetworkName")
    code: str = Field(alias="NetworkCode")


class SigningKey(WireModel):
    """Public half of a wallet's signing key"""
    curve: str = Field(alias="Curve")
    scheme: str = Field(alias="Scheme")
    public_key: str = Field(alias="PublicKey")


class Wallet(WireModel):
    """Custodial wallet record; `id` is assigned by the service"""
    id: str = Field(alias="Id")
    network: str = Field(alias="Network")
    # Unrecognized statuses are kept verbatim
    status: Union[WalletStatus, str] = Field(alias="Status", union_mode="left_to_right")
    name: str = Field(alias="Name")
    address: str = Field(alias="Address")
    private_key: Optional[str] = Field(default=None, alias="PrivateKey")
    seed: Optional[str] = Field(default=None, alias="Seed")
    created_at: datetime = Field(alias="DateCreated")
    signing_key: SigningKey = Field(alias="SigningKey")


class CreateWalletBody(WireModel):
    """Create wallet request"""
    network_id: int = Field(alias="NetworkId")
    name: str = Field(alias="Name")
    user_id: str = Field(alias="UserId")
    tags: Optional[List[str]] = Field(default=None, alias="Tags")


class UpdateWalletBody(WireModel):
    """Update wallet request"""
    name: str = Field(alias="Name")
    user_id: str = Field(alias="UserId")


class GeneralResult(BaseModel, Generic[T]):
    """
    Uniform outcome of a wallet API call.

    `succeeded` is the only success signal; a failed result never carries
    data, and `message` holds the service message or the best available
    error description.
    """
    succeeded: bool
    message: str = ""
    data: Optional[T] = None

    @model_validator(mode="after")
    def _failure_has_no_data(self):
        if not self.succeeded and self.data is not None:
            raise ValueError("a failed result cannot carry data")
        return self

    @classmethod
    def success(cls, data: Optional[T] = None, message: str = "") -> "GeneralResult[T]":
        return cls(succeeded=True, message=message, data=data)

    @classmethod
    def failure(cls, message: str) -> "GeneralResult[T]":
        return cls(succeeded=False, message=message, data=None)


__all__ = [
    "WalletStatus",
    "Network",
    "SigningKey",
    "Wallet",
    "CreateWalletBody",
    "UpdateWalletBody",
    "GeneralResult",
]
