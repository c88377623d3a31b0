"""
Wallet SDK Client

Client library for the remote custodial-wallet API. Every call returns a
GeneralResult; network, HTTP and contract failures are reported through the
result instead of being raised.
"""

import httpx
import logging
from dataclasses import replace
from urllib.parse import quote
from typing import Optional, List, Dict, Any, Tuple, Type, Union
from pydantic import TypeAdapter, ValidationError

from core.config import ClientConfig
from core.service_client_base import BaseServiceClient

from .models import (
    GeneralResult,
    Network,
    Wallet,
    CreateWalletBody,
    UpdateWalletBody,
)
from .protocols import MissingAccessKeyError, MalformedResponseError

logger = logging.getLogger(__name__)

ACCESS_KEY_HEADER = "x-api-key"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"

_NETWORK_LIST = TypeAdapter(List[Network])
_WALLET = TypeAdapter(Wallet)


class WalletClient(BaseServiceClient):
    """Wallet API HTTP client"""

    service_name = "wallet_api"

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        endpoint_url: Optional[str] = None,
        api_version: Optional[str] = None,
        access_key: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Wallet API client

        Args:
            config: Base connection settings, defaults to ClientConfig()
            endpoint_url: Overrides config.endpoint_url
            api_version: Overrides config.api_version
            access_key: Overrides config.access_key (required one way or the other)
            headers: Extra headers merged over config.extra_headers
            transport: Custom httpx transport

        Raises:
            MissingAccessKeyError: no access key in config or arguments

        Example:
            >>> async with WalletClient(access_key="k1") as client:
            ...     result = await client.list_networks()
        """
        self.config = (config or ClientConfig()).merged(
            endpoint_url=endpoint_url,
            api_version=api_version,
            access_key=access_key,
            extra_headers=headers,
        )
        if not self.config.access_key:
            raise MissingAccessKeyError("Access Key is required")

        # Credential goes last so extra headers cannot shadow it
        request_headers = dict(self.config.extra_headers)
        request_headers[ACCESS_KEY_HEADER] = self.config.access_key

        super().__init__(
            base_url=self.config.base_url,
            headers=request_headers,
            transport=transport,
        )

    def set_access_key(self, new_access_key: str):
        """
        Rotate the API credential

        Requests already in flight keep the key they were sent with.

        Raises:
            MissingAccessKeyError: new_access_key is empty
        """
        if not new_access_key:
            raise MissingAccessKeyError("Access Key is required")
        self.config = replace(self.config, access_key=new_access_key)
        self.set_header(ACCESS_KEY_HEADER, new_access_key)
        logger.info(f"Rotated access key for {self.service_name} client")

    # =============================================================================
    # Response / Error Normalization
    # =============================================================================

    @staticmethod
    def _unwrap(response: httpx.Response) -> Tuple[Any, str]:
        """Check status and split the {Result, Message} envelope"""
        response.raise_for_status()
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Wallet service returned invalid JSON: {e}") from e
        if not isinstance(body, dict):
            raise MalformedResponseError("Wallet service response is not a JSON object")
        message = body.get("Message")
        return body.get("Result"), message if isinstance(message, str) else ""

    @staticmethod
    def _wallet_path(wallet_id: str) -> str:
        """Wallet id encoded as a single path segment"""
        segment = quote(wallet_id, safe="")
        if segment in (".", ".."):
            segment = segment.replace(".", "%2E")
        return f"/wallets/{segment}"

    @staticmethod
    def _parse(adapter: TypeAdapter, payload: Any, what: str):
        if payload is None:
            raise MalformedResponseError(f"Wallet service response has no {what} in 'Result'")
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid {what} in wallet service response: {e}") from e

    @staticmethod
    def _body_message(response: httpx.Response) -> Optional[str]:
        """Structured error message from an error response, if any"""
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        for key in ("message", "Message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
        return None

    def _error_message(self, error: Exception) -> str:
        if isinstance(error, httpx.HTTPStatusError):
            body_message = self._body_message(error.response)
            if body_message:
                return body_message
        if isinstance(error, (httpx.HTTPError, MalformedResponseError)):
            return str(error) or UNKNOWN_ERROR_MESSAGE
        return UNKNOWN_ERROR_MESSAGE

    def _handle_error(self, operation: str, error: Exception) -> GeneralResult:
        message = self._error_message(error)
        if isinstance(error, httpx.HTTPStatusError):
            logger.warning(f"Failed to {operation}: {error.response.status_code} {message}")
        elif isinstance(error, (httpx.HTTPError, MalformedResponseError)):
            logger.warning(f"Failed to {operation}: {message}")
        else:
            logger.error(f"Unexpected error during {operation}: {error!r}")
        return GeneralResult.failure(message)

    @staticmethod
    def _coerce_body(model: Type, body: Union[Any, Dict[str, Any]]):
        if isinstance(body, model):
            return body
        return model.model_validate(body)

    # =============================================================================
    # Networks
    # =============================================================================

    async def list_networks(self) -> GeneralResult[List[Network]]:
        """
        List supported blockchain networks

        Returns:
            Result with the network list

        Example:
            >>> result = await client.list_networks()
            >>> if result.succeeded:
            ...     codes = [n.code for n in result.data]
        """
        try:
            response = await self.get("/networks")
            payload, message = self._unwrap(response)
            networks = self._parse(_NETWORK_LIST, payload, "network list")
            return GeneralResult[List[Network]].success(networks, message)
        except Exception as e:
            return self._handle_error("list networks", e)

    # =============================================================================
    # Wallet Management
    # =============================================================================

    async def create_wallet(
        self,
        body: Union[CreateWalletBody, Dict[str, Any]]
    ) -> GeneralResult[Wallet]:
        """
        Create new wallet

        Args:
            body: CreateWalletBody or an equivalent dict

        Returns:
            Result with the created wallet

        Example:
            >>> result = await client.create_wallet(
            ...     CreateWalletBody(network_id=1, name="My Wallet", user_id="user-123")
            ... )
        """
        body = self._coerce_body(CreateWalletBody, body)
        try:
            response = await self.post("/wallets", json=body.to_wire())
            payload, message = self._unwrap(response)
            wallet = self._parse(_WALLET, payload, "wallet")
            return GeneralResult[Wallet].success(wallet, message)
        except Exception as e:
            return self._handle_error("create wallet", e)

    async def update_wallet(
        self,
        wallet_id: str,
        body: Union[UpdateWalletBody, Dict[str, Any]]
    ) -> GeneralResult[Wallet]:
        """
        Update wallet name/owner

        Args:
            wallet_id: Wallet ID
            body: UpdateWalletBody or an equivalent dict

        Returns:
            Result with the updated wallet
        """
        body = self._coerce_body(UpdateWalletBody, body)
        try:
            response = await self.put(self._wallet_path(wallet_id), json=body.to_wire())
            payload, message = self._unwrap(response)
            wallet = self._parse(_WALLET, payload, "wallet")
            return GeneralResult[Wallet].success(wallet, message)
        except Exception as e:
            return self._handle_error("update wallet", e)

    async def get_wallet(self, wallet_id: str) -> GeneralResult[Wallet]:
        """
        Get wallet by ID

        Args:
            wallet_id: Wallet ID

        Returns:
            Result with the wallet details

        Example:
            >>> result = await client.get_wallet("wallet123")
        """
        try:
            response = await self.get(self._wallet_path(wallet_id))
            payload, message = self._unwrap(response)
            wallet = self._parse(_WALLET, payload, "wallet")
            return GeneralResult[Wallet].success(wallet, message)
        except Exception as e:
            return self._handle_error("get wallet", e)

    async def delete_wallet(self, wallet_id: str) -> GeneralResult[None]:
        """
        Delete wallet by ID

        Returns:
            Result without data; `succeeded` tells whether the wallet is gone
        """
        try:
            response = await self.delete(self._wallet_path(wallet_id))
            # Any 2xx means deleted; the body only contributes a message
            response.raise_for_status()
            message = self._body_message(response) or ""
            return GeneralResult.success(None, message)
        except Exception as e:
            return self._handle_error("delete wallet", e)


__all__ = ["WalletClient", "ACCESS_KEY_HEADER", "UNKNOWN_ERROR_MESSAGE"]
