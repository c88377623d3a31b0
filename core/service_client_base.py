"""
Base HTTP Client for Remote API Communication

所有远程 API 客户端的基类，统一管理 HTTP 连接和请求头
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

logger = logging.getLogger(__name__)


class BaseServiceClient(ABC):
    """
    远程 API 客户端基类

    自动处理：
    1. 基础 URL 拼接
    2. 默认请求头 (含认证头)
    3. HTTP 客户端生命周期

    使用示例：
        class WalletClient(BaseServiceClient):
            service_name = "wallet_api"

            async def get_wallet(self, wallet_id: str):
                response = await self.get(f"/wallets/{wallet_id}")
                return response.json()
    """

    # 子类需要定义这些
    service_name: str = None  # 例如 "wallet_api"

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        初始化客户端

        Args:
            base_url: API 基础URL (含版本前缀)
            headers: 附加到每个请求的 headers
            transport: 自定义 httpx transport (测试时注入 MockTransport)
        """
        if not self.service_name:
            raise ValueError(f"{self.__class__.__name__} must define 'service_name'")

        self.base_url = base_url.rstrip('/')

        default_headers = self._build_default_headers()
        default_headers.update(headers or {})

        # 持久化 HTTP 客户端，超时使用 httpx 默认值
        self.client = httpx.AsyncClient(
            headers=default_headers,
            transport=transport
        )

        logger.debug(f"Initialized {self.service_name} client: {self.base_url}")

    def _build_default_headers(self) -> Dict[str, str]:
        """构建默认请求headers"""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"wallet-sdk-python/{self.service_name}"
        }

    def set_header(self, name: str, value: str):
        """
        替换默认 header

        只影响之后发出的请求，已在途的请求保持原值
        """
        self.client.headers[name] = value

    async def close(self):
        """关闭HTTP客户端"""
        await self.client.aclose()
        logger.debug(f"Closed {self.service_name} client")

    @property
    def is_closed(self) -> bool:
        return self.client.is_closed

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器退出"""
        await self.close()

    # ========================================
    # HTTP 方法封装
    # ========================================

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """GET 请求"""
        url = f"{self.base_url}{path}"
        return await self.client.get(url, params=params)

    async def post(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """POST 请求"""
        url = f"{self.base_url}{path}"
        return await self.client.post(url, json=json)

    async def put(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """PUT 请求"""
        url = f"{self.base_url}{path}"
        return await self.client.put(url, json=json)

    async def delete(self, path: str) -> httpx.Response:
        """DELETE 请求"""
        url = f"{self.base_url}{path}"
        return await self.client.delete(url)


__all__ = ["BaseServiceClient"]
