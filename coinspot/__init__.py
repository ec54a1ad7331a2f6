"""
CoinSpot Python SDK
===================
CoinSpot API v2 的异步 Python SDK
"""
from typing import Optional

import httpx

from .coinspot_client import (
    CoinSpotClient,
    CoinSpotError,
    CoinSpotAuthError,
    CoinSpotAPIError,
    ensure_ok,
    sign,
)
from .config import CoinSpotConfig
from .public import PublicAPI
from .trade import TradeAPI
from .asset import AssetAPI
from .account import AccountAPI
from .normalize import normalize_dates, parse_date


class CoinSpot:
    """CoinSpot 主类，整合所有 API 模块"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化 CoinSpot 客户端

        不传 api_key / secret 时只能调用公共 API。

        Args:
            api_key: API Key
            secret: Secret Key
            base_url: 自定义基础 URL（可选）
            timeout: 请求超时秒数（可选，默认不超时）
            transport: 自定义 httpx transport（可选）
        """
        self.client = CoinSpotClient(
            api_key=api_key,
            secret=secret,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

        # 初始化各个 API 模块
        self.public = PublicAPI(self.client)
        self.trade = TradeAPI(self.client)
        self.asset = AssetAPI(self.client)
        self.account = AccountAPI(self.client)

    @classmethod
    def from_config(
        cls,
        config: Optional[CoinSpotConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "CoinSpot":
        """从配置创建客户端，默认读取环境变量"""
        config = config or CoinSpotConfig()
        return cls(
            api_key=config.api_key,
            secret=config.secret,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self):
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.__aexit__(exc_type, exc_val, exc_tb)


__all__ = [
    "CoinSpot",
    "CoinSpotClient",
    "CoinSpotConfig",
    "CoinSpotError",
    "CoinSpotAuthError",
    "CoinSpotAPIError",
    "ensure_ok",
    "sign",
    "normalize_dates",
    "parse_date",
    "PublicAPI",
    "TradeAPI",
    "AssetAPI",
    "AccountAPI",
]
