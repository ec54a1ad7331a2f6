"""
公共 API（最新价格、挂单、成交记录）
"""
from typing import Optional
from .coinspot_client import CoinSpotClient
from .models import (
    CompletedOrdersResponse,
    LatestPricesResponse,
    LatestRateResponse,
    OrderBookResponse,
)
from .normalize import normalize_dates


class PublicAPI:
    """公共 API（无需认证）"""

    def __init__(self, client: CoinSpotClient):
        self.client = client

    async def latest_prices(self) -> LatestPricesResponse:
        """
        获取所有币种最新价格
        GET /pubapi/v2/latest
        """
        return await self.client.get("/latest")

    async def latest_coin_prices(
        self,
        coin_type: str,
        market: Optional[str] = None
    ) -> LatestPricesResponse:
        """
        获取单个币种最新价格
        GET /pubapi/v2/latest/:cointype[/:markettype]

        Args:
            coin_type: 币种简称（如 BTC, LTC, DOGE）
            market: 市场币种（可选，如 USDT）

        Returns:
            最新价格
        """
        return await self.client.get("/latest", coin_type, market)

    async def latest_buy_price(
        self,
        coin_type: str,
        market: Optional[str] = None
    ) -> LatestRateResponse:
        """
        获取最新买入价
        GET /pubapi/v2/buyprice/:cointype[/:markettype]
        """
        return await self.client.get("/buyprice", coin_type, market)

    async def latest_sell_price(
        self,
        coin_type: str,
        market: Optional[str] = None
    ) -> LatestRateResponse:
        """
        获取最新卖出价
        GET /pubapi/v2/sellprice/:cointype[/:markettype]
        """
        return await self.client.get("/sellprice", coin_type, market)

    async def open_orders_by_coin(
        self,
        coin_type: str,
        market: Optional[str] = None
    ) -> OrderBookResponse:
        """
        获取币种当前挂单
        GET /pubapi/v2/orders/open/:cointype[/:markettype]
        """
        return await self.client.get("/orders/open", coin_type, market)

    async def completed_orders_by_coin(
        self,
        coin_type: str,
        market: Optional[str] = None
    ) -> CompletedOrdersResponse:
        """
        获取币种已成交订单
        GET /pubapi/v2/orders/completed/:cointype[/:markettype]

        Args:
            coin_type: 币种简称
            market: 市场币种（可选）

        Returns:
            买卖成交记录，solddate 已转换为 datetime
        """
        response = await self.client.get("/orders/completed", coin_type, market)
        return normalize_dates(response, "solddate", "buyorders", "sellorders")
