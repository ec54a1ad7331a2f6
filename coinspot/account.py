"""
账户相关 API（状态检查、余额、订单及资金记录，只读）
"""
from datetime import date
from typing import Optional
from .coinspot_client import CoinSpotClient
from .models import (
    AffiliatePaymentsResponse,
    AnyCoinBalanceResponse,
    CoinBalancesResponse,
    CompletedOrdersResponse,
    DepositHistoryResponse,
    MyOpenOrdersResponse,
    OrderBookResponse,
    OrderHistoryResponse,
    ReferralPaymentsResponse,
    SendReceiveHistoryResponse,
    StatusResponse,
    WithdrawalHistoryResponse,
)
from .normalize import normalize_dates, optional_date, optional_iso


class AccountAPI:
    """账户相关 API"""

    def __init__(self, client: CoinSpotClient):
        self.client = client

    async def full_access_status_check(self) -> StatusResponse:
        """
        检查是否有完整 API 权限
        POST /api/v2/status
        """
        return await self.client.post("/status")

    async def readonly_status_check(self) -> StatusResponse:
        """
        检查是否有只读 API 权限
        POST /api/v2/ro/status
        """
        return await self.client.post("/ro/status")

    async def open_market_orders(
        self,
        coin_type: str,
        market_type: Optional[str] = None
    ) -> OrderBookResponse:
        """
        获取市场挂单
        POST /api/v2/ro/orders/market/open

        Args:
            coin_type: 币种简称（如 BTC, LTC, DOGE）
            market_type: 市场币种（可选，如 AUD, USDT）

        Returns:
            买卖挂单列表
        """
        data = {
            "cointype": coin_type,
            "markettype": market_type,
        }
        return await self.client.post("/ro/orders/market/open", data)

    async def completed_market_orders(
        self,
        coin_type: str,
        market_type: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None
    ) -> CompletedOrdersResponse:
        """
        获取市场成交记录
        POST /api/v2/ro/orders/market/completed

        Args:
            coin_type: 币种简称
            market_type: 市场币种（可选）
            start_date: 开始时间（可选）
            end_date: 结束时间（可选）
            limit: 返回数量（可选，默认 200，最多 500）

        Returns:
            成交记录，solddate 已转换为 datetime
        """
        data = {
            "cointype": coin_type,
            "markettype": market_type,
            "startdate": optional_iso(start_date),
            "enddate": optional_iso(end_date),
            "limit": limit,
        }
        response = await self.client.post("/ro/orders/market/completed", data)
        return normalize_dates(response, "solddate", "buyorders", "sellorders")

    async def my_coin_balances(self) -> CoinBalancesResponse:
        """
        获取所有币种余额
        POST /api/v2/ro/my/balances
        """
        return await self.client.post("/ro/my/balances")

    async def my_coin_balance(
        self,
        coin_type: str,
        available: bool = False
    ) -> AnyCoinBalanceResponse:
        """
        获取单个币种余额
        POST /api/v2/ro/my/balance/:cointype?available=yes|no

        Args:
            coin_type: 币种简称（如 AUD, BTC）
            available: 是否同时返回可用余额（决定返回结构中是否有 available 字段）

        Returns:
            币种余额
        """
        params = {"available": "yes" if available else "no"}
        return await self.client.post(f"/ro/my/balance/{coin_type}", params=params)

    async def my_open_market_orders(
        self,
        coin_type: Optional[str] = None,
        market_type: Optional[str] = None
    ) -> MyOpenOrdersResponse:
        """
        获取我的市场挂单
        POST /api/v2/ro/my/orders/market/open
        """
        data = {
            "cointype": coin_type,
            "markettype": market_type,
        }
        response = await self.client.post("/ro/my/orders/market/open", data)
        return normalize_dates(response, "created", "buyorders", "sellorders")

    async def my_open_limit_orders(
        self,
        coin_type: Optional[str] = None
    ) -> MyOpenOrdersResponse:
        """
        获取我的限价 / 止损挂单
        POST /api/v2/ro/my/orders/limit/open
        """
        response = await self.client.post("/ro/my/orders/limit/open", {"cointype": coin_type})
        return normalize_dates(response, "created", "buyorders", "sellorders")

    async def my_order_history(
        self,
        coin_type: Optional[str] = None,
        market_type: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None
    ) -> OrderHistoryResponse:
        """
        获取我的订单历史
        POST /api/v2/ro/my/orders/completed

        Args:
            coin_type: 币种简称（可选）
            market_type: 市场币种（可选）
            start_date: 开始时间（可选）
            end_date: 结束时间（可选）
            limit: 返回数量（可选，默认 200，最多 500）

        Returns:
            订单历史，solddate 已转换为 datetime
        """
        data = {
            "cointype": coin_type,
            "markettype": market_type,
            "startdate": optional_iso(start_date),
            "enddate": optional_iso(end_date),
            "limit": limit,
        }
        response = await self.client.post("/ro/my/orders/completed", data)
        return normalize_dates(response, "solddate", "buyorders", "sellorders")

    async def my_market_order_history(
        self,
        coin_type: Optional[str] = None,
        market_type: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None
    ) -> OrderHistoryResponse:
        """
        获取我的市价单历史
        POST /api/v2/ro/my/orders/market/completed

        参数同 my_order_history。
        """
        data = {
            "cointype": coin_type,
            "markettype": market_type,
            "startdate": optional_iso(start_date),
            "enddate": optional_iso(end_date),
            "limit": limit,
        }
        response = await self.client.post("/ro/my/orders/market/completed", data)
        return normalize_dates(response, "solddate", "buyorders", "sellorders")

    async def my_send_and_receive_history(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> SendReceiveHistoryResponse:
        """
        获取转出 / 转入记录
        POST /api/v2/ro/my/sendreceive

        日期参数只发送 YYYY-MM-DD。
        """
        data = {
            "startdate": optional_date(start_date),
            "enddate": optional_date(end_date),
        }
        response = await self.client.post("/ro/my/sendreceive", data)
        return normalize_dates(response, "timestamp", "sendtransactions", "receivetransactions")

    async def my_deposit_history(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> DepositHistoryResponse:
        """
        获取充值记录
        POST /api/v2/ro/my/deposits
        """
        data = {
            "startdate": optional_date(start_date),
            "enddate": optional_date(end_date),
        }
        response = await self.client.post("/ro/my/deposits", data)
        return normalize_dates(response, "created", "deposits")

    async def my_withdrawal_history(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> WithdrawalHistoryResponse:
        """
        获取提现记录
        POST /api/v2/ro/my/withdrawals
        """
        data = {
            "startdate": optional_date(start_date),
            "enddate": optional_date(end_date),
        }
        response = await self.client.post("/ro/my/withdrawals", data)
        return normalize_dates(response, "created", "withdrawals")

    async def my_affiliate_payments(self) -> AffiliatePaymentsResponse:
        """
        获取联盟佣金记录
        POST /api/v2/ro/my/affiliatepayments
        """
        response = await self.client.post("/ro/my/affiliatepayments")
        return normalize_dates(response, "month", "payments")

    async def my_referral_payments(self) -> ReferralPaymentsResponse:
        """
        获取推荐奖励记录
        POST /api/v2/ro/my/referralpayments
        """
        response = await self.client.post("/ro/my/referralpayments")
        return normalize_dates(response, "timestamp", "payments")
