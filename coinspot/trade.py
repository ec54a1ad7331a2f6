"""
交易相关 API（报价、下单、撤单）
"""
from typing import Literal, Optional
from .coinspot_client import CoinSpotClient
from .models import (
    MessageResponse,
    PlaceNowOrderResponse,
    PlaceOrderResponse,
    QuoteResponse,
)

AmountType = Literal["coin", "aud"]
Direction = Literal["UP", "DOWN", "BOTH"]


class TradeAPI:
    """交易相关 API（需要完整权限的 API Key）"""

    def __init__(self, client: CoinSpotClient):
        self.client = client

    async def buy_now_quote(
        self,
        coin_type: str,
        amount: float,
        amount_type: AmountType
    ) -> QuoteResponse:
        """
        获取立即买入报价
        POST /api/v2/quote/buy/now

        Args:
            coin_type: 币种简称（如 BTC, LTC, DOGE）
            amount: 买入数量
            amount_type: "coin" 或 "aud"，amount 是币数量还是 AUD 金额

        Returns:
            报价
        """
        data = {
            "cointype": coin_type,
            "amount": amount,
            "amounttype": amount_type,
        }
        return await self.client.post("/quote/buy/now", data)

    async def sell_now_quote(
        self,
        coin_type: str,
        amount: float,
        amount_type: AmountType
    ) -> QuoteResponse:
        """
        获取立即卖出报价
        POST /api/v2/quote/sell/now
        """
        data = {
            "cointype": coin_type,
            "amount": amount,
            "amounttype": amount_type,
        }
        return await self.client.post("/quote/sell/now", data)

    async def swap_now_quote(
        self,
        coin_type_sell: str,
        coin_type_buy: str,
        amount: float
    ) -> QuoteResponse:
        """
        获取立即兑换报价
        POST /api/v2/quote/swap/now

        Args:
            coin_type_sell: 卖出的币种
            coin_type_buy: 换入的币种
            amount: 卖出币种的数量
        """
        data = {
            "cointypesell": coin_type_sell,
            "cointypebuy": coin_type_buy,
            "amount": amount,
        }
        return await self.client.post("/quote/swap/now", data)

    async def place_market_buy_order(
        self,
        coin_type: str,
        amount: float,
        rate: float,
        market_type: str = "AUD"
    ) -> PlaceOrderResponse:
        """
        挂买单
        POST /api/v2/my/buy

        Args:
            coin_type: 币种简称
            amount: 买入数量，最多 8 位小数
            rate: 愿意支付的价格（市场币种计价），最多 8 位小数
            market_type: 市场币种（默认 AUD，如 USDT）

        Returns:
            订单创建结果
        """
        data = {
            "cointype": coin_type,
            "amount": amount,
            "rate": rate,
            "markettype": market_type,
        }
        return await self.client.post("/my/buy", data)

    async def place_buy_now_order(
        self,
        coin_type: str,
        amount: float,
        amount_type: AmountType,
        rate: Optional[float] = None,
        threshold: Optional[float] = None,
        direction: Direction = "UP"
    ) -> PlaceNowOrderResponse:
        """
        立即买入
        POST /api/v2/my/buy/now

        Args:
            coin_type: 币种简称
            amount: 买入数量，币最多 8 位小数，AUD 最多 2 位
            amount_type: "coin" 或 "aud"
            rate: 报价接口返回的价格（可选）
            threshold: 0 ~ 1000，价格偏离超过该百分比时终止（可选）
            direction: 阈值生效的价格方向 UP / DOWN / BOTH（默认 UP）
        """
        data = {
            "cointype": coin_type,
            "amount": amount,
            "amounttype": amount_type,
            "rate": rate,
            "threshold": threshold,
            "direction": direction,
        }
        return await self.client.post("/my/buy/now", data)

    async def place_market_sell_order(
        self,
        coin_type: str,
        amount: float,
        rate: float,
        market_type: str = "AUD"
    ) -> PlaceOrderResponse:
        """
        挂卖单
        POST /api/v2/my/sell
        """
        data = {
            "cointype": coin_type,
            "amount": amount,
            "rate": rate,
            "markettype": market_type,
        }
        return await self.client.post("/my/sell", data)

    async def place_sell_now_order(
        self,
        coin_type: str,
        amount: float,
        amount_type: AmountType,
        rate: Optional[float] = None,
        threshold: Optional[float] = None,
        direction: Direction = "DOWN"
    ) -> PlaceNowOrderResponse:
        """
        立即卖出
        POST /api/v2/my/sell/now

        direction 默认 DOWN，其余参数同 place_buy_now_order。
        """
        data = {
            "cointype": coin_type,
            "amount": amount,
            "amounttype": amount_type,
            "rate": rate,
            "threshold": threshold,
            "direction": direction,
        }
        return await self.client.post("/my/sell/now", data)

    async def place_swap_now_order(
        self,
        coin_type_sell: str,
        coin_type_buy: str,
        amount: float,
        rate: Optional[float] = None,
        threshold: Optional[float] = None,
        direction: Direction = "BOTH"
    ) -> PlaceNowOrderResponse:
        """
        立即兑换
        POST /api/v2/my/swap/now

        Args:
            coin_type_sell: 卖出的币种
            coin_type_buy: 换入的币种
            amount: 卖出币种的数量，最多 8 位小数
            rate: 报价接口返回的价格（可选）
            threshold: 0 ~ 1000 的百分比阈值（可选）
            direction: 阈值生效的价格方向（默认 BOTH）
        """
        data = {
            "cointypesell": coin_type_sell,
            "cointypebuy": coin_type_buy,
            "amount": amount,
            "rate": rate,
            "threshold": threshold,
            "direction": direction,
        }
        return await self.client.post("/my/swap/now", data)

    async def cancel_my_buy_order(self, order_id: str) -> MessageResponse:
        """
        撤销买单
        POST /api/v2/my/buy/cancel
        """
        return await self.client.post("/my/buy/cancel", {"id": order_id})

    async def cancel_my_sell_order(self, order_id: str) -> MessageResponse:
        """
        撤销卖单
        POST /api/v2/my/sell/cancel
        """
        return await self.client.post("/my/sell/cancel", {"id": order_id})
