"""
钱包相关 API（充值地址、提币）
"""
from typing import Optional
from .coinspot_client import CoinSpotClient
from .models import (
    DepositAddressResponse,
    MessageResponse,
    WithdrawalDetailsResponse,
)


class AssetAPI:
    """钱包相关 API（需要完整权限的 API Key）"""

    def __init__(self, client: CoinSpotClient):
        self.client = client

    async def my_coin_deposit_address(self, coin_type: str) -> DepositAddressResponse:
        """
        获取充值地址
        POST /api/v2/my/coin/deposit

        Args:
            coin_type: 币种简称（如 BTC, LTC, DOGE）

        Returns:
            各网络的充值地址
        """
        return await self.client.post("/my/coin/deposit", {"cointype": coin_type})

    async def get_coin_withdrawal_details(self, coin_type: str) -> WithdrawalDetailsResponse:
        """
        获取提币网络及手续费
        POST /api/v2/my/coin/withdraw/senddetails
        """
        return await self.client.post("/my/coin/withdraw/senddetails", {"cointype": coin_type})

    async def coin_withdrawal(
        self,
        coin_type: str,
        amount: float,
        address: str,
        email_confirm: bool = False,
        network: Optional[str] = None,
        payment_id: Optional[str] = None
    ) -> MessageResponse:
        """
        提币
        POST /api/v2/my/coin/withdraw/send

        Args:
            coin_type: 币种简称
            amount: 提币数量（币计价）
            address: 目标地址
            email_confirm: 是否需要邮件确认后才执行
            network: 提币网络（可选，如 BNB, ETH，不传使用默认网络）
            payment_id: payment id / memo（可选）

        Returns:
            提币结果
        """
        data = {
            "cointype": coin_type,
            "amount": amount,
            "address": address,
            "emailconfirm": "YES" if email_confirm else "NO",
            "network": network,
            "paymentid": payment_id,
        }
        return await self.client.post("/my/coin/withdraw/send", data)
