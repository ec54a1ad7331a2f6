"""
CoinSpot API 响应结构（仅用于类型标注）
"""
from datetime import datetime
from typing import Dict, List, Literal, Optional, TypedDict, Union

Status = Literal["ok", "error"]


class StatusResponse(TypedDict):
    status: Status


class MessageResponse(TypedDict, total=False):
    status: Status
    message: str


# ---------- 公共 API ----------

class Price(TypedDict):
    bid: float
    ask: float
    last: float


class LatestPricesResponse(MessageResponse, total=False):
    prices: Dict[str, Price]


class LatestRateResponse(MessageResponse, total=False):
    rate: float
    market: str


class BookOrder(TypedDict):
    amount: float
    rate: float
    total: float
    coin: str
    market: str


class OrderBookResponse(MessageResponse, total=False):
    buyorders: List[BookOrder]
    sellorders: List[BookOrder]


class CompletedOrder(BookOrder):
    solddate: Optional[datetime]


class CompletedOrdersResponse(MessageResponse, total=False):
    buyorders: List[CompletedOrder]
    sellorders: List[CompletedOrder]


# ---------- 交易 / 钱包 ----------

class QuoteResponse(MessageResponse, total=False):
    rate: float


class PlaceOrderResponse(MessageResponse, total=False):
    coin: str
    market: str
    amount: float
    rate: float
    id: str


class PlaceNowOrderResponse(MessageResponse, total=False):
    coin: str
    market: str
    amount: float
    total: float


class DepositNetwork(TypedDict):
    name: str
    network: str
    address: str
    memo: str


class DepositAddressResponse(MessageResponse, total=False):
    networks: List[DepositNetwork]


class WithdrawalNetwork(TypedDict):
    network: str
    paymentid: str
    fee: float
    minsend: float
    default: bool


class WithdrawalDetailsResponse(MessageResponse, total=False):
    networks: List[WithdrawalNetwork]


# ---------- 只读 API ----------

class CoinBalance(TypedDict):
    balance: float
    audbalance: float
    rate: float


class AvailableCoinBalance(CoinBalance):
    available: float


class CoinBalancesResponse(MessageResponse, total=False):
    balances: List[Dict[str, CoinBalance]]


class CoinBalanceResponse(MessageResponse, total=False):
    balance: Dict[str, CoinBalance]


class AvailableCoinBalanceResponse(MessageResponse, total=False):
    balance: Dict[str, AvailableCoinBalance]


class OpenOrder(BookOrder):
    id: str
    created: Optional[datetime]


class MyOpenOrdersResponse(MessageResponse, total=False):
    buyorders: List[OpenOrder]
    sellorders: List[OpenOrder]


class HistoricOrder(CompletedOrder, total=False):
    type: str
    audfeeExGst: float
    audGst: float
    audtotal: float
    otc: bool


class OrderHistoryResponse(MessageResponse, total=False):
    buyorders: List[HistoricOrder]
    sellorders: List[HistoricOrder]


class Transfer(TypedDict, total=False):
    timestamp: Optional[datetime]
    amount: float
    coin: str
    address: str
    aud: float


# "from" 是关键字，只能用函数式写法
ReceiveTransfer = TypedDict(
    "ReceiveTransfer",
    {
        "timestamp": Optional[datetime],
        "amount": float,
        "coin": str,
        "address": str,
        "aud": float,
        "from": str,
    },
    total=False,
)


class SendReceiveHistoryResponse(MessageResponse, total=False):
    sendtransactions: List[Transfer]
    receivetransactions: List[ReceiveTransfer]


class Deposit(TypedDict, total=False):
    amount: float
    created: Optional[datetime]
    status: str
    type: str
    reference: str


class DepositHistoryResponse(MessageResponse, total=False):
    deposits: List[Deposit]


class Withdrawal(TypedDict, total=False):
    amount: float
    created: Optional[datetime]
    status: str


class WithdrawalHistoryResponse(MessageResponse, total=False):
    withdrawals: List[Withdrawal]


class AffiliatePayment(TypedDict):
    amount: float
    month: Optional[datetime]


class AffiliatePaymentsResponse(MessageResponse, total=False):
    payments: List[AffiliatePayment]


class ReferralPayment(TypedDict):
    amount: float
    coin: str
    audamount: float
    timestamp: Optional[datetime]


class ReferralPaymentsResponse(MessageResponse, total=False):
    payments: List[ReferralPayment]


AnyCoinBalanceResponse = Union[CoinBalanceResponse, AvailableCoinBalanceResponse]
