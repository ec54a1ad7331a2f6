from datetime import date, datetime, timedelta, timezone

import pytest

from conftest import RecordingTransport
from coinspot import CoinSpot

PRIVATE = "https://www.coinspot.com.au/api/v2"
PUBLIC = "https://www.coinspot.com.au/pubapi/v2"

START = datetime(2024, 3, 1, 8, 15, 0, tzinfo=timezone.utc)
END = datetime(2024, 3, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)


def body_without_nonce(transport):
    body = transport.last_body()
    body.pop("nonce")
    return body


@pytest.mark.asyncio
@pytest.mark.parametrize("method,args,path,expected", [
    ("buy_now_quote", ("BTC", 100, "aud"), "/quote/buy/now",
     {"cointype": "BTC", "amount": 100, "amounttype": "aud"}),
    ("sell_now_quote", ("ETH", 1.25, "coin"), "/quote/sell/now",
     {"cointype": "ETH", "amount": 1.25, "amounttype": "coin"}),
    ("swap_now_quote", ("BTC", "ETH", 0.1), "/quote/swap/now",
     {"cointypesell": "BTC", "cointypebuy": "ETH", "amount": 0.1}),
    ("place_market_sell_order", ("BTC", 0.2, 60000, "USDT"), "/my/sell",
     {"cointype": "BTC", "amount": 0.2, "rate": 60000, "markettype": "USDT"}),
    ("place_sell_now_order", ("BTC", 0.2, "coin", 59000, 5), "/my/sell/now",
     {"cointype": "BTC", "amount": 0.2, "amounttype": "coin", "rate": 59000,
      "threshold": 5, "direction": "DOWN"}),
    ("place_swap_now_order", ("BTC", "ETH", 0.1), "/my/swap/now",
     {"cointypesell": "BTC", "cointypebuy": "ETH", "amount": 0.1, "direction": "BOTH"}),
    ("cancel_my_buy_order", ("order-1",), "/my/buy/cancel", {"id": "order-1"}),
    ("cancel_my_sell_order", ("order-2",), "/my/sell/cancel", {"id": "order-2"}),
])
async def test_trade_endpoints(api, transport, method, args, path, expected):
    await getattr(api.trade, method)(*args)

    assert str(transport.last.url) == PRIVATE + path
    assert body_without_nonce(transport) == expected


@pytest.mark.asyncio
async def test_coin_withdrawal_body(api, transport):
    await api.asset.coin_withdrawal("XRP", 20, "rAddress", network="XRP", payment_id="memo-1")

    assert str(transport.last.url) == PRIVATE + "/my/coin/withdraw/send"
    assert body_without_nonce(transport) == {
        "cointype": "XRP",
        "amount": 20,
        "address": "rAddress",
        "emailconfirm": "NO",
        "network": "XRP",
        "paymentid": "memo-1",
    }


@pytest.mark.asyncio
async def test_wallet_lookups(api, transport):
    await api.asset.my_coin_deposit_address("BTC")
    assert str(transport.last.url) == PRIVATE + "/my/coin/deposit"
    assert body_without_nonce(transport) == {"cointype": "BTC"}

    await api.asset.get_coin_withdrawal_details("BTC")
    assert str(transport.last.url) == PRIVATE + "/my/coin/withdraw/senddetails"

    await api.asset.coin_withdrawal("BTC", 1, "addr", email_confirm=True)
    assert body_without_nonce(transport) == {
        "cointype": "BTC", "amount": 1, "address": "addr", "emailconfirm": "YES",
    }


@pytest.mark.asyncio
async def test_full_iso_dates_for_order_history(api, transport):
    await api.account.my_order_history("BTC", "AUD", START, END, 300)

    assert str(transport.last.url) == PRIVATE + "/ro/my/orders/completed"
    assert body_without_nonce(transport) == {
        "cointype": "BTC",
        "markettype": "AUD",
        "startdate": "2024-03-01T08:15:00.000Z",
        "enddate": "2024-03-31T23:59:59.999Z",
        "limit": 300,
    }


@pytest.mark.asyncio
async def test_full_iso_dates_for_market_endpoints(api, transport):
    await api.account.completed_market_orders("BTC", start_date=START)
    assert str(transport.last.url) == PRIVATE + "/ro/orders/market/completed"
    assert body_without_nonce(transport) == {"cointype": "BTC", "startdate": "2024-03-01T08:15:00.000Z"}

    await api.account.my_market_order_history(end_date=END)
    assert str(transport.last.url) == PRIVATE + "/ro/my/orders/market/completed"
    assert body_without_nonce(transport) == {"enddate": "2024-03-31T23:59:59.999Z"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", [
    ("my_send_and_receive_history", "/ro/my/sendreceive"),
    ("my_deposit_history", "/ro/my/deposits"),
    ("my_withdrawal_history", "/ro/my/withdrawals"),
])
async def test_date_only_history_endpoints(api, transport, method, path):
    await getattr(api.account, method)(START, date(2024, 3, 31))

    assert str(transport.last.url) == PRIVATE + path
    assert body_without_nonce(transport) == {"startdate": "2024-03-01", "enddate": "2024-03-31"}


@pytest.mark.asyncio
async def test_optional_filters_are_left_out(api, transport, fixed_clock):
    await api.account.my_open_market_orders()

    assert str(transport.last.url) == PRIVATE + "/ro/my/orders/market/open"
    assert transport.last.content == b'{"nonce":12345}'


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", [
    ("readonly_status_check", "/ro/status"),
    ("my_coin_balances", "/ro/my/balances"),
    ("my_affiliate_payments", "/ro/my/affiliatepayments"),
    ("my_referral_payments", "/ro/my/referralpayments"),
])
async def test_parameterless_account_endpoints(api, transport, method, path):
    await getattr(api.account, method)()

    assert str(transport.last.url) == PRIVATE + path
    assert body_without_nonce(transport) == {}


@pytest.mark.asyncio
async def test_coin_balance_available_flag(api, transport):
    await api.account.my_coin_balance("ETH")

    assert str(transport.last.url) == PRIVATE + "/ro/my/balance/ETH?available=no"


@pytest.mark.asyncio
async def test_completed_orders_by_coin_normalized():
    transport = RecordingTransport({
        "status": "ok",
        "message": "ok",
        "buyorders": [{"amount": 1, "rate": 2, "total": 2, "coin": "BTC", "market": "BTC/AUD",
                       "solddate": "2024-03-01T08:15:00.000Z"}],
        "sellorders": [],
    })
    api = CoinSpot(transport=transport)

    result = await api.public.completed_orders_by_coin("BTC", "AUD")

    assert str(transport.last.url) == PUBLIC + "/orders/completed/BTC/AUD"
    assert result["buyorders"][0]["solddate"] == START
    assert result["sellorders"] == []


@pytest.mark.asyncio
async def test_open_limit_orders_normalized():
    transport = RecordingTransport({
        "status": "ok",
        "message": "ok",
        "buyorders": [{"id": "a", "amount": 1, "rate": 2, "coin": "BTC", "market": "BTC/AUD",
                       "created": "2024-03-01T08:15:00.000Z", "type": "buy limit"}],
        "sellorders": [{"id": "b", "amount": 1, "rate": 3, "coin": "BTC", "market": "BTC/AUD",
                        "created": "2024-03-31T23:59:59.999Z", "type": "take profit"}],
    })
    api = CoinSpot("dummy", "dummy", transport=transport)

    result = await api.account.my_open_limit_orders("BTC")

    assert result["buyorders"][0]["created"] == START
    assert result["sellorders"][0]["created"] == END
    assert result["sellorders"][0]["type"] == "take profit"


@pytest.mark.asyncio
async def test_send_receive_history_normalized():
    transport = RecordingTransport({
        "status": "ok",
        "message": "ok",
        "sendtransactions": [{"timestamp": "2024-03-01T08:15:00.000Z", "amount": 1, "coin": "BTC",
                              "address": "x", "aud": 100}],
        "receivetransactions": [{"timestamp": "2024-03-31T23:59:59.999Z", "amount": 2, "coin": "BTC",
                                 "address": "y", "aud": 200, "from": "z"}],
    })
    api = CoinSpot("dummy", "dummy", transport=transport)

    result = await api.account.my_send_and_receive_history()

    assert result["sendtransactions"][0]["timestamp"] == START
    assert result["receivetransactions"][0]["timestamp"] == END
    assert result["receivetransactions"][0]["from"] == "z"


@pytest.mark.asyncio
async def test_affiliate_payments_month_normalized():
    transport = RecordingTransport({
        "status": "ok",
        "message": "ok",
        "payments": [
            {"amount": 12.5, "month": "2024-02-01T00:00:00.000Z"},
            {"amount": 3, "month": "2023-02"},
            {"amount": 4, "month": "2023-11-01"},
        ],
    })
    api = CoinSpot("dummy", "dummy", transport=transport)

    result = await api.account.my_affiliate_payments()

    assert result["payments"] == [
        {"amount": 12.5, "month": datetime(2024, 2, 1, tzinfo=timezone.utc)},
        {"amount": 3, "month": datetime(2023, 2, 1, tzinfo=timezone.utc)},
        {"amount": 4, "month": datetime(2023, 11, 1, tzinfo=timezone.utc)},
    ]
    assert all(p["month"].utcoffset() == timedelta(0) for p in result["payments"])


@pytest.mark.asyncio
async def test_history_error_response_passes_through():
    transport = RecordingTransport({"status": "error", "message": "Invalid API key"})
    api = CoinSpot("dummy", "dummy", transport=transport)

    result = await api.account.my_deposit_history()

    assert result == {"status": "error", "message": "Invalid API key"}
