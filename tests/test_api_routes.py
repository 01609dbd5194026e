import json
import logging

import pytest

from api_client import UpbitAPIError
from dashboard.models.ticker import to_ticker_data
from tests.fakes import make_market, make_ticker


@pytest.mark.asyncio
async def test_unknown_market_path_is_wrong_parameter(client):
    response = await client.get("/api/market/unknown")

    assert response.status_code == 404
    assert response.json()["code"] == "4_W_P"


@pytest.mark.asyncio
async def test_market_all_and_info(client, fake_upbit):
    fake_upbit.markets = [make_market("KRW-BTC", "비트코인", "Bitcoin")]

    response = await client.get("/api/market/all")
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == "0"
    assert body["data"][0]["koreanName"] == "비트코인"

    response = await client.get("/api/market/info", params={"code": "KRW-BTC"})
    assert response.json()["data"]["market"] == "KRW-BTC"

    response = await client.get("/api/market/info", params={"code": "KRW-NONE"})
    assert response.status_code == 404
    assert response.json()["code"] == "4"

    response = await client.get("/api/market/info")
    assert response.json()["code"] == "4_W_P"


@pytest.mark.asyncio
async def test_ticker_currency_served_from_cache(client, fake_redis, fake_upbit):
    cached = [to_ticker_data(make_ticker("KRW-BTC")).model_dump(by_alias=True)]
    await fake_redis.set("TICKER_KRW", json.dumps(cached))

    response = await client.get("/api/ticker/currency", params={"currencies": "KRW"})

    assert response.status_code == 200
    assert response.json()["data"] == cached
    assert fake_upbit.call_count("get_ticker_all") == 0


@pytest.mark.asyncio
async def test_ticker_currency_miss_uses_upstream(client, fake_upbit):
    fake_upbit.ticker_all["BTC"] = [make_ticker("BTC-ETH")]

    response = await client.get("/api/ticker/currency", params={"currencies": "BTC"})

    assert response.json()["data"][0]["market"] == "BTC-ETH"
    assert fake_upbit.call_count("get_ticker_all") == 1


@pytest.mark.asyncio
async def test_ticker_currency_requires_parameter(client):
    response = await client.get("/api/ticker/currency")

    assert response.json()["code"] == "4_W_P"


@pytest.mark.asyncio
async def test_ticker_by_markets(client, fake_upbit):
    fake_upbit.tickers = [make_ticker("KRW-BTC"), make_ticker("KRW-ETH")]

    response = await client.get("/api/ticker/market", params={"markets": "KRW-BTC,KRW-ETH"})
    assert [item["market"] for item in response.json()["data"]] == ["KRW-BTC", "KRW-ETH"]

    response = await client.get("/api/ticker/market", params={"markets": "KRW-NONE"})
    assert response.status_code == 404
    assert response.json() == {
        "code": "4", "title": "Not Found", "message": "Oh, I can't find it!", "data": []
    }


@pytest.mark.asyncio
async def test_upstream_failure_is_internal_server_error(client, fake_upbit):
    fake_upbit.error = UpbitAPIError("업비트 API 요청 실패 503", 503, "unavailable")

    response = await client.get("/api/ticker/currency", params={"currencies": "KRW"})

    assert response.status_code == 500
    assert response.json()["code"] == "5"


@pytest.mark.asyncio
async def test_malformed_cache_is_internal_server_error(client, fake_redis):
    await fake_redis.set("TICKER_KRW", "{broken")

    response = await client.get("/api/ticker/currency", params={"currencies": "KRW"})

    assert response.status_code == 500
    assert response.json()["code"] == "5"


@pytest.mark.asyncio
async def test_candle_list(client, fake_upbit):
    fake_upbit.candles = [{
        "market": "KRW-BTC",
        "candle_date_time_utc": "2025-08-15T11:24:00",
        "candle_date_time_kst": "2025-08-15T20:24:00",
        "opening_price": 1.0, "high_price": 2.0, "low_price": 0.5, "trade_price": 1.5,
        "timestamp": 1755257040000,
        "candle_acc_trade_price": 100.0, "candle_acc_trade_volume": 10.0,
    }]

    response = await client.get(
        "/api/candle/list", params={"market": "KRW-BTC", "candleType": "MINUTES_5", "candleCount": "3"}
    )

    assert response.json()["data"][0]["tradePrice"] == 1.5
    assert fake_upbit.calls[0] == ("get_candle_minutes", 5, "KRW-BTC", 3, None)


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [
    {"market": "KRW-BTC", "candleType": "FORTNIGHT", "candleCount": "3"},
    {"market": "KRW-BTC", "candleType": "DAYS", "candleCount": "many"},
    {"market": "KRW-BTC", "candleType": "DAYS"},
])
async def test_candle_list_bad_parameters(client, params):
    response = await client.get("/api/candle/list", params=params)

    assert response.status_code == 404
    assert response.json()["code"] == "4_W_P"


@pytest.mark.asyncio
async def test_order_book_routes(client, fake_upbit):
    fake_upbit.supported_levels = [{"market": "KRW-BTC", "supported_levels": [0, 1000]}]

    response = await client.get("/api/order-book/order-book", params={"market": "KRW-BTC"})
    assert response.json()["code"] == "4"

    response = await client.get("/api/order-book/supported-levels", params={"market": "KRW-BTC"})
    assert response.json()["data"] == [{"market": "KRW-BTC", "supportedLevelList": [0, 1000]}]

    response = await client.get("/api/order-book/unknown")
    assert response.json()["code"] == "4_W_P"


@pytest.mark.asyncio
async def test_unknown_route_is_not_found_envelope(client):
    response = await client.get("/no/such/route")

    assert response.status_code == 404
    assert response.json()["code"] == "4"


@pytest.mark.asyncio
async def test_method_not_allowed_is_envelope(client):
    response = await client.post("/api/market/all")

    body = response.json()
    assert "detail" not in body
    assert body["code"] == "4_W_P"
    assert body["title"] == "Bad Request"
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_request_log_uses_matched_route(client, caplog):
    with caplog.at_level(logging.INFO, logger="dashboard.app_factory"):
        await client.get("/api/market/unknown")

    assert any("GET /api/market/{path} - 404" in message for message in caplog.messages)


@pytest.mark.asyncio
async def test_health_and_config(client):
    response = await client.get("/health")
    assert response.json()["status"] == "healthy"

    response = await client.get("/config")
    assert "batch" in response.json()


@pytest.mark.asyncio
async def test_market_list_page(client, fake_upbit):
    fake_upbit.markets = [
        make_market("KRW-BTC", "비트코인", "Bitcoin"),
        make_market("BTC-ETH", "이더리움", "Ethereum"),
    ]
    fake_upbit.ticker_all["KRW"] = [make_ticker("KRW-BTC", 150_000_000, 2_500_000)]

    response = await client.get("/")

    assert response.status_code == 200
    assert "비트코인" in response.text
    assert "2.50M" in response.text
    assert "이더리움" not in response.text


@pytest.mark.asyncio
async def test_trade_page(client, fake_upbit):
    fake_upbit.markets = [make_market("KRW-BTC", "비트코인", "Bitcoin")]
    fake_upbit.tickers = [make_ticker("KRW-BTC")]

    response = await client.get("/trade", params={"code": "KRW-BTC"})
    assert response.status_code == 200
    assert "Bitcoin" in response.text
    assert "2025-08-15 20:24:00" in response.text
    assert "/api/order-book/order-book?market=KRW-BTC" in response.text

    response = await client.get("/trade")
    assert response.status_code == 404
    assert "4_W_P" in response.text

    response = await client.get("/trade", params={"code": "KRW-NONE"})
    assert response.status_code == 404
    assert "Not Found" in response.text
