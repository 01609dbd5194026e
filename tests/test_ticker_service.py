import json

import pytest

from dashboard.cache.redis_service import RedisService
from dashboard.models.ticker import TickerData, to_ticker_data
from dashboard.services.ticker_service import TickerService
from tests.fakes import FakeRedis, FakeUpbitAPI, make_ticker


def _service():
    redis = FakeRedis()
    upbit = FakeUpbitAPI()
    return TickerService(RedisService(redis), upbit), redis, upbit


def _cached(markets):
    return json.dumps([to_ticker_data(make_ticker(market)).model_dump(by_alias=True) for market in markets])


@pytest.mark.asyncio
async def test_cache_hit_returns_cached_list_without_upstream_call():
    service, redis, upbit = _service()
    await redis.set("TICKER_KRW", _cached(["KRW-BTC", "KRW-ETH"]))

    result = await service.get_ticker_list_by_market_currency("KRW")

    assert [item["market"] for item in result] == ["KRW-BTC", "KRW-ETH"]
    assert "tradePrice" in result[0]
    assert upbit.call_count("get_ticker_all") == 0


@pytest.mark.asyncio
async def test_cache_miss_fetches_upstream_every_time():
    service, redis, upbit = _service()
    upbit.ticker_all["BTC"] = [make_ticker("BTC-ETH"), make_ticker("BTC-XRP"), make_ticker("BTC-ADA")]

    first = await service.get_ticker_list_by_market_currency("BTC")

    assert len(first) == 3
    assert all(isinstance(item, TickerData) for item in first)
    assert upbit.call_count("get_ticker_all") == 1

    await service.get_ticker_list_by_market_currency("BTC")

    assert upbit.call_count("get_ticker_all") == 2
    assert await redis.get("TICKER_BTC") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("cached", ["", "[]"])
async def test_empty_cache_value_is_a_miss(cached):
    service, redis, upbit = _service()
    await redis.set("TICKER_USDT", cached)

    result = await service.get_ticker_list_by_market_currency("USDT")

    assert result == []
    assert upbit.call_count("get_ticker_all") == 1


@pytest.mark.asyncio
async def test_malformed_cache_value_raises():
    service, redis, upbit = _service()
    await redis.set("TICKER_KRW", "{not json")

    with pytest.raises(json.JSONDecodeError):
        await service.get_ticker_list_by_market_currency("KRW")

    assert upbit.call_count("get_ticker_all") == 0


@pytest.mark.asyncio
async def test_upstream_error_propagates():
    service, _, upbit = _service()
    upbit.error = RuntimeError("upstream down")

    with pytest.raises(RuntimeError):
        await service.get_ticker_list_by_market_currency("KRW")


@pytest.mark.asyncio
async def test_tickers_by_markets():
    service, _, upbit = _service()
    upbit.tickers = [make_ticker("KRW-BTC"), make_ticker("KRW-ETH")]

    result = await service.get_ticker_list_by_markets(["KRW-ETH"])

    assert [item.market for item in result] == ["KRW-ETH"]
    assert await service.get_ticker_list_by_markets([]) == []
