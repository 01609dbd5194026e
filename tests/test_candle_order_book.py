import pytest

from dashboard.services.candle_service import CandleService
from dashboard.services.order_book_service import OrderBookService
from tests.fakes import FakeUpbitAPI

CANDLE = {
    "market": "KRW-BTC",
    "candle_date_time_utc": "2025-08-15T11:24:00",
    "candle_date_time_kst": "2025-08-15T20:24:00",
    "opening_price": 100.0,
    "high_price": 110.0,
    "low_price": 95.0,
    "trade_price": 105.0,
    "timestamp": 1755257040000,
    "candle_acc_trade_price": 1_000_000.0,
    "candle_acc_trade_volume": 10.0,
    "unit": 1,
}


@pytest.mark.asyncio
@pytest.mark.parametrize("candle_unit,method,unit", [
    ("SECONDS", "get_candle_seconds", None),
    ("MINUTES", "get_candle_minutes", 1),
    ("MINUTES_15", "get_candle_minutes", 15),
    ("HOURS_4", "get_candle_minutes", 240),
    ("DAYS", "get_candle_days", None),
    ("WEEKS", "get_candle_weeks", None),
    ("MONTHS", "get_candle_months", None),
    ("YEARS", "get_candle_years", None),
])
async def test_candle_unit_dispatch(candle_unit, method, unit):
    upbit = FakeUpbitAPI()
    upbit.candles = [CANDLE]

    result = await CandleService(upbit).get_candle_data_list("KRW-BTC", candle_unit, 10)

    assert upbit.calls[0][0] == method
    if unit is not None:
        assert upbit.calls[0][1] == unit
    assert result[0].trade_price == 105.0
    assert result[0].model_dump(by_alias=True)["candleDateTimeKst"] == "2025-08-15T20:24:00"


@pytest.mark.asyncio
async def test_unknown_candle_unit_raises():
    with pytest.raises(ValueError):
        await CandleService(FakeUpbitAPI()).get_candle_data_list("KRW-BTC", "FORTNIGHT", 10)


@pytest.mark.asyncio
async def test_candle_count_is_clamped():
    upbit = FakeUpbitAPI()

    assert await CandleService(upbit).get_candle_data_list("KRW-BTC", "DAYS", 1000, "2025-08-15 00:00:00") == []
    assert upbit.calls[0] == ("get_candle_days", "KRW-BTC", 200, "2025-08-15 00:00:00")


def _order_book(market):
    return {
        "market": market,
        "timestamp": 1755257040000,
        "total_ask_size": 5.0,
        "total_bid_size": 7.0,
        "orderbook_units": [
            {"ask_price": 101.0, "bid_price": 100.0, "ask_size": 1.0, "bid_size": 2.0},
        ],
        "level": 0,
    }


@pytest.mark.asyncio
async def test_order_book_picks_requested_market():
    upbit = FakeUpbitAPI()
    upbit.order_books = [_order_book("KRW-ETH"), _order_book("KRW-BTC")]

    order_book = await OrderBookService(upbit).get_order_book("KRW-BTC", 1000)

    assert order_book.market == "KRW-BTC"
    assert order_book.order_book_unit_list[0].ask_price == 101.0
    assert upbit.calls[0] == ("get_order_book", ("KRW-BTC",), 1000)


@pytest.mark.asyncio
async def test_order_book_missing_market():
    upbit = FakeUpbitAPI()
    upbit.order_books = [_order_book("KRW-ETH")]

    assert await OrderBookService(upbit).get_order_book("KRW-BTC") is None


@pytest.mark.asyncio
async def test_supported_levels():
    upbit = FakeUpbitAPI()
    upbit.supported_levels = [{"market": "KRW-BTC", "supported_levels": [0, 10000, 100000]}]

    result = await OrderBookService(upbit).get_order_book_supported_levels("KRW-BTC")

    assert result[0].supported_level_list == [0, 10000, 100000]
