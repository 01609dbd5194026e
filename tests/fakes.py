"""테스트용 Redis / 업비트 API 대체 객체와 샘플 레코드"""

from typing import Any, Dict, List, Optional


class FakeRedis:
    """redis.asyncio 클라이언트 대체 (문자열 / 해시 / 집합 + TTL)"""

    def __init__(self) -> None:
        self._strings: Dict[str, str] = {}
        self._hashes: Dict[str, Dict[str, str]] = {}
        self._sets: Dict[str, set] = {}
        self._ttls: Dict[str, int] = {}
        self.get_calls = 0

    def _has(self, key: str) -> bool:
        return key in self._strings or key in self._hashes or key in self._sets

    async def get(self, key: str) -> Optional[str]:
        self.get_calls += 1
        return self._strings.get(key)

    async def set(self, key: str, value: str) -> bool:
        self._strings[key] = value
        self._ttls.pop(key, None)
        return True

    async def hset(self, key: str, mapping: Dict[str, str]) -> int:
        self._hashes.setdefault(key, {}).update(mapping)
        return len(mapping)

    async def hget(self, key: str, field: str) -> Optional[str]:
        return self._hashes.get(key, {}).get(field)

    async def sadd(self, key: str, *values: str) -> int:
        self._sets.setdefault(key, set()).update(values)
        return len(values)

    async def smembers(self, key: str) -> set:
        return set(self._sets.get(key, set()))

    async def expire(self, key: str, ttl: int) -> bool:
        if not self._has(key):
            return False
        self._ttls[key] = int(ttl)
        return True

    async def ttl(self, key: str) -> int:
        if not self._has(key):
            return -2
        return self._ttls.get(key, -1)

    async def exists(self, key: str) -> int:
        return int(self._has(key))

    async def delete(self, key: str) -> int:
        existed = int(self._has(key))
        self._strings.pop(key, None)
        self._hashes.pop(key, None)
        self._sets.pop(key, None)
        self._ttls.pop(key, None)
        return existed


class FakeUpbitAPI:
    """UpbitAPI 대체 - 응답 주입 및 호출 기록"""

    def __init__(self) -> None:
        self.ticker_all: Dict[str, List[Dict[str, Any]]] = {}
        self.tickers: List[Dict[str, Any]] = []
        self.markets: List[Dict[str, Any]] = []
        self.candles: List[Dict[str, Any]] = []
        self.order_books: List[Dict[str, Any]] = []
        self.supported_levels: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None
        self.calls: List[tuple] = []

    def _record(self, *call):
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    def call_count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)

    async def get_market_list(self, is_details: bool = True):
        self._record("get_market_list", is_details)
        return self.markets

    async def get_ticker_all(self, quote_currencies: str):
        self._record("get_ticker_all", quote_currencies)
        return self.ticker_all.get(quote_currencies, [])

    async def get_ticker(self, markets: List[str]):
        self._record("get_ticker", tuple(markets))
        return [item for item in self.tickers if item["market"] in markets]

    async def get_candle_seconds(self, market, count, to=None):
        self._record("get_candle_seconds", market, count, to)
        return self.candles

    async def get_candle_minutes(self, unit, market, count, to=None):
        self._record("get_candle_minutes", unit, market, count, to)
        return self.candles

    async def get_candle_days(self, market, count, to=None):
        self._record("get_candle_days", market, count, to)
        return self.candles

    async def get_candle_weeks(self, market, count, to=None):
        self._record("get_candle_weeks", market, count, to)
        return self.candles

    async def get_candle_months(self, market, count, to=None):
        self._record("get_candle_months", market, count, to)
        return self.candles

    async def get_candle_years(self, market, count, to=None):
        self._record("get_candle_years", market, count, to)
        return self.candles

    async def get_order_book(self, markets, level=0):
        self._record("get_order_book", tuple(markets), level)
        return self.order_books

    async def get_order_book_supported_levels(self, markets):
        self._record("get_order_book_supported_levels", tuple(markets))
        return self.supported_levels

    async def close(self):
        pass


def make_ticker(market: str, trade_price: float = 1000.0, acc_trade_price_24h: float = 2_500_000.0) -> Dict[str, Any]:
    """업비트 ticker 응답 형식의 레코드"""
    return {
        "market": market,
        "trade_date": "20250815",
        "trade_time": "112400",
        "trade_date_kst": "20250815",
        "trade_time_kst": "202400",
        "trade_timestamp": 1755257040000,
        "opening_price": trade_price * 0.98,
        "high_price": trade_price * 1.05,
        "low_price": trade_price * 0.95,
        "trade_price": trade_price,
        "prev_closing_price": trade_price * 0.98,
        "change": "RISE",
        "change_price": trade_price * 0.02,
        "change_rate": 0.0204,
        "signed_change_price": trade_price * 0.02,
        "signed_change_rate": 0.0204,
        "trade_volume": 0.5,
        "acc_trade_price": acc_trade_price_24h / 2,
        "acc_trade_price_24h": acc_trade_price_24h,
        "acc_trade_volume": 1200.0,
        "acc_trade_volume_24h": 2400.0,
        "highest_52_week_price": trade_price * 2,
        "highest_52_week_date": "2025-03-01",
        "lowest_52_week_price": trade_price / 2,
        "lowest_52_week_date": "2024-09-01",
        "timestamp": 1755257040123,
    }


def make_market(market: str, korean_name: str, english_name: str, warning: bool = False) -> Dict[str, Any]:
    """업비트 market/all?is_details=true 응답 형식의 레코드"""
    return {
        "market": market,
        "korean_name": korean_name,
        "english_name": english_name,
        "market_event": {
            "warning": warning,
            "caution": {
                "PRICE_FLUCTUATIONS": False,
                "TRADING_VOLUME_SOARING": True,
                "DEPOSIT_AMOUNT_SOARING": False,
                "GLOBAL_PRICE_DIFFERENCES": False,
                "CONCENTRATION_OF_SMALL_ACCOUNTS": False,
            },
        },
    }
