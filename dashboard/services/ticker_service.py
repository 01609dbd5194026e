"""
티커 조회 서비스
- 마켓 통화별 티커: Redis 캐시 우선 조회, 없으면 업비트 API
- 캐시 기록은 배치 작업만 담당
"""

import json
import logging
from typing import Any, List

from config import ticker_cache_key
from ..cache.redis_service import RedisService
from ..models.ticker import TickerData, to_ticker_data

logger = logging.getLogger(__name__)


class TickerService:
    """티커 조회 서비스"""

    def __init__(self, redis_service: RedisService, upbit_api):
        self.redis_service = redis_service
        self.upbit_api = upbit_api

    async def get_ticker_list_by_market_currency(self, currency_key: str) -> List[Any]:
        """마켓 통화(KRW/BTC/USDT) 티커 목록 - 캐시 적중 시 저장된 목록을 그대로 반환"""
        cached = await self._get_ticker_list_by_cache(currency_key)
        if cached:
            return cached

        logger.debug(f"🔍 티커 캐시 미스: {currency_key}")
        response = await self.upbit_api.get_ticker_all(currency_key)

        if not response:
            return []

        return [to_ticker_data(item) for item in response]

    async def get_ticker_list_by_markets(self, markets: List[str]) -> List[TickerData]:
        """종목 코드 목록으로 티커 조회 (항상 업비트 API)"""
        if not markets:
            return []

        response = await self.upbit_api.get_ticker(markets)

        if not response:
            return []

        return [to_ticker_data(item) for item in response]

    async def _get_ticker_list_by_cache(self, currency_key: str) -> List[Any]:
        result = await self.redis_service.get(ticker_cache_key(currency_key))

        if not result:
            return []

        # 손상된 캐시 값은 JSONDecodeError로 그대로 전파
        ticker_list = json.loads(result)
        if not isinstance(ticker_list, list):
            return []

        return ticker_list
