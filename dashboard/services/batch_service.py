"""배치 작업 본문 - 마켓 통화별 티커를 Redis 캐시에 적재"""

import json
import logging
from typing import List

from config import ticker_cache_key
from ..cache.redis_service import RedisService
from ..enums.market_currency import get_main_currency_type_list
from ..models.ticker import TickerData, to_ticker_data

logger = logging.getLogger(__name__)


class BatchService:
    """배치 서비스"""

    def __init__(self, redis_service: RedisService, upbit_api, ticker_cache_expire: int = 60):
        self.redis_service = redis_service
        self.upbit_api = upbit_api
        self.ticker_cache_expire = ticker_cache_expire

    async def execute_update_market_currency_ticker_to_cache(self) -> int:
        """KRW/BTC/USDT 티커를 조회해 TICKER_<통화> 키에 저장, 저장한 티커 수 반환"""
        total = 0

        for currency in get_main_currency_type_list():
            ticker_list = await self._get_ticker_by_upbit_api(currency.code)
            payload = json.dumps([ticker.model_dump(by_alias=True) for ticker in ticker_list])

            await self.redis_service.set(ticker_cache_key(currency.code), payload, self.ticker_cache_expire)
            total += len(ticker_list)

        logger.debug(f"📦 티커 캐시 갱신 완료: {total}건")
        return total

    async def _get_ticker_by_upbit_api(self, currency_code: str) -> List[TickerData]:
        response = await self.upbit_api.get_ticker_all(currency_code)

        if not response:
            return []

        return [to_ticker_data(item) for item in response]
