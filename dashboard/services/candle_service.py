"""캔들 조회 서비스 - 캔들 단위별로 업비트 API 분기"""

import logging
from typing import Any, Dict, List, Optional

from config import MAX_CANDLE_COUNT
from ..enums.candle_unit import UpbitCandleUnit, get_candle_unit
from ..models.candle import CandleData, to_candle_data

logger = logging.getLogger(__name__)


class CandleService:
    """캔들 조회 서비스"""

    def __init__(self, upbit_api):
        self.upbit_api = upbit_api

    async def get_candle_data_list(
        self,
        market: str,
        candle_unit: str,
        candle_count: int,
        to: Optional[str] = None
    ) -> List[CandleData]:
        """캔들 목록 조회 - 알 수 없는 단위는 ValueError"""
        unit = get_candle_unit(candle_unit)
        if unit is None:
            raise ValueError(f"알 수 없는 캔들 단위: {candle_unit}")

        count = max(1, min(candle_count, MAX_CANDLE_COUNT))
        response = await self._get_candle_by_upbit_api(market, unit, count, to)

        if not response:
            return []

        return [to_candle_data(item) for item in response]

    async def _get_candle_by_upbit_api(
        self,
        market: str,
        unit: UpbitCandleUnit,
        count: int,
        to: Optional[str]
    ) -> List[Dict[str, Any]]:
        if unit.is_minute_based:
            return await self.upbit_api.get_candle_minutes(unit.unit, market, count, to)

        if unit is UpbitCandleUnit.SECONDS:
            return await self.upbit_api.get_candle_seconds(market, count, to)
        if unit is UpbitCandleUnit.DAYS:
            return await self.upbit_api.get_candle_days(market, count, to)
        if unit is UpbitCandleUnit.WEEKS:
            return await self.upbit_api.get_candle_weeks(market, count, to)
        if unit is UpbitCandleUnit.MONTHS:
            return await self.upbit_api.get_candle_months(market, count, to)
        return await self.upbit_api.get_candle_years(market, count, to)
