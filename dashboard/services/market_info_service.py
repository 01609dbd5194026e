"""마켓 정보 서비스 - DB 우선, 비어 있으면 업비트에서 받아 저장"""

import logging
from typing import List, Optional

from ..models.market_info import MarketInfoData, to_market_info_data
from ..repository.market_info_repository import MarketInfoRepository

logger = logging.getLogger(__name__)


class MarketInfoService:
    """마켓 정보 서비스"""

    def __init__(self, repository: MarketInfoRepository, upbit_api):
        self.repository = repository
        self.upbit_api = upbit_api

    async def get_all_market_info_list(self) -> List[MarketInfoData]:
        rows = await self.repository.find_all()

        if rows:
            return [to_market_info_data(row) for row in rows]

        logger.info("📥 저장된 마켓 정보 없음 - 업비트에서 조회")
        response = await self.upbit_api.get_market_list(is_details=True)

        if not response:
            return []

        saved_rows = await self.repository.save_all(response)
        return [to_market_info_data(row) for row in saved_rows]

    async def get_market_info_list_by_market_currency(self, market_currency: str) -> List[MarketInfoData]:
        """마켓 통화 접두사(KRW-, BTC-, USDT-)로 조회. 저장된 정보가 없으면 전체 적재 후 필터링"""
        prefix = f"{market_currency}-"
        rows = await self.repository.find_all_by_market_like(f"{prefix}%")

        if rows:
            return [to_market_info_data(row) for row in rows]

        return [item for item in await self.get_all_market_info_list() if item.market.startswith(prefix)]

    async def get_market_info(self, market: str) -> Optional[MarketInfoData]:
        row = await self.repository.find_top_by_market(market)

        if not row:
            return None

        return to_market_info_data(row)
