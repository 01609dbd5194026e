"""
마켓 정보 저장소
- market_info 테이블 조회/저장
- 업비트 market/all(is_details=true) 응답을 행으로 변환
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, insert, update
from sqlalchemy.ext.asyncio import AsyncEngine

from ..database.connection import get_connection
from ..database.schema import market_info_table
from ..utils.datetime_utils import now_unix

logger = logging.getLogger(__name__)

# 업비트 caution 키 -> 컬럼명
_CAUTION_COLUMNS = {
    "PRICE_FLUCTUATIONS": "price_fluctuations",
    "TRADING_VOLUME_SOARING": "trading_volume_soaring",
    "DEPOSIT_AMOUNT_SOARING": "deposit_amount_soaring",
    "GLOBAL_PRICE_DIFFERENCES": "global_price_differences",
    "CONCENTRATION_OF_SMALL_ACCOUNTS": "concentration_of_small_accounts",
}


def _event_values(item: Dict[str, Any]) -> Dict[str, bool]:
    """market_event 필드를 경고/주의 컬럼 값으로 변환"""
    market_event = item.get("market_event") or {}
    caution = market_event.get("caution") or {}

    values = {"warning": bool(market_event.get("warning", item.get("market_warning") == "CAUTION"))}
    for key, column in _CAUTION_COLUMNS.items():
        values[column] = bool(caution.get(key, False))
    return values


class MarketInfoRepository:
    """market_info 테이블 저장소"""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def find_all(self) -> List[Dict[str, Any]]:
        query = select(market_info_table).order_by(market_info_table.c.id)
        async with get_connection(self.engine) as conn:
            result = await conn.execute(query)
            return [dict(row) for row in result.mappings().all()]

    async def find_top_by_market(self, market: str) -> Optional[Dict[str, Any]]:
        query = select(market_info_table).where(market_info_table.c.market == market).limit(1)
        async with get_connection(self.engine) as conn:
            result = await conn.execute(query)
            row = result.mappings().first()
            return dict(row) if row else None

    async def find_all_by_market_like(self, pattern: str) -> List[Dict[str, Any]]:
        query = (
            select(market_info_table)
            .where(market_info_table.c.market.like(pattern))
            .order_by(market_info_table.c.id)
        )
        async with get_connection(self.engine) as conn:
            result = await conn.execute(query)
            return [dict(row) for row in result.mappings().all()]

    async def find_all_by_market_in(self, markets: List[str]) -> List[Dict[str, Any]]:
        if not markets:
            return []

        query = (
            select(market_info_table)
            .where(market_info_table.c.market.in_(markets))
            .order_by(market_info_table.c.id)
        )
        async with get_connection(self.engine) as conn:
            result = await conn.execute(query)
            return [dict(row) for row in result.mappings().all()]

    async def save_all(self, upstream_markets: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """업비트 마켓 목록 저장 - 기존 마켓은 갱신, 신규 마켓은 추가"""
        existing = {row["market"] for row in await self.find_all()}
        now = now_unix()

        inserted = 0
        updated = 0
        async with get_connection(self.engine) as conn:
            for item in upstream_markets:
                values = _event_values(item)

                if item["market"] in existing:
                    await conn.execute(
                        update(market_info_table)
                        .where(market_info_table.c.market == item["market"])
                        .values(**values, updated_at=now)
                    )
                    updated += 1
                    continue

                await conn.execute(
                    insert(market_info_table).values(
                        market=item["market"],
                        korean_name=item["korean_name"],
                        english_name=item["english_name"],
                        created_at=now,
                        updated_at=now,
                        **values,
                    )
                )
                existing.add(item["market"])
                inserted += 1

        logger.info(f"💾 마켓 정보 저장 완료 - 추가: {inserted}, 갱신: {updated}")
        return await self.find_all()
