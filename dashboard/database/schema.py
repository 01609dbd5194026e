"""market_info 테이블 정의 및 초기화"""

import logging

from sqlalchemy import MetaData, Table, Column, Integer, BigInteger, String, Boolean
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

metadata = MetaData()

# sqlite autoincrement를 위해 BigInteger는 INTEGER로 매핑
_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")

market_info_table = Table(
    "market_info",
    metadata,
    Column("id", _ID_TYPE, primary_key=True, autoincrement=True),
    Column("market", String(32), nullable=False, unique=True),
    Column("korean_name", String(100), nullable=False),
    Column("english_name", String(100), nullable=False),
    Column("warning", Boolean, nullable=False, default=False),
    Column("price_fluctuations", Boolean, nullable=False, default=False),
    Column("trading_volume_soaring", Boolean, nullable=False, default=False),
    Column("deposit_amount_soaring", Boolean, nullable=False, default=False),
    Column("global_price_differences", Boolean, nullable=False, default=False),
    Column("concentration_of_small_accounts", Boolean, nullable=False, default=False),
    Column("created_at", BigInteger, nullable=False),  # unix 초
    Column("updated_at", BigInteger, nullable=False),
    Column("deleted_at", BigInteger, nullable=True),
)


async def init_db(engine: AsyncEngine):
    """테이블 생성 (이미 있으면 건너뜀)"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("✅ 데이터베이스 초기화 완료")
    except Exception as e:
        logger.error(f"❌ 데이터베이스 초기화 실패: {str(e)}")
        raise
