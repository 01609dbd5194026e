"""
데이터베이스 연결 관리
- 비동기 엔진 생성 (운영: postgresql+asyncpg, 개발/테스트: sqlite+aiosqlite)
- 연결 테스트
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncConnection

from ..config_manager import DatabaseConfig

logger = logging.getLogger(__name__)


def create_engine_from_config(db_config: DatabaseConfig) -> AsyncEngine:
    """설정으로부터 비동기 엔진 생성"""
    options = {
        "echo": db_config.echo,  # SQL 쿼리 로깅 (개발시 True)
        "pool_pre_ping": True,  # 연결 상태 확인
    }

    # sqlite는 연결 풀 크기 옵션을 받지 않음
    if not db_config.url.startswith("sqlite"):
        options.update(
            pool_size=db_config.pool_size,
            max_overflow=db_config.pool_size * 2,
            pool_timeout=30,
            pool_recycle=3600,
        )

    engine = create_async_engine(db_config.url, **options)
    logger.info(f"🗄️ 데이터베이스 엔진 생성: {db_config.url.split('://', 1)[0]}")
    return engine


@asynccontextmanager
async def get_connection(engine: AsyncEngine) -> AsyncGenerator[AsyncConnection, None]:
    """트랜잭션 연결 컨텍스트 매니저 - 예외 시 롤백 후 재발생"""
    async with engine.connect() as conn:
        try:
            yield conn
            await conn.commit()
        except Exception as e:
            await conn.rollback()
            logger.error(f"데이터베이스 오류: {str(e)}")
            raise


async def test_connection(engine: AsyncEngine) -> bool:
    """데이터베이스 연결 테스트"""
    try:
        async with get_connection(engine) as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("✅ 데이터베이스 연결 테스트 성공")
        return True
    except Exception as e:
        logger.error(f"❌ 데이터베이스 연결 테스트 실패: {str(e)}")
        return False
