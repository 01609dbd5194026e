"""
애플리케이션 생명주기 관리 모듈
- 시작 시 DB 엔진 / Redis / 업비트 클라이언트 / 배치 스케줄러 생성 후 app.state에 보관
- 종료 시 역순으로 정리
"""

import logging
from contextlib import asynccontextmanager

from api_client import UpbitAPI
from .cache.redis_connection import RedisConnectionManager
from .cache.redis_service import RedisService
from .config_manager import config_manager
from .database.connection import create_engine_from_config, test_connection
from .database.schema import init_db
from .services.batch_service import BatchService
from .services.scheduler import BatchJobScheduler

logger = logging.getLogger(__name__)


class DatabaseManager:
    """데이터베이스 엔진 생성 및 스키마 초기화"""

    @staticmethod
    async def initialize(app):
        engine = create_engine_from_config(config_manager.database)
        app.state.db_engine = engine

        if not await test_connection(engine):
            raise RuntimeError("데이터베이스 연결 실패")

        await init_db(engine)

    @staticmethod
    async def dispose(app):
        engine = getattr(app.state, "db_engine", None)
        if engine is not None:
            await engine.dispose()
            logger.info("🗄️ 데이터베이스 엔진 종료")


class CacheManager:
    """Redis 연결 생성 및 종료"""

    @staticmethod
    async def initialize(app):
        connection = RedisConnectionManager(config_manager.cache)
        app.state.redis_connection = connection
        app.state.redis = await connection.initialize()

    @staticmethod
    async def close(app):
        connection = getattr(app.state, "redis_connection", None)
        if connection is not None:
            await connection.close()


class ServiceManager:
    """업비트 클라이언트 및 배치 스케줄러 관리"""

    @staticmethod
    async def start_services(app):
        app.state.upbit_api = UpbitAPI(config_manager.upbit)

        redis_service = RedisService(app.state.redis)
        batch_service = BatchService(
            redis_service,
            app.state.upbit_api,
            config_manager.batch.ticker_cache_expire
        )
        app.state.scheduler = BatchJobScheduler(redis_service, batch_service, config_manager.batch)

        if not config_manager.batch.enabled:
            logger.info("⏸️ 배치 작업 비활성화 (BATCH_ENABLED=false)")
            return

        if await app.state.scheduler.start_all():
            await app.state.scheduler.run_now()

    @staticmethod
    async def stop_services(app):
        scheduler = getattr(app.state, "scheduler", None)
        if scheduler is not None and scheduler.is_running:
            await scheduler.stop_all()

        upbit_api = getattr(app.state, "upbit_api", None)
        if upbit_api is not None:
            await upbit_api.close()


class ApplicationLifecycle:
    """애플리케이션 생명주기 총괄 관리"""

    def __init__(self):
        self.db_manager = DatabaseManager()
        self.cache_manager = CacheManager()
        self.service_manager = ServiceManager()

    async def startup(self, app):
        """애플리케이션 시작 시 초기화 작업"""
        logger.info("🚀 업비트 마켓 대시보드 시작")

        await self.db_manager.initialize(app)
        await self.cache_manager.initialize(app)
        await self.service_manager.start_services(app)

        logger.info("✅ 초기화 완료")

    async def shutdown(self, app):
        """애플리케이션 종료 시 정리 작업"""
        logger.info("🛑 업비트 마켓 대시보드 종료")

        try:
            await self.service_manager.stop_services(app)
        finally:
            await self.cache_manager.close(app)
            await self.db_manager.dispose(app)


# 전역 인스턴스
app_lifecycle = ApplicationLifecycle()


@asynccontextmanager
async def lifespan_manager(app):
    """FastAPI 애플리케이션 생명주기 관리"""
    try:
        await app_lifecycle.startup(app)
        yield
    except Exception as e:
        logger.error(f"❌ 시스템 시작 중 오류: {str(e)}")
        raise
    finally:
        await app_lifecycle.shutdown(app)
