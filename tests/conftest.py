import os

# 설정 관리자 생성 전에 테스트 환경 고정
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ["LOG_FILE"] = ""
os.environ["BATCH_ENABLED"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dashboard.app_factory import create_testing_app
from dashboard.config_manager import DatabaseConfig
from dashboard.database.connection import create_engine_from_config
from dashboard.database.schema import init_db
from tests.fakes import FakeRedis, FakeUpbitAPI


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def fake_upbit() -> FakeUpbitAPI:
    return FakeUpbitAPI()


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_engine_from_config(DatabaseConfig(url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"))
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def app(fake_redis, fake_upbit, db_engine):
    application = create_testing_app()
    application.state.redis = fake_redis
    application.state.upbit_api = fake_upbit
    application.state.db_engine = db_engine
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
