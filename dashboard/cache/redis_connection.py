"""
Redis 연결 관리
- 애플리케이션 생명주기에서 생성/종료
- 소켓 타임아웃을 설정으로 명시
"""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.asyncio import Redis

from ..config_manager import CacheConfig

logger = logging.getLogger(__name__)


class RedisConnectionManager:
    """Redis 연결 관리자 (initialize()가 반환한 클라이언트를 app.state에 보관)"""

    def __init__(self, cache_config: CacheConfig):
        self._config = cache_config
        self._redis: Optional[Redis] = None

    async def initialize(self) -> Redis:
        if self._redis is None:
            logger.info(f"🔄 Redis 연결 시도: {self._config.url}")
            self._redis = redis.from_url(
                self._config.url,
                password=self._config.password,
                socket_timeout=self._config.socket_timeout,
                socket_connect_timeout=self._config.socket_timeout,
                decode_responses=True,
            )
            await self._redis.ping()
            logger.info("✅ Redis 연결 성공")
        return self._redis

    async def close(self) -> None:
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None
            logger.info("🛑 Redis 연결 종료")
