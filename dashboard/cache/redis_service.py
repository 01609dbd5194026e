"""Redis 명령 래퍼 - 만료 시간 처리 규칙 포함"""

import logging
from typing import Dict, List, Optional, Set

logger = logging.getLogger(__name__)


class RedisService:
    """Redis 캐시 서비스 (클라이언트는 외부에서 주입)"""

    def __init__(self, client):
        self.client = client

    async def exists(self, key: str) -> bool:
        return bool(await self.client.exists(key))

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set(self, key: str, value: str, expire: int = 0) -> bool:
        """값 저장 - expire가 0이면 만료 없음"""
        await self.client.set(key, value)

        if expire == 0:
            return True

        await self.client.expire(key, expire)
        return True

    async def hset(self, key: str, mapping: Dict[str, str], expire: int = 0) -> bool:
        """해시 저장 - 만료가 아직 없는 키에만 expire 적용"""
        await self.client.hset(key, mapping=mapping)

        if expire == 0:
            return True

        ttl = await self.client.ttl(key)
        if ttl == -1:
            await self.client.expire(key, expire)

        return True

    async def hget(self, key: str, field: str) -> Optional[str]:
        return await self.client.hget(key, field)

    async def sadd(self, key: str, values: List[str], expire: int = 0) -> bool:
        """집합 추가 - 만료가 아직 없는 키에만 expire 적용"""
        if values:
            await self.client.sadd(key, *values)

        if expire == 0:
            return True

        ttl = await self.client.ttl(key)
        if ttl == -1:
            await self.client.expire(key, expire)

        return True

    async def smembers(self, key: str) -> Set[str]:
        return set(await self.client.smembers(key))
