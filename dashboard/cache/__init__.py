"""캐시 패키지"""

from .redis_connection import RedisConnectionManager
from .redis_service import RedisService

__all__ = ['RedisConnectionManager', 'RedisService']
