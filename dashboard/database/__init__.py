"""데이터베이스 패키지"""

from .connection import create_engine_from_config, get_connection, test_connection
from .schema import metadata, market_info_table, init_db

__all__ = [
    'create_engine_from_config', 'get_connection', 'test_connection',
    'metadata', 'market_info_table', 'init_db'
]
