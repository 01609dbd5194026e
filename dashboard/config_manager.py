"""
설정 관리 시스템
- 환경별 설정 관리 (개발/운영/테스트)
- DB / Redis / 업비트 API 연결 설정
- 타임아웃 값을 명시적으로 관리
"""

import os
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _env_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() == 'true'


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    file_path: str = 'dashboard.log'
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    console_enabled: bool = True


@dataclass
class DatabaseConfig:
    """데이터베이스 설정"""
    url: str = "sqlite+aiosqlite:///./dashboard.db"
    pool_size: int = 5
    echo: bool = False


@dataclass
class CacheConfig:
    """Redis 캐시 설정"""
    url: str = "redis://localhost:6379/0"
    password: Optional[str] = None
    socket_timeout: float = 5.0  # 초


@dataclass
class UpbitConfig:
    """업비트 API 설정"""
    base_url: str = "https://api.upbit.com"
    timeout_total: float = 30.0
    timeout_connect: float = 10.0
    timeout_sock_read: float = 20.0
    escape_query: bool = True


@dataclass
class BatchConfig:
    """배치 작업 설정"""
    enabled: bool = True
    ticker_interval_seconds: int = 1
    ticker_cache_expire: int = 60  # 초


@dataclass
class WebServerConfig:
    """웹 서버 설정"""
    host: str = "0.0.0.0"
    port: int = 8001
    reload: bool = False
    workers: int = 1
    cors_enabled: bool = True
    cors_origins: List[str] = field(default_factory=lambda: [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ])


@dataclass
class SystemConfig:
    """시스템 설정"""
    environment: str = "development"  # development, production, testing
    debug: bool = True


class ConfigManager:
    """설정 관리자"""

    def __init__(self, env_file: Optional[str] = None):
        self._env_file = env_file or '.env'
        self._load_environment()
        self._initialize_configs()

    def _load_environment(self):
        """환경 변수 로드"""
        if Path(self._env_file).exists():
            load_dotenv(self._env_file)
            logger.info(f"✅ 환경 설정 로드 완료: {self._env_file}")
        else:
            logger.warning(f"⚠️ 환경 파일 없음: {self._env_file} (기본값 사용)")

    def _initialize_configs(self):
        """설정 초기화"""
        environment = os.getenv('ENVIRONMENT', 'development').lower()

        self.logging = LoggingConfig(
            level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            file_path=os.getenv('LOG_FILE', 'dashboard.log'),
            console_enabled=_env_bool('LOG_CONSOLE', 'true')
        )

        self.database = DatabaseConfig(
            url=os.getenv('DB_URL', 'sqlite+aiosqlite:///./dashboard.db'),
            pool_size=int(os.getenv('DB_POOL_SIZE', '5')),
            echo=_env_bool('DB_ECHO', 'false')
        )

        self.cache = CacheConfig(
            url=os.getenv('REDIS_URL', 'redis://localhost:6379/0'),
            password=os.getenv('REDIS_PASSWORD') or None,
            socket_timeout=float(os.getenv('REDIS_SOCKET_TIMEOUT', '5'))
        )

        self.upbit = UpbitConfig(
            base_url=os.getenv('UPBIT_BASE_URL', 'https://api.upbit.com'),
            timeout_total=float(os.getenv('UPBIT_TIMEOUT_TOTAL', '30')),
            timeout_connect=float(os.getenv('UPBIT_TIMEOUT_CONNECT', '10')),
            timeout_sock_read=float(os.getenv('UPBIT_TIMEOUT_SOCK_READ', '20')),
            escape_query=_env_bool('QUERY_ESCAPE', 'true')
        )

        self.batch = BatchConfig(
            enabled=_env_bool('BATCH_ENABLED', 'true'),
            ticker_interval_seconds=int(os.getenv('TICKER_JOB_INTERVAL', '1')),
            ticker_cache_expire=int(os.getenv('TICKER_CACHE_EXPIRE', '60'))
        )

        cors_origins = os.getenv('CORS_ORIGINS')
        self.webserver = WebServerConfig(
            host=os.getenv('HOST', '0.0.0.0'),
            port=int(os.getenv('PORT', '8001')),
            reload=_env_bool('RELOAD', 'false'),
            workers=int(os.getenv('WORKERS', '1'))
        )
        if cors_origins:
            self.webserver.cors_origins = [origin.strip() for origin in cors_origins.split(',') if origin.strip()]

        self.system = SystemConfig(
            environment=environment,
            debug=_env_bool('DEBUG', 'true')
        )

        logger.info(f"⚙️ 설정 초기화 완료 - 환경: {environment}")

    def get_config_summary(self) -> Dict[str, Any]:
        """설정 요약 정보 반환"""
        return {
            "environment": self.system.environment,
            "debug": self.system.debug,
            "webserver_port": self.webserver.port,
            "database": {
                "driver": self.database.url.split("://", 1)[0],
                "pool_size": self.database.pool_size
            },
            "cache": {
                "socket_timeout": self.cache.socket_timeout
            },
            "upbit": {
                "base_url": self.upbit.base_url,
                "timeout_total": self.upbit.timeout_total,
                "escape_query": self.upbit.escape_query
            },
            "batch": {
                "enabled": self.batch.enabled,
                "ticker_interval_seconds": self.batch.ticker_interval_seconds,
                "ticker_cache_expire": self.batch.ticker_cache_expire
            }
        }

    def validate_config(self) -> Dict[str, Any]:
        """설정 유효성 검증"""
        issues = []
        warnings = []

        if not self.database.url:
            issues.append("DB_URL이 설정되지 않음")

        if not self.cache.url:
            issues.append("REDIS_URL이 설정되지 않음")

        if self.batch.ticker_interval_seconds <= 0:
            issues.append(f"티커 배치 주기가 유효하지 않음: {self.batch.ticker_interval_seconds}")

        if self.upbit.timeout_total <= 0:
            issues.append(f"업비트 API 타임아웃이 유효하지 않음: {self.upbit.timeout_total}")

        if self.system.environment == 'production' and self.system.debug:
            warnings.append("운영 환경에서 디버그 모드가 활성화됨")

        if self.batch.ticker_cache_expire < self.batch.ticker_interval_seconds:
            warnings.append("티커 캐시 만료 시간이 배치 주기보다 짧음")

        if not self.upbit.escape_query:
            warnings.append("쿼리 문자열 이스케이프가 비활성화됨")

        return {
            "valid": len(issues) == 0,
            "issues": issues,
            "warnings": warnings
        }

    def is_production(self) -> bool:
        """운영 환경 여부 확인"""
        return self.system.environment == 'production'

    def is_development(self) -> bool:
        """개발 환경 여부 확인"""
        return self.system.environment == 'development'

    def is_testing(self) -> bool:
        """테스트 환경 여부 확인"""
        return self.system.environment == 'testing'


# 전역 설정 관리자 인스턴스
config_manager = ConfigManager()
