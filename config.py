"""시스템 설정 및 상수 정의"""

from datetime import datetime, timezone

# 🚀 서버 시작 시간
SERVER_START_TIME = datetime.now(timezone.utc).timestamp()

APP_NAME = "Upbit Market Dashboard"
APP_VERSION = "1.0.0"

# API 설정
UPBIT_BASE = "https://api.upbit.com"

# 캐시 키 설정
TICKER_KEY_PREFIX = "TICKER_"
BATCH_JOB_STATUS_KEY = "batch-job-status"  # 배치 작업 상태 해시 키

# 배치 작업 상태값
JOB_STATUS_STAY = "stay"
JOB_STATUS_WORK = "work"

# 스케줄러 타임존
SCHEDULER_TIMEZONE = "Asia/Seoul"

# 캔들 조회 제한
MAX_CANDLE_COUNT = 200  # Upbit candles limit


def ticker_cache_key(currency_code: str) -> str:
    """마켓 통화별 티커 캐시 키 생성"""
    return f"{TICKER_KEY_PREFIX}{currency_code}"
