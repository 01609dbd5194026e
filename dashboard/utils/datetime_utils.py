"""날짜/시간 관련 유틸리티 함수"""

from datetime import datetime, timedelta, timezone
from typing import Optional

UTC = timezone.utc
KST = timezone(timedelta(hours=9))

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(tz=UTC)


def now_unix() -> int:
    """현재 epoch 초"""
    return int(utc_now().timestamp())


def format_epoch_ms(timestamp_ms: Optional[int], fmt: str = DATE_TIME_FORMAT) -> str:
    """밀리초 타임스탬프를 KST 문자열로 (화면 표시용)"""
    if not timestamp_ms:
        return ""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=KST).strftime(fmt)
