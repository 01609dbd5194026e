"""업비트 캔들 단위 / 기준 시간대"""

from enum import Enum
from typing import Optional


class UpbitCandleUnit(Enum):
    """캔들 단위 - (key, unit, name). 분 단위가 아닌 캔들의 unit은 0"""
    SECONDS = ("SECONDS", 0, "초")
    MINUTES = ("MINUTES", 1, "1분")
    MINUTES_3 = ("MINUTES_3", 3, "3분")
    MINUTES_5 = ("MINUTES_5", 5, "5분")
    MINUTES_10 = ("MINUTES_10", 10, "10분")
    MINUTES_15 = ("MINUTES_15", 15, "15분")
    MINUTES_30 = ("MINUTES_30", 30, "30분")
    HOURS = ("HOURS", 60, "1시간")
    HOURS_4 = ("HOURS_4", 240, "4시간")
    DAYS = ("DAYS", 0, "일")
    WEEKS = ("WEEKS", 0, "주")
    MONTHS = ("MONTHS", 0, "월")
    YEARS = ("YEARS", 0, "년")

    def __init__(self, key: str, unit: int, display_name: str):
        self.key = key
        self.unit = unit
        self.display_name = display_name

    @property
    def is_minute_based(self) -> bool:
        """분봉 API(/candles/minutes/{unit})로 조회하는 단위인지"""
        return self.unit > 0


class UpbitCandleTimeZone(Enum):
    """캔들 기준 시간대"""
    UTC = "UTC"
    KST = "KST"


def exist_candle_unit(key: str) -> bool:
    return any(item.key == key for item in UpbitCandleUnit)


def get_candle_unit(key: str) -> Optional[UpbitCandleUnit]:
    for item in UpbitCandleUnit:
        if item.key == key:
            return item
    return None


def exist_candle_time_zone(time_zone: str) -> bool:
    return any(item.value == time_zone for item in UpbitCandleTimeZone)
