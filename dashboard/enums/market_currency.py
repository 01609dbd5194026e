"""마켓 통화 구분 (KRW / BTC / USDT)"""

from enum import Enum
from typing import List, Optional


class MarketCurrencyCode(Enum):
    """마켓 기준 통화"""
    KRW = ("KRW", "원화")
    BTC = ("BTC", "BTC")
    USDT = ("USDT", "USDT")

    def __init__(self, code: str, display_name: str):
        self.code = code
        self.display_name = display_name


# 접두어 매칭 우선순위 (앞에 있을수록 우선)
CURRENCY_PRIORITY = (
    MarketCurrencyCode.KRW,
    MarketCurrencyCode.BTC,
    MarketCurrencyCode.USDT,
)


def get_market_currency_type(market_code: str) -> Optional[MarketCurrencyCode]:
    """마켓 코드 접두어로 기준 통화 판별 (예: KRW-BTC -> KRW)"""
    for currency in CURRENCY_PRIORITY:
        if market_code.startswith(currency.code):
            return currency
    return None


def get_main_currency_type_list() -> List[MarketCurrencyCode]:
    """화면 탭 / 배치 작업에 쓰이는 주요 통화 목록"""
    return list(CURRENCY_PRIORITY)


def exist_market_currency(code: str) -> bool:
    return any(currency.code == code for currency in CURRENCY_PRIORITY)
