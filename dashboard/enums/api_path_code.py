"""대시보드 API 경로 정의"""

from enum import Enum


class ApiPathCode(Enum):
    """API 경로 - (path, full_path, description)"""
    MARKET_ALL = ("all", "/api/market/all", "전체 마켓 정보를 조회합니다.")
    MARKET_INFO = ("info", "/api/market/info", "특정 마켓 정보를 조회합니다.")

    TICKER_CURRENCY = ("currency", "/api/ticker/currency", "마켓 단위 현재가 정보")
    TICKER_MARKET_CODE = ("market", "/api/ticker/market", "마켓 코드별 현재가 정보")

    CANDLE_LIST = ("list", "/api/candle/list", "캔들 정보")

    ORDER_BOOK = ("order-book", "/api/order-book/order-book", "호가 정보")
    ORDER_BOOK_SUPPORTED_LEVEL = ("supported-levels", "/api/order-book/supported-levels", "호가 모아보기 단위 정보")

    def __init__(self, path: str, full_path: str, description: str):
        self.path = path
        self.full_path = full_path
        self.description = description

    def get_url(self, params: str = "") -> str:
        if params:
            return f"{self.full_path}?{params}"
        return self.full_path
