"""업비트 시세(Quotation) API 경로"""

from enum import Enum


class UpbitApiUrlCode(Enum):
    """업비트 API 엔드포인트 - (path, title, description)"""
    MARKET_ALL = ("/v1/market/all", "종목 코드 조회", "업비트에서 거래 가능한 종목 목록")
    TICKER = ("/v1/ticker", "종목 단위 현재가 정보", "요청 당시 종목의 스냅샷을 반환한다.")
    TICKER_ALL = ("/v1/ticker/all", "마켓 단위 현재가 정보", "마켓 단위 종목들의 스냅샷을 반환한다.")
    CANDLE_SECONDS = ("/v1/candles/seconds", "초(Second) 캔들", "초 단위로 봉 데이터를 반환한다")
    CANDLE_MINUTES = ("/v1/candles/minutes/{unit}", "분(Minute) 캔들",
                      "분 단위로 봉 데이터를 반환한다.(1, 3, 5, 10, 15, 30, 60, 240)")
    CANDLE_DAYS = ("/v1/candles/days", "일(Day) 캔들", "일 단위로 봉 데이터를 반환한다.")
    CANDLE_WEEKS = ("/v1/candles/weeks", "주(Week) 캔들", "주 단위로 봉 데이터를 반환한다.")
    CANDLE_MONTHS = ("/v1/candles/months", "월(Month) 캔들", "월 단위로 봉 데이터를 반환한다.")
    CANDLE_YEARS = ("/v1/candles/years", "년(Year) 캔들", "년 단위로 봉 데이터를 반환한다.")
    ORDER_BOOK = ("/v1/orderbook", "호가 정보", "호가 정보 조회 (원화마켓만 지원)")
    ORDER_BOOK_SUPPORTED_LEVELS = ("/v1/orderbook/supported_levels", "호가 모아보기 단위 정보 조회",
                                   "호가 모아보기 단위 정보 조회 (원화마켓만 지원)")

    def __init__(self, path: str, title: str, description: str):
        self.path = path
        self.title = title
        self.description = description

    def get_url(self, base_url: str, params: str = "") -> str:
        url = f"{base_url.rstrip('/')}{self.path}"
        if params:
            return f"{url}?{params}"
        return url

    def get_url_with_unit(self, base_url: str, unit: int, params: str = "") -> str:
        url = f"{base_url.rstrip('/')}{self.path.replace('{unit}', str(unit))}"
        if params:
            return f"{url}?{params}"
        return url
