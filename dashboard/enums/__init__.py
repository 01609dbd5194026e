"""고정 코드 테이블 모듈"""

from .market_currency import (
    MarketCurrencyCode, CURRENCY_PRIORITY, get_market_currency_type,
    get_main_currency_type_list, exist_market_currency
)
from .number_unit import NumberUnit, get_number_unit
from .response_code import ResponseCode
from .api_path_code import ApiPathCode
from .upbit_api_url_code import UpbitApiUrlCode
from .candle_unit import (
    UpbitCandleUnit, UpbitCandleTimeZone, exist_candle_unit, get_candle_unit, exist_candle_time_zone
)

__all__ = [
    'MarketCurrencyCode', 'CURRENCY_PRIORITY', 'get_market_currency_type',
    'get_main_currency_type_list', 'exist_market_currency',
    'NumberUnit', 'get_number_unit',
    'ResponseCode', 'ApiPathCode', 'UpbitApiUrlCode',
    'UpbitCandleUnit', 'UpbitCandleTimeZone', 'exist_candle_unit', 'get_candle_unit', 'exist_candle_time_zone'
]
