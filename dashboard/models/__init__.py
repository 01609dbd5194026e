"""데이터 모델 모듈"""

from .response import ResponseObject
from .ticker import TickerData, to_ticker_data
from .market_info import MarketInfoData, to_market_info_data
from .candle import CandleData, to_candle_data
from .order_book import (
    OrderBookData, OrderBookUnitData, OrderBookSupportedLevelData,
    to_order_book_data, to_order_book_supported_level_data
)

__all__ = [
    'ResponseObject',
    'TickerData', 'to_ticker_data',
    'MarketInfoData', 'to_market_info_data',
    'CandleData', 'to_candle_data',
    'OrderBookData', 'OrderBookUnitData', 'OrderBookSupportedLevelData',
    'to_order_book_data', 'to_order_book_supported_level_data'
]
