"""서비스 패키지"""

from .ticker_service import TickerService
from .market_info_service import MarketInfoService
from .candle_service import CandleService
from .order_book_service import OrderBookService
from .batch_service import BatchService
from .scheduler import BatchJobScheduler

__all__ = [
    'TickerService', 'MarketInfoService', 'CandleService', 'OrderBookService',
    'BatchService', 'BatchJobScheduler'
]
