"""
FastAPI 의존성 제공자
- 생명주기에서 만든 공유 자원(app.state)을 요청 단위 서비스로 전달
"""

from fastapi import Depends, Request

from .cache.redis_service import RedisService
from .repository.market_info_repository import MarketInfoRepository
from .services.ticker_service import TickerService
from .services.market_info_service import MarketInfoService
from .services.candle_service import CandleService
from .services.order_book_service import OrderBookService


def get_redis_service(request: Request) -> RedisService:
    return RedisService(request.app.state.redis)


def get_upbit_api(request: Request):
    return request.app.state.upbit_api


def get_market_info_repository(request: Request) -> MarketInfoRepository:
    return MarketInfoRepository(request.app.state.db_engine)


def get_ticker_service(
    redis_service: RedisService = Depends(get_redis_service),
    upbit_api=Depends(get_upbit_api)
) -> TickerService:
    return TickerService(redis_service, upbit_api)


def get_market_info_service(
    repository: MarketInfoRepository = Depends(get_market_info_repository),
    upbit_api=Depends(get_upbit_api)
) -> MarketInfoService:
    return MarketInfoService(repository, upbit_api)


def get_candle_service(upbit_api=Depends(get_upbit_api)) -> CandleService:
    return CandleService(upbit_api)


def get_order_book_service(upbit_api=Depends(get_upbit_api)) -> OrderBookService:
    return OrderBookService(upbit_api)
