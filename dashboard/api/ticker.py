"""현재가(Ticker) API 라우터"""

from fastapi import APIRouter, Depends
from typing import Optional
import logging

from ..dependencies import get_ticker_service
from ..enums.api_path_code import ApiPathCode
from ..enums.response_code import ResponseCode
from ..services.ticker_service import TickerService
from ..utils.response_utils import ok, error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ticker"])


@router.get("/api/ticker/{path}")
async def ticker_api(
    path: str,
    currencies: Optional[str] = None,
    markets: Optional[str] = None,
    service: TickerService = Depends(get_ticker_service)
):
    """현재가 조회 (currency: 마켓 통화 단위, market: 종목 코드 목록)"""
    if path == ApiPathCode.TICKER_CURRENCY.path:
        if not currencies:
            return error(ResponseCode.WRONG_PARAMETER)

        ticker_list = await service.get_ticker_list_by_market_currency(currencies)
        return ok(ticker_list)

    if path == ApiPathCode.TICKER_MARKET_CODE.path:
        if not markets:
            return error(ResponseCode.WRONG_PARAMETER)

        market_list = [market.strip() for market in markets.split(",") if market.strip()]
        ticker_list = await service.get_ticker_list_by_markets(market_list)

        if not ticker_list:
            return error(ResponseCode.NOT_FOUND, [])

        return ok(ticker_list)

    return error(ResponseCode.WRONG_PARAMETER)
