"""마켓 정보 API 라우터"""

from fastapi import APIRouter, Depends
from typing import Optional
import logging

from ..dependencies import get_market_info_service
from ..enums.api_path_code import ApiPathCode
from ..enums.response_code import ResponseCode
from ..services.market_info_service import MarketInfoService
from ..utils.response_utils import ok, error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["market"])


@router.get("/api/market/{path}")
async def market_api(
    path: str,
    code: Optional[str] = None,
    service: MarketInfoService = Depends(get_market_info_service)
):
    """마켓 정보 조회 (all: 전체, info: 단일 마켓)"""
    if path == ApiPathCode.MARKET_ALL.path:
        market_info_list = await service.get_all_market_info_list()
        return ok(market_info_list)

    if path == ApiPathCode.MARKET_INFO.path:
        return await _get_market_info(service, code)

    return error(ResponseCode.WRONG_PARAMETER)


async def _get_market_info(service: MarketInfoService, code: Optional[str]):
    if not code:
        return error(ResponseCode.WRONG_PARAMETER)

    market_info = await service.get_market_info(code)

    if not market_info:
        return error(ResponseCode.NOT_FOUND)

    return ok(market_info)
