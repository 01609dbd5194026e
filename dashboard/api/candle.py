"""캔들 API 라우터"""

from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging

from ..dependencies import get_candle_service
from ..enums.api_path_code import ApiPathCode
from ..enums.response_code import ResponseCode
from ..services.candle_service import CandleService
from ..utils.response_utils import ok, error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["candle"])


@router.get("/api/candle/{path}")
async def candle_api(
    path: str,
    market: Optional[str] = None,
    candle_type: Optional[str] = Query(None, alias="candleType"),
    candle_count: Optional[str] = Query(None, alias="candleCount"),
    to: Optional[str] = None,
    service: CandleService = Depends(get_candle_service)
):
    """캔들 목록 조회 (list)"""
    if path != ApiPathCode.CANDLE_LIST.path:
        return error(ResponseCode.WRONG_PARAMETER)

    if not market or not candle_type or not candle_count:
        return error(ResponseCode.WRONG_PARAMETER)

    try:
        count = int(candle_count)
        candle_list = await service.get_candle_data_list(market, candle_type, count, to or None)
    except ValueError as e:
        logger.warning(f"⚠️ 캔들 조회 파라미터 오류: {str(e)}")
        return error(ResponseCode.WRONG_PARAMETER)

    return ok(candle_list)
