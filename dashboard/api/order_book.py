"""호가 API 라우터"""

from fastapi import APIRouter, Depends
from typing import Optional
import logging

from ..dependencies import get_order_book_service
from ..enums.api_path_code import ApiPathCode
from ..enums.response_code import ResponseCode
from ..services.order_book_service import OrderBookService
from ..utils.response_utils import ok, error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["order-book"])


@router.get("/api/order-book/{path}")
async def order_book_api(
    path: str,
    market: Optional[str] = None,
    level: Optional[str] = None,
    service: OrderBookService = Depends(get_order_book_service)
):
    """호가 조회 (order-book: 호가, supported-levels: 모아보기 단위)"""
    if path == ApiPathCode.ORDER_BOOK.path:
        return await _get_order_book(service, market, level)

    if path == ApiPathCode.ORDER_BOOK_SUPPORTED_LEVEL.path:
        if not market:
            return error(ResponseCode.WRONG_PARAMETER)

        supported_level_list = await service.get_order_book_supported_levels(market)
        return ok(supported_level_list)

    return error(ResponseCode.WRONG_PARAMETER)


async def _get_order_book(service: OrderBookService, market: Optional[str], level: Optional[str]):
    if not market:
        return error(ResponseCode.WRONG_PARAMETER)

    try:
        level_number = float(level) if level else 0
    except ValueError:
        return error(ResponseCode.WRONG_PARAMETER)

    order_book = await service.get_order_book(market, level_number)

    if not order_book:
        return error(ResponseCode.NOT_FOUND)

    return ok(order_book)
