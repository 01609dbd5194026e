"""호가 데이터 모델"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict

from ..utils.string_utils import to_camel

_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OrderBookUnitData(BaseModel):
    model_config = _MODEL_CONFIG

    ask_price: float
    bid_price: float
    ask_size: float
    bid_size: float


class OrderBookData(BaseModel):
    """마켓 호가 스냅샷"""
    model_config = _MODEL_CONFIG

    market: str
    timestamp: int
    total_ask_size: float
    total_bid_size: float
    order_book_unit_list: List[OrderBookUnitData]
    level: float = 0


class OrderBookSupportedLevelData(BaseModel):
    """호가 모아보기 지원 단위"""
    model_config = _MODEL_CONFIG

    market: str
    supported_level_list: List[float]


def to_order_book_data(item: Dict[str, Any]) -> OrderBookData:
    """업비트 orderbook 응답 -> OrderBookData"""
    return OrderBookData(
        market=item["market"],
        timestamp=item["timestamp"],
        total_ask_size=item["total_ask_size"],
        total_bid_size=item["total_bid_size"],
        order_book_unit_list=[
            OrderBookUnitData(
                ask_price=unit["ask_price"],
                bid_price=unit["bid_price"],
                ask_size=unit["ask_size"],
                bid_size=unit["bid_size"],
            )
            for unit in item.get("orderbook_units", [])
        ],
        level=item.get("level", 0),
    )


def to_order_book_supported_level_data(item: Dict[str, Any]) -> OrderBookSupportedLevelData:
    return OrderBookSupportedLevelData(
        market=item["market"],
        supported_level_list=item.get("supported_levels", []),
    )
