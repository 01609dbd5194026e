"""캔들 데이터 모델"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from ..utils.string_utils import to_camel


class CandleData(BaseModel):
    """캔들 1개 - 단위별로 없는 필드는 None"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    timestamp: int
    market: str
    candle_date_time_utc: str
    candle_date_time_kst: str
    opening_price: float
    high_price: float
    low_price: float
    trade_price: float
    candle_acc_trade_price: float
    candle_acc_trade_volume: float
    prev_closing_price: Optional[float] = None
    change_price: Optional[float] = None
    change_rate: Optional[float] = None
    unit: Optional[int] = None
    converted_trade_price: Optional[float] = None
    first_day_of_period: Optional[str] = None


def to_candle_data(item: Dict[str, Any]) -> CandleData:
    """업비트 캔들 응답 -> CandleData"""
    return CandleData(
        timestamp=item["timestamp"],
        market=item["market"],
        candle_date_time_utc=item["candle_date_time_utc"],
        candle_date_time_kst=item["candle_date_time_kst"],
        opening_price=item["opening_price"],
        high_price=item["high_price"],
        low_price=item["low_price"],
        trade_price=item["trade_price"],
        candle_acc_trade_price=item["candle_acc_trade_price"],
        candle_acc_trade_volume=item["candle_acc_trade_volume"],
        prev_closing_price=item.get("prev_closing_price"),
        change_price=item.get("change_price"),
        change_rate=item.get("change_rate"),
        unit=item.get("unit"),
        converted_trade_price=item.get("converted_trade_price"),
        first_day_of_period=item.get("first_day_of_period"),
    )
