"""현재가(Ticker) 데이터 모델"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from ..utils.string_utils import to_camel


class TickerData(BaseModel):
    """종목 현재가 스냅샷 - 응답/캐시 직렬화는 camelCase"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    market: str
    trade_date: str
    trade_time: str
    trade_date_kst: str
    trade_time_kst: str
    trade_timestamp: int
    opening_price: float
    high_price: float
    low_price: float
    trade_price: float
    prev_closing_price: float
    change: str
    change_price: float
    change_rate: float
    signed_change_price: float
    signed_change_rate: float
    trade_volume: float
    acc_trade_price: float
    acc_trade_price_24h: float
    acc_trade_volume: float
    acc_trade_volume_24h: float
    highest_52_week_price: float
    highest_52_week_date: str
    lowest_52_week_price: float
    lowest_52_week_date: str
    timestamp: int


def to_ticker_data(item: Dict[str, Any]) -> TickerData:
    """업비트 ticker 응답(snake_case) -> TickerData"""
    return TickerData(
        market=item["market"],
        trade_date=item["trade_date"],
        trade_time=item["trade_time"],
        trade_date_kst=item["trade_date_kst"],
        trade_time_kst=item["trade_time_kst"],
        trade_timestamp=item["trade_timestamp"],
        opening_price=item["opening_price"],
        high_price=item["high_price"],
        low_price=item["low_price"],
        trade_price=item["trade_price"],
        prev_closing_price=item["prev_closing_price"],
        change=item["change"],
        change_price=item["change_price"],
        change_rate=item["change_rate"],
        signed_change_price=item["signed_change_price"],
        signed_change_rate=item["signed_change_rate"],
        trade_volume=item["trade_volume"],
        acc_trade_price=item["acc_trade_price"],
        acc_trade_price_24h=item["acc_trade_price_24h"],
        acc_trade_volume=item["acc_trade_volume"],
        acc_trade_volume_24h=item["acc_trade_volume_24h"],
        highest_52_week_price=item["highest_52_week_price"],
        highest_52_week_date=item["highest_52_week_date"],
        lowest_52_week_price=item["lowest_52_week_price"],
        lowest_52_week_date=item["lowest_52_week_date"],
        timestamp=item["timestamp"],
    )
