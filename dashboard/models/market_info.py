"""마켓 정보 데이터 모델"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from ..utils.string_utils import to_camel


class MarketInfoData(BaseModel):
    """market_info 테이블 행의 응답 표현"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    market: str
    korean_name: str
    english_name: str
    warning: bool = False
    price_fluctuations: bool = False
    trading_volume_soaring: bool = False
    deposit_amount_soaring: bool = False
    global_price_differences: bool = False
    concentration_of_small_accounts: bool = False
    created_at: int
    updated_at: int
    deleted_at: Optional[int] = None


def to_market_info_data(row: Mapping[str, Any]) -> MarketInfoData:
    """DB 행 -> MarketInfoData"""
    return MarketInfoData(
        id=row["id"],
        market=row["market"],
        korean_name=row["korean_name"],
        english_name=row["english_name"],
        warning=bool(row["warning"]),
        price_fluctuations=bool(row["price_fluctuations"]),
        trading_volume_soaring=bool(row["trading_volume_soaring"]),
        deposit_amount_soaring=bool(row["deposit_amount_soaring"]),
        global_price_differences=bool(row["global_price_differences"]),
        concentration_of_small_accounts=bool(row["concentration_of_small_accounts"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row["deleted_at"],
    )
