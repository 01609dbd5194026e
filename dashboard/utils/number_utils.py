"""숫자 / 가격 계산 유틸리티 (Decimal 기반)"""

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_CEILING
from typing import Any

from ..enums.number_unit import get_number_unit

logger = logging.getLogger(__name__)


def is_number(value: Any) -> bool:
    """숫자 또는 유한한 숫자로 변환 가능한 문자열인지 ("nan", "inf" 제외)"""
    if value is None or isinstance(value, bool):
        return False

    if isinstance(value, (int, float, Decimal)):
        return True

    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False

    return False


def get_decimal_depth(value: float) -> int:
    """소수점 자릿수"""
    if value == 0:
        return 0

    exponent = Decimal(str(value)).normalize().as_tuple().exponent
    return max(0, -exponent)


def divide_ceil(value: float, divide_unit: float = 0) -> float:
    if value == 0:
        return 0

    if divide_unit == 0:
        return float(Decimal(str(value)))

    return float(Decimal(str(value)) / Decimal(str(divide_unit)))


def ceil_price(value: float, unit: int = 0) -> float:
    """소수점 unit 자리에서 올림"""
    if value == 0:
        return 0

    try:
        quantum = Decimal(1).scaleb(-unit)
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_CEILING))
    except InvalidOperation as e:
        logger.error(f"❌ 가격 올림 실패: value={value}, unit={unit} - {str(e)}")
        return 0


def subtract_price(price: float, base_price: float) -> float:
    return float(Decimal(str(price)) - Decimal(str(base_price)))


def calculate_rate(price: float, base_price: float) -> float:
    """기준가 대비 변동률 (%)"""
    if not price or not base_price:
        return 0

    price_decimal = Decimal(str(price))
    base_decimal = Decimal(str(base_price))

    return float((price_decimal - base_decimal) / abs(base_decimal) * 100)


def calculate_percent(price: float, base_price: float) -> float:
    """기준가 대비 비율 (%)"""
    if not price or not base_price:
        return 0

    return float(Decimal(str(price)) / Decimal(str(base_price)) * 100)


def number_with_commas(num: float, digits: int) -> str:
    """천 단위 콤마 + 고정 소수 자릿수"""
    if num == 0:
        return "0"

    return f"{num:,.{digits}f}"


def get_decimal_place_value(decimal_place: int) -> float:
    """소수점 자릿수에 해당하는 최소 단위 (0 -> 1, 2 -> 0.01). 범위 밖은 1"""
    if 0 <= decimal_place <= 10:
        return float(Decimal(1).scaleb(-decimal_place))
    return 1


def format_with_unit(value: float, digits: int = 2) -> str:
    """숫자를 K/M/B/T 단위로 축약 (예: 2500000 -> 2.50M)"""
    number_unit = get_number_unit(value)

    if number_unit.threshold == 0:
        return number_with_commas(value, digits)

    scaled = Decimal(str(value)) / Decimal(number_unit.threshold)
    return f"{number_with_commas(float(scaled), digits)}{number_unit.unit}"
