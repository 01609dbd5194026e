"""숫자 단위 (K / M / B / T) 판별"""

from enum import Enum


class NumberUnit(Enum):
    """숫자 크기 단위 - 기준값 오름차순"""
    ONES = ("", 0)
    THOUSANDS = ("K", 1_000)
    MILLIONS = ("M", 1_000_000)
    BILLIONS = ("B", 1_000_000_000)
    TRILLIONS = ("T", 1_000_000_000_000)

    def __init__(self, unit: str, threshold: int):
        self.unit = unit
        self.threshold = threshold


# 큰 단위부터 검사
_UNITS_DESCENDING = tuple(sorted(NumberUnit, key=lambda item: item.threshold, reverse=True))


def get_number_unit(value: float) -> NumberUnit:
    """절대값 이하의 가장 큰 단위 반환 (부호 무시, 최소 ONES)"""
    magnitude = abs(value)

    for number_unit in _UNITS_DESCENDING:
        if number_unit.threshold <= magnitude:
            return number_unit

    return NumberUnit.ONES
