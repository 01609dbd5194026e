"""문자열 관련 유틸리티 함수"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, List
from urllib.parse import quote

_SCALAR_TYPES = (str, int, float, Decimal)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_skipped(value: Any) -> bool:
    return value is None or callable(value)


def _pair(key: str, value: Any, escape: bool) -> str:
    text = _format_value(value)
    if escape:
        return f"{quote(str(key), safe='')}={quote(text, safe='')}"
    return f"{key}={text}"


def generate_query_param(fields: Any, escape: bool = True) -> str:
    """
    매핑을 쿼리 문자열로 변환
    - 입력 순서 유지, 리스트 값은 key=v 를 원소마다 반복
    - None / 호출 가능한 값은 생략
    - escape=False 면 퍼센트 인코딩 없이 그대로 이어붙임
    """
    if not isinstance(fields, Mapping):
        return ""

    param_list: List[str] = []

    for key, value in fields.items():
        if _is_skipped(value):
            continue

        if isinstance(value, (bool,) + _SCALAR_TYPES):
            param_list.append(_pair(key, value, escape))
        elif isinstance(value, (list, tuple)):
            param_list.extend(_pair(key, item, escape) for item in value if not _is_skipped(item))

    return "&".join(param_list)


def to_camel(name: str) -> str:
    """snake_case -> camelCase (숫자 뒤 문자는 그대로: acc_trade_price_24h -> accTradePrice24h)"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)
