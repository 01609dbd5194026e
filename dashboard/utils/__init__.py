"""유틸리티 함수 모듈"""

from .string_utils import generate_query_param, to_camel
from .datetime_utils import utc_now, now_unix, format_epoch_ms, UTC, KST
from . import number_utils
from . import response_utils

__all__ = [
    'generate_query_param', 'to_camel',
    'utc_now', 'now_unix', 'format_epoch_ms', 'UTC', 'KST',
    'number_utils', 'response_utils'
]
