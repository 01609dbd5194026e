"""공통 응답 봉투 생성 유틸리티"""

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..enums.response_code import ResponseCode
from ..models.response import ResponseObject


def ok(data: Any = None, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """성공 응답 (code "0", HTTP 200)"""
    return _build(ResponseCode.SUCCESS, data, headers)


def error(response_code: ResponseCode, data: Any = None) -> JSONResponse:
    """오류 응답 - HTTP 상태는 응답 코드 테이블 값 사용"""
    return _build(response_code, data)


def _build(response_code: ResponseCode, data: Any, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    body = ResponseObject.of(response_code, data)
    return JSONResponse(
        status_code=response_code.status,
        content=jsonable_encoder(body),
        headers=headers
    )
