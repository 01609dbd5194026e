"""API 응답 모델"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..enums.response_code import ResponseCode


class ResponseObject(BaseModel):
    """공통 응답 봉투 - {code, title, message, data}"""
    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    message: str
    data: Any = None

    @classmethod
    def of(cls, response_code: ResponseCode, data: Any = None) -> "ResponseObject":
        return cls(
            code=response_code.code,
            title=response_code.title,
            message=response_code.message,
            data=data
        )
