"""API 응답 코드 테이블"""

from enum import Enum


class ResponseCode(Enum):
    """응답 코드 - 본문 코드와 HTTP 상태를 함께 관리"""
    SUCCESS = ("0", "Success", "Success", 200)
    NOT_FOUND = ("4", "Not Found", "Oh, I can't find it!", 404)
    ALREADY_EXISTS = ("4_A_E", "Bad Request", "Hey, it already exists!", 404)
    # 호환성 유지를 위해 400이 아닌 404 사용
    WRONG_PARAMETER = ("4_W_P", "Bad Request", "Hey, you have wrong parameter!", 404)
    UNAUTHORIZED = ("4-U", "Unauthorized", "You are not authorized to access this resource", 401)
    INTERNAL_SERVER_ERROR = ("5", "Internal Server Error", "Sorry, something went wrong!", 500)
    UNKNOWN_ERROR = ("5-1", "Unknown Error", "Sorry, something went wrong?!", 500)
    NOT_IMPLEMENTED = ("5-2", "Not Implemented", "Sorry, this feature is not implemented yet!", 501)

    def __init__(self, code: str, title: str, message: str, status: int):
        self.code = code
        self.title = title
        self.message = message
        self.status = status
