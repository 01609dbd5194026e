"""
FastAPI 애플리케이션 팩토리
- 로깅 / CORS / 예외 처리기 / 요청 로깅 미들웨어 설정
- 환경별 애플리케이션 생성
"""

import json
import logging
import time
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_client import UpbitAPIError
from config import APP_NAME, APP_VERSION
from .config_manager import config_manager
from .router_registry import router_registry
from .app_lifecycle import lifespan_manager
from .enums.response_code import ResponseCode
from .utils.response_utils import error

logger = logging.getLogger(__name__)


def setup_logging():
    """로깅 설정"""
    handlers = []

    if config_manager.logging.file_path:
        handlers.append(RotatingFileHandler(
            config_manager.logging.file_path,
            maxBytes=config_manager.logging.max_bytes,
            backupCount=config_manager.logging.backup_count,
            encoding="utf-8"
        ))

    if config_manager.logging.console_enabled:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=getattr(logging, config_manager.logging.level, logging.INFO),
        format=config_manager.logging.format,
        handlers=handlers,
        force=True  # 기존 설정 덮어쓰기
    )


def setup_cors_middleware(app: FastAPI):
    """CORS 미들웨어 설정"""
    if not config_manager.webserver.cors_enabled:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config_manager.webserver.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    logger.info(f"✅ CORS 미들웨어 설정 완료 - Origins: {len(config_manager.webserver.cors_origins)}개")


def setup_request_logging(app: FastAPI):
    """요청 로깅 및 처리 시간 측정"""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = (time.perf_counter() - start_time) * 1000
        # 매칭된 라우트 경로 (/api/market/{path}), 매칭 실패 시 요청 경로
        route = request.scope.get("route")
        path = getattr(route, "path", request.url.path)
        logger.info(f"🌐 {request.method} {path} - {response.status_code} ({process_time:.1f}ms)")
        response.headers["X-Process-Time"] = f"{process_time:.1f}"

        return response


def _http_status_response_code(status_code: int) -> ResponseCode:
    """HTTP 상태 -> 응답 코드 (표에 없는 4xx는 wrongParameter, 5xx는 internalServerError)"""
    if status_code == 404:
        return ResponseCode.NOT_FOUND
    if status_code == 401:
        return ResponseCode.UNAUTHORIZED
    if status_code == 501:
        return ResponseCode.NOT_IMPLEMENTED
    if status_code >= 500:
        return ResponseCode.INTERNAL_SERVER_ERROR
    return ResponseCode.WRONG_PARAMETER


def setup_exception_handlers(app: FastAPI):
    """예외 처리기 설정 - 모든 오류를 응답 봉투로 변환"""

    async def internal_error_handler(request: Request, exc: Exception):
        logger.error(f"❌ {request.method} {request.url.path} 처리 실패: {type(exc).__name__}: {str(exc)}")
        return error(ResponseCode.INTERNAL_SERVER_ERROR)

    # 업스트림 / 캐시 / DB 오류, 손상된 캐시 값
    for exc_class in (UpbitAPIError, RedisError, SQLAlchemyError, json.JSONDecodeError):
        app.add_exception_handler(exc_class, internal_error_handler)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"⚠️ 잘못된 요청 파라미터: {request.url.path} - {exc.errors()}")
        return error(ResponseCode.WRONG_PARAMETER)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        response_code = _http_status_response_code(exc.status_code)
        if response_code is not ResponseCode.NOT_FOUND:
            logger.warning(f"⚠️ HTTP 오류: {request.method} {request.url.path} - {exc.status_code} {exc.detail}")
        return error(response_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"🚨 처리되지 않은 오류: {request.url.path} - {str(exc)}", exc_info=True)
        return error(ResponseCode.INTERNAL_SERVER_ERROR)


def create_application(environment: str = None, lifespan=lifespan_manager) -> FastAPI:
    """
    FastAPI 애플리케이션 생성 팩토리

    Args:
        environment: 환경 설정 (development, production, testing)
        lifespan: 생명주기 관리자 (테스트에서는 None으로 공유 자원 직접 주입)

    Returns:
        FastAPI: 구성된 FastAPI 애플리케이션 인스턴스
    """
    if environment:
        config_manager.system.environment = environment
        config_manager.system.debug = environment == "development"

    setup_logging()

    logger.info(f"🚀 애플리케이션 생성 시작 - 환경: {config_manager.system.environment}")

    validation_result = config_manager.validate_config()
    if not validation_result["valid"]:
        logger.error(f"❌ 설정 검증 실패: {validation_result['issues']}")
        raise ValueError(f"Invalid configuration: {validation_result['issues']}")

    if validation_result["warnings"]:
        logger.warning(f"⚠️ 설정 경고: {validation_result['warnings']}")

    app = FastAPI(
        title=APP_NAME,
        description="업비트 마켓 시세 대시보드",
        version=APP_VERSION,
        debug=config_manager.system.debug,
        lifespan=lifespan
    )

    setup_cors_middleware(app)
    setup_request_logging(app)
    setup_exception_handlers(app)

    router_registry.register_all_routers(app)

    logger.info("✅ 애플리케이션 생성 완료")

    return app


def create_testing_app() -> FastAPI:
    """테스트환경용 애플리케이션 생성 (생명주기 없이)"""
    return create_application("testing", lifespan=None)
