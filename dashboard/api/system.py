"""시스템 관련 API 라우터"""

from fastapi import APIRouter, Request
import logging
import time

from config import APP_VERSION, SERVER_START_TIME
from ..config_manager import config_manager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health")
async def health_check(request: Request):
    """헬스 체크 엔드포인트"""
    scheduler = getattr(request.app.state, "scheduler", None)

    return {
        "status": "healthy",
        "environment": config_manager.system.environment,
        "version": APP_VERSION,
        "uptime_seconds": int(time.time() - SERVER_START_TIME),
        "batch": {
            "running": bool(scheduler and scheduler.is_running),
            "next_run_time": scheduler.get_next_run_time() if scheduler else None
        }
    }


@router.get("/config")
async def get_config_summary():
    """설정 요약 정보"""
    return config_manager.get_config_summary()


@router.post("/config/validate")
async def validate_config():
    """설정 유효성 검증"""
    return config_manager.validate_config()
