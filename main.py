"""
업비트 마켓 대시보드 - 메인 애플리케이션
- 라우터 등록 및 생명주기 관리는 dashboard 패키지에서 수행
- 환경별 설정 지원
"""

import logging
import os

# 설정 관리자를 가장 먼저 초기화
from dashboard.config_manager import config_manager
from dashboard.app_factory import create_application

logger = logging.getLogger(__name__)


def main():
    """메인 애플리케이션 진입점"""
    environment = os.getenv('ENVIRONMENT', 'development').lower()

    app = create_application(environment)

    logger.info(f"🚀 업비트 마켓 대시보드 시작 - 환경: {environment}")
    for key, value in config_manager.get_config_summary().items():
        logger.info(f"   {key}: {value}")

    return app


# FastAPI 애플리케이션 인스턴스 생성
app = main()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=config_manager.webserver.host,
        port=config_manager.webserver.port,
        workers=config_manager.webserver.workers if config_manager.is_production() else 1,
        reload=config_manager.webserver.reload and not config_manager.is_production(),
        log_level="debug" if config_manager.system.debug else "info",
        access_log=True
    )
