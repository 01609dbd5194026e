"""
라우터 등록 시스템
- API 라우터와 View 라우터를 모듈 경로로 등록
- 새 라우터는 설정 목록에 한 줄 추가
"""

import importlib
import logging
from typing import Dict, List, Tuple, Optional
from fastapi import FastAPI
from fastapi.routing import APIRouter

logger = logging.getLogger(__name__)


class RouterConfig:
    """라우터 설정 정보"""

    def __init__(self, module_path: str, router_name: str = "router",
                 prefix: str = "", tags: Optional[List[str]] = None):
        self.module_path = module_path
        self.router_name = router_name
        self.prefix = prefix
        self.tags = tags or []


class RouterRegistry:
    """라우터 등록 관리"""

    def __init__(self):
        self.routers: Dict[str, Dict[str, RouterConfig]] = {
            "api": {
                "market": RouterConfig("dashboard.api.market", tags=["Market"]),
                "ticker": RouterConfig("dashboard.api.ticker", tags=["Ticker"]),
                "candle": RouterConfig("dashboard.api.candle", tags=["Candle"]),
                "order_book": RouterConfig("dashboard.api.order_book", tags=["Order Book"]),
                "system": RouterConfig("dashboard.api.system", tags=["System"]),
            },
            "views": {
                "main_views": RouterConfig("dashboard.views.main_views", "main_views_router", tags=["Views"]),
            },
        }

    def _load_router(self, config: RouterConfig) -> Tuple[Optional[APIRouter], str]:
        """라우터 동적 로드"""
        try:
            module = importlib.import_module(config.module_path)
        except ImportError as e:
            return None, f"Failed to import {config.module_path}: {str(e)}"

        router = getattr(module, config.router_name, None)

        if router is None:
            return None, f"Router '{config.router_name}' not found in {config.module_path}"

        if not isinstance(router, APIRouter):
            return None, f"'{config.router_name}' is not an APIRouter instance in {config.module_path}"

        return router, ""

    def register_routers(self, app: FastAPI, router_type: str) -> Dict[str, bool]:
        """지정한 종류(api/views)의 라우터를 앱에 등록"""
        configs = self.routers[router_type]
        results = {}

        for name, config in configs.items():
            router, error = self._load_router(config)

            if router is None:
                logger.warning(f"⚠️ 라우터 로드 실패: {name} - {error}")
                results[name] = False
                continue

            app.include_router(router, prefix=config.prefix, tags=config.tags)
            logger.info(f"✅ 라우터 등록 완료: {name} ({config.prefix or '/'})")
            results[name] = True

        return results

    def register_all_routers(self, app: FastAPI) -> Dict[str, Dict[str, bool]]:
        """모든 라우터를 등록"""
        results = {router_type: self.register_routers(app, router_type) for router_type in self.routers}

        summary = ", ".join(
            f"{router_type}: {sum(result.values())}/{len(result)}" for router_type, result in results.items()
        )
        logger.info(f"🎯 라우터 등록 완료 - {summary}")

        return results


# 전역 라우터 레지스트리 인스턴스
router_registry = RouterRegistry()
