"""
배치 작업 스케줄러
- APScheduler 주기 작업 (Asia/Seoul)
- Redis 해시(batch-job-status)로 작업 상태(stay/work) 공유
- 해시가 이미 있으면 다른 인스턴스가 작업을 소유한 것으로 보고 시작하지 않음
"""

import asyncio
import logging
from typing import Dict, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from config import BATCH_JOB_STATUS_KEY, JOB_STATUS_STAY, JOB_STATUS_WORK, SCHEDULER_TIMEZONE
from ..cache.redis_service import RedisService
from ..config_manager import BatchConfig
from .batch_service import BatchService

logger = logging.getLogger(__name__)

TICKER_JOB_NAME = "jobUpdateTickerList"


class BatchJobScheduler:
    """배치 작업 스케줄러"""

    def __init__(self, redis_service: RedisService, batch_service: BatchService, batch_config: BatchConfig):
        self.redis_service = redis_service
        self.batch_service = batch_service
        self.batch_config = batch_config
        self.scheduler = AsyncIOScheduler(timezone=SCHEDULER_TIMEZONE)
        self.is_running = False
        # 실행 중인 작업이 끝나야 상태 해시를 지울 수 있음
        self._job_lock = asyncio.Lock()

    @property
    def job_names(self):
        return [TICKER_JOB_NAME]

    async def start_all(self) -> bool:
        """모든 배치 작업 시작 - 상태 해시가 이미 있으면 False"""
        if self.is_running:
            logger.warning("⚠️ [스케줄러] 이미 실행 중입니다")
            return False

        if await self.redis_service.exists(BATCH_JOB_STATUS_KEY):
            logger.warning(f"⚠️ [스케줄러] 작업 상태 키가 이미 존재함: {BATCH_JOB_STATUS_KEY}")
            return False

        await self.redis_service.hset(
            BATCH_JOB_STATUS_KEY,
            {name: JOB_STATUS_STAY for name in self.job_names}
        )

        self.scheduler.add_job(
            self.run_ticker_job,
            trigger=IntervalTrigger(seconds=self.batch_config.ticker_interval_seconds),
            id=TICKER_JOB_NAME,
            name='티커 캐시 갱신',
            replace_existing=True,
            max_instances=1,
            coalesce=True
        )

        self.scheduler.start()
        self.is_running = True

        logger.info(f"🕐 [스케줄러] 배치 작업 시작 - 티커 갱신 주기 {self.batch_config.ticker_interval_seconds}초")
        return True

    async def stop_all(self):
        """모든 배치 작업 중지 - 새 실행을 막고, 진행 중인 작업이 끝난 뒤 상태 해시 삭제"""
        if self.is_running:
            self.scheduler.shutdown(wait=False)
            self.is_running = False
            logger.info("🛑 [스케줄러] 배치 작업 중지")

        async with self._job_lock:
            if await self.redis_service.exists(BATCH_JOB_STATUS_KEY):
                await self.redis_service.delete(BATCH_JOB_STATUS_KEY)

    async def run_now(self):
        """모든 배치 작업 즉시 1회 실행"""
        await self.run_ticker_job()

    async def run_ticker_job(self) -> bool:
        """티커 캐시 갱신 - 이전 실행이 진행 중이면 건너뜀"""
        if await self._is_working(TICKER_JOB_NAME):
            logger.debug(f"⏭️ [{TICKER_JOB_NAME}] 실행 중 - 건너뜀")
            return False

        async with self._job_lock:
            await self._set_status(TICKER_JOB_NAME, JOB_STATUS_WORK)
            try:
                await self.batch_service.execute_update_market_currency_ticker_to_cache()
            except Exception as e:
                logger.error(f"🚨 [{TICKER_JOB_NAME}] 작업 실패: {str(e)}")
            finally:
                await self._set_status(TICKER_JOB_NAME, JOB_STATUS_STAY)

        return True

    def get_next_run_time(self) -> Optional[str]:
        """다음 실행 시간 조회"""
        if not self.is_running:
            return None

        job = self.scheduler.get_job(TICKER_JOB_NAME)
        if job and job.next_run_time:
            return job.next_run_time.strftime('%Y-%m-%d %H:%M:%S')
        return None

    async def get_job_status(self) -> Dict[str, Optional[str]]:
        return {
            name: await self.redis_service.hget(BATCH_JOB_STATUS_KEY, name)
            for name in self.job_names
        }

    async def _is_working(self, job_name: str) -> bool:
        return await self.redis_service.hget(BATCH_JOB_STATUS_KEY, job_name) == JOB_STATUS_WORK

    async def _set_status(self, job_name: str, status: str):
        await self.redis_service.hset(BATCH_JOB_STATUS_KEY, {job_name: status})
