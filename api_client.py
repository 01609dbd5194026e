"""
업비트 API 클라이언트 모듈
- UpbitRateLimiter: 시세 조회 API 레이트 리밋 관리
- UpbitAPI: 업비트 시세(Quotation) REST API 클라이언트
- UpbitAPIError: 업스트림 호출 실패
"""

import asyncio
import time
import threading
from collections import deque
from typing import Dict, Optional, Any, List
import aiohttp
import logging

from dashboard.config_manager import UpbitConfig
from dashboard.enums.upbit_api_url_code import UpbitApiUrlCode
from dashboard.utils.string_utils import generate_query_param

logger = logging.getLogger(__name__)


class UpbitAPIError(Exception):
    """업비트 API 호출 실패 (비정상 상태 코드 / 네트워크 오류 / 타임아웃)"""

    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.body = body


class UpbitRateLimiter:
    """업비트 시세 API 레이트 리밋 관리자"""

    def __init__(self, per_second: int = 10, per_minute: int = 600):
        # 시세 조회 제한: 초당 10회, 분당 600회
        self.rest_per_second = per_second
        self.rest_per_minute = per_minute

        # 요청 기록 (타임스탬프 저장)
        self.rest_requests = deque()
        self.rest_lock = threading.Lock()

    def _clean_old_requests(self, time_window: int):
        """오래된 요청 기록 정리"""
        current_time = time.time()
        while self.rest_requests and current_time - self.rest_requests[0] > time_window:
            self.rest_requests.popleft()

    def can_make_request(self) -> bool:
        """요청 가능 여부 확인"""
        with self.rest_lock:
            current_time = time.time()
            self._clean_old_requests(60)

            recent_requests = [req for req in self.rest_requests if current_time - req <= 1]
            if len(recent_requests) >= self.rest_per_second:
                return False

            return len(self.rest_requests) < self.rest_per_minute

    def record_request(self):
        with self.rest_lock:
            self.rest_requests.append(time.time())

    async def wait_for_slot(self):
        """슬롯이 사용 가능할 때까지 대기 (점진적 백오프)"""
        consecutive_waits = 0
        while not self.can_make_request():
            consecutive_waits += 1
            base_delay = 0.2 if consecutive_waits < 5 else 0.5
            await asyncio.sleep(base_delay * (1.2 ** min(consecutive_waits, 10)))

            if consecutive_waits > 20:
                logger.warning(f"⚠️ 업비트 API 레이트 리밋 대기 중... ({consecutive_waits}회)")

        self.record_request()

    def get_remaining_capacity(self) -> Dict[str, int]:
        """남은 요청 용량 조회"""
        current_time = time.time()
        with self.rest_lock:
            self._clean_old_requests(60)
            recent = [req for req in self.rest_requests if current_time - req <= 1]
            return {
                "remaining_per_second": self.rest_per_second - len(recent),
                "remaining_per_minute": self.rest_per_minute - len(self.rest_requests)
            }


class UpbitAPI:
    """업비트 시세 REST API 클라이언트"""

    def __init__(self, config: Optional[UpbitConfig] = None, rate_limiter: Optional[UpbitRateLimiter] = None):
        self.config = config or UpbitConfig()
        self.base_url = self.config.base_url
        self.rate_limiter = rate_limiter or UpbitRateLimiter()
        self.session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """aiohttp 세션 생성 또는 반환"""
        if self.session is None or self.session.closed:
            connector = aiohttp.TCPConnector(
                keepalive_timeout=60,
                enable_cleanup_closed=True,
                limit=100,
                limit_per_host=30,
                ttl_dns_cache=300
            )

            headers = {
                "Accept": "application/json",
                "User-Agent": "UpbitMarketDashboard/1.0"
            }

            timeout = aiohttp.ClientTimeout(
                total=self.config.timeout_total,
                connect=self.config.timeout_connect,
                sock_read=self.config.timeout_sock_read
            )

            self.session = aiohttp.ClientSession(
                connector=connector,
                headers=headers,
                timeout=timeout
            )
        return self.session

    def _query(self, fields: Dict[str, Any]) -> str:
        return generate_query_param(fields, escape=self.config.escape_query)

    async def _request_get(self, url: str) -> Any:
        """GET 요청 - 200이 아니면 UpbitAPIError"""
        await self.rate_limiter.wait_for_slot()

        session = await self._get_session()
        try:
            async with session.get(url) as response:
                if response.status == 200:
                    return await response.json()

                error_text = await response.text()
                logger.error(f"⚠️ 업비트 API 응답 오류 {response.status}: {url} - {error_text}")
                raise UpbitAPIError(f"업비트 API 요청 실패 {response.status}", response.status, error_text)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"⚠️ 업비트 API 요청 오류: {url} - {str(e)}")
            raise UpbitAPIError(f"업비트 API 요청 오류: {str(e)}") from e

    async def get_market_list(self, is_details: bool = True) -> List[Dict]:
        """종목 코드 목록 조회"""
        url = UpbitApiUrlCode.MARKET_ALL.get_url(self.base_url, self._query({"is_details": is_details}))
        return await self._request_get(url)

    async def get_ticker_all(self, quote_currencies: str) -> List[Dict]:
        """마켓 단위 현재가 조회 (quote_currencies: "KRW" 또는 "KRW,BTC")"""
        url = UpbitApiUrlCode.TICKER_ALL.get_url(self.base_url, self._query({"quote_currencies": quote_currencies}))
        return await self._request_get(url)

    async def get_ticker(self, markets: List[str]) -> List[Dict]:
        """종목 단위 현재가 조회"""
        url = UpbitApiUrlCode.TICKER.get_url(self.base_url, self._query({"markets": ",".join(markets)}))
        return await self._request_get(url)

    async def get_candle_seconds(self, market: str, count: int, to: Optional[str] = None) -> List[Dict]:
        url = UpbitApiUrlCode.CANDLE_SECONDS.get_url(
            self.base_url, self._query({"market": market, "count": count, "to": to})
        )
        return await self._request_get(url)

    async def get_candle_minutes(self, unit: int, market: str, count: int, to: Optional[str] = None) -> List[Dict]:
        """분 캔들 조회 - unit은 1, 3, 5, 10, 15, 30, 60, 240"""
        if not unit:
            raise ValueError("분 캔들 단위(unit)가 지정되지 않았습니다")

        url = UpbitApiUrlCode.CANDLE_MINUTES.get_url_with_unit(
            self.base_url, unit, self._query({"market": market, "count": count, "to": to})
        )
        return await self._request_get(url)

    async def get_candle_days(self, market: str, count: int, to: Optional[str] = None) -> List[Dict]:
        url = UpbitApiUrlCode.CANDLE_DAYS.get_url(
            self.base_url, self._query({"market": market, "count": count, "to": to})
        )
        return await self._request_get(url)

    async def get_candle_weeks(self, market: str, count: int, to: Optional[str] = None) -> List[Dict]:
        url = UpbitApiUrlCode.CANDLE_WEEKS.get_url(
            self.base_url, self._query({"market": market, "count": count, "to": to})
        )
        return await self._request_get(url)

    async def get_candle_months(self, market: str, count: int, to: Optional[str] = None) -> List[Dict]:
        url = UpbitApiUrlCode.CANDLE_MONTHS.get_url(
            self.base_url, self._query({"market": market, "count": count, "to": to})
        )
        return await self._request_get(url)

    async def get_candle_years(self, market: str, count: int, to: Optional[str] = None) -> List[Dict]:
        url = UpbitApiUrlCode.CANDLE_YEARS.get_url(
            self.base_url, self._query({"market": market, "count": count, "to": to})
        )
        return await self._request_get(url)

    async def get_order_book(self, markets: List[str], level: float = 0) -> List[Dict]:
        """호가 정보 조회 (level: 호가 모아보기 단위, 0이면 기본)"""
        fields: Dict[str, Any] = {"markets": ",".join(markets)}
        if level:
            fields["level"] = level

        url = UpbitApiUrlCode.ORDER_BOOK.get_url(self.base_url, self._query(fields))
        return await self._request_get(url)

    async def get_order_book_supported_levels(self, markets: List[str]) -> List[Dict]:
        """호가 모아보기 단위 조회"""
        url = UpbitApiUrlCode.ORDER_BOOK_SUPPORTED_LEVELS.get_url(
            self.base_url, self._query({"markets": ",".join(markets)})
        )
        return await self._request_get(url)

    async def close(self):
        """세션 종료"""
        if self.session and not self.session.closed:
            await self.session.close()
