"""저장소 패키지"""

from .market_info_repository import MarketInfoRepository

__all__ = ['MarketInfoRepository']
