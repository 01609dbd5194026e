"""호가 조회 서비스"""

from typing import List, Optional

from ..models.order_book import (
    OrderBookData, OrderBookSupportedLevelData,
    to_order_book_data, to_order_book_supported_level_data
)


class OrderBookService:
    """호가 조회 서비스"""

    def __init__(self, upbit_api):
        self.upbit_api = upbit_api

    async def get_order_book(self, market: str, level: float = 0) -> Optional[OrderBookData]:
        response = await self.upbit_api.get_order_book([market], level)

        if not response:
            return None

        for item in response:
            if item.get("market") == market:
                return to_order_book_data(item)

        return None

    async def get_order_book_supported_levels(self, market: str) -> List[OrderBookSupportedLevelData]:
        response = await self.upbit_api.get_order_book_supported_levels([market])

        if not response:
            return []

        return [to_order_book_supported_level_data(item) for item in response]
