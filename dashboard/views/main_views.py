"""
메인 뷰 라우터
- 마켓 목록 페이지 (통화 탭별 현재가, 거래대금 단위 축약)
- 종목 상세 페이지 (호가 / 캔들은 API로 조회)
"""

import html
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from config import APP_NAME
from ..dependencies import get_market_info_service, get_ticker_service
from ..enums.api_path_code import ApiPathCode
from ..enums.market_currency import MarketCurrencyCode, get_main_currency_type_list, get_market_currency_type
from ..enums.response_code import ResponseCode
from ..services.market_info_service import MarketInfoService
from ..services.ticker_service import TickerService
from ..utils.datetime_utils import format_epoch_ms
from ..utils.number_utils import format_with_unit, number_with_commas
from ..utils.string_utils import generate_query_param

logger = logging.getLogger(__name__)
main_views_router = APIRouter()

_BASE_STYLE = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: #f5f6fa; color: #333; padding: 24px; }
        .container { max-width: 1100px; margin: 0 auto; background: #fff; border-radius: 12px; padding: 24px; box-shadow: 0 4px 16px rgba(0,0,0,0.06); }
        h1 { font-size: 22px; margin-bottom: 16px; }
        .tabs a { display: inline-block; padding: 8px 16px; margin-right: 6px; border-radius: 8px; background: #eef0f5; color: #333; text-decoration: none; }
        .tabs a.active { background: #093687; color: #fff; }
        table { width: 100%; border-collapse: collapse; margin-top: 16px; font-size: 14px; }
        th, td { padding: 10px 8px; border-bottom: 1px solid #eee; text-align: right; }
        th:first-child, td:first-child { text-align: left; }
        .rise { color: #c84a31; }
        .fall { color: #1261c4; }
        .warning { color: #e67e22; font-size: 12px; margin-left: 4px; }
        .error { text-align: center; padding: 60px 0; }
        .error .code { color: #999; margin-top: 8px; }
"""


def _page(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    html_content = f"""
    <!DOCTYPE html>
    <html lang="ko">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>{html.escape(title)} - {APP_NAME}</title>
        <style>{_BASE_STYLE}</style>
    </head>
    <body>
        <div class="container">
            {body}
        </div>
    </body>
    </html>
    """
    return HTMLResponse(content=html_content, status_code=status_code)


def _error_page(response_code: ResponseCode) -> HTMLResponse:
    body = f"""
            <div class="error">
                <h1>{html.escape(response_code.title)}</h1>
                <p>{html.escape(response_code.message)}</p>
                <p class="code">code: {response_code.code}</p>
                <p><a href="/">마켓 목록으로</a></p>
            </div>
    """
    return _page(response_code.title, body, response_code.status)


def _ticker_dict(ticker: Any) -> Dict[str, Any]:
    """캐시(dict) / 업비트 조회(TickerData) 결과를 camelCase dict로 통일"""
    if isinstance(ticker, dict):
        return ticker
    return ticker.model_dump(by_alias=True)


def _change_class(change: Optional[str]) -> str:
    if change == "RISE":
        return "rise"
    if change == "FALL":
        return "fall"
    return ""


def _currency_tabs(active: MarketCurrencyCode) -> str:
    return "".join(
        f'<a href="/?currency={currency.code}" class="{"active" if currency is active else ""}">'
        f'{currency.display_name}</a>'
        for currency in get_main_currency_type_list()
    )


def _market_rows(market_info_list: List[Any], ticker_map: Dict[str, Dict[str, Any]], digits: int) -> str:
    rows = []
    for market_info in market_info_list:
        ticker = ticker_map.get(market_info.market)
        if ticker is None:
            continue

        warning = '<span class="warning">유의</span>' if market_info.warning else ""
        css = _change_class(ticker.get("change"))
        rows.append(f"""
                <tr>
                    <td><a href="/trade?code={html.escape(market_info.market)}">{html.escape(market_info.korean_name)}</a>{warning}<br>
                        <small>{html.escape(market_info.market)}</small></td>
                    <td class="{css}">{number_with_commas(ticker["tradePrice"], digits)}</td>
                    <td class="{css}">{ticker["signedChangeRate"] * 100:+.2f}%</td>
                    <td>{format_with_unit(ticker["accTradePrice24h"])}</td>
                </tr>""")
    return "".join(rows)


@main_views_router.get("/", response_class=HTMLResponse)
async def market_list_page(
    currency: str = MarketCurrencyCode.KRW.code,
    market_info_service: MarketInfoService = Depends(get_market_info_service),
    ticker_service: TickerService = Depends(get_ticker_service)
):
    """마켓 목록 - 통화 탭별 현재가"""
    currency_type = get_market_currency_type(currency)
    if currency_type is None or currency_type.code != currency:
        return _error_page(ResponseCode.WRONG_PARAMETER)

    market_info_list = await market_info_service.get_market_info_list_by_market_currency(currency_type.code)
    ticker_list = await ticker_service.get_ticker_list_by_market_currency(currency_type.code)
    ticker_map = {ticker["market"]: ticker for ticker in map(_ticker_dict, ticker_list)}

    digits = 0 if currency_type is MarketCurrencyCode.KRW else 8
    body = f"""
            <h1>📈 {APP_NAME}</h1>
            <div class="tabs">{_currency_tabs(currency_type)}</div>
            <table>
                <thead>
                    <tr><th>종목</th><th>현재가</th><th>전일대비</th><th>거래대금(24h)</th></tr>
                </thead>
                <tbody>{_market_rows(market_info_list, ticker_map, digits)}
                </tbody>
            </table>
    """
    return _page(f"{currency_type.display_name} 마켓", body)


@main_views_router.get("/trade", response_class=HTMLResponse)
async def trade_page(
    code: Optional[str] = None,
    market_info_service: MarketInfoService = Depends(get_market_info_service),
    ticker_service: TickerService = Depends(get_ticker_service)
):
    """종목 상세 - 시세 요약, 호가 / 캔들은 화면에서 API 조회"""
    if not code:
        return _error_page(ResponseCode.WRONG_PARAMETER)

    market_info_list = await market_info_service.get_all_market_info_list()
    market_info = next((item for item in market_info_list if item.market == code), None)

    if market_info is None:
        logger.info(f"🔍 존재하지 않는 마켓 조회: {code}")
        return _error_page(ResponseCode.NOT_FOUND)

    ticker_list = await ticker_service.get_ticker_list_by_markets([market_info.market])
    summary = ""
    if ticker_list:
        ticker = _ticker_dict(ticker_list[0])
        css = _change_class(ticker.get("change"))
        summary = f"""
            <table>
                <tr><th>현재가</th><td class="{css}">{number_with_commas(ticker["tradePrice"], 2)}</td></tr>
                <tr><th>전일대비</th><td class="{css}">{ticker["signedChangeRate"] * 100:+.2f}%</td></tr>
                <tr><th>고가 / 저가</th><td>{number_with_commas(ticker["highPrice"], 2)} / {number_with_commas(ticker["lowPrice"], 2)}</td></tr>
                <tr><th>거래량(24h)</th><td>{format_with_unit(ticker["accTradeVolume24h"])}</td></tr>
                <tr><th>거래대금(24h)</th><td>{format_with_unit(ticker["accTradePrice24h"])}</td></tr>
                <tr><th>최근 체결</th><td>{format_epoch_ms(ticker["tradeTimestamp"])}</td></tr>
            </table>
        """

    market = html.escape(market_info.market)
    body = f"""
            <h1>{html.escape(market_info.korean_name)} <small>{market} · {html.escape(market_info.english_name)}</small></h1>
            {summary}
            <h1 style="margin-top: 24px;">호가</h1>
            <table id="order-book"><tbody><tr><td>불러오는 중...</td></tr></tbody></table>
            <script>
                fetch('{ApiPathCode.ORDER_BOOK.get_url(generate_query_param({"market": market_info.market}))}')
                    .then(response => response.json())
                    .then(result => {{
                        const tbody = document.querySelector('#order-book tbody');
                        if (result.code !== '0' || !result.data) {{
                            tbody.innerHTML = '<tr><td>' + result.message + '</td></tr>';
                            return;
                        }}
                        tbody.innerHTML = result.data.orderBookUnitList.map(unit =>
                            '<tr><td class="fall">' + unit.askSize + '</td><td>' + unit.askPrice +
                            '</td><td>' + unit.bidPrice + '</td><td class="rise">' + unit.bidSize + '</td></tr>'
                        ).join('');
                    }});
            </script>
    """
    return _page(market_info.korean_name, body)
