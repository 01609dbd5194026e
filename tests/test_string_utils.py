from decimal import Decimal

from dashboard.utils.string_utils import generate_query_param, to_camel


def test_scalars_and_lists_in_insertion_order():
    assert generate_query_param({"a": 1, "b": [2, 3]}) == "a=1&b=2&b=3"


def test_none_and_callables_are_omitted():
    assert generate_query_param({"a": None, "b": "x"}) == "b=x"
    assert generate_query_param({"f": lambda: 1, "b": "x"}) == "b=x"


def test_none_and_callable_list_elements_are_omitted():
    assert generate_query_param({"markets": ["KRW-BTC", None, print, "KRW-ETH"]}) == "markets=KRW-BTC&markets=KRW-ETH"
    assert generate_query_param({"a": [None]}) == ""


def test_non_mapping_returns_empty_string():
    assert generate_query_param(None) == ""
    assert generate_query_param([("a", 1)]) == ""
    assert generate_query_param("a=1") == ""


def test_empty_list_emits_nothing():
    assert generate_query_param({"a": [], "b": 1}) == "b=1"


def test_booleans_and_decimals():
    assert generate_query_param({"is_details": True, "x": False}) == "is_details=true&x=false"
    assert generate_query_param({"price": Decimal("0.001")}) == "price=0.001"


def test_values_are_escaped_by_default():
    assert generate_query_param({"to": "2025-08-15 11:24:00"}) == "to=2025-08-15%2011%3A24%3A00"
    assert generate_query_param({"markets": "KRW-BTC,KRW-ETH"}) == "markets=KRW-BTC%2CKRW-ETH"


def test_escape_disabled_keeps_raw_values():
    assert generate_query_param({"markets": "KRW-BTC,KRW-ETH"}, escape=False) == "markets=KRW-BTC,KRW-ETH"


def test_to_camel_keeps_digit_suffix_lowercase():
    assert to_camel("acc_trade_price_24h") == "accTradePrice24h"
    assert to_camel("highest_52_week_price") == "highest52WeekPrice"
    assert to_camel("market") == "market"
