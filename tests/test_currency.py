from __future__ import annotations

import pytest

from geoprice.currency import (
    convert_price,
    format_price,
    get_currency_info,
    is_currency_supported,
    supported_currencies,
)
from geoprice.tables import CURRENCY_INFO, EXCHANGE_RATES, PPP_ADJUSTMENTS


def _strip_symbol(formatted: str, currency: str) -> str:
    meta = CURRENCY_INFO[currency]
    if meta.position == "before":
        assert formatted.startswith(meta.symbol)
        return formatted[len(meta.symbol):]
    assert formatted.endswith(f" {meta.symbol}")
    return formatted[: -len(meta.symbol) - 1]


def test_india_price_gets_ppp_then_rounds_to_whole_rupees() -> None:
    # 6 * 0.25 * 83 = 124.5
    price = convert_price(6, "INR", "IN")
    assert price == 125
    assert isinstance(price, int)


def test_usd_without_country_is_unchanged() -> None:
    assert convert_price(6, "USD") == 6
    assert convert_price(60, "USD", None) == 60


def test_exchange_rate_applied_without_ppp() -> None:
    assert convert_price(6, "EUR") == 5.1
    assert convert_price(60, "EUR", "DE") == 51.0
    assert convert_price(6, "JPY", "JP") == 660


def test_three_decimal_currencies_keep_extra_precision() -> None:
    assert convert_price(6, "KWD") == 1.8
    assert format_price(convert_price(6, "KWD"), "KWD") == "د.ك1.800"
    assert convert_price(7, "BHD") == 2.66
    assert format_price(2.66, "BHD").endswith("2.660")


def test_rounding_is_half_up() -> None:
    # 1.005 is stored as 1.00499999999999989...; round(x, 2) gives 1.0
    assert convert_price(1.005, "USD") == 1.01


def test_unknown_currency_returns_usd_amount(caplog) -> None:
    with caplog.at_level("WARNING", logger="geoprice.currency"):
        assert convert_price(6, "XYZ", "IN") == 6
    assert "XYZ" in caplog.text


def test_conversion_is_non_negative() -> None:
    for currency in EXCHANGE_RATES:
        assert convert_price(0, currency) == 0
        assert convert_price(6, currency, "IN") >= 0


@pytest.mark.parametrize("price", [1, 6, 9.99, 60, 250])
def test_ppp_never_raises_price(price) -> None:
    for country in PPP_ADJUSTMENTS:
        for currency in ("USD", "EUR", "INR", "JPY", "KWD", "BRL"):
            assert convert_price(price, currency, country) <= convert_price(price, currency, None)


def test_format_examples() -> None:
    assert format_price(100, "USD") == "$100.00"
    assert format_price(100, "EUR") == "€100.00"
    assert format_price(100, "INR") == "₹100"
    assert format_price(100, "JPY") == "¥100"
    assert format_price(100, "SEK") == "100.00 kr"


def test_format_rounds_ties_half_up() -> None:
    assert format_price(2.5, "JPY") == "¥3"
    assert format_price(124.5, "INR") == "₹125"
    assert format_price(0.125, "USD") == "$0.13"
    assert format_price(1.005, "USD") == "$1.01"


def test_format_uses_thousands_separators() -> None:
    assert format_price(1234567.891, "USD") == "$1,234,567.89"
    assert format_price(1245, "INR") == "₹1,245"
    assert format_price(23000, "VND") == "23,000 ₫"


def test_format_unknown_currency_uses_usd_display() -> None:
    assert format_price(12.5, "XYZ") == "$12.50"


def test_format_decimal_digits_match_currency_metadata() -> None:
    for currency, meta in CURRENCY_INFO.items():
        number = _strip_symbol(format_price(1234.5678, currency), currency)
        if meta.decimals == 0:
            assert "." not in number, currency
        else:
            assert len(number.split(".")[1]) == meta.decimals, currency


@pytest.mark.parametrize("price", [0, 1, 6, 9.99, 19.5, 999.99])
def test_usd_convert_then_format_round_trip(price) -> None:
    assert format_price(convert_price(price, "USD", None), "USD") == "$" + f"{price:.2f}"


def test_currency_lookups() -> None:
    assert is_currency_supported("INR")
    assert not is_currency_supported("XYZ")
    assert set(supported_currencies()) == set(EXCHANGE_RATES)
    assert get_currency_info("JPY").decimals == 0
    assert get_currency_info("XYZ") == CURRENCY_INFO["USD"]


def test_every_rated_currency_has_display_metadata() -> None:
    assert set(EXCHANGE_RATES) <= set(CURRENCY_INFO)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        EXCHANGE_RATES["USD"] = 2.0  # type: ignore[index]
