"""Currency conversion and display formatting."""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from .tables import BASE_CURRENCY, CURRENCY_INFO, EXCHANGE_RATES, PPP_ADJUSTMENTS, CurrencyMeta

logger = logging.getLogger(__name__)


def supported_currencies() -> List[str]:
    return list(EXCHANGE_RATES.keys())


def is_currency_supported(currency: str) -> bool:
    return currency in EXCHANGE_RATES


def get_currency_info(currency: str) -> CurrencyMeta:
    return CURRENCY_INFO.get(currency) or CURRENCY_INFO[BASE_CURRENCY]


def _round_half_up(value: float, decimals: int):
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if decimals == 0:
        return int(rounded)
    return float(rounded)


def convert_price(base_price_usd: float, target_currency: str, country_code: Optional[str] = None):
    """Convert a USD price into ``target_currency``.

    The country's PPP multiplier (if any) is applied to the USD amount before
    the exchange rate, and the result is rounded half-up to the currency's
    subunit precision. An unknown currency returns the USD amount unchanged;
    callers keep displaying the requested currency code alongside it.
    """
    rate = EXCHANGE_RATES.get(target_currency)
    if rate is None:
        logger.warning('Exchange rate not found for %s, using USD amount', target_currency)
        return base_price_usd

    adjusted = base_price_usd
    multiplier = PPP_ADJUSTMENTS.get(country_code) if country_code else None
    if multiplier is not None:
        adjusted = base_price_usd * multiplier

    meta = CURRENCY_INFO.get(target_currency)
    decimals = meta.decimals if meta else 2
    return _round_half_up(adjusted * rate, decimals)


def format_price(amount: float, currency: str) -> str:
    """Render ``amount`` with the currency's symbol, e.g. ``$1,200.00`` or ``100.00 kr``."""
    meta = get_currency_info(currency)
    number = f"{_round_half_up(amount, meta.decimals):,.{meta.decimals}f}"
    if meta.position == 'before':
        return f"{meta.symbol}{number}"
    return f"{number} {meta.symbol}"
