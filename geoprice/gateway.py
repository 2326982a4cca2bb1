"""Payment gateway currency compatibility.

The gateway only settles a fixed set of currencies. When the requester's local
currency is not one of them we pick a coarse regional substitute; the goal is
gateway acceptance, not exact localization.
"""
from typing import Optional

from .tables import EU_COUNTRIES

GATEWAY_SUPPORTED_CURRENCIES = frozenset({
    'INR', 'USD', 'EUR', 'GBP', 'AUD', 'CAD', 'SGD', 'AED', 'MYR',
})

GULF_COUNTRIES = frozenset({'AE', 'SA', 'QA', 'KW', 'BH', 'OM'})

DEFAULT_THEME_COLOR = '#3B82F6'


def is_gateway_supported_currency(currency: str) -> bool:
    return currency in GATEWAY_SUPPORTED_CURRENCIES


def resolve_fallback_currency(currency: str, country_code: str) -> str:
    """Return ``currency`` if the gateway accepts it, else the regional fallback."""
    if is_gateway_supported_currency(currency):
        return currency

    code = (country_code or '').upper().strip()
    if code == 'IN':
        return 'INR'
    if code in EU_COUNTRIES:
        return 'EUR'
    if code == 'GB':
        return 'GBP'
    if code in ('AU', 'NZ'):
        return 'AUD'
    if code == 'CA':
        return 'CAD'
    if code == 'SG':
        return 'SGD'
    if code in GULF_COUNTRIES:
        return 'AED'
    if code == 'MY':
        return 'MYR'
    return 'USD'


def build_gateway_config(currency: str, theme_color: Optional[str] = None) -> dict:
    """Checkout widget options handed to the frontend alongside the pricing."""
    return {
        'currency': currency,
        'theme': {'color': theme_color or DEFAULT_THEME_COLOR},
        'modal': {
            'backdropClose': False,
            'escape': True,
            'handleback': True,
            'confirm_close': True,
        },
        'config': {
            'display': {
                'language': 'en',
                'preferences': {'show_default_blocks': True},
            },
        },
    }
