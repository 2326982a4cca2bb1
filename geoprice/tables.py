"""Static currency and country reference data.

Exchange rates are USD-denominated and updated by hand; everything here is
read-only once the module is imported.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class CurrencyMeta:
    symbol: str
    position: str  # 'before' | 'after'
    decimals: int

    def to_dict(self) -> dict:
        return {'symbol': self.symbol, 'position': self.position, 'decimals': self.decimals}


BASE_CURRENCY = 'USD'

# Units of each currency per 1 USD
EXCHANGE_RATES: Mapping[str, float] = MappingProxyType({
    'USD': 1.00,
    'EUR': 0.85,
    'GBP': 0.73,
    'CAD': 1.25,
    'AUD': 1.35,
    'NZD': 1.45,
    'INR': 83.00,
    'JPY': 110.00,
    'KRW': 1200.00,
    'CNY': 7.20,
    'SGD': 1.35,
    'HKD': 7.80,
    'TWD': 28.50,
    'MYR': 4.20,
    'THB': 33.00,
    'IDR': 14500.00,
    'PHP': 50.00,
    'VND': 23000.00,
    'BRL': 5.00,
    'MXN': 18.00,
    'ARS': 350.00,
    'CLP': 800.00,
    'COP': 4000.00,
    'PEN': 3.70,
    'CHF': 0.92,
    'NOK': 9.50,
    'SEK': 9.80,
    'DKK': 6.30,
    'PLN': 3.90,
    'CZK': 22.00,
    'HUF': 320.00,
    'RON': 4.20,
    'BGN': 1.66,
    'HRK': 6.40,
    'RSD': 100.00,
    'TRY': 18.50,
    'ILS': 3.20,
    'SAR': 3.75,
    'AED': 3.67,
    'QAR': 3.64,
    'KWD': 0.30,
    'BHD': 0.38,
    'OMR': 0.38,
    'JOD': 0.71,
    'LBP': 1500.00,
    'PKR': 280.00,
    'BDT': 85.00,
    'LKR': 200.00,
    'NPR': 132.00,
    'ZAR': 15.00,
    'NGN': 460.00,
    'KES': 110.00,
    'GHS': 6.00,
    'EGP': 15.50,
    'MAD': 9.20,
    'TND': 2.80,
    'DZD': 135.00,
    'RUB': 75.00,
    'UAH': 27.00,
    'BYN': 2.50,
})

CURRENCY_INFO: Mapping[str, CurrencyMeta] = MappingProxyType({
    'USD': CurrencyMeta('$', 'before', 2),
    'EUR': CurrencyMeta('€', 'before', 2),
    'GBP': CurrencyMeta('£', 'before', 2),
    'CAD': CurrencyMeta('C$', 'before', 2),
    'AUD': CurrencyMeta('A$', 'before', 2),
    'NZD': CurrencyMeta('NZ$', 'before', 2),
    'INR': CurrencyMeta('₹', 'before', 0),
    'JPY': CurrencyMeta('¥', 'before', 0),
    'KRW': CurrencyMeta('₩', 'before', 0),
    'CNY': CurrencyMeta('¥', 'before', 2),
    'SGD': CurrencyMeta('S$', 'before', 2),
    'HKD': CurrencyMeta('HK$', 'before', 2),
    'TWD': CurrencyMeta('NT$', 'before', 0),
    'MYR': CurrencyMeta('RM', 'before', 2),
    'THB': CurrencyMeta('฿', 'before', 2),
    'IDR': CurrencyMeta('Rp', 'before', 0),
    'PHP': CurrencyMeta('₱', 'before', 2),
    'VND': CurrencyMeta('₫', 'after', 0),
    'BRL': CurrencyMeta('R$', 'before', 2),
    'MXN': CurrencyMeta('$', 'before', 2),
    'ARS': CurrencyMeta('$', 'before', 2),
    'CLP': CurrencyMeta('$', 'before', 0),
    'COP': CurrencyMeta('$', 'before', 0),
    'PEN': CurrencyMeta('S/', 'before', 2),
    'CHF': CurrencyMeta('CHF', 'before', 2),
    'NOK': CurrencyMeta('kr', 'after', 2),
    'SEK': CurrencyMeta('kr', 'after', 2),
    'DKK': CurrencyMeta('kr', 'after', 2),
    'PLN': CurrencyMeta('zł', 'after', 2),
    'CZK': CurrencyMeta('Kč', 'after', 2),
    'HUF': CurrencyMeta('Ft', 'after', 0),
    'RON': CurrencyMeta('lei', 'after', 2),
    'BGN': CurrencyMeta('лв', 'after', 2),
    'HRK': CurrencyMeta('kn', 'after', 2),
    'RSD': CurrencyMeta('дин', 'after', 2),
    'TRY': CurrencyMeta('₺', 'before', 2),
    'ILS': CurrencyMeta('₪', 'before', 2),
    'SAR': CurrencyMeta('ر.س', 'before', 2),
    'AED': CurrencyMeta('د.إ', 'before', 2),
    'QAR': CurrencyMeta('ر.ق', 'before', 2),
    'KWD': CurrencyMeta('د.ك', 'before', 3),
    'BHD': CurrencyMeta('د.ب', 'before', 3),
    'OMR': CurrencyMeta('ر.ع', 'before', 3),
    'JOD': CurrencyMeta('د.ا', 'before', 3),
    'LBP': CurrencyMeta('ل.ل', 'before', 0),
    'PKR': CurrencyMeta('₨', 'before', 0),
    'BDT': CurrencyMeta('৳', 'before', 0),
    'LKR': CurrencyMeta('₨', 'before', 2),
    'NPR': CurrencyMeta('₨', 'before', 0),
    'ZAR': CurrencyMeta('R', 'before', 2),
    'NGN': CurrencyMeta('₦', 'before', 2),
    'KES': CurrencyMeta('KSh', 'before', 2),
    'GHS': CurrencyMeta('₵', 'before', 2),
    'EGP': CurrencyMeta('£', 'before', 2),
    'MAD': CurrencyMeta('د.م', 'before', 2),
    'TND': CurrencyMeta('د.ت', 'before', 3),
    'DZD': CurrencyMeta('د.ج', 'before', 2),
    'RUB': CurrencyMeta('₽', 'after', 2),
    'UAH': CurrencyMeta('₴', 'before', 2),
    'BYN': CurrencyMeta('Br', 'after', 2),
})

# Purchasing power parity multipliers applied to the USD price
PPP_ADJUSTMENTS: Mapping[str, float] = MappingProxyType({
    'IN': 0.25,
    'PK': 0.30,
    'BD': 0.30,
    'LK': 0.35,
    'NP': 0.30,
    'NG': 0.40,
    'KE': 0.45,
    'GH': 0.40,
    'EG': 0.50,
    'ZA': 0.60,
    'BR': 0.70,
    'MX': 0.75,
    'AR': 0.60,
    'CL': 0.80,
    'CO': 0.65,
    'PE': 0.70,
    'PH': 0.50,
    'ID': 0.45,
    'MY': 0.70,
    'TH': 0.65,
    'VN': 0.40,
    'CN': 0.60,
    'TR': 0.65,
    'RU': 0.55,
    'UA': 0.45,
    'PL': 0.75,
    'CZ': 0.80,
    'HU': 0.75,
    'RO': 0.70,
    'BG': 0.65,
})

EU_COUNTRIES = frozenset({
    'DE', 'FR', 'IT', 'ES', 'NL', 'BE', 'AT', 'PT', 'IE', 'FI',
    'GR', 'LU', 'MT', 'CY', 'SK', 'SI', 'EE', 'LV', 'LT',
})

# Local currency by country (ISO 3166-1 alpha-2 -> ISO 4217). Some of these
# have no exchange rate; conversion then degrades to the USD amount.
COUNTRY_CURRENCY: Mapping[str, str] = MappingProxyType({
    'US': 'USD', 'CA': 'CAD', 'GB': 'GBP', 'AU': 'AUD', 'NZ': 'NZD',
    'IN': 'INR', 'CN': 'CNY', 'JP': 'JPY', 'KR': 'KRW', 'SG': 'SGD',
    'DE': 'EUR', 'FR': 'EUR', 'IT': 'EUR', 'ES': 'EUR', 'NL': 'EUR',
    'BE': 'EUR', 'AT': 'EUR', 'PT': 'EUR', 'IE': 'EUR', 'FI': 'EUR',
    'GR': 'EUR', 'LU': 'EUR', 'MT': 'EUR', 'CY': 'EUR', 'SK': 'EUR',
    'SI': 'EUR', 'EE': 'EUR', 'LV': 'EUR', 'LT': 'EUR',
    'BR': 'BRL', 'MX': 'MXN', 'AR': 'ARS', 'CL': 'CLP', 'CO': 'COP',
    'PE': 'PEN', 'UY': 'UYU', 'PY': 'PYG', 'BO': 'BOB', 'EC': 'USD',
    'VE': 'VES', 'GY': 'GYD', 'SR': 'SRD', 'FK': 'FKP',
    'CH': 'CHF', 'NO': 'NOK', 'SE': 'SEK', 'DK': 'DKK', 'IS': 'ISK',
    'PL': 'PLN', 'CZ': 'CZK', 'HU': 'HUF', 'RO': 'RON', 'BG': 'BGN',
    'HR': 'HRK', 'RS': 'RSD', 'BA': 'BAM', 'MK': 'MKD', 'AL': 'ALL',
    'ME': 'EUR', 'XK': 'EUR', 'MD': 'MDL', 'UA': 'UAH', 'BY': 'BYN',
    'RU': 'RUB', 'TR': 'TRY', 'IL': 'ILS', 'SA': 'SAR', 'AE': 'AED',
    'QA': 'QAR', 'KW': 'KWD', 'BH': 'BHD', 'OM': 'OMR', 'JO': 'JOD',
    'LB': 'LBP', 'SY': 'SYP', 'IQ': 'IQD', 'IR': 'IRR', 'AF': 'AFN',
    'PK': 'PKR', 'BD': 'BDT', 'LK': 'LKR', 'MV': 'MVR', 'NP': 'NPR',
    'BT': 'BTN', 'MM': 'MMK', 'TH': 'THB', 'LA': 'LAK', 'KH': 'KHR',
    'VN': 'VND', 'MY': 'MYR', 'BN': 'BND', 'ID': 'IDR', 'PH': 'PHP',
    'TW': 'TWD', 'HK': 'HKD', 'MO': 'MOP', 'MN': 'MNT', 'KZ': 'KZT',
    'KG': 'KGS', 'TJ': 'TJS', 'UZ': 'UZS', 'TM': 'TMT',
    'ZA': 'ZAR', 'NG': 'NGN', 'KE': 'KES', 'GH': 'GHS', 'EG': 'EGP',
    'MA': 'MAD', 'TN': 'TND', 'DZ': 'DZD', 'LY': 'LYD', 'SD': 'SDG',
    'ET': 'ETB', 'UG': 'UGX', 'TZ': 'TZS', 'RW': 'RWF', 'BI': 'BIF',
    'DJ': 'DJF', 'SO': 'SOS', 'ER': 'ERN', 'SS': 'SSP', 'TD': 'XAF',
    'CF': 'XAF', 'CM': 'XAF', 'GQ': 'XAF', 'GA': 'XAF', 'CG': 'XAF',
    'AO': 'AOA', 'ZM': 'ZMW', 'ZW': 'ZWL', 'BW': 'BWP', 'SZ': 'SZL',
    'LS': 'LSL', 'MZ': 'MZN', 'MG': 'MGA', 'MU': 'MUR', 'SC': 'SCR',
    'KM': 'KMF', 'MW': 'MWK', 'NA': 'NAD',
})

COUNTRY_NAMES: Mapping[str, str] = MappingProxyType({
    'US': 'United States', 'CA': 'Canada', 'GB': 'United Kingdom',
    'AU': 'Australia', 'NZ': 'New Zealand', 'IN': 'India',
    'DE': 'Germany', 'FR': 'France', 'IT': 'Italy', 'ES': 'Spain',
    'NL': 'Netherlands', 'BE': 'Belgium', 'CH': 'Switzerland',
    'NO': 'Norway', 'SE': 'Sweden', 'DK': 'Denmark', 'FI': 'Finland',
    'BR': 'Brazil', 'MX': 'Mexico', 'AR': 'Argentina', 'CL': 'Chile',
    'JP': 'Japan', 'KR': 'South Korea', 'CN': 'China', 'SG': 'Singapore',
    'HK': 'Hong Kong', 'TW': 'Taiwan', 'MY': 'Malaysia', 'TH': 'Thailand',
    'ID': 'Indonesia', 'PH': 'Philippines', 'VN': 'Vietnam',
    'ZA': 'South Africa', 'NG': 'Nigeria', 'KE': 'Kenya', 'EG': 'Egypt',
    'TR': 'Turkey', 'IL': 'Israel', 'SA': 'Saudi Arabia', 'AE': 'United Arab Emirates',
    'RU': 'Russia', 'UA': 'Ukraine', 'PL': 'Poland', 'CZ': 'Czech Republic',
})
