"""Resolve a request to a country / currency.

IP lookups go to an external geolocation provider and are cached in-process
for a day. When the IP is unusable or the lookup fails we fall back to CDN and
Accept-Language headers, and finally to a fixed US default.
"""
import ipaddress
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

import requests

from .tables import COUNTRY_CURRENCY, COUNTRY_NAMES

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_URL = 'https://ipapi.co/{ip}/json/'
DEFAULT_TIMEOUT = 5.0
DEFAULT_CACHE_TTL = 24 * 60 * 60
DEFAULT_USER_AGENT = 'geoprice/1.0'

PRIVATE_NETWORKS = (
    ipaddress.ip_network('10.0.0.0/8'),
    ipaddress.ip_network('172.16.0.0/12'),
    ipaddress.ip_network('192.168.0.0/16'),
)


class GeolocationUnavailable(Exception):
    """The external lookup timed out, errored or returned an unusable body."""


@dataclass(frozen=True)
class CountryInfo:
    country: str
    country_code: str
    currency: str
    region: str = 'Unknown'
    city: str = 'Unknown'
    timezone: str = 'UTC'

    def to_dict(self) -> dict:
        return {
            'country': self.country,
            'countryCode': self.country_code,
            'currency': self.currency,
            'region': self.region,
            'city': self.city,
            'timezone': self.timezone,
        }


DEFAULT_COUNTRY = CountryInfo(country='United States', country_code='US', currency='USD')


def default_country() -> CountryInfo:
    return DEFAULT_COUNTRY


def currency_for_country(country_code: str) -> str:
    return COUNTRY_CURRENCY.get(country_code, 'USD')


def country_name(country_code: str) -> str:
    return COUNTRY_NAMES.get(country_code, 'Unknown')


def country_from_code(country_code: str) -> CountryInfo:
    code = country_code.upper()
    return CountryInfo(country=country_name(code), country_code=code, currency=currency_for_country(code))


def is_public_ip(ip: Optional[str]) -> bool:
    """False for empty, unparseable, loopback and RFC 1918 addresses."""
    if not ip:
        return False
    try:
        addr = ipaddress.ip_address(ip.strip())
    except ValueError:
        return False
    mapped = getattr(addr, 'ipv4_mapped', None)
    if mapped is not None:
        addr = mapped
    if addr.is_loopback:
        return False
    return not any(addr in net for net in PRIVATE_NETWORKS if net.version == addr.version)


@dataclass(frozen=True)
class GeoCacheEntry:
    data: CountryInfo
    timestamp: float


class GeoCache:
    """Thread-safe IP -> CountryInfo cache with lazy expiry on read."""

    def __init__(self, ttl: float = DEFAULT_CACHE_TTL, clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self.clock = clock
        self._entries: Dict[str, GeoCacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, ip: str) -> Optional[CountryInfo]:
        now = self.clock()
        with self._lock:
            entry = self._entries.get(ip)
            if entry is None:
                return None
            if now - entry.timestamp >= self.ttl:
                del self._entries[ip]
                return None
            return entry.data

    def set(self, ip: str, data: CountryInfo) -> None:
        entry = GeoCacheEntry(data=data, timestamp=self.clock())
        with self._lock:
            self._entries[ip] = entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    if value is None:
        return None
    value = value.strip()
    return value or None


class GeolocationResolver:
    def __init__(
        self,
        lookup_url: str = DEFAULT_LOOKUP_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        cache: Optional[GeoCache] = None,
    ):
        self.lookup_url = lookup_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.cache = cache if cache is not None else GeoCache()

    def resolve(self, ip: Optional[str], headers: Mapping[str, str]) -> CountryInfo:
        """Best available CountryInfo for the request; never raises."""
        if is_public_ip(ip):
            ip = ip.strip()
            cached = self.cache.get(ip)
            if cached is not None:
                return cached
            try:
                info = self.lookup(ip)
            except GeolocationUnavailable as e:
                logger.warning('Geolocation lookup failed ip=%s err=%s', ip, e)
            else:
                self.cache.set(ip, info)
                return info
        return self.from_headers(headers)

    def lookup(self, ip: str) -> CountryInfo:
        url = self.lookup_url.format(ip=ip)
        try:
            resp = requests.get(url, timeout=self.timeout, headers={'User-Agent': self.user_agent})
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise GeolocationUnavailable(f'request error: {e}') from e
        except ValueError as e:
            raise GeolocationUnavailable('response body is not JSON') from e
        except Exception as e:  # noqa: BLE001
            raise GeolocationUnavailable(f'unexpected lookup error: {e}') from e
        if not isinstance(data, dict):
            raise GeolocationUnavailable('response body is not an object')
        if data.get('error'):
            raise GeolocationUnavailable(f"provider error reason={data.get('reason')}")
        return CountryInfo(
            country=str(data.get('country_name') or 'Unknown'),
            country_code=str(data.get('country_code') or 'US').upper(),
            currency=str(data.get('currency') or 'USD').upper(),
            region=str(data.get('region') or 'Unknown'),
            city=str(data.get('city') or 'Unknown'),
            timezone=str(data.get('timezone') or 'UTC'),
        )

    def from_headers(self, headers: Mapping[str, str]) -> CountryInfo:
        cdn_country = _header(headers, 'cf-ipcountry')
        if cdn_country and len(cdn_country) == 2 and cdn_country.isalpha() and cdn_country.upper() != 'XX':
            return country_from_code(cdn_country)

        accept_language = _header(headers, 'accept-language')
        if accept_language:
            primary = accept_language.split(',')[0].split(';')[0].strip()
            parts = primary.split('-')
            if len(parts) > 1 and len(parts[1]) == 2 and parts[1].isalpha():
                return country_from_code(parts[1])

        return default_country()

    def clear_cache(self) -> None:
        self.cache.clear()
