"""Per-request pricing pipeline.

Combines geolocation, plan pricing, payment methods and gateway currency
compatibility into a single PricingResult. Pricing gates the checkout page, so
any unexpected failure here degrades to the US/USD default instead of raising.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from .currency import supported_currencies
from .gateway import GATEWAY_SUPPORTED_CURRENCIES, build_gateway_config, resolve_fallback_currency
from .geolocation import CountryInfo, GeolocationResolver, default_country
from .payment_methods import PAYMENT_METHODS, PaymentMethodSet, select_payment_methods
from .pricing import LocalizedPricing, get_pricing_for_currency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """The only parts of an inbound request the pipeline looks at."""
    headers: Mapping[str, str] = field(default_factory=dict)
    remote_addr: Optional[str] = None

    def __post_init__(self):
        # header names are case-insensitive on the wire
        object.__setattr__(self, 'headers', {k.lower(): v for k, v in self.headers.items()})

    @classmethod
    def from_flask(cls, request) -> 'RequestContext':
        return cls(headers=dict(request.headers.items()), remote_addr=request.remote_addr)


def extract_client_ip(ctx: RequestContext) -> Optional[str]:
    cf_connecting_ip = (ctx.headers.get('cf-connecting-ip') or '').strip()
    if cf_connecting_ip:
        return cf_connecting_ip
    forwarded = (ctx.headers.get('x-forwarded-for') or '').split(',')[0].strip()
    if forwarded:
        return forwarded
    real_ip = (ctx.headers.get('x-real-ip') or '').strip()
    if real_ip:
        return real_ip
    return ctx.remote_addr or None


@dataclass(frozen=True)
class PricingResult:
    location: CountryInfo
    pricing: LocalizedPricing
    payment_methods: PaymentMethodSet
    fallback_used: bool = False
    original_currency: Optional[str] = None
    theme_color: Optional[str] = None

    @property
    def gateway_config(self) -> dict:
        return build_gateway_config(self.pricing.currency, self.theme_color)

    def to_dict(self) -> dict:
        data = {
            'success': True,
            'location': self.location.to_dict(),
            'pricing': self.pricing.to_dict(),
            'paymentMethods': self.payment_methods.to_dict(),
            'gatewayConfig': self.gateway_config,
            'fallbackUsed': self.fallback_used,
        }
        if self.original_currency:
            data['originalCurrency'] = self.original_currency
        return data


class PricingOrchestrator:
    def __init__(self, resolver: Optional[GeolocationResolver] = None, theme_color: Optional[str] = None):
        self.resolver = resolver or GeolocationResolver()
        self.theme_color = theme_color
        self._default = self._build(default_country())

    def _build(self, location: CountryInfo) -> PricingResult:
        return PricingResult(
            location=location,
            pricing=get_pricing_for_currency(location.currency, location.country_code),
            payment_methods=select_payment_methods(location.country_code),
            theme_color=self.theme_color,
        )

    def default_pricing(self) -> PricingResult:
        return self._default

    def _resolve(self, ctx: RequestContext) -> PricingResult:
        ip = extract_client_ip(ctx)
        location = self.resolver.resolve(ip, ctx.headers)
        return self._build(location)

    def resolve_pricing(self, ctx: RequestContext) -> PricingResult:
        try:
            return self._resolve(ctx)
        except Exception:  # noqa: BLE001
            logger.exception('Pricing resolution failed; serving default pricing')
            return self._default

    def resolve_compatible_pricing(self, ctx: RequestContext) -> PricingResult:
        """Like resolve_pricing, but priced in a currency the gateway can settle."""
        try:
            result = self._resolve(ctx)
            original = result.pricing.currency
            country_code = result.location.country_code
            fallback = resolve_fallback_currency(original, country_code)
            if fallback == original:
                return result
            logger.info('Using fallback currency %s instead of %s for country=%s', fallback, original, country_code)
            return replace(
                result,
                pricing=get_pricing_for_currency(fallback, country_code),
                fallback_used=True,
                original_currency=original,
            )
        except Exception:  # noqa: BLE001
            logger.exception('Compatible pricing resolution failed; serving default pricing')
            return self._default

    def international_config(self) -> dict:
        return {
            'gatewayCurrencies': sorted(GATEWAY_SUPPORTED_CURRENCIES),
            'supportedCurrencies': supported_currencies(),
            'defaultCurrency': 'USD',
            'paymentMethods': {bucket.value: methods.to_dict() for bucket, methods in PAYMENT_METHODS.items()},
        }
