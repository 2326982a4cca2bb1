"""Central plan pricing utilities."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .currency import convert_price, format_price, get_currency_info
from .tables import CurrencyMeta


@dataclass(frozen=True)
class PricingPlan:
    id: str
    name: str
    period: str  # 'month' | 'year'
    base_price_usd: float
    description: str
    discount: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            'id': self.id,
            'name': self.name,
            'price': self.base_price_usd,
            'currency': 'USD',
            'period': self.period,
            'description': self.description,
        }
        if self.discount:
            data['discount'] = self.discount
        return data


# Yearly is priced on its own (two months free), not monthly * 12
MONTHLY_PLAN = PricingPlan(
    id='premium_monthly',
    name='Premium Monthly',
    period='month',
    base_price_usd=6,
    description='Perfect for individual developers',
)
YEARLY_PLAN = PricingPlan(
    id='premium_yearly',
    name='Premium Yearly',
    period='year',
    base_price_usd=60,
    description='Best value - 2 months free!',
    discount='17% off',
)

PLANS: Mapping[str, PricingPlan] = MappingProxyType({
    'monthly': MONTHLY_PLAN,
    'yearly': YEARLY_PLAN,
})


@dataclass(frozen=True)
class PlanPrice:
    plan: PricingPlan
    price: float
    formatted: str

    def to_dict(self) -> dict:
        data = {
            'id': self.plan.id,
            'name': self.plan.name,
            'price': self.price,
            'formatted': self.formatted,
            'period': self.plan.period,
            'description': self.plan.description,
        }
        if self.plan.discount:
            data['discount'] = self.plan.discount
        return data


@dataclass(frozen=True)
class LocalizedPricing:
    currency: str
    currency_info: CurrencyMeta
    monthly: PlanPrice
    yearly: PlanPrice

    def to_dict(self) -> dict:
        return {
            'currency': self.currency,
            'currencyInfo': self.currency_info.to_dict(),
            'monthly': self.monthly.to_dict(),
            'yearly': self.yearly.to_dict(),
        }


def price_plan(plan: PricingPlan, currency: str, country_code: Optional[str] = None) -> PlanPrice:
    amount = convert_price(plan.base_price_usd, currency, country_code)
    return PlanPrice(plan=plan, price=amount, formatted=format_price(amount, currency))


def get_pricing_for_currency(currency: str, country_code: Optional[str] = None) -> LocalizedPricing:
    """Price both canonical plans in ``currency`` for a requester in ``country_code``."""
    return LocalizedPricing(
        currency=currency,
        currency_info=get_currency_info(currency),
        monthly=price_plan(MONTHLY_PLAN, currency, country_code),
        yearly=price_plan(YEARLY_PLAN, currency, country_code),
    )
