"""Local payment rails enabled per region bucket."""
from dataclasses import asdict, dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .tables import EU_COUNTRIES


class RegionBucket(str, Enum):
    IN = 'IN'
    US = 'US'
    EU = 'EU'
    INTERNATIONAL = 'INTERNATIONAL'


@dataclass(frozen=True)
class PaymentMethodSet:
    netbanking: bool = False
    wallet: bool = False
    upi: bool = False
    emi: bool = False
    paylater: bool = False

    # Cards are accepted everywhere
    @property
    def card(self) -> bool:
        return True

    def to_dict(self) -> dict:
        return {'card': self.card, **asdict(self)}


CARD_ONLY = PaymentMethodSet()

PAYMENT_METHODS: Mapping[RegionBucket, PaymentMethodSet] = MappingProxyType({
    RegionBucket.IN: PaymentMethodSet(netbanking=True, wallet=True, upi=True),
    RegionBucket.US: CARD_ONLY,
    RegionBucket.EU: CARD_ONLY,
    RegionBucket.INTERNATIONAL: CARD_ONLY,
})


def region_bucket_for(country_code: str) -> RegionBucket:
    code = (country_code or '').upper().strip()
    if code == 'IN':
        return RegionBucket.IN
    if code in EU_COUNTRIES:
        return RegionBucket.EU
    if code == 'US':
        return RegionBucket.US
    return RegionBucket.INTERNATIONAL


def select_payment_methods(country_code: str) -> PaymentMethodSet:
    return PAYMENT_METHODS[region_bucket_for(country_code)]
