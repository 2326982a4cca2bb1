from __future__ import annotations

import pytest

from geoprice.payment_methods import RegionBucket, region_bucket_for, select_payment_methods
from geoprice.tables import COUNTRY_CURRENCY, EU_COUNTRIES


def test_india_gets_local_rails() -> None:
    methods = select_payment_methods("IN")
    assert methods.card
    assert methods.upi
    assert methods.netbanking
    assert methods.wallet
    assert not methods.emi
    assert not methods.paylater


def test_germany_is_card_only() -> None:
    methods = select_payment_methods("DE")
    assert methods.card is True
    assert methods.upi is False
    assert region_bucket_for("DE") is RegionBucket.EU


@pytest.mark.parametrize(
    ("country", "bucket"),
    [
        ("IN", RegionBucket.IN),
        ("US", RegionBucket.US),
        ("FR", RegionBucket.EU),
        ("LT", RegionBucket.EU),
        ("GB", RegionBucket.INTERNATIONAL),
        ("PL", RegionBucket.INTERNATIONAL),
        ("TH", RegionBucket.INTERNATIONAL),
        ("", RegionBucket.INTERNATIONAL),
        ("in", RegionBucket.IN),
    ],
)
def test_region_buckets(country, bucket) -> None:
    assert region_bucket_for(country) is bucket


def test_eu_set_has_nineteen_members() -> None:
    assert len(EU_COUNTRIES) == 19


def test_card_is_enabled_for_every_country() -> None:
    for country in list(COUNTRY_CURRENCY) + ["XX", "ZZ", ""]:
        assert select_payment_methods(country).card is True


def test_to_dict_lists_all_rails() -> None:
    assert select_payment_methods("US").to_dict() == {
        "card": True,
        "netbanking": False,
        "wallet": False,
        "upi": False,
        "emi": False,
        "paylater": False,
    }
